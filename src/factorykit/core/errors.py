"""Errors raised by the factories."""

from __future__ import annotations

from collections.abc import Iterable


class UnknownVariantError(LookupError):
    """Raised when a factory is asked for a tag no variant is registered under."""

    def __init__(self, kind: str, known: Iterable[str] = ()) -> None:
        self.kind = kind
        self.known = tuple(known)
        super().__init__(
            f"Unknown variant {kind!r}. Known variants: {', '.join(self.known) or '(none)'}"
        )
