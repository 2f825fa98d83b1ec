"""Social network composites and their factory method.

Usage:
    fb = Facebook()
    fb.create_profile()
    fb.get_sections()  # (PersonalSection(), PatentSection(), PublicationSection())

    # Or through the registry:
    lk = build_profile("LinkedIn")

Each SocialNetwork variant overrides ``create_sections`` to decide which
sections it is made of; ``create_profile`` on the base class appends whatever
the variant returns. Nothing outside the variant chooses its parts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import overload

from factorykit.core.profile.models import Section, format_sections
from factorykit.core.registry import VariantRegistry

logger = logging.getLogger(__name__)


def _check_section(section: object) -> None:
    if not isinstance(section, Section):
        raise TypeError(f"Expected a Section, got {type(section).__name__}")


class SocialNetwork:
    """Composite root owning an ordered, append-only list of sections."""

    def __init__(self) -> None:
        self._sections: list[Section] = []

    @property
    def name(self) -> str:
        return type(self).__name__

    def add_section(self, section: Section) -> None:
        """Append a section.

        Raises:
            TypeError: If section is not a Section instance.
        """
        _check_section(section)
        self._sections.append(section)

    def get_sections(self) -> tuple[Section, ...]:
        """Return a read-only snapshot of the sections in insertion order."""
        return tuple(self._sections)

    def create_sections(self) -> list[Section]:
        """Factory method: build fresh instances of this variant's sections.

        Returns:
            Sections in the order they should appear in the profile.
        """
        raise NotImplementedError(f"{self.name} must implement create_sections()")

    def create_profile(self) -> None:
        """Append this variant's sections.

        Not idempotent: calling it twice appends the sections twice.
        """
        sections = self.create_sections()
        # All or nothing: a bad section leaves the profile unchanged
        for section in sections:
            _check_section(section)
        self._sections.extend(sections)
        logger.debug("Populated %s profile with %d sections", self.name, len(sections))

    def report(self) -> str:
        """Return the one-line summary, e.g. ``"LinkedIn: [PersonalSection, AlbumSection]"``."""
        return f"{self.name}: {format_sections(self._sections)}"

    def __repr__(self) -> str:
        return f"{self.name}(sections={list(self._sections)!r})"


# Module-level registry instance, filled by @network at import time
_registry: VariantRegistry[SocialNetwork] = VariantRegistry("network")


def get_network_registry() -> VariantRegistry[SocialNetwork]:
    """Access the global social network registry."""
    return _registry


@overload
def network(tag: type[SocialNetwork]) -> type[SocialNetwork]: ...


@overload
def network(
    tag: str | None = None, *, registry: VariantRegistry[SocialNetwork] | None = None
) -> Callable[[type[SocialNetwork]], type[SocialNetwork]]: ...


def network(
    tag: str | type[SocialNetwork] | None = None,
    *,
    registry: VariantRegistry[SocialNetwork] | None = None,
) -> type[SocialNetwork] | Callable[[type[SocialNetwork]], type[SocialNetwork]]:
    """Register a SocialNetwork subclass under a tag (default: class name).

    Raises:
        TypeError: If the decorated class is not a SocialNetwork subclass.
    """
    target = registry if registry is not None else _registry

    def decorator(cls: type[SocialNetwork], name: str | None) -> type[SocialNetwork]:
        if not (isinstance(cls, type) and issubclass(cls, SocialNetwork)):
            raise TypeError(
                f"Network variant {getattr(cls, '__name__', cls)!r} must subclass SocialNetwork"
            )
        target.register(name or cls.__name__, cls)
        return cls

    if isinstance(tag, type):
        return decorator(tag, None)
    return lambda cls: decorator(cls, tag)


def create_network(
    kind: str, *, registry: VariantRegistry[SocialNetwork] | None = None
) -> SocialNetwork:
    """Build a new, empty network of the variant registered under ``kind``.

    Raises:
        UnknownVariantError: If no variant is registered under ``kind``.
    """
    target = registry if registry is not None else _registry
    return target.create(kind)


def build_profile(
    kind: str, *, registry: VariantRegistry[SocialNetwork] | None = None
) -> SocialNetwork:
    """Build a network of the given kind and populate its profile."""
    profile = create_network(kind, registry=registry)
    profile.create_profile()
    return profile
