"""Variant registry: maps string tags to constructors.

Usage:
    registry: VariantRegistry[Vehicle] = VariantRegistry("vehicle")
    registry.register("Genesis", Genesis)

    car = registry.create("Genesis", 20)
    registry.create("Tesla", 20)  # raises UnknownVariantError

Factories dispatch through a registry instead of a conditional, so a new
variant only needs to be registered; the dispatch code never changes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from factorykit.core.errors import UnknownVariantError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class VariantRegistry(Generic[T]):
    """Process-local registry mapping variant tags to constructors.

    Tags are matched exactly (case-sensitive). Registration order is kept so
    that ``tags()`` lists variants in the order they were declared.
    """

    def __init__(self, name: str = "variant") -> None:
        """Initialize empty registry.

        Args:
            name: Label used in log messages, e.g. "vehicle".
        """
        self.name = name
        self._by_tag: dict[str, Callable[..., T]] = {}

    def register(self, tag: str, constructor: Callable[..., T]) -> Callable[..., T]:
        """Register a constructor under a tag.

        Args:
            tag: Variant tag callers will pass to the factory.
            constructor: Callable producing a new instance of the variant.

        Returns:
            The constructor, unchanged, so this can back a decorator.

        Raises:
            ValueError: If tag is empty.
            RuntimeError: If tag is already taken by a different constructor.
        """
        if not tag:
            raise ValueError(f"Cannot register {self.name} with an empty tag")

        existing = self._by_tag.get(tag)
        if existing is constructor:
            return constructor
        if existing is not None:
            raise RuntimeError(
                f"Variant tag collision: {constructor!r} and {existing!r} "
                f"both registered as {self.name} {tag!r}"
            )

        self._by_tag[tag] = constructor
        logger.debug("Registered %s variant %r -> %r", self.name, tag, constructor)
        return constructor

    def get(self, tag: str) -> Callable[..., T] | None:
        """Get the constructor for a tag.

        Returns:
            Constructor if registered, None otherwise.
        """
        return self._by_tag.get(tag)

    def resolve(self, tag: str) -> Callable[..., T]:
        """Get the constructor for a tag, failing loudly if it is unknown.

        Raises:
            UnknownVariantError: If no constructor is registered under tag.
        """
        constructor = self._by_tag.get(tag)
        if constructor is None:
            logger.debug("Unknown %s variant %r requested", self.name, tag)
            raise UnknownVariantError(tag, self.tags())
        return constructor

    def create(self, tag: str, *args: object, **kwargs: object) -> T:
        """Construct a new instance of the variant registered under tag."""
        return self.resolve(tag)(*args, **kwargs)

    def is_registered(self, tag: str) -> bool:
        return tag in self._by_tag

    def tags(self) -> tuple[str, ...]:
        """Registered tags in registration order."""
        return tuple(self._by_tag)

    def __contains__(self, tag: object) -> bool:
        return tag in self._by_tag

    def __len__(self) -> int:
        return len(self._by_tag)
