"""Vehicle factory, registry, and decorator.

Usage:
    @vehicle("Genesis")
    class Genesis(Vehicle):
        pass

    car = create_vehicle("Genesis", 20)
    car.run()
    car.report()  # "Genesis - moved: 20"

The factory names each vehicle after the tag it was created from, so a
variant class only has to subclass Vehicle and be registered.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import overload

from factorykit.core.registry import VariantRegistry
from factorykit.core.vehicle.models import Vehicle

logger = logging.getLogger(__name__)

# Module-level registry instance, filled by @vehicle at import time
_registry: VariantRegistry[Vehicle] = VariantRegistry("vehicle")


def get_vehicle_registry() -> VariantRegistry[Vehicle]:
    """Access the global vehicle registry."""
    return _registry


def _check_constructible(cls: type[Vehicle]) -> None:
    """Ensure the factory can call ``cls(model=..., power=...)``.

    Raises:
        TypeError: If the class constructor cannot take model and power.
    """
    try:
        inspect.signature(cls).bind(model="", power=0)
    except TypeError as e:
        raise TypeError(
            f"Vehicle variant {cls.__name__!r} must accept model and power "
            f"keyword arguments: {e}"
        ) from e


@overload
def vehicle(tag: type[Vehicle]) -> type[Vehicle]: ...


@overload
def vehicle(
    tag: str | None = None, *, registry: VariantRegistry[Vehicle] | None = None
) -> Callable[[type[Vehicle]], type[Vehicle]]: ...


def vehicle(
    tag: str | type[Vehicle] | None = None,
    *,
    registry: VariantRegistry[Vehicle] | None = None,
) -> type[Vehicle] | Callable[[type[Vehicle]], type[Vehicle]]:
    """Register a Vehicle subclass as a variant the factory can build.

    Supports three forms:
        @vehicle                        # bare decorator, tag = class name
        @vehicle("Genesis")             # explicit tag
        @vehicle(registry=my_registry)  # register somewhere other than global

    Vehicles built by ``create_vehicle`` take the tag as their model name.

    Args:
        tag: Variant tag, or the class itself when used bare.
        registry: Registry to add the variant to. Defaults to the global one.

    Returns:
        Decorated class or decorator function.

    Raises:
        TypeError: If the decorated class is not a Vehicle subclass, or its
            constructor cannot take model and power.
    """
    target = registry if registry is not None else _registry

    def decorator(cls: type[Vehicle], name: str | None) -> type[Vehicle]:
        if not (isinstance(cls, type) and issubclass(cls, Vehicle)):
            raise TypeError(
                f"Vehicle variant {getattr(cls, '__name__', cls)!r} must subclass Vehicle"
            )
        _check_constructible(cls)
        target.register(name or cls.__name__, cls)
        return cls

    if isinstance(tag, type):
        # Called bare: @vehicle
        return decorator(tag, None)
    return lambda cls: decorator(cls, tag)


def create_vehicle(
    kind: str, power: float, *, registry: VariantRegistry[Vehicle] | None = None
) -> Vehicle:
    """Build a new vehicle of the variant registered under ``kind``.

    Args:
        kind: Variant tag, e.g. "Genesis" or "Spark". Becomes the model name.
        power: Distance added per run. Any number is accepted.
        registry: Registry to look the tag up in. Defaults to the global one.

    Returns:
        New vehicle with ``moved == 0``. The factory keeps no reference to it.

    Raises:
        UnknownVariantError: If no variant is registered under ``kind``.
    """
    target = registry if registry is not None else _registry
    car = target.create(kind, model=kind, power=power)
    logger.debug("Created %s with power %s", kind, power)
    return car


def make_vehicle(model: str, power: float) -> Vehicle:
    """Build a plain Vehicle with any display name, bypassing the registry."""
    return Vehicle(model=model, power=power)
