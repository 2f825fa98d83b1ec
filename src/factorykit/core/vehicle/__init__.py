"""Vehicle functionality: models, built-in variants, and the factory."""

from factorykit.core.vehicle.core import (
    create_vehicle,
    get_vehicle_registry,
    make_vehicle,
    vehicle,
)
from factorykit.core.vehicle.models import Drivable, Vehicle
from factorykit.core.vehicle.variants import Genesis, Spark

__all__ = [
    # Models
    "Vehicle",
    "Drivable",
    # Variants
    "Genesis",
    "Spark",
    # Core
    "vehicle",
    "create_vehicle",
    "make_vehicle",
    "get_vehicle_registry",
]
