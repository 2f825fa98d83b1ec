"""Core functionalities: variant registry, vehicle factory, profile builder.

Architecture Note:
    core/ holds the object-creation primitives. Registries are filled once,
    at import time, by the @vehicle and @network decorators; after that they
    are only read. Objects produced by a factory belong to the caller.
"""

from factorykit.core.errors import UnknownVariantError
from factorykit.core.profile import (
    AlbumSection,
    Facebook,
    LinkedIn,
    PatentSection,
    PersonalSection,
    Populatable,
    PublicationSection,
    Section,
    SocialNetwork,
    build_profile,
    create_network,
    format_sections,
    get_network_registry,
    network,
)
from factorykit.core.registry import VariantRegistry
from factorykit.core.vehicle import (
    Drivable,
    Genesis,
    Spark,
    Vehicle,
    create_vehicle,
    get_vehicle_registry,
    make_vehicle,
    vehicle,
)

__all__ = [
    # Registry
    "VariantRegistry",
    "UnknownVariantError",
    # Vehicle
    "Vehicle",
    "Drivable",
    "Genesis",
    "Spark",
    "vehicle",
    "create_vehicle",
    "make_vehicle",
    "get_vehicle_registry",
    # Profile
    "Section",
    "PersonalSection",
    "AlbumSection",
    "PatentSection",
    "PublicationSection",
    "Populatable",
    "SocialNetwork",
    "Facebook",
    "LinkedIn",
    "network",
    "create_network",
    "build_profile",
    "format_sections",
    "get_network_registry",
]
