"""factorykit: the Factory and Factory Method patterns, by example.

Usage:
    from factorykit import create_vehicle, build_profile

    car = create_vehicle("Genesis", 20)
    car.run()
    car.run()
    print(car.report())        # Genesis - moved: 40

    profile = build_profile("LinkedIn")
    print(profile.report())    # LinkedIn: [PersonalSection, AlbumSection]

    @vehicle("Avante")
    class Avante(Vehicle):
        pass
"""

__version__ = "0.1.0"

# Core primitives
from factorykit.core import (
    AlbumSection,
    Drivable,
    Facebook,
    Genesis,
    LinkedIn,
    PatentSection,
    PersonalSection,
    Populatable,
    PublicationSection,
    Section,
    SocialNetwork,
    Spark,
    UnknownVariantError,
    VariantRegistry,
    Vehicle,
    build_profile,
    create_network,
    create_vehicle,
    format_sections,
    make_vehicle,
    network,
    vehicle,
)

__all__ = [
    # Version
    "__version__",
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
]
