"""Profile functionality: sections, networks, and the factory method."""

from factorykit.core.profile.core import (
    SocialNetwork,
    build_profile,
    create_network,
    get_network_registry,
    network,
)
from factorykit.core.profile.models import (
    AlbumSection,
    PatentSection,
    PersonalSection,
    Populatable,
    PublicationSection,
    Section,
    format_sections,
)
from factorykit.core.profile.variants import Facebook, LinkedIn

__all__ = [
    # Models
    "Section",
    "PersonalSection",
    "AlbumSection",
    "PatentSection",
    "PublicationSection",
    "Populatable",
    "format_sections",
    # Variants
    "Facebook",
    "LinkedIn",
    # Core
    "SocialNetwork",
    "network",
    "create_network",
    "build_profile",
    "get_network_registry",
]
