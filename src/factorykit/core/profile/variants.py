"""Built-in social network variants."""

from __future__ import annotations

from factorykit.core.profile.core import SocialNetwork, network
from factorykit.core.profile.models import (
    AlbumSection,
    PatentSection,
    PersonalSection,
    PublicationSection,
    Section,
)


@network
class Facebook(SocialNetwork):
    def create_sections(self) -> list[Section]:
        return [PersonalSection(), PatentSection(), PublicationSection()]


@network
class LinkedIn(SocialNetwork):
    def create_sections(self) -> list[Section]:
        return [PersonalSection(), AlbumSection()]
