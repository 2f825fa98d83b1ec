"""Profile section markers and the composite protocol.

Sections carry no data; a profile is described entirely by which section
variants it holds and in what order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Section:
    """Base marker for a profile section."""


@dataclass(frozen=True, slots=True)
class PersonalSection(Section):
    pass


@dataclass(frozen=True, slots=True)
class AlbumSection(Section):
    pass


@dataclass(frozen=True, slots=True)
class PatentSection(Section):
    pass


@dataclass(frozen=True, slots=True)
class PublicationSection(Section):
    pass


@runtime_checkable
class Populatable(Protocol):
    """A composite that builds its own parts."""

    def create_profile(self) -> None: ...
    def get_sections(self) -> tuple[Section, ...]: ...


def format_sections(sections: Iterable[Section]) -> str:
    """Render sections by variant name, e.g. ``"[PersonalSection, AlbumSection]"``."""
    return "[" + ", ".join(type(s).__name__ for s in sections) + "]"
