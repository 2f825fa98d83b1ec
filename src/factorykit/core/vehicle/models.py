"""Vehicle models: the base entity and its capability protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class Drivable(Protocol):
    """Anything that accumulates distance and can report it."""

    def run(self) -> None: ...
    def report(self) -> str: ...


@dataclass
class Vehicle:
    """A vehicle that moves ``power`` units every time it runs.

    ``moved`` starts at zero and only ever grows, by exactly ``power`` per
    call to ``run``.
    """

    model: str
    power: float
    moved: float = field(default=0, init=False)

    def run(self) -> None:
        self.moved += self.power

    def report(self) -> str:
        """Return the one-line status, e.g. ``"Genesis - moved: 40"``."""
        return f"{self.model} - moved: {self.moved}"
