from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


@dataclass(frozen=True)
class Position:
    """A board cell. Equality is structural; the engine never moves players."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
