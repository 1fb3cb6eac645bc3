"""Coordinate and motion types for the rope simulation."""

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    """Head motion direction, keyed by its input letter."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def delta(self) -> tuple[int, int]:
        """Unit (dx, dy) vector; y grows upward."""
        match self:
            case Direction.UP:
                return (0, 1)
            case Direction.DOWN:
                return (0, -1)
            case Direction.LEFT:
                return (-1, 0)
            case Direction.RIGHT:
                return (1, 0)


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A point on the unbounded integer lattice."""

    x: int = 0
    y: int = 0

    def moved(self, dx: int, dy: int) -> "Coordinate":
        return Coordinate(self.x + dx, self.y + dy)

    def chebyshev(self, other: "Coordinate") -> int:
        """max(|dx|, |dy|) between two coordinates."""
        return max(abs(self.x - other.x), abs(self.y - other.y))


ORIGIN = Coordinate(0, 0)


@dataclass(frozen=True, slots=True)
class Motion:
    """One parsed instruction: move the head `steps` units in `direction`."""

    direction: Direction
    steps: int
