"""Height matrix and scan direction types for the grid scanner."""

from dataclasses import dataclass
from enum import StrEnum

import numpy as np


class ScanDirection(StrEnum):
    """Direction to look outward from a cell."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Unit (d_row, d_col) step for this direction."""
        match self:
            case ScanDirection.UP:
                return (-1, 0)
            case ScanDirection.DOWN:
                return (1, 0)
            case ScanDirection.LEFT:
                return (0, -1)
            case ScanDirection.RIGHT:
                return (0, 1)


@dataclass(frozen=True)
class HeightMatrix:
    """Immutable rectangular grid of single-digit heights.

    Uses frozen=True but omits slots=True since numpy arrays don't
    interact well with __slots__. The backing array is marked read-only.
    """

    heights: np.ndarray  # int8 array of shape (rows, cols), values 0-9

    def __post_init__(self) -> None:
        self.heights.setflags(write=False)

    @property
    def rows(self) -> int:
        return int(self.heights.shape[0])

    @property
    def cols(self) -> int:
        return int(self.heights.shape[1])

    def height(self, row: int, col: int) -> int:
        return int(self.heights[row, col])

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_boundary(self, row: int, col: int) -> bool:
        return (
            row == 0
            or col == 0
            or row == self.rows - 1
            or col == self.cols - 1
        )
