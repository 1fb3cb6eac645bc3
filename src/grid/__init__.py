"""Height grid parsing, directional scanning, and scenic scoring."""

from src.grid.parser import parse_height_matrix
from src.grid.scanner import (
    best_scenic_cell,
    count_visible,
    is_visible,
    is_visible_from,
    max_scenic_score,
    scan,
    scenic_score,
    scenic_scores,
    viewing_distance,
    visibility_mask,
)
from src.grid.types import HeightMatrix, ScanDirection

__all__ = [
    "HeightMatrix",
    "ScanDirection",
    "parse_height_matrix",
    "scan",
    "is_visible_from",
    "is_visible",
    "viewing_distance",
    "scenic_score",
    "count_visible",
    "max_scenic_score",
    "visibility_mask",
    "scenic_scores",
    "best_scenic_cell",
]
