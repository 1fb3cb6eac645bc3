"""Directional visibility and scenic-score scanning over a HeightMatrix.

Both metrics are built on one primitive, scan(), which lazily yields the
heights met when walking outward from a cell toward one edge. Consumers stop
at the first blocker, so a per-cell query touches only the cells it needs.

For whole-matrix reductions the module also provides numpy-vectorized maps
(visibility_mask, scenic_scores) computed in O(rows * cols) per height
level instead of O(rows * cols * (rows + cols)). They must agree with the
per-cell functions cell for cell.
"""

import logging
import math
from collections.abc import Callable, Iterator

import numpy as np

from src.grid.types import HeightMatrix, ScanDirection

log = logging.getLogger(__name__)


def scan(
    matrix: HeightMatrix, row: int, col: int, direction: ScanDirection
) -> Iterator[int]:
    """Yield heights outward from (row, col), nearest neighbor first.

    The origin cell itself is not yielded; iteration ends at the grid edge.
    Each call returns a fresh generator, so a scan can be restarted freely.

    Args:
        matrix: Grid to scan.
        row: Origin row (0-indexed).
        col: Origin column (0-indexed).
        direction: Which edge to walk toward.

    Yields:
        Heights of the cells passed, in order of distance.
    """
    if not matrix.contains(row, col):
        raise IndexError(
            f"cell ({row}, {col}) outside {matrix.rows}x{matrix.cols} grid"
        )
    d_row, d_col = direction.delta
    r, c = row + d_row, col + d_col
    while matrix.contains(r, c):
        yield matrix.height(r, c)
        r += d_row
        c += d_col


def is_visible_from(
    matrix: HeightMatrix, row: int, col: int, direction: ScanDirection
) -> bool:
    """True if every cell between (row, col) and the edge is strictly lower."""
    origin = matrix.height(row, col)
    return all(h < origin for h in scan(matrix, row, col, direction))


def is_visible(matrix: HeightMatrix, row: int, col: int) -> bool:
    """True if the cell can be seen from outside along its row or column.

    Boundary cells are always visible.
    """
    if matrix.is_boundary(row, col):
        return True
    return any(
        is_visible_from(matrix, row, col, direction)
        for direction in ScanDirection
    )


def viewing_distance(
    matrix: HeightMatrix, row: int, col: int, direction: ScanDirection
) -> int:
    """Count cells seen from (row, col) in one direction.

    The first cell at least as tall as the origin is counted and ends the
    scan; otherwise counting stops at the edge. A boundary cell looking
    toward its own edge sees 0 cells.
    """
    origin = matrix.height(row, col)
    distance = 0
    for h in scan(matrix, row, col, direction):
        distance += 1
        if h >= origin:
            break
    return distance


def scenic_score(matrix: HeightMatrix, row: int, col: int) -> int:
    """Product of the four directional viewing distances."""
    return math.prod(
        viewing_distance(matrix, row, col, direction)
        for direction in ScanDirection
    )


def count_visible(matrix: HeightMatrix) -> int:
    """Number of cells visible from outside the grid, one scan per cell."""
    count = sum(
        1
        for row in range(matrix.rows)
        for col in range(matrix.cols)
        if is_visible(matrix, row, col)
    )
    log.info(
        "Visible cells: %d of %d (%dx%d grid)",
        count,
        matrix.rows * matrix.cols,
        matrix.rows,
        matrix.cols,
    )
    return count


def max_scenic_score(matrix: HeightMatrix) -> int:
    """Highest scenic score over all cells, one scan per cell."""
    return max(
        scenic_score(matrix, row, col)
        for row in range(matrix.rows)
        for col in range(matrix.cols)
    )


# ── Vectorized whole-matrix maps ─────────────────────────────────────────


def _shift_right(a: np.ndarray, fill: int) -> np.ndarray:
    """Shift columns one place right, filling column 0 with `fill`."""
    shifted = np.empty_like(a)
    shifted[:, 0] = fill
    shifted[:, 1:] = a[:, :-1]
    return shifted


def _visible_looking_left(heights: np.ndarray) -> np.ndarray:
    """Boolean map: strictly taller than everything to the left."""
    running_max = np.maximum.accumulate(heights.astype(np.int16), axis=1)
    return heights > _shift_right(running_max, fill=-1)


def _distance_looking_left(heights: np.ndarray) -> np.ndarray:
    """Viewing distance toward column 0 for every cell.

    For each height level, tracks the nearest column strictly to the left
    holding a cell of at least that height. Cells of that level then see
    up to and including that blocker, or to the edge if there is none.
    """
    n_rows, n_cols = heights.shape
    idx = np.broadcast_to(np.arange(n_cols, dtype=np.int64), (n_rows, n_cols))
    distance = np.zeros((n_rows, n_cols), dtype=np.int64)

    for level in np.unique(heights):
        blocker_col = np.where(heights >= level, idx, -1)
        nearest = _shift_right(np.maximum.accumulate(blocker_col, axis=1), fill=-1)
        level_distance = np.where(nearest >= 0, idx - nearest, idx)
        distance = np.where(heights == level, level_distance, distance)

    return distance


def _per_direction(
    heights: np.ndarray, looking_left: Callable[[np.ndarray], np.ndarray]
) -> dict[ScanDirection, np.ndarray]:
    """Apply a left-looking kernel in all four directions via flips/transposes."""
    return {
        ScanDirection.LEFT: looking_left(heights),
        ScanDirection.RIGHT: looking_left(heights[:, ::-1])[:, ::-1],
        ScanDirection.UP: looking_left(heights.T).T,
        ScanDirection.DOWN: looking_left(heights[::-1, :].T).T[::-1, :],
    }


def visibility_mask(matrix: HeightMatrix) -> np.ndarray:
    """Boolean (rows, cols) map of cells visible from outside the grid."""
    per_direction = _per_direction(matrix.heights, _visible_looking_left)
    return np.logical_or.reduce(list(per_direction.values()))


def scenic_scores(matrix: HeightMatrix) -> np.ndarray:
    """int64 (rows, cols) map of scenic scores."""
    per_direction = _per_direction(matrix.heights, _distance_looking_left)
    return np.prod(np.stack(list(per_direction.values())), axis=0)


def best_scenic_cell(matrix: HeightMatrix) -> tuple[int, int, int]:
    """Locate the highest scenic score.

    Returns:
        (row, col, score) of the first cell, in row-major order, achieving
        the maximum.
    """
    scores = scenic_scores(matrix)
    row, col = np.unravel_index(int(np.argmax(scores)), scores.shape)
    score = int(scores[row, col])
    log.info("Best scenic score %d at (%d, %d)", score, row, col)
    return int(row), int(col), score
