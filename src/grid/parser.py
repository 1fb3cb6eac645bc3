"""Parser for equal-length digit-string grid rows."""

import numpy as np

from src.errors import ParseError
from src.grid.types import HeightMatrix
from src.parsing import split_lines


def parse_height_matrix(text: str) -> HeightMatrix:
    """Parse rows of digits into a HeightMatrix.

    Args:
        text: Lines of digits, all of the same length, no separators.

    Returns:
        HeightMatrix with an int8 array of shape (rows, cols).

    Raises:
        ParseError: On an empty grid, a non-digit character, or rows of
            unequal length.
    """
    lines = [line for line in split_lines(text) if line]
    if not lines:
        raise ParseError("grid input is empty")

    width = len(lines[0])
    for line_no, line in enumerate(lines, start=1):
        if len(line) != width:
            raise ParseError(
                f"line {line_no}: row length {len(line)} differs from "
                f"first row length {width}"
            )
        if not (line.isascii() and line.isdigit()):
            raise ParseError(
                f"line {line_no}: grid rows must contain only digits 0-9, "
                f"got {line!r}"
            )

    heights = np.array(
        [[ord(ch) - ord("0") for ch in line] for line in lines],
        dtype=np.int8,
    )
    return HeightMatrix(heights=heights)
