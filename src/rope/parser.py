"""Parser for `<DIRECTION> <STEPCOUNT>` motion lines."""

from src.errors import ParseError
from src.parsing import parse_int, split_lines
from src.rope.types import Direction, Motion


def parse_motion(line: str, line_no: int) -> Motion:
    """Parse a single motion line such as ``R 4``."""
    parts = line.split()
    if len(parts) != 2:
        raise ParseError(
            f"line {line_no}: expected '<DIRECTION> <STEPCOUNT>', got {line!r}"
        )
    letter, count = parts
    try:
        direction = Direction(letter)
    except ValueError:
        raise ParseError(
            f"line {line_no}: unknown direction {letter!r} "
            f"(expected one of U, D, L, R)"
        ) from None
    steps = parse_int(count, line_no, "step count")
    if steps < 1:
        raise ParseError(f"line {line_no}: step count must be >= 1, got {steps}")
    return Motion(direction=direction, steps=steps)


def parse_motions(text: str) -> list[Motion]:
    """Parse the full motion list, ignoring blank lines."""
    return [
        parse_motion(line, line_no)
        for line_no, line in enumerate(split_lines(text), start=1)
        if line.strip()
    ]
