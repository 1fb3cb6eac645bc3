"""Calorie counting: blank-line separated groups of integers."""

from src.errors import ParseError
from src.parsing import parse_int, split_lines


def parse_calorie_groups(text: str) -> list[int]:
    """Sum each blank-line separated group.

    The final group is flushed even without a trailing blank line; runs of
    blank lines do not create empty groups.
    """
    totals: list[int] = []
    current: int | None = None
    for line_no, line in enumerate(split_lines(text), start=1):
        if line.strip():
            current = (current or 0) + parse_int(line.strip(), line_no, "calories")
        elif current is not None:
            totals.append(current)
            current = None
    if current is not None:
        totals.append(current)
    if not totals:
        raise ParseError("calorie list is empty")
    return totals


def top_n_total(totals: list[int], n: int) -> int:
    """Sum of the n largest group totals."""
    return sum(sorted(totals, reverse=True)[:n])
