"""Parser for the fixed-width crate diagram and its move list.

The diagram occupies a 4-character column per stack ("[A] "), with a
numbering row (" 1   2   3 ") beneath it and a blank line separating it
from the `move <n> from <i> to <j>` instructions.
"""

import re

from src.crates.types import CrateStack, MoveInstruction
from src.errors import ParseError
from src.parsing import split_lines

COLUMN_WIDTH = 4
MOVE_PATTERN = re.compile(r"move (\d+) from (\d+) to (\d+)")


def parse_stacks(diagram: list[str]) -> list[CrateStack]:
    """Build stacks from the diagram rows, numbering row last.

    Args:
        diagram: Crate rows top to bottom, followed by the numbering row.

    Returns:
        One CrateStack per numbered column, labels bottom to top.
    """
    if not diagram:
        raise ParseError("crate diagram is empty")

    *crate_rows, numbering = diagram
    numbers = numbering.split()
    expected = [str(i) for i in range(1, len(numbers) + 1)]
    if not numbers or numbers != expected:
        raise ParseError(
            f"line {len(diagram)}: expected stack numbering 1..N, "
            f"got {numbering!r}"
        )

    stacks = [CrateStack() for _ in numbers]
    # Bottom row first so pushes land in stacking order
    for row_index in range(len(crate_rows) - 1, -1, -1):
        row = crate_rows[row_index]
        for offset in range(0, len(row), COLUMN_WIDTH):
            if row[offset] == " ":
                continue
            stack_index = offset // COLUMN_WIDTH
            opened = row[offset] == "["
            closed = offset + 2 < len(row) and row[offset + 2] == "]"
            if stack_index >= len(stacks) or not (opened and closed):
                raise ParseError(
                    f"line {row_index + 1}: malformed crate at column "
                    f"{offset + 1} in {row!r}"
                )
            stacks[stack_index].push(row[offset + 1])
    return stacks


def parse_move(line: str, line_no: int) -> MoveInstruction:
    """Parse one `move <n> from <i> to <j>` line."""
    match = MOVE_PATTERN.fullmatch(line.strip())
    if match is None:
        raise ParseError(
            f"line {line_no}: expected 'move <n> from <i> to <j>', got {line!r}"
        )
    count, source, target = (int(group) for group in match.groups())
    return MoveInstruction(count=count, source=source, target=target)


def parse_crate_plan(text: str) -> tuple[list[CrateStack], list[MoveInstruction]]:
    """Split the input at its first blank line and parse both halves.

    Returns:
        (stacks, instructions) in input order.
    """
    lines = split_lines(text)
    try:
        separator = lines.index("")
    except ValueError:
        raise ParseError(
            "missing blank line between crate diagram and move list"
        ) from None

    stacks = parse_stacks(lines[:separator])
    instructions = [
        parse_move(line, line_no)
        for line_no, line in enumerate(lines[separator + 1:], start=separator + 2)
        if line.strip()
    ]
    return stacks, instructions
