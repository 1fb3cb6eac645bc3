"""Rucksack item priorities."""

from functools import reduce

from src.errors import ParseError
from src.parsing import split_lines

GROUP_SIZE = 3


def priority(item: str) -> int:
    """a..z -> 1..26, A..Z -> 27..52."""
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    raise ParseError(f"item {item!r} has no priority")


def _common_item(parts: list[str], where: str) -> str:
    common = reduce(set.intersection, (set(p) for p in parts))
    if len(common) != 1:
        raise ParseError(
            f"{where}: expected exactly one shared item, found {sorted(common)}"
        )
    return common.pop()


def _rucksacks(text: str) -> list[str]:
    return [line for line in split_lines(text) if line]


def compartment_priorities(text: str) -> int:
    """Sum of priorities of the item found in both halves of each rucksack."""
    total = 0
    for line_no, line in enumerate(_rucksacks(text), start=1):
        if len(line) % 2:
            raise ParseError(
                f"rucksack {line_no}: odd item count {len(line)} cannot be split"
            )
        half = len(line) // 2
        shared = _common_item([line[:half], line[half:]], f"rucksack {line_no}")
        total += priority(shared)
    return total


def badge_priorities(text: str) -> int:
    """Sum of priorities of the badge shared by each group of three rucksacks."""
    sacks = _rucksacks(text)
    if len(sacks) % GROUP_SIZE:
        raise ParseError(
            f"{len(sacks)} rucksacks do not divide into groups of {GROUP_SIZE}"
        )
    return sum(
        priority(
            _common_item(sacks[i:i + GROUP_SIZE], f"group {i // GROUP_SIZE + 1}")
        )
        for i in range(0, len(sacks), GROUP_SIZE)
    )
