"""Section assignment range pairs (`a-b,c-d`)."""

import re
from dataclasses import dataclass

from src.errors import ParseError
from src.parsing import split_lines

PAIR_PATTERN = re.compile(r"(\d+)-(\d+),(\d+)-(\d+)")


@dataclass(frozen=True, slots=True)
class SectionRange:
    """Inclusive range of section ids."""

    low: int
    high: int

    def contains(self, other: "SectionRange") -> bool:
        return self.low <= other.low and other.high <= self.high

    def overlaps(self, other: "SectionRange") -> bool:
        return self.low <= other.high and other.low <= self.high


def parse_range_pairs(text: str) -> list[tuple[SectionRange, SectionRange]]:
    pairs = []
    for line_no, line in enumerate(split_lines(text), start=1):
        if not line.strip():
            continue
        match = PAIR_PATTERN.fullmatch(line.strip())
        if match is None:
            raise ParseError(f"line {line_no}: expected 'a-b,c-d', got {line!r}")
        a, b, c, d = (int(g) for g in match.groups())
        if a > b or c > d:
            raise ParseError(f"line {line_no}: range bounds out of order in {line!r}")
        pairs.append((SectionRange(a, b), SectionRange(c, d)))
    return pairs


def count_containing(pairs: list[tuple[SectionRange, SectionRange]]) -> int:
    """Pairs in which one range fully contains the other."""
    return sum(1 for a, b in pairs if a.contains(b) or b.contains(a))


def count_overlapping(pairs: list[tuple[SectionRange, SectionRange]]) -> int:
    """Pairs that share at least one section."""
    return sum(1 for a, b in pairs if a.overlaps(b))
