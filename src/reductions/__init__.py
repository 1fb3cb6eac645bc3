"""Single-pass reductions over parsed records for the simpler puzzles."""

from src.reductions.calories import parse_calorie_groups, top_n_total
from src.reductions.ranges import (
    SectionRange,
    count_containing,
    count_overlapping,
    parse_range_pairs,
)
from src.reductions.rps import Outcome, Shape, score_as_outcomes, score_as_shapes
from src.reductions.rucksack import badge_priorities, compartment_priorities, priority
from src.reductions.signal import find_marker

__all__ = [
    "parse_calorie_groups",
    "top_n_total",
    "Shape",
    "Outcome",
    "score_as_shapes",
    "score_as_outcomes",
    "priority",
    "compartment_priorities",
    "badge_priorities",
    "SectionRange",
    "parse_range_pairs",
    "count_containing",
    "count_overlapping",
    "find_marker",
]
