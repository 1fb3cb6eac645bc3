"""Per-day solver registry.

Each solver takes the raw input text, the part number (1 or 2), and the
run's PuzzleConfig, and returns the answer to print: an int, or a string
for the crate puzzle. Solvers parse fresh on every call and hold no state
between calls.
"""

import logging
from collections.abc import Callable

from src.config.puzzle import PuzzleConfig
from src.crates import TransferMode, apply_moves, parse_crate_plan, top_labels
from src.filesystem import replay_session, summarize_directories
from src.grid import count_visible, max_scenic_score, parse_height_matrix
from src.reductions import (
    badge_priorities,
    compartment_priorities,
    count_containing,
    count_overlapping,
    find_marker,
    parse_calorie_groups,
    parse_range_pairs,
    score_as_outcomes,
    score_as_shapes,
    top_n_total,
)
from src.rope import count_tail_positions, parse_motions

log = logging.getLogger(__name__)

Answer = int | str
Solver = Callable[[str, int, PuzzleConfig], Answer]

PARTS: tuple[int, ...] = (1, 2)


def solve_calories(text: str, part: int, config: PuzzleConfig) -> Answer:
    totals = parse_calorie_groups(text)
    return top_n_total(totals, 1 if part == 1 else config.calories.top_n)


def solve_rock_paper_scissors(text: str, part: int, config: PuzzleConfig) -> Answer:
    return score_as_shapes(text) if part == 1 else score_as_outcomes(text)


def solve_rucksacks(text: str, part: int, config: PuzzleConfig) -> Answer:
    return compartment_priorities(text) if part == 1 else badge_priorities(text)


def solve_section_ranges(text: str, part: int, config: PuzzleConfig) -> Answer:
    pairs = parse_range_pairs(text)
    return count_containing(pairs) if part == 1 else count_overlapping(pairs)


def solve_crates(text: str, part: int, config: PuzzleConfig) -> Answer:
    stacks, moves = parse_crate_plan(text)
    mode = TransferMode.SINGLE if part == 1 else TransferMode.BULK
    return top_labels(apply_moves(stacks, moves, mode))


def solve_signal(text: str, part: int, config: PuzzleConfig) -> Answer:
    window = config.signal.packet_marker if part == 1 else config.signal.message_marker
    return find_marker(text, window)


def solve_filesystem(text: str, part: int, config: PuzzleConfig) -> Answer:
    report = summarize_directories(replay_session(text), config.filesystem)
    return report.small_dir_total if part == 1 else report.delete_candidate_size


def solve_grid(text: str, part: int, config: PuzzleConfig) -> Answer:
    matrix = parse_height_matrix(text)
    if part == 1:
        return count_visible(matrix)
    return max_scenic_score(matrix)


def solve_rope(text: str, part: int, config: PuzzleConfig) -> Answer:
    n_knots = config.rope.short_knots if part == 1 else config.rope.long_knots
    return count_tail_positions(parse_motions(text), n_knots)


SOLVERS: dict[int, Solver] = {
    1: solve_calories,
    2: solve_rock_paper_scissors,
    3: solve_rucksacks,
    4: solve_section_ranges,
    5: solve_crates,
    6: solve_signal,
    7: solve_filesystem,
    8: solve_grid,
    9: solve_rope,
}


def solve(day: int, text: str, part: int, config: PuzzleConfig) -> Answer:
    """Dispatch one run to the solver registered for `day`.

    Raises:
        ValueError: For an unregistered day or a part other than 1 or 2.
        PuzzleError: Whatever the day's parser or simulator raises.
    """
    if day not in SOLVERS:
        raise ValueError(f"no solver for day {day} (have {sorted(SOLVERS)})")
    if part not in PARTS:
        raise ValueError(f"part must be 1 or 2, got {part}")
    log.info("Solving day %d part %d (%d characters of input)", day, part, len(text))
    return SOLVERS[day](text, part, config)
