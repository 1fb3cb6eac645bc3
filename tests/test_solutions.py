"""Tests for the solver registry across every day and part."""

from dataclasses import replace

import pytest

from src.config import DEFAULT_CONFIG, RopeConfig
from src.errors import UnderflowError
from src.grid import max_scenic_score, parse_height_matrix
from src.solutions import SOLVERS, solve

CALORIES = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"
SHAPES = "A Y\nB X\nC Z\n"
RUCKSACKS = (
    "vJrwpWtwJgWrhcsFMMfFFhFp\n"
    "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL\n"
    "PmmdzqPrVvPwwTWBwg\n"
    "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn\n"
    "ttgJtRGJQctTZtZT\n"
    "CrZsJsPPZsGzwwsLwLmpwMDw\n"
)
RANGES = "2-4,6-8\n2-3,4-5\n5-7,7-9\n2-8,3-7\n6-6,4-6\n2-6,4-8\n"
CRATES = (
    "    [D]    \n"
    "[N] [C]    \n"
    "[Z] [M] [P]\n"
    " 1   2   3 \n"
    "\n"
    "move 1 from 2 to 1\n"
    "move 3 from 1 to 3\n"
    "move 2 from 2 to 1\n"
    "move 1 from 1 to 2\n"
)
SIGNAL = "mjqjpqmgbljsphdztnvjfqwrcgsmlb\n"
SESSION = (
    "$ cd /\n$ ls\ndir a\n14848514 b.txt\n8504156 c.dat\ndir d\n"
    "$ cd a\n$ ls\ndir e\n29116 f\n2557 g\n62596 h.lst\n"
    "$ cd e\n$ ls\n584 i\n$ cd ..\n$ cd ..\n"
    "$ cd d\n$ ls\n4060174 j\n8033020 d.log\n5626152 d.ext\n7214296 k\n"
)
GRID = "30373\n25512\n65332\n33549\n35390\n"
ROPE_SMALL = "R 4\nU 4\nL 3\nD 1\nR 4\nD 1\nL 5\nR 2\n"
ROPE_LARGE = "R 5\nU 8\nL 8\nD 3\nR 17\nD 10\nL 25\nU 20\n"

EXPECTED = [
    (1, CALORIES, 1, 24000),
    (1, CALORIES, 2, 45000),
    (2, SHAPES, 1, 15),
    (2, SHAPES, 2, 12),
    (3, RUCKSACKS, 1, 157),
    (3, RUCKSACKS, 2, 70),
    (4, RANGES, 1, 2),
    (4, RANGES, 2, 4),
    (5, CRATES, 1, "CMZ"),
    (5, CRATES, 2, "MCD"),
    (6, SIGNAL, 1, 7),
    (6, SIGNAL, 2, 19),
    (7, SESSION, 1, 95437),
    (7, SESSION, 2, 24933642),
    (8, GRID, 1, 21),
    (8, GRID, 2, 8),
    (9, ROPE_SMALL, 1, 13),
    (9, ROPE_SMALL, 2, 1),
    (9, ROPE_LARGE, 2, 36),
]


class TestSolve:
    """Dispatch by day and part."""

    @pytest.mark.parametrize("day, text, part, expected", EXPECTED)
    def test_sample_answers(self, day, text, part, expected):
        assert solve(day, text, part, DEFAULT_CONFIG) == expected

    @pytest.mark.parametrize("day, text, part, expected", EXPECTED)
    def test_repeat_runs_identical(self, day, text, part, expected):
        first = solve(day, text, part, DEFAULT_CONFIG)
        second = solve(day, text, part, DEFAULT_CONFIG)
        assert first == second == expected

    def test_every_day_registered(self):
        assert sorted(SOLVERS) == list(range(1, 10))

    def test_unknown_day(self):
        with pytest.raises(ValueError, match="no solver for day 42"):
            solve(42, "", 1, DEFAULT_CONFIG)

    def test_bad_part(self):
        with pytest.raises(ValueError, match="part must be 1 or 2"):
            solve(9, ROPE_SMALL, 3, DEFAULT_CONFIG)

    def test_config_changes_knot_count(self):
        cfg = replace(DEFAULT_CONFIG, rope=RopeConfig(short_knots=1, long_knots=2))
        assert solve(9, ROPE_SMALL, 2, cfg) == 13

    def test_errors_propagate(self):
        text = "[A]\n 1 \n\nmove 2 from 1 to 1\n"
        with pytest.raises(UnderflowError):
            solve(5, text, 1, DEFAULT_CONFIG)

    def test_grid_part_two_matches_scan_reducer(self):
        matrix = parse_height_matrix(GRID)
        assert solve(8, GRID, 2, DEFAULT_CONFIG) == max_scenic_score(matrix)
