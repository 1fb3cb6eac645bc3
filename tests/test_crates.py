"""Tests for crate diagram parsing and both transfer modes."""

import pytest

from src.crates import (
    CrateStack,
    MoveInstruction,
    TransferMode,
    apply_move,
    apply_moves,
    parse_crate_plan,
    parse_move,
    parse_stacks,
    top_labels,
)
from src.errors import ParseError, UnderflowError, UnknownReferenceError

SAMPLE = "\n".join(
    [
        "    [D]    ",
        "[N] [C]    ",
        "[Z] [M] [P]",
        " 1   2   3 ",
        "",
        "move 1 from 2 to 1",
        "move 3 from 1 to 3",
        "move 2 from 2 to 1",
        "move 1 from 1 to 2",
    ]
) + "\n"


def _sample_stacks() -> list[CrateStack]:
    return [CrateStack(["Z", "N"]), CrateStack(["M", "C", "D"]), CrateStack(["P"])]


class TestCrateStack:
    """LIFO push/pop/peek at one end."""

    def test_push_pop_peek(self):
        stack = CrateStack()
        assert stack.peek() is None
        stack.push("A")
        stack.push("B")
        assert stack.peek() == "B"
        assert stack.pop() == "B"
        assert len(stack) == 1

    def test_pop_empty(self):
        with pytest.raises(UnderflowError):
            CrateStack().pop()


class TestParseCratePlan:
    """Fixed-width diagram plus move list."""

    def test_sample_stacks(self):
        stacks, moves = parse_crate_plan(SAMPLE)
        assert [s.labels for s in stacks] == [["Z", "N"], ["M", "C", "D"], ["P"]]
        assert moves[0] == MoveInstruction(count=1, source=2, target=1)
        assert len(moves) == 4

    def test_right_trimmed_rows(self):
        stacks = parse_stacks(["    [D]", "[N] [C]", "[Z] [M] [P]", " 1   2   3"])
        assert [s.labels for s in stacks] == [["Z", "N"], ["M", "C", "D"], ["P"]]

    def test_numbered_empty_stack(self):
        stacks = parse_stacks(["[A]", " 1   2 "])
        assert [len(s) for s in stacks] == [1, 0]

    def test_missing_separator(self):
        with pytest.raises(ParseError, match="blank line"):
            parse_crate_plan("[A]\n 1 \nmove 1 from 1 to 1\n")

    def test_bad_numbering(self):
        with pytest.raises(ParseError, match="numbering"):
            parse_stacks(["[A]", " 2 "])

    def test_crate_beyond_numbered_columns(self):
        with pytest.raises(ParseError, match="malformed crate"):
            parse_stacks(["[A] [B]", " 1 "])

    def test_stray_character_in_crate_slot(self):
        with pytest.raises(ParseError, match="malformed crate at column 1"):
            parse_stacks(["X   [B]", " 1   2 "])

    def test_bad_move(self):
        with pytest.raises(ParseError, match="line 3"):
            parse_move("move one from 1 to 2", 3)


class TestSingleMode:
    """One crate at a time reverses the moved block."""

    def test_sample_tops(self):
        stacks, moves = parse_crate_plan(SAMPLE)
        assert top_labels(apply_moves(stacks, moves, TransferMode.SINGLE)) == "CMZ"

    def test_block_reversed(self):
        stacks = _sample_stacks()
        apply_move(stacks, MoveInstruction(3, 2, 3), TransferMode.SINGLE)
        assert stacks[2].labels == ["P", "D", "C", "M"]


class TestBulkMode:
    """Whole-block moves preserve order."""

    def test_sample_tops(self):
        stacks, moves = parse_crate_plan(SAMPLE)
        assert top_labels(apply_moves(stacks, moves, TransferMode.BULK)) == "MCD"

    def test_block_preserved(self):
        stacks = _sample_stacks()
        apply_move(stacks, MoveInstruction(3, 2, 3), TransferMode.BULK)
        assert stacks[2].labels == ["P", "M", "C", "D"]
        assert stacks[1].labels == []


class TestErrors:
    """Malformed moves fail fast in both modes."""

    @pytest.mark.parametrize("mode", list(TransferMode))
    def test_underflow(self, mode):
        stacks = _sample_stacks()
        with pytest.raises(UnderflowError, match="cannot move 2"):
            apply_move(stacks, MoveInstruction(2, 3, 1), mode)
        # Failing move leaves stacks untouched
        assert [s.labels for s in stacks] == [s.labels for s in _sample_stacks()]

    @pytest.mark.parametrize("index", [0, 4])
    def test_unknown_stack(self, index):
        with pytest.raises(UnknownReferenceError, match=f"stack {index}"):
            apply_move(
                _sample_stacks(), MoveInstruction(1, index, 1), TransferMode.SINGLE
            )

    def test_empty_stack_contributes_no_top(self):
        stacks = _sample_stacks()
        apply_move(stacks, MoveInstruction(1, 3, 1), TransferMode.SINGLE)
        assert top_labels(stacks) == "PD"


class TestIdempotence:
    """Fresh parses give identical answers."""

    def test_repeat_runs_identical(self):
        results = []
        for _ in range(2):
            stacks, moves = parse_crate_plan(SAMPLE)
            results.append(top_labels(apply_moves(stacks, moves, TransferMode.BULK)))
        assert results == ["MCD", "MCD"]
