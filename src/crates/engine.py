"""Crate rearrangement: apply move instructions to 1-indexed stacks."""

import logging
from collections.abc import Iterable

from src.crates.types import CrateStack, MoveInstruction, TransferMode
from src.errors import UnderflowError, UnknownReferenceError

log = logging.getLogger(__name__)


def _stack_at(stacks: list[CrateStack], index: int) -> CrateStack:
    """Resolve a 1-based stack index."""
    if not 1 <= index <= len(stacks):
        raise UnknownReferenceError(
            f"stack {index} does not exist (have 1..{len(stacks)})"
        )
    return stacks[index - 1]


def apply_move(
    stacks: list[CrateStack], move: MoveInstruction, mode: TransferMode
) -> None:
    """Apply a single instruction in place.

    Raises:
        UnknownReferenceError: If either index is outside 1..len(stacks).
        UnderflowError: If the source holds fewer than `move.count` crates.
            Checked up front, so a failing move leaves the stacks untouched.
    """
    source = _stack_at(stacks, move.source)
    target = _stack_at(stacks, move.target)
    if move.count > len(source):
        raise UnderflowError(
            f"cannot move {move.count} crates from stack {move.source} "
            f"holding {len(source)}"
        )

    if mode is TransferMode.SINGLE:
        for _ in range(move.count):
            target.push(source.pop())
        return

    # Stage the block, then unstage in reverse-of-pop order
    staging = CrateStack()
    for _ in range(move.count):
        staging.push(source.pop())
    while len(staging):
        target.push(staging.pop())


def apply_moves(
    stacks: list[CrateStack],
    moves: Iterable[MoveInstruction],
    mode: TransferMode,
) -> list[CrateStack]:
    """Apply every instruction in order, mutating and returning `stacks`."""
    n_moves = 0
    for move in moves:
        log.debug(
            "move %d from %d to %d (%s)",
            move.count,
            move.source,
            move.target,
            mode.value,
        )
        apply_move(stacks, move, mode)
        n_moves += 1
    log.info(
        "Applied %d moves across %d stacks in %s mode",
        n_moves,
        len(stacks),
        mode.value,
    )
    return stacks


def top_labels(stacks: list[CrateStack]) -> str:
    """Concatenate the top label of every stack; empty stacks add nothing."""
    return "".join(label for stack in stacks if (label := stack.peek()) is not None)
