"""Crate diagram parsing and LIFO stack rearrangement."""

from src.crates.engine import apply_move, apply_moves, top_labels
from src.crates.parser import parse_crate_plan, parse_move, parse_stacks
from src.crates.types import CrateStack, MoveInstruction, TransferMode

__all__ = [
    "CrateStack",
    "MoveInstruction",
    "TransferMode",
    "parse_stacks",
    "parse_move",
    "parse_crate_plan",
    "apply_move",
    "apply_moves",
    "top_labels",
]
