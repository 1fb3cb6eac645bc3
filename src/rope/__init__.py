"""Rope simulation: lattice types, motion parsing, and knot-following."""

from src.rope.parser import parse_motion, parse_motions
from src.rope.simulator import Rope, count_tail_positions, follow, simulate_rope
from src.rope.types import ORIGIN, Coordinate, Direction, Motion

__all__ = [
    "Coordinate",
    "Direction",
    "Motion",
    "ORIGIN",
    "parse_motion",
    "parse_motions",
    "Rope",
    "follow",
    "simulate_rope",
    "count_tail_positions",
]
