"""Unit-step rope simulation over the integer lattice.

The head moves one unit at a time; every following knot then restores the
adjacency invariant (Chebyshev distance <= 1 to its predecessor) by moving
at most one step, diagonally whenever both axes differ. Multi-unit motions
are never applied as a single vector because intermediate knot interactions
must be resolved at every unit step.
"""

import logging
from collections.abc import Callable, Iterable

from src.rope.types import ORIGIN, Coordinate, Direction, Motion

log = logging.getLogger(__name__)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def follow(leader: Coordinate, knot: Coordinate) -> Coordinate:
    """Return the knot's new position after its leader has moved.

    A knot already touching its leader (including overlapping it) stays put.
    Otherwise it moves one unit along each axis on which the two differ, so
    a shared row or column gives an orthogonal step and anything else a
    diagonal one.

    Args:
        leader: Position of the preceding knot (already updated this step).
        knot: Current position of the following knot.

    Returns:
        The following knot's updated position.
    """
    if knot.chebyshev(leader) <= 1:
        return knot
    return knot.moved(_sign(leader.x - knot.x), _sign(leader.y - knot.y))


class Rope:
    """An ordered chain of knots; knot 0 is the head, the last is the tail.

    Created with every knot at the origin and mutated in place by step().
    """

    def __init__(self, n_knots: int) -> None:
        if n_knots < 1:
            raise ValueError(f"a rope needs at least one knot, got {n_knots}")
        self.knots: list[Coordinate] = [ORIGIN] * n_knots

    def __len__(self) -> int:
        return len(self.knots)

    @property
    def head(self) -> Coordinate:
        return self.knots[0]

    @property
    def tail(self) -> Coordinate:
        return self.knots[-1]

    def step(self, direction: Direction) -> Coordinate:
        """Move the head one unit and let every knot follow in order.

        Returns:
            The tail position after the step.
        """
        dx, dy = direction.delta
        knots = self.knots
        knots[0] = knots[0].moved(dx, dy)
        for i in range(1, len(knots)):
            moved = follow(knots[i - 1], knots[i])
            if moved == knots[i]:
                # Nothing downstream can move either.
                break
            knots[i] = moved
        return knots[-1]


def simulate_rope(
    motions: Iterable[Motion],
    n_knots: int,
    on_step: Callable[[tuple[Coordinate, ...]], None] | None = None,
) -> set[Coordinate]:
    """Run all motions against a fresh rope and collect tail positions.

    Args:
        motions: Parsed motions, consumed strictly in input order.
        n_knots: Rope length including the head (N=1 means the head is
            also the tail).
        on_step: Optional observer called with a snapshot of every knot
            after each unit step.

    Returns:
        Set of distinct coordinates the tail has occupied, including the
        origin it starts on.
    """
    rope = Rope(n_knots)
    visited: set[Coordinate] = {rope.tail}
    n_motions = 0
    n_steps = 0

    for motion in motions:
        n_motions += 1
        log.debug("Motion %s %d", motion.direction.value, motion.steps)
        for _ in range(motion.steps):
            visited.add(rope.step(motion.direction))
            n_steps += 1
            if on_step is not None:
                on_step(tuple(rope.knots))

    log.info(
        "Rope of %d knots: %d motions, %d unit steps, %d tail positions",
        n_knots,
        n_motions,
        n_steps,
        len(visited),
    )
    return visited


def count_tail_positions(motions: Iterable[Motion], n_knots: int) -> int:
    """Number of distinct coordinates visited by the tail."""
    return len(simulate_rope(motions, n_knots))
