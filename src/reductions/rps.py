"""Rock-paper-scissors strategy guide scoring.

Shapes and outcomes are closed enumerations; the beats relation and the
scores are total functions over them rather than lookup tables.
"""

from enum import Enum

from src.errors import ParseError
from src.parsing import split_lines


class Shape(Enum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def score(self) -> int:
        return self.value

    def beats(self) -> "Shape":
        """The shape this one defeats."""
        match self:
            case Shape.ROCK:
                return Shape.SCISSORS
            case Shape.PAPER:
                return Shape.ROCK
            case Shape.SCISSORS:
                return Shape.PAPER

    def loses_to(self) -> "Shape":
        """The shape that defeats this one."""
        match self:
            case Shape.ROCK:
                return Shape.PAPER
            case Shape.PAPER:
                return Shape.SCISSORS
            case Shape.SCISSORS:
                return Shape.ROCK


class Outcome(Enum):
    LOSS = 0
    DRAW = 3
    WIN = 6

    @property
    def score(self) -> int:
        return self.value


def outcome(opponent: Shape, mine: Shape) -> Outcome:
    """Result of one round from my point of view."""
    if mine == opponent:
        return Outcome.DRAW
    if mine.beats() == opponent:
        return Outcome.WIN
    return Outcome.LOSS


def shape_for(opponent: Shape, wanted: Outcome) -> Shape:
    """The shape to throw against `opponent` to get `wanted`."""
    match wanted:
        case Outcome.DRAW:
            return opponent
        case Outcome.WIN:
            return opponent.loses_to()
        case Outcome.LOSS:
            return opponent.beats()


def parse_shape(letter: str, line_no: int) -> Shape:
    match letter:
        case "A" | "X":
            return Shape.ROCK
        case "B" | "Y":
            return Shape.PAPER
        case "C" | "Z":
            return Shape.SCISSORS
        case _:
            raise ParseError(f"line {line_no}: unknown shape {letter!r}")


def parse_outcome(letter: str, line_no: int) -> Outcome:
    match letter:
        case "X":
            return Outcome.LOSS
        case "Y":
            return Outcome.DRAW
        case "Z":
            return Outcome.WIN
        case _:
            raise ParseError(f"line {line_no}: unknown outcome {letter!r}")


def parse_rounds(text: str) -> list[tuple[str, str, int]]:
    """Split `<A|B|C> <X|Y|Z>` lines into (left, right, line_no) triples."""
    rounds = []
    for line_no, line in enumerate(split_lines(text), start=1):
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2:
            raise ParseError(f"line {line_no}: expected two columns, got {line!r}")
        rounds.append((parts[0], parts[1], line_no))
    return rounds


def score_as_shapes(text: str) -> int:
    """Total score reading the second column as my shape."""
    total = 0
    for left, right, line_no in parse_rounds(text):
        opponent = parse_shape(left, line_no)
        mine = parse_shape(right, line_no)
        total += mine.score + outcome(opponent, mine).score
    return total


def score_as_outcomes(text: str) -> int:
    """Total score reading the second column as the desired outcome."""
    total = 0
    for left, right, line_no in parse_rounds(text):
        opponent = parse_shape(left, line_no)
        wanted = parse_outcome(right, line_no)
        total += shape_for(opponent, wanted).score + wanted.score
    return total
