"""Error taxonomy shared by every puzzle parser and simulator.

All errors are unrecoverable: the run aborts at the point of detection and
the command-line entry point reports the message and exits non-zero. Each
class also derives from the closest builtin so callers can catch either.
"""


class PuzzleError(Exception):
    """Base class for all puzzle input and simulation failures."""


class ParseError(PuzzleError, ValueError):
    """Raised when input text does not match the expected grammar."""


class UnknownReferenceError(PuzzleError, LookupError):
    """Raised when a filesystem child or stack index does not exist."""


class UnderflowError(PuzzleError, IndexError):
    """Raised when popping more elements than a stack holds."""


class StructuralError(PuzzleError):
    """Raised on invalid tree navigation, e.g. ascending above the root."""
