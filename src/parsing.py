"""Line splitting shared by every puzzle grammar."""

from src.errors import ParseError


def split_lines(text: str) -> list[str]:
    """Split raw input into lines, dropping a single trailing newline.

    Interior blank lines are preserved since some grammars (calorie groups,
    the crate diagram separator) depend on them.

    Args:
        text: Entire input as read from disk.

    Returns:
        List of lines without line terminators.
    """
    if text.endswith("\n"):
        text = text[:-1]
    return [line.rstrip("\r") for line in text.split("\n")]


def parse_int(token: str, line_no: int, what: str = "integer") -> int:
    """Parse a decimal integer token, raising ParseError with context.

    Args:
        token: The text to convert.
        line_no: 1-based line number, for the error message.
        what: Human-readable name of the field being parsed.

    Returns:
        The parsed integer.
    """
    try:
        return int(token)
    except ValueError:
        raise ParseError(
            f"line {line_no}: expected {what}, got {token!r}"
        ) from None
