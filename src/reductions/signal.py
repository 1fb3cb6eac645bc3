"""Start-of-packet / start-of-message marker detection."""

from collections import Counter

from src.errors import ParseError


def find_marker(stream: str, window: int) -> int:
    """1-based position of the last character of the first distinct window.

    Slides a window of `window` characters across the stream keeping a
    running character count, so each character is visited once.

    Raises:
        ParseError: If no window of pairwise-distinct characters exists.
    """
    stream = stream.strip()
    counts: Counter[str] = Counter()
    for i, ch in enumerate(stream):
        counts[ch] += 1
        if i >= window:
            dropped = stream[i - window]
            counts[dropped] -= 1
            if counts[dropped] == 0:
                del counts[dropped]
        if i >= window - 1 and len(counts) == window:
            return i + 1
    raise ParseError(
        f"no run of {window} distinct characters in a {len(stream)}-character stream"
    )
