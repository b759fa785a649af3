"""Timestamp parsing for cut configurations

Accepts colon separated timestamps, most significant first:
``H:M:S``, ``M:S`` or ``S``. Components have no upper bound, so ``"90"``
and ``"99:00"`` are both valid and normalize through powers of 60.
"""

from .exceptions import ParseError

MAX_COMPONENTS = 3


def parse_time(text: str) -> int:
    """
    Convert a timestamp string into a whole number of seconds.

    Args:
        text: Timestamp such as ``"01:02:03"``, ``"2:05"`` or ``"90"``

    Returns:
        int: Offset in seconds

    Raises:
        ParseError: If there are more than three components or any component
            is not a non-negative integer
    """
    parts = text.split(":")
    if len(parts) > MAX_COMPONENTS:
        raise ParseError(text)

    seconds = 0
    for position, part in enumerate(reversed(parts)):
        if not part.isdigit() or not part.isascii():
            raise ParseError(text, reason=f"invalid time component {part!r}")
        seconds += int(part) * 60 ** position
    return seconds


def format_time(seconds: int) -> str:
    """Render seconds as HH:MM:SS"""
    if seconds < 0:
        raise ValueError(f"Negative offset: {seconds}")
    hours, rest = divmod(int(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
