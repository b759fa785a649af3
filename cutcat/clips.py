"""Cut configuration loading

The configuration is line text, one range per line::

    00:00:12 00:08:00
    00:09:00 00:23:10

Tokens stay as text in ConfigEntry records; conversion to seconds happens in
parse_ranges() before any engine invocation.
"""

import logging
from pathlib import Path
from typing import Iterable, List, TextIO

from .exceptions import ConfigFormatError
from .models import ConfigEntry, TimeRange
from .timeparse import format_time

logger = logging.getLogger(__name__)


def read_config(stream: TextIO) -> List[ConfigEntry]:
    """
    Read ordered ConfigEntry records from a line-oriented text stream.

    Raises:
        ConfigFormatError: If any line does not hold exactly two tokens
    """
    entries = []
    for lineno, line in enumerate(stream, start=1):
        tokens = line.split()
        if len(tokens) != 2:
            content = line.rstrip("\r\n")
            raise ConfigFormatError(
                f"invalid format of time on line {lineno}: {content!r}",
                module="clips"
            )
        entries.append(ConfigEntry(start_text=tokens[0], end_text=tokens[1]))
    return entries


def load_config(path: Path) -> List[ConfigEntry]:
    """
    Load the cut configuration from `path`.

    Raises:
        ConfigFormatError: If the file cannot be read, is empty or is malformed
    """
    try:
        with open(path, encoding="utf-8") as f:
            entries = read_config(f)
    except OSError as e:
        raise ConfigFormatError(f"Cannot read cut config {path}: {e}", module="clips") from e

    if not entries:
        raise ConfigFormatError(f"No ranges found in {path}", module="clips")
    logger.info("Loaded %d ranges from %s", len(entries), path)
    return entries


def parse_ranges(entries: Iterable[ConfigEntry]) -> List[TimeRange]:
    """Convert entries to TimeRanges, stopping at the first ParseError."""
    ranges = []
    for index, entry in enumerate(entries):
        time_range = entry.to_range()
        if time_range.end <= time_range.start:
            logger.warning(
                "Range %d ends before it starts (%s -> %s)",
                index, format_time(time_range.start), format_time(time_range.end)
            )
        ranges.append(time_range)
    return ranges
