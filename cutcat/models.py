"""Data records passed between pipeline stages"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import SEGMENT_EXTENSION
from .timeparse import parse_time


@dataclass(frozen=True)
class TimeRange:
    """Absolute start/end offsets in seconds. `end` is not a duration."""
    start: int
    end: int


@dataclass(frozen=True)
class ConfigEntry:
    """One raw `<start> <end>` line from the cut configuration."""
    start_text: str
    end_text: str

    def to_range(self) -> TimeRange:
        """Parse both tokens; raises ParseError on a malformed timestamp."""
        return TimeRange(start=parse_time(self.start_text), end=parse_time(self.end_text))


@dataclass(frozen=True)
class SegmentJob:
    """
    One extraction unit of work.

    Attributes:
        index: Position of the range in the configuration
        time_range: Range to extract from the master file
        output_path: Destination, derived only from `index`
    """
    index: int
    time_range: TimeRange
    output_path: Path

    @classmethod
    def for_range(cls, index: int, time_range: TimeRange, work_dir: Path) -> "SegmentJob":
        return cls(
            index=index,
            time_range=time_range,
            output_path=work_dir / f"{index}{SEGMENT_EXTENSION}"
        )


@dataclass
class SegmentResult:
    """Outcome of one SegmentJob, tagged with the job's index."""
    index: int
    path: Path
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None
