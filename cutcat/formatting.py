"""Console output for cutcat runs, rendered with rich"""

from pathlib import Path
from typing import Iterable, Sequence, Tuple

from rich.console import Console
from rich.text import Text

from .models import TimeRange
from .timeparse import format_time

console = Console()

# kind -> (mark, mark style, message style)
MARKS = {
    "check": ("✓ ", "bold green", "bold"),
    "success": ("✓ ", "green", "green"),
    "warning": ("⚠ ", "bold yellow", "yellow"),
    "error": ("✗ ", "bold red", "bold red"),
    "info": ("ℹ ", "bold blue", "blue"),
}


def _mark(kind: str, message: str) -> None:
    mark, mark_style, message_style = MARKS[kind]
    console.print(Text(mark, style=mark_style) + Text(message, style=message_style))


def print_check(message: str) -> None:
    _mark("check", message)


def print_success(message: str) -> None:
    _mark("success", message)


def print_warning(message: str) -> None:
    _mark("warning", message)


def print_error(message: str) -> None:
    _mark("error", message)


def print_info(message: str) -> None:
    _mark("info", message)


def print_run_header(title: str, fields: Iterable[Tuple[str, object]]) -> None:
    """
    Print a title bar followed by aligned ``label: value`` lines.

    Args:
        title: Text shown in the bar
        fields: (label, value) pairs in display order
    """
    fields = list(fields)
    width = max((len(label) for label, _ in fields), default=0)
    console.print(Text(f"== {title} ", style="bold blue") + Text("=" * 40, style="blue"))
    for label, value in fields:
        console.print(Text(f"  {label.ljust(width)}  ", style="bold") + Text(str(value)))


def print_segments(ranges: Sequence[TimeRange], segments: Sequence[Path]) -> None:
    """One line per joined segment, in output order: index, span, duration and file."""
    for index, (time_range, segment) in enumerate(zip(ranges, segments)):
        span = f"{format_time(time_range.start)} -> {format_time(time_range.end)}"
        duration = max(time_range.end - time_range.start, 0)
        console.print(
            Text(f"  #{index:<3}", style="bold cyan")
            + Text(span)
            + Text(f"  {duration:>5}s  ", style="dim")
            + Text(segment.name, style="green")
        )
