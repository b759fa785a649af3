"""Handles concatenation of extracted segments into the final output."""

import logging
from pathlib import Path
from typing import Sequence

from ..command_jobs import ConcatJob
from ..config import MANIFEST_PREFIX, Settings
from ..exceptions import ConcatenationError, FilesystemError
from .command_builders import build_concat_command

logger = logging.getLogger(__name__)


def _quote(path: Path) -> str:
    # concat demuxer quoting: close quote, escaped quote, reopen
    return "'" + str(path).replace("'", "'\\''") + "'"

def manifest_path(work_dir: Path, output_file: Path) -> Path:
    return work_dir / f"{MANIFEST_PREFIX}{output_file.name}.txt"

def write_manifest(segments: Sequence[Path], work_dir: Path, output_file: Path) -> Path:
    """
    Write the concat demuxer manifest listing `segments` in the given order.

    Raises:
        FilesystemError: If the manifest cannot be written
    """
    concat_file = manifest_path(work_dir, output_file)
    lines = "".join(f"file {_quote(segment.absolute())}\n" for segment in segments)
    try:
        concat_file.write_text(lines, encoding="utf-8")
    except OSError as e:
        raise FilesystemError(f"Failed to write manifest {concat_file}: {e}", module="concatenation") from e
    logger.debug("Wrote manifest %s with %d entries", concat_file, len(segments))
    return concat_file

def concatenate_segments(
    segments: Sequence[Path],
    work_dir: Path,
    output_file: Path,
    settings: Settings
) -> Path:
    """
    Merge segments, in order, into `output_file` with a single stream-copy pass.

    Raises:
        ConcatenationError: If there is nothing to merge or the merge fails
        FilesystemError: If the manifest cannot be written
    """
    if not segments:
        raise ConcatenationError("No segments to concatenate", module="concatenation")

    concat_file = write_manifest(segments, work_dir, output_file)
    logger.info("Concatenating %d segments into %s", len(segments), output_file)
    cmd = build_concat_command(concat_file, output_file, settings.ffmpeg)
    ConcatJob(cmd).execute()

    if not output_file.exists() or output_file.stat().st_size == 0:
        raise ConcatenationError(
            "Concatenated output is missing or empty",
            module="concatenation"
        )
    return output_file
