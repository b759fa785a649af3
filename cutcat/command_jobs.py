"""
command_jobs.py

Defines a base class for engine command jobs and specialized implementations
for each pipeline step (master re-encode, segment extraction, concatenation).
Every job makes at most one attempt.
"""

import logging
import subprocess
from pathlib import Path
from typing import List

from .utils import run_cmd
from .exceptions import (
    EngineInvocationError, EncodingError,
    SegmentExtractionError, ConcatenationError, FilesystemError
)

logger = logging.getLogger(__name__)

class CommandJob:
    """
    Base class representing a command job.

    Attributes:
        cmd (List[str]): The command to run
    """
    def __init__(self, cmd: List[str]):
        self.cmd = cmd

    def execute(self) -> None:
        """
        Execute the stored command.

        Raises:
            EngineInvocationError: If the command exits non-zero or cannot be spawned
        """
        logger.debug("Executing command: %s", " ".join(self.cmd))
        try:
            run_cmd(self.cmd)
        except subprocess.CalledProcessError as e:
            raise EngineInvocationError(
                f"Command failed with exit code {e.returncode}: {' '.join(self.cmd)}",
                module="command_jobs",
                exit_code=e.returncode,
                stderr=e.stderr or ""
            ) from e
        except OSError as e:
            raise EngineInvocationError(
                f"Could not start {self.cmd[0]}: {e}",
                module="command_jobs"
            ) from e

def partial_path(output_file: Path) -> Path:
    """In-progress name for an encode target, keeping its container suffix."""
    return output_file.with_name(f"{output_file.stem}.partial{output_file.suffix}")

class TranscodeJob(CommandJob):
    """
    Whole-file master re-encode, skipped when the output already exists.

    ffmpeg writes to `partial_file`, which is renamed to `output_file` only
    after a clean exit. A failed or interrupted encode never leaves a file
    under the final name.
    """
    def __init__(self, cmd: List[str], output_file: Path, partial_file: Path):
        super().__init__(cmd)
        self.output_file = output_file
        self.partial_file = partial_file

    def _discard_partial(self) -> None:
        if self.partial_file.exists():
            logger.warning("Removing incomplete encode %s", self.partial_file)
            self.partial_file.unlink()

    def execute(self) -> bool:
        """Returns True if ffmpeg ran, False if an existing output was reused."""
        if self.output_file.exists():
            logger.info("Master %s already exists; skipping re-encode", self.output_file)
            return False
        # Left behind by a killed run; the command carries no -y
        self._discard_partial()
        try:
            super().execute()
        except EngineInvocationError as e:
            self._discard_partial()
            raise EncodingError(
                f"Re-encode failed: {e.message}",
                module="transcode",
                exit_code=e.exit_code,
                stderr=e.stderr
            ) from e
        except KeyboardInterrupt:
            self._discard_partial()
            raise
        try:
            self.partial_file.replace(self.output_file)
        except OSError as e:
            raise FilesystemError(
                f"Cannot move {self.partial_file} to {self.output_file}: {e}",
                module="transcode"
            ) from e
        return True

class ExtractJob(CommandJob):
    """Job for extracting one segment; always runs."""
    def execute(self) -> None:
        try:
            super().execute()
        except EngineInvocationError as e:
            raise SegmentExtractionError(
                f"Extraction failed: {e.message}",
                module="splitter",
                exit_code=e.exit_code,
                stderr=e.stderr
            ) from e

class ConcatJob(CommandJob):
    """Job for concatenating segments."""
    def execute(self) -> None:
        try:
            super().execute()
        except EngineInvocationError as e:
            raise ConcatenationError(
                f"Concat failed: {e.message}",
                module="concatenation",
                exit_code=e.exit_code,
                stderr=e.stderr
            ) from e
