"""Configuration settings for the cutcat pipeline

This module centralizes configuration including:
- Engine binary and log locations (overridable via environment variables)
- Master re-encode parameters
- Working directory and segment naming conventions
- The explicit Settings structure handed to the pipeline controller
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import psutil

from .exceptions import ConfigurationError

# External engine binary
FFMPEG = os.environ.get("CUTCAT_FFMPEG", "ffmpeg")
FFMPEG_LOGLEVEL = "warning"

# LOG_DIR: user definable with default of "$HOME/cutcat_logs"
LOG_DIR = Path(os.environ.get("CUTCAT_LOG_DIR", str(Path.home() / "cutcat_logs")))

# Logging configuration
LOG_LEVEL = os.environ.get("CUTCAT_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR, CRITICAL

# Master re-encode settings
DEFAULT_RESOLUTION = "1280x720"
DEFAULT_BITRATE = "1500k"

# Cut configuration file; line text despite the extension
DEFAULT_CONFIG_FILE = "config.json"

# Working directory layout
WORK_DIR_SUFFIX = "_tmp"
SEGMENT_EXTENSION = ".mp4"
MANIFEST_PREFIX = "clips-"

AUTO_WORKERS = "auto"

_RESOLUTION_RE = re.compile(r"^\d+x\d+$")


@dataclass
class Settings:
    """Everything one pipeline run needs, passed in at construction time."""
    input_path: Optional[Path]
    output_path: Optional[Path]
    config_path: Path = Path(DEFAULT_CONFIG_FILE)
    resolution: str = DEFAULT_RESOLUTION
    bitrate: str = DEFAULT_BITRATE
    max_workers: Optional[Union[int, str]] = None  # None means one worker per segment
    cleanup: bool = False
    ffmpeg: str = FFMPEG

    def __post_init__(self) -> None:
        if isinstance(self.input_path, str):
            self.input_path = Path(self.input_path) if self.input_path else None
        if isinstance(self.output_path, str):
            self.output_path = Path(self.output_path) if self.output_path else None
        if isinstance(self.config_path, str):
            self.config_path = Path(self.config_path)

    def validate(self) -> None:
        """Validate settings, raising ConfigurationError on the first problem."""
        if self.input_path is None:
            raise ConfigurationError("no input file", module="config")
        if self.output_path is None:
            raise ConfigurationError("no output file", module="config")
        if not _RESOLUTION_RE.match(self.resolution):
            raise ConfigurationError(
                f"Invalid resolution {self.resolution!r}, expected WIDTHxHEIGHT",
                module="config"
            )
        if not self.bitrate:
            raise ConfigurationError("Bitrate must not be empty", module="config")
        if self.max_workers is None or self.max_workers == AUTO_WORKERS:
            return
        if isinstance(self.max_workers, bool) or not isinstance(self.max_workers, int):
            raise ConfigurationError(
                f"max_workers must be a positive integer or '{AUTO_WORKERS}': {self.max_workers!r}",
                module="config"
            )
        if self.max_workers < 1:
            raise ConfigurationError(
                f"max_workers must be positive: {self.max_workers}",
                module="config"
            )

    def resolve_max_workers(self, job_count: int) -> int:
        """Return the thread pool size for `job_count` extraction jobs."""
        if self.max_workers is None:
            limit = job_count
        elif self.max_workers == AUTO_WORKERS:
            limit = psutil.cpu_count() or 1
        else:
            limit = self.max_workers
        return max(1, min(limit, job_count))
