"""Utility functions for the cutcat pipeline"""

import logging
import shutil
import subprocess
from datetime import datetime
from pathlib import Path
from typing import List, Union

from .config import FFMPEG
from .exceptions import DependencyError, FilesystemError

logger = logging.getLogger(__name__)


def run_cmd(cmd: List[str], capture_output: bool = True,
            check: bool = True) -> subprocess.CompletedProcess:
    """Run a command and handle errors"""
    logger.info("Running command: %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            capture_output=capture_output,
            check=check,
            text=True
        )
        if result.stdout:
            logger.debug("Command stdout: %s", result.stdout)
        if result.stderr:
            logger.debug("Command stderr: %s", result.stderr)
        return result
    except subprocess.CalledProcessError as e:
        logger.error("Command failed: %s", " ".join(cmd))
        logger.error("Error output: %s", e.stderr)
        raise

def get_file_size(path: Union[str, Path]) -> int:
    """Get file size in bytes"""
    return Path(path).stat().st_size

def get_timestamp() -> str:
    """Get current timestamp in YYYYMMDD_HHMMSS format"""
    return datetime.now().strftime("%Y%m%d_%H%M%S")

def format_size(size: int) -> str:
    """Format file size for display"""
    for unit in ['B', 'KiB', 'MiB', 'GiB', 'TiB']:
        if size < 1024:
            return f"{size:.1f}{unit}"
        size /= 1024
    return f"{size:.1f}TiB"

def check_dependencies(ffmpeg: str = FFMPEG) -> None:
    """
    Check that the transcoding engine is on PATH.

    Raises:
        DependencyError: If ffmpeg cannot be found
    """
    if shutil.which(ffmpeg) is None:
        logger.error("Required dependency not found: %s", ffmpeg)
        raise DependencyError(f"{ffmpeg} not found on PATH", module="utils")

def cleanup_working_dir(work_dir: Path) -> None:
    """Remove a pipeline working directory and everything in it."""
    try:
        if work_dir.exists():
            shutil.rmtree(work_dir)
            logger.info("Cleaned up working directory %s", work_dir)
    except OSError as e:
        raise FilesystemError(f"Failed to clean up {work_dir}: {e}", module="utils") from e
