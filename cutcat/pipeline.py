"""High-level pipeline orchestration

Responsibilities:
  - Load and parse the cut configuration before any engine invocation.
  - Own the working directory lifecycle.
  - Sequence master re-encode, segment extraction and concatenation.
  - Track the pipeline state and report the stage that failed.

Every stage is fail-fast: the first error aborts the run, nothing is rolled
back and intermediate files stay on disk for the next attempt.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, TypeVar

from .clips import load_config, parse_ranges
from .command_jobs import TranscodeJob, partial_path
from .config import WORK_DIR_SUFFIX, Settings
from .exceptions import CutcatError, FilesystemError, PipelineError
from .formatting import (
    print_check, print_info, print_run_header,
    print_segments, print_success, print_warning
)
from .models import TimeRange
from .utils import cleanup_working_dir, format_size, get_file_size
from .video.command_builders import build_transcode_command
from .video.concatenation import concatenate_segments, manifest_path
from .video.splitter import split_segments

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PipelineStage(Enum):
    """Linear pipeline states; any failure moves to FAILED."""
    INIT = "init"
    CONFIG_LOADED = "config loaded"
    MASTER_ENCODED = "master encoded"
    SEGMENTS_EXTRACTED = "segments extracted"
    CONCATENATED = "concatenated"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PipelineResult:
    output_file: Path
    work_dir: Path
    master_file: Path
    segments: List[Path] = field(default_factory=list)
    ranges: List[TimeRange] = field(default_factory=list)
    manifest: Optional[Path] = None
    master_reused: bool = False
    elapsed: float = 0.0


def ensure_work_dir(input_file: Path) -> Path:
    """
    Create `<stem>_tmp` beside the input file, reusing it if present.

    Raises:
        FilesystemError: If the directory cannot be created
    """
    work_dir = input_file.parent / f"{input_file.stem}{WORK_DIR_SUFFIX}"
    try:
        work_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Cannot create working directory {work_dir}: {e}", module="pipeline") from e
    return work_dir

def master_path(work_dir: Path, input_file: Path, resolution: str) -> Path:
    return work_dir / f"{resolution}_{input_file.name}"


class Pipeline:
    """
    Cut-and-concatenate controller for one input file.

    Attributes:
        settings: Explicit run configuration
        stage: Current PipelineStage
    """
    def __init__(self, settings: Settings):
        settings.validate()
        self.settings = settings
        self.stage = PipelineStage.INIT

    def _step(self, name: str, work: Callable[[], T], next_stage: Optional[PipelineStage] = None) -> T:
        try:
            result = work()
        except CutcatError as e:
            self.stage = PipelineStage.FAILED
            logger.error("Stage '%s' failed: %s", name, e)
            raise PipelineError(f"{name} failed: {e.message}", stage=name) from e
        if next_stage is not None:
            self.stage = next_stage
            logger.debug("Pipeline stage: %s", next_stage.value)
        return result

    def _load_ranges(self) -> List[TimeRange]:
        return parse_ranges(load_config(self.settings.config_path))

    def _encode_master(self, master_file: Path) -> bool:
        partial_file = partial_path(master_file)
        cmd = build_transcode_command(
            self.settings.input_path, partial_file,
            self.settings.resolution, self.settings.bitrate,
            self.settings.ffmpeg
        )
        logger.info("Converting %s to %s", self.settings.input_path, master_file)
        return TranscodeJob(cmd, master_file, partial_file).execute()

    def run(self) -> PipelineResult:
        """
        Run every stage in order.

        Returns:
            PipelineResult: Paths produced by the run

        Raises:
            PipelineError: Wrapping the first stage failure
        """
        if self.stage is not PipelineStage.INIT:
            raise PipelineError(f"Pipeline already ran (stage: {self.stage.value})", stage="init")

        start_time = time.time()
        settings = self.settings

        ranges = self._step("load config", self._load_ranges, PipelineStage.CONFIG_LOADED)
        work_dir = self._step("working directory", lambda: ensure_work_dir(settings.input_path))
        master_file = master_path(work_dir, settings.input_path, settings.resolution)

        ran = self._step(
            "master re-encode",
            lambda: self._encode_master(master_file),
            PipelineStage.MASTER_ENCODED
        )
        segments = self._step(
            "segment extraction",
            lambda: split_segments(ranges, work_dir, master_file, settings),
            PipelineStage.SEGMENTS_EXTRACTED
        )
        self._step(
            "concatenation",
            lambda: concatenate_segments(segments, work_dir, settings.output_path, settings),
            PipelineStage.CONCATENATED
        )

        if settings.cleanup:
            self._step("cleanup", lambda: cleanup_working_dir(work_dir))
        self.stage = PipelineStage.DONE

        return PipelineResult(
            output_file=settings.output_path,
            work_dir=work_dir,
            master_file=master_file,
            segments=segments,
            ranges=ranges,
            manifest=manifest_path(work_dir, settings.output_path),
            master_reused=not ran,
            elapsed=time.time() - start_time
        )


def process_file(settings: Settings) -> PipelineResult:
    """Run the pipeline for one input, printing a header and a summary."""
    print_run_header("cutcat", [
        ("Input", settings.input_path),
        ("Output", settings.output_path),
        ("Cut config", settings.config_path),
        ("Master", f"{settings.resolution} @ {settings.bitrate}"),
    ])

    result = Pipeline(settings).run()

    if result.master_reused:
        print_warning(f"Reused master {result.master_file.name} from an earlier run")
    print_segments(result.ranges, result.segments)
    print_success(
        f"Joined {len(result.segments)} segments into {result.output_file} "
        f"({format_size(get_file_size(result.output_file))})"
    )
    print_check(f"Finished in {result.elapsed:.1f}s")
    if not settings.cleanup:
        print_info(f"Intermediate files kept in {result.work_dir}")
    return result
