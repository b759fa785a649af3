"""Parallel segment extraction

Responsibilities:
- Create one SegmentJob per configured range, keyed by its config position
- Run every job against the shared master file on a thread pool
- Join all jobs, then rebuild the ordered path list from job indices
- Surface any failed extraction as a pipeline-aborting error

Workers never touch shared state: each returns a SegmentResult and the
ordered list is only assembled after the pool has shut down.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence

from ..command_jobs import ExtractJob
from ..config import Settings
from ..exceptions import SegmentExtractionError
from ..models import SegmentJob, SegmentResult, TimeRange
from ..timeparse import format_time
from .command_builders import build_extract_command

logger = logging.getLogger(__name__)


def extract_segment(job: SegmentJob, master_file: Path, binary: str) -> SegmentResult:
    """Run one extraction job, capturing any failure in the result."""
    cmd = build_extract_command(master_file, job.time_range, job.output_path, binary)
    logger.info(
        "Extracting segment %d: %s -> %s",
        job.index, format_time(job.time_range.start), format_time(job.time_range.end)
    )
    try:
        ExtractJob(cmd).execute()
    except SegmentExtractionError as e:
        logger.error("Segment %d failed: %s", job.index, e)
        return SegmentResult(index=job.index, path=job.output_path, error=e)
    return SegmentResult(index=job.index, path=job.output_path)

def collect_results(results: Sequence[SegmentResult], job_count: int) -> List[Path]:
    """
    Order results by job index and check that every job succeeded.

    Raises:
        SegmentExtractionError: If any job failed or a slot is missing
    """
    slots: List[Optional[SegmentResult]] = [None] * job_count
    for result in results:
        slots[result.index] = result

    missing = [i for i, slot in enumerate(slots) if slot is None]
    if missing:
        raise SegmentExtractionError(f"No result for segments {missing}", module="splitter")

    failed = [slot for slot in slots if not slot.ok]
    if failed:
        raise SegmentExtractionError(
            f"{len(failed)} of {job_count} segments failed: {[r.index for r in failed]}",
            module="splitter"
        ) from failed[0].error

    return [slot.path for slot in slots]

def validate_segments(segments: Sequence[Path]) -> None:
    """Every extracted segment must exist and be non-empty."""
    for segment in segments:
        if not segment.exists() or segment.stat().st_size == 0:
            raise SegmentExtractionError(
                f"Segment output is missing or empty: {segment}",
                module="splitter"
            )

def split_segments(
    ranges: Sequence[TimeRange],
    work_dir: Path,
    master_file: Path,
    settings: Settings
) -> List[Path]:
    """
    Extract every range from the master file concurrently.

    Args:
        ranges: Ranges in configuration order
        work_dir: Directory receiving `<index>.mp4` segment files
        master_file: Re-encoded master shared read-only by all jobs
        settings: Pipeline settings (worker cap, ffmpeg binary)

    Returns:
        List[Path]: Segment paths in configuration order

    Raises:
        SegmentExtractionError: If there are no ranges or any extraction fails
    """
    if not ranges:
        raise SegmentExtractionError("No ranges to extract", module="splitter")

    jobs = [SegmentJob.for_range(i, r, work_dir) for i, r in enumerate(ranges)]
    max_workers = settings.resolve_max_workers(len(jobs))
    logger.info("Extracting %d segments with %d workers", len(jobs), max_workers)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(extract_segment, job, master_file, settings.ffmpeg)
            for job in jobs
        ]
    # Executor shutdown is the join barrier
    results = [future.result() for future in futures]

    segments = collect_results(results, len(jobs))
    validate_segments(segments)
    return segments
