"""Helper functions for building ffmpeg commands"""

from pathlib import Path
from typing import List

import ffmpeg

from ..config import FFMPEG, FFMPEG_LOGLEVEL
from ..models import TimeRange


def _compile(stream, binary: str, overwrite: bool = False) -> List[str]:
    stream = stream.global_args("-hide_banner", "-loglevel", FFMPEG_LOGLEVEL)
    return stream.compile(cmd=binary, overwrite_output=overwrite)

def build_transcode_command(
    input_file: Path,
    output_file: Path,
    resolution: str,
    bitrate: str,
    binary: str = FFMPEG
) -> List[str]:
    """Build ffmpeg command for the whole-file master re-encode"""
    stream = ffmpeg.input(str(input_file)).output(
        str(output_file),
        s=resolution,
        video_bitrate=bitrate,
    )
    return _compile(stream, binary)

def build_extract_command(
    master_file: Path,
    time_range: TimeRange,
    output_file: Path,
    binary: str = FFMPEG
) -> List[str]:
    """Build ffmpeg command for a stream-copy segment extraction"""
    stream = ffmpeg.input(str(master_file)).output(
        str(output_file),
        ss=time_range.start,
        to=time_range.end,
        c="copy",
    )
    return _compile(stream, binary, overwrite=True)

def build_concat_command(
    concat_file: Path,
    output_file: Path,
    binary: str = FFMPEG
) -> List[str]:
    """Build ffmpeg command for concatenating segments listed in `concat_file`"""
    stream = ffmpeg.input(str(concat_file), f="concat", safe=0).output(
        str(output_file),
        c="copy",
    )
    return _compile(stream, binary, overwrite=True)
