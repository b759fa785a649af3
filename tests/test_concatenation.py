"""Tests for manifest writing and the concat merge."""

from pathlib import Path
from unittest.mock import patch

import pytest

from cutcat.config import Settings
from cutcat.exceptions import ConcatenationError, FilesystemError
from cutcat.video.concatenation import concatenate_segments, write_manifest


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(input_path=tmp_path / "movie.mkv", output_path=tmp_path / "clip.mp4")


def test_write_manifest_lists_absolute_paths_in_order(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    segments = [Path("movie_tmp/1.mp4"), Path("movie_tmp/0.mp4")]
    manifest = write_manifest(segments, tmp_path, Path("clip.mp4"))

    assert manifest == tmp_path / "clips-clip.mp4.txt"
    assert manifest.read_text().splitlines() == [
        f"file '{tmp_path / 'movie_tmp' / '1.mp4'}'",
        f"file '{tmp_path / 'movie_tmp' / '0.mp4'}'",
    ]


def test_write_manifest_escapes_quotes(tmp_path: Path):
    manifest = write_manifest([tmp_path / "it's.mp4"], tmp_path, Path("out.mp4"))
    assert manifest.read_text() == f"file '{tmp_path}/it'\\''s.mp4'\n"


def test_write_manifest_failure(tmp_path: Path):
    with pytest.raises(FilesystemError):
        write_manifest([tmp_path / "0.mp4"], tmp_path / "missing", Path("out.mp4"))


@patch("cutcat.command_jobs.run_cmd")
def test_concatenate_segments(mock_run_cmd, tmp_path: Path, settings: Settings):
    mock_run_cmd.side_effect = lambda cmd: settings.output_path.write_bytes(b"merged")
    segments = [tmp_path / "0.mp4", tmp_path / "1.mp4"]

    assert concatenate_segments(segments, tmp_path, settings.output_path, settings) == settings.output_path

    mock_run_cmd.assert_called_once()
    cmd = mock_run_cmd.call_args.args[0]
    assert cmd[cmd.index("-i") + 1] == str(tmp_path / "clips-clip.mp4.txt")
    assert str(settings.output_path) in cmd


@patch("cutcat.command_jobs.run_cmd")
def test_concatenate_segments_missing_output(mock_run_cmd, tmp_path: Path, settings: Settings):
    with pytest.raises(ConcatenationError, match="missing or empty"):
        concatenate_segments([tmp_path / "0.mp4"], tmp_path, settings.output_path, settings)


def test_concatenate_nothing(tmp_path: Path, settings: Settings):
    with pytest.raises(ConcatenationError):
        concatenate_segments([], tmp_path, settings.output_path, settings)
