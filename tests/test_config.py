"""Unit tests for cutcat settings."""
from pathlib import Path
from unittest.mock import patch

import pytest

from cutcat.config import Settings
from cutcat.exceptions import ConfigurationError


@pytest.fixture
def settings() -> Settings:
    return Settings(input_path="movie.mkv", output_path="clip.mp4")


def test_defaults(settings: Settings) -> None:
    assert settings.input_path == Path("movie.mkv")
    assert settings.output_path == Path("clip.mp4")
    assert settings.config_path == Path("config.json")
    assert settings.resolution == "1280x720"
    assert settings.bitrate == "1500k"
    assert settings.max_workers is None
    assert settings.cleanup is False
    settings.validate()


def test_empty_strings_become_none() -> None:
    settings = Settings(input_path="", output_path="")
    assert settings.input_path is None
    with pytest.raises(ConfigurationError, match="no input file"):
        settings.validate()


@pytest.mark.parametrize("resolution", ["720p", "1280*720", "x720", ""])
def test_invalid_resolution(settings: Settings, resolution: str) -> None:
    settings.resolution = resolution
    with pytest.raises(ConfigurationError, match="resolution"):
        settings.validate()


@pytest.mark.parametrize("max_workers", [0, -1, "four", 2.5, True])
def test_invalid_max_workers(settings: Settings, max_workers) -> None:
    settings.max_workers = max_workers
    with pytest.raises(ConfigurationError, match="max_workers"):
        settings.validate()


def test_unbounded_by_default(settings: Settings) -> None:
    assert settings.resolve_max_workers(12) == 12


def test_cap_limits_pool(settings: Settings) -> None:
    settings.max_workers = 4
    assert settings.resolve_max_workers(12) == 4
    assert settings.resolve_max_workers(2) == 2


def test_auto_uses_cpu_count(settings: Settings) -> None:
    settings.max_workers = "auto"
    settings.validate()
    with patch("cutcat.config.psutil.cpu_count", return_value=6):
        assert settings.resolve_max_workers(20) == 6
    with patch("cutcat.config.psutil.cpu_count", return_value=None):
        assert settings.resolve_max_workers(20) == 1
