"""Unit tests for utility helpers and logging setup"""

import logging
import subprocess
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import MagicMock, patch

from cutcat.exceptions import DependencyError, FilesystemError
from cutcat.logging import configure_logging
from cutcat.utils import check_dependencies, cleanup_working_dir, format_size, run_cmd


class TestRunCmd(unittest.TestCase):
    @patch("cutcat.utils.subprocess.run")
    def test_success(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        run_cmd(["ffmpeg", "-version"])
        mock_run.assert_called_once_with(
            ["ffmpeg", "-version"], capture_output=True, check=True, text=True
        )

    @patch("cutcat.utils.subprocess.run")
    def test_failure_propagates(self, mock_run):
        mock_run.side_effect = subprocess.CalledProcessError(1, ["ffmpeg"], stderr="bad")
        with self.assertRaises(subprocess.CalledProcessError):
            run_cmd(["ffmpeg"])


class TestHelpers(unittest.TestCase):
    def test_format_size(self):
        self.assertEqual(format_size(512), "512.0B")
        self.assertEqual(format_size(2048), "2.0KiB")

    @patch("cutcat.utils.shutil.which", return_value=None)
    def test_missing_ffmpeg(self, mock_which):
        with self.assertRaises(DependencyError):
            check_dependencies("ffmpeg")

    @patch("cutcat.utils.shutil.which", return_value="/usr/bin/ffmpeg")
    def test_ffmpeg_present(self, mock_which):
        check_dependencies("ffmpeg")

    def test_cleanup_working_dir(self):
        with TemporaryDirectory() as tmp:
            work_dir = Path(tmp) / "movie_tmp"
            work_dir.mkdir()
            (work_dir / "0.mp4").write_bytes(b"x")
            cleanup_working_dir(work_dir)
            self.assertFalse(work_dir.exists())
            # Already gone is fine
            cleanup_working_dir(work_dir)

    def test_cleanup_failure(self):
        # TemporaryDirectory also uses shutil.rmtree, so patch only inside it
        with TemporaryDirectory() as tmp:
            with patch("cutcat.utils.shutil.rmtree", side_effect=PermissionError("denied")):
                with self.assertRaises(FilesystemError):
                    cleanup_working_dir(Path(tmp))
            self.assertTrue(Path(tmp).exists())


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self):
        logger = logging.getLogger("cutcat")
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()

    def test_console_only(self):
        self.assertIsNone(configure_logging("DEBUG", file_logging=False))
        logger = logging.getLogger("cutcat")
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)

    def test_unknown_level_falls_back_to_info(self):
        configure_logging("chatty", file_logging=False)
        self.assertEqual(logging.getLogger("cutcat").level, logging.INFO)

    def test_file_logging(self):
        with TemporaryDirectory() as tmp:
            log_file = configure_logging("INFO", log_dir=Path(tmp) / "logs")
            logging.getLogger("cutcat.test").info("hello")
            self.assertTrue(log_file.exists())
            self.tearDown()
            self.assertIn("hello", log_file.read_text())

if __name__ == "__main__":
    unittest.main()
