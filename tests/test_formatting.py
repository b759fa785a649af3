"""Tests for console summary output"""

import unittest
from pathlib import Path

from cutcat.formatting import console, print_run_header, print_segments, print_warning
from cutcat.models import TimeRange


class TestFormatting(unittest.TestCase):
    def test_segments_listed_in_output_order(self):
        ranges = [TimeRange(10, 20), TimeRange(60, 90)]
        segments = [Path("movie_tmp/0.mp4"), Path("movie_tmp/1.mp4")]
        with console.capture() as capture:
            print_segments(ranges, segments)
        lines = capture.get().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertIn("#0", lines[0])
        self.assertIn("00:00:10 -> 00:00:20", lines[0])
        self.assertIn("10s", lines[0])
        self.assertIn("0.mp4", lines[0])
        self.assertIn("00:01:00 -> 00:01:30", lines[1])
        self.assertIn("1.mp4", lines[1])

    def test_inverted_range_duration_is_zero(self):
        with console.capture() as capture:
            print_segments([TimeRange(30, 10)], [Path("0.mp4")])
        self.assertIn(" 0s", capture.get())

    def test_run_header_aligns_labels(self):
        with console.capture() as capture:
            print_run_header("cutcat", [("Input", "movie.mkv"), ("Cut config", "config.json")])
        lines = capture.get().splitlines()
        self.assertIn("cutcat", lines[0])
        self.assertEqual(lines[1].index("movie.mkv"), lines[2].index("config.json"))

    def test_warning_mark(self):
        with console.capture() as capture:
            print_warning("Reused master")
        self.assertEqual(capture.get().strip(), "⚠ Reused master")

if __name__ == "__main__":
    unittest.main()
