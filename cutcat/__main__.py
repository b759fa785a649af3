"""
Command-line interface for the cutcat pipeline
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from . import __version__
from .config import (
    AUTO_WORKERS, DEFAULT_BITRATE, DEFAULT_CONFIG_FILE,
    DEFAULT_RESOLUTION, Settings
)
from .exceptions import CutcatError, PipelineError
from .formatting import print_error, print_success
from .logging import configure_logging
from .pipeline import process_file
from .utils import check_dependencies

HELP_TEXT = """
config file example:
-----------------------------
00:00:12 00:08:00
00:09:00 00:23:10
...
-----------------------------
"""

def _worker_count(value: str) -> Union[int, str]:
    if value == AUTO_WORKERS:
        return value
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer or '{AUTO_WORKERS}', got {value!r}")
    if count < 1:
        raise argparse.ArgumentTypeError(f"worker count must be positive, got {count}")
    return count

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="cutcat",
        description="Cut time ranges out of a video and join them into one file",
        epilog=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument("-i", "--input", type=Path, default=None, help="Input file")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Output file")
    parser.add_argument(
        "-f", "--config",
        dest="config",
        type=Path,
        default=Path(DEFAULT_CONFIG_FILE),
        help="Cut config, one '<start> <end>' range per line (default: %(default)s)"
    )
    parser.add_argument(
        "--max-workers",
        dest="max_workers",
        type=_worker_count,
        default=None,
        help=f"Maximum concurrent extractions, an integer or '{AUTO_WORKERS}' (default: one per range)"
    )
    parser.add_argument(
        "--cleanup",
        action="store_true",
        help="Remove the working directory after a successful run"
    )
    parser.add_argument("--resolution", default=DEFAULT_RESOLUTION, help="Master resolution (default: %(default)s)")
    parser.add_argument("--bitrate", default=DEFAULT_BITRATE, help="Master video bitrate (default: %(default)s)")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Set logging level (default from CUTCAT_LOG_LEVEL or INFO)"
    )
    parser.add_argument(
        "--no-log-file",
        dest="file_logging",
        action="store_false",
        help="Only log to the console"
    )
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = parse_args(argv)
    log_file = configure_logging(args.log_level, file_logging=args.file_logging)

    log = logging.getLogger("cutcat")
    if log_file is not None:
        log.debug("Log file: %s", log_file)

    settings = Settings(
        input_path=args.input,
        output_path=args.output,
        config_path=args.config,
        resolution=args.resolution,
        bitrate=args.bitrate,
        max_workers=args.max_workers,
        cleanup=args.cleanup
    )

    try:
        settings.validate()
        check_dependencies(settings.ffmpeg)
        result = process_file(settings)
    except PipelineError as e:
        print_error(f"Failed during {e.stage}")
        log.error("%s", e.__cause__ or e)
        return 1
    except CutcatError as e:
        log.error("%s", e)
        return 1
    except KeyboardInterrupt:
        log.warning("Interrupted by user")
        return 130

    print_success(f"Wrote {result.output_file}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
