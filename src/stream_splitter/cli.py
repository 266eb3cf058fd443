"""Command-line interface for stream splitter."""

import argparse
import logging
import sys

from stream_splitter.config import STDIN_SOURCE, SplitConfig
from stream_splitter.errors import SplitError
from stream_splitter.naming import DEFAULT_PREFIX
from stream_splitter.runner import run_split
from stream_splitter.size import parse_byte_size

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="stream-splitter",
        description="Split a file or standard input into pieces.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default=STDIN_SOURCE,
        help="Input file, or '-' for standard input (default: -)",
    )

    parser.add_argument(
        "prefix",
        nargs="?",
        default=DEFAULT_PREFIX,
        help=f"Output file name prefix (default: {DEFAULT_PREFIX})",
    )

    parser.add_argument(
        "-b",
        "--bytes",
        default="0",
        metavar="SIZE",
        help="Bytes per output file, e.g. 500, 10K, 20MiB, 1GB",
    )

    parser.add_argument(
        "-l",
        "--lines",
        type=int,
        default=0,
        help="Lines per output file (default when nothing else is given: 1000)",
    )

    parser.add_argument(
        "-n",
        "--number",
        type=int,
        default=0,
        help="Number of output files (requires an input file)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    if args.lines < 0 or args.number < 0:
        parser.error("--lines and --number must not be negative")

    try:
        bytes_per_chunk = parse_byte_size(args.bytes)
    except SplitError as exc:
        parser.error(f"--bytes: {exc}")

    config = SplitConfig(
        bytes_per_chunk=bytes_per_chunk,
        lines_per_chunk=args.lines,
        number_of_files=args.number,
        input_source=args.input_file,
        output_prefix=args.prefix,
    )

    # Option conflicts are raised by run_split before any file is opened.
    try:
        run_split(config)
    except SplitError as exc:
        parser.error(str(exc))
    except OSError as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
