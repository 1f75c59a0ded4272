"""
Command-line interface for the prefix sorter.

Handles argument parsing and runs the sorter behind a single error boundary.
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .config import resolve_config
from .log import configure_logging, get_run_logger
from .operations import sort_by_prefix


def _delimiter(value: str) -> str:
    if value == "":
        raise argparse.ArgumentTypeError("delimiter must not be empty")
    return value


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="prefix-sorter",
        description="Move files sharing a filename prefix into a subdirectory named after it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
  Given "cat - 1.jpg", "cat - 2.jpg" and "dog - 1.jpg",
  prefix-sorter -s " - " moves both cat files into cat/.
  dog - 1.jpg stays where it is: its prefix has only one file.

Safety:
  Existing files are never overwritten; such moves are skipped with a warning.
  Use --dry to preview changes before applying.
        """
    )

    parser.add_argument(
        "--directory", "-d",
        type=str,
        default=None,
        help="The directory of the files (default: current directory)"
    )

    parser.add_argument(
        "--remove", "-r",
        action="store_true",
        help="Remove the prefix from moved filenames"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose console output"
    )

    parser.add_argument(
        "--logfile", "-l",
        type=str,
        default=None,
        help="The logfile path; if left empty no logfile is created"
    )

    parser.add_argument(
        "--split-on", "-s",
        type=_delimiter,
        required=True,
        help='What to split the filenames on, e.g. " - "'
    )

    parser.add_argument(
        "--dry",
        action="store_true",
        help="Dry run, no files will be changed"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def run(args: argparse.Namespace) -> int:
    """
    Run the prefix sorter with the given arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for a fatal error)
    """
    config = resolve_config(args)
    configure_logging(verbose=config.verbose, logfile=config.logfile)
    log = get_run_logger("prefix_sorter.cli")

    try:
        sort_by_prefix(config, log=log)
        return 0
    except Exception as e:
        log.critical("Fatal error", error=e)
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
