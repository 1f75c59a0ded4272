"""
Configuration for the prefix sorter.

Uses a frozen dataclass so one resolved configuration travels through a
whole run unchanged. Defaults that depend on the environment (the current
working directory) are applied once, in resolve_config().
"""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class RunConfig:
    """
    Resolved settings for one run.

    Example:
        config = RunConfig(path=Path("~/Music").expanduser(), split_on=" - ")

        # Preview only, dropping the prefix from moved files
        config = RunConfig(path=Path("."), split_on="_", remove_prefix=True, dry_run=True)
    """

    # Directory whose top-level files are grouped
    path: Path

    # Literal delimiter used for every split and re-join
    split_on: str

    remove_prefix: bool = False
    dry_run: bool = False
    verbose: bool = False

    # JSON logfile; None disables file logging
    logfile: Optional[Path] = None

    @property
    def is_silent(self) -> bool:
        """True when nothing below INFO reaches the console and no logfile is written."""
        return not self.verbose and self.logfile is None


def resolve_config(args: argparse.Namespace, cwd: Optional[Path] = None) -> RunConfig:
    """
    Build the RunConfig for parsed command-line arguments.

    Args:
        args: Namespace produced by the CLI parser
        cwd: Fallback directory when --directory is omitted (default: Path.cwd())

    Returns:
        Immutable run configuration
    """
    if args.directory:
        path = Path(args.directory).expanduser()
    else:
        path = cwd if cwd is not None else Path.cwd()

    # An empty or blank --logfile means "no logfile"
    logfile = None
    if args.logfile and args.logfile.strip():
        logfile = Path(args.logfile).expanduser()

    return RunConfig(
        path=path,
        split_on=args.split_on,
        remove_prefix=args.remove,
        dry_run=args.dry,
        verbose=args.verbose,
        logfile=logfile,
    )
