"""
Core operations for the prefix sorter.

Scanning, grouping and moving happen here, in three steps run one after the
other: list the directory, bucket files by prefix, then move every bucket
holding more than one file into a subdirectory named after its prefix.

Reporting goes through an injected RunLogger so the same code can be driven
by the CLI or by tests.
"""

import errno
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from .config import RunConfig
from .log import RunLogger, get_run_logger
from .utils import build_file_name, get_prefix, prefix_key, split_file_name


@dataclass
class PrefixGroup:
    """Files sharing a case-insensitive prefix, in the order they were found."""
    key: str
    delimiter: str
    files: List[Path] = field(default_factory=list)

    @property
    def canonical_prefix(self) -> str:
        """Prefix as spelled by the first file in the group."""
        return get_prefix(split_file_name(self.files[0], self.delimiter))

    @property
    def is_eligible(self) -> bool:
        return len(self.files) > 1


@dataclass(frozen=True)
class PlannedMove:
    source: Path
    destination: Path


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single move. error is set when the move failed."""
    source: Path
    destination: Path
    error: Optional[OSError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ReorganizeResult:
    """Result of a reorganize run with statistics."""
    group_count: int = 0
    success_count: int = 0
    error_count: int = 0
    actions: List[PlannedMove] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


def list_files(directory: Path) -> List[Path]:
    """
    List the regular files directly inside a directory.

    Order follows the filesystem's own enumeration order.

    Raises:
        NotADirectoryError: If directory does not exist or is not a directory
    """
    if not directory.is_dir():
        raise NotADirectoryError(errno.ENOTDIR, "Not a valid directory", str(directory))
    return [f for f in directory.iterdir() if f.is_file()]


def create_directory(path: Path) -> None:
    """Create a directory; an existing directory is left as is."""
    path.mkdir(exist_ok=True)


def move_file(source: Path, destination: Path) -> MoveResult:
    """
    Move a file without overwriting anything at the destination.

    I/O failures are returned in the result instead of raised.

    Args:
        source: File to move
        destination: Full target path, including the new filename

    Returns:
        MoveResult describing the outcome
    """
    try:
        if destination.exists():
            raise FileExistsError(errno.EEXIST, "Destination already exists", str(destination))
        shutil.move(str(source), str(destination))
    except OSError as e:
        return MoveResult(source, destination, error=e)
    return MoveResult(source, destination)


def group_by_prefix(
    files: Iterable[Path],
    delimiter: str,
    log: Optional[RunLogger] = None,
) -> Dict[str, PrefixGroup]:
    """
    Bucket files by the lowercased first segment of their name.

    Files whose name does not contain the delimiter are left out.

    Args:
        files: Paths in directory enumeration order
        delimiter: Literal split delimiter
        log: Logger for trace output

    Returns:
        Mapping of prefix key to group, in first-seen order
    """
    if log is None:
        log = get_run_logger(__name__)

    groups: Dict[str, PrefixGroup] = {}
    for file_path in files:
        segments = split_file_name(file_path, delimiter)
        if len(segments) <= 1:
            continue

        key = prefix_key(get_prefix(segments))
        group = groups.get(key)
        if group is None:
            log.trace("Found new prefix", prefix=key)
            group = groups[key] = PrefixGroup(key=key, delimiter=delimiter)
        group.files.append(file_path)

    return groups


def plan_group(group: PrefixGroup, config: RunConfig) -> Tuple[Path, List[PlannedMove]]:
    """
    Work out where every file of a group goes.

    Returns:
        The group's new directory and one PlannedMove per member, in group order
    """
    new_directory = config.path / group.canonical_prefix
    moves = []
    for old_path in group.files:
        segments = split_file_name(old_path, config.split_on)
        new_name = build_file_name(segments, config.split_on, config.remove_prefix)
        moves.append(PlannedMove(old_path, new_directory / new_name))
    return new_directory, moves


def reorganize(
    groups: Dict[str, PrefixGroup],
    config: RunConfig,
    log: Optional[RunLogger] = None,
) -> ReorganizeResult:
    """
    Move each group with more than one file into its own subdirectory.

    A failed move is reported as a warning and the run carries on with the
    next file. Failing to create a group's directory is not caught here.

    Args:
        groups: Output of group_by_prefix()
        config: Run configuration
        log: Logger for progress output

    Returns:
        ReorganizeResult with statistics
    """
    if log is None:
        log = get_run_logger(__name__)

    result = ReorganizeResult()

    log.trace("Prefixes found", count=len(groups))
    to_change = [group for group in groups.values() if group.is_eligible]
    result.group_count = len(to_change)
    log.info(f"{len(to_change)} prefixes with more than one item", count=len(to_change))

    for group in to_change:
        new_directory, moves = plan_group(group, config)
        if not config.dry_run:
            create_directory(new_directory)

        for move in moves:
            log.trace("Moving file", old=str(move.source), new=str(move.destination))
            result.actions.append(move)

            if config.dry_run:
                continue

            outcome = move_file(move.source, move.destination)
            if outcome.ok:
                result.success_count += 1
            else:
                log.warn("Could not move file", error=outcome.error, path=str(move.source))
                result.errors.append(f"{move.source.name}: {outcome.error}")
                result.error_count += 1

    return result


def sort_by_prefix(config: RunConfig, log: Optional[RunLogger] = None) -> ReorganizeResult:
    """
    Run the whole scan, group and move pipeline for one directory.

    Exceptions other than per-file move failures propagate to the caller.
    """
    if log is None:
        log = get_run_logger(__name__)

    log.trace(
        "Settings",
        path=str(config.path),
        split_on=config.split_on,
        remove_prefix=config.remove_prefix,
        dry_run=config.dry_run,
        verbose=config.verbose,
        logfile=str(config.logfile) if config.logfile else None,
    )
    if config.dry_run:
        log.info("Dry run.")
        if config.is_silent:
            log.warn("There is no logging output on this dry run.")
            log.info("Try to enable -v for verbose or -l for a logfile.")

    files = list_files(config.path)
    groups = group_by_prefix(files, config.split_on, log=log)
    result = reorganize(groups, config, log=log)

    log.info(
        "Successfully ran to completion",
        moved=result.success_count,
        failed=result.error_count,
        planned=len(result.actions),
    )
    return result
