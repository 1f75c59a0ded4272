"""
Prefix Sorter - Move files that share a filename prefix into their own folder.

This package splits filenames on a delimiter, groups them by the first
segment and relocates every group of two or more files.
"""

__version__ = "1.0.0"

from .config import RunConfig, resolve_config
from .operations import (
    group_by_prefix,
    reorganize,
    sort_by_prefix,
)

__all__ = [
    "RunConfig",
    "resolve_config",
    "group_by_prefix",
    "reorganize",
    "sort_by_prefix",
]
