"""
Pure helpers for splitting filenames into prefix segments.

These functions touch nothing on disk; they only look at names.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Union


def split_file_name(path: Union[str, Path], delimiter: str) -> List[str]:
    """
    Split the base name of a path on a literal delimiter.

    Only the final path component is split. Matching is exact and
    case-sensitive; the delimiter is never treated as a pattern.

    Args:
        path: File path (or bare filename)
        delimiter: Non-empty separator string, e.g. " - "

    Returns:
        The name segments. A name without the delimiter gives a single
        segment holding the whole name.

    Example:
        >>> split_file_name("/music/Queen - Bohemian Rhapsody.mp3", " - ")
        ['Queen', 'Bohemian Rhapsody.mp3']
    """
    return Path(path).name.split(delimiter)


def get_prefix(segments: Sequence[str]) -> Optional[str]:
    """Return the first segment, or None if there are none."""
    if not segments:
        return None
    return segments[0]


def prefix_key(prefix: str) -> str:
    """Grouping key for a prefix: "Cat" and "cat" share a group."""
    return prefix.lower()


def build_file_name(segments: Sequence[str], delimiter: str, remove_prefix: bool = False) -> str:
    """
    Rebuild a filename from its segments.

    Args:
        segments: Segments from split_file_name()
        delimiter: Separator placed between retained segments
        remove_prefix: Drop the first segment

    Returns:
        The new filename

    Example:
        >>> build_file_name(["cat", "1.jpg"], " - ", remove_prefix=True)
        '1.jpg'
    """
    start = 1 if remove_prefix else 0
    return delimiter.join(segments[start:])
