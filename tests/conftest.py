"""
Pytest fixtures for prefix sorter tests.

Provides reusable fixtures for creating temporary directories with prefixed
files, run configurations and a logger that records what it is told.
"""

import logging

import pytest
import structlog
from pathlib import Path

from prefix_sorter.config import RunConfig
from prefix_sorter.log import LOGGER_NAME


class RecordingLogger:
    """RunLogger double that keeps every record in memory."""

    def __init__(self):
        self.records = []

    def _record(self, level, event, error=None, **fields):
        self.records.append({"level": level, "event": event, "error": error, **fields})

    def trace(self, event, **fields):
        self._record("trace", event, **fields)

    def info(self, event, **fields):
        self._record("info", event, **fields)

    def warn(self, event, error=None, **fields):
        self._record("warn", event, error=error, **fields)

    def critical(self, event, error=None, **fields):
        self._record("critical", event, error=error, **fields)

    def events(self, level=None):
        return [r["event"] for r in self.records if level is None or r["level"] == level]


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def recorder() -> RecordingLogger:
    """Create a logger that captures records from operations."""
    return RecordingLogger()


@pytest.fixture
def run_config(temp_dir: Path) -> RunConfig:
    """Configuration splitting on " - " in the temporary directory."""
    return RunConfig(path=temp_dir, split_on=" - ")


@pytest.fixture
def pet_files(temp_dir: Path) -> dict:
    """
    Create two "cat" files and one "dog" file.

    Each file has unique content so moves can be verified by content.

    Returns a dict mapping filename to created path.
    """
    files = {}
    for name in ["cat - 1.jpg", "cat - 2.jpg", "dog - 1.jpg"]:
        f = temp_dir / name
        f.write_text(f"content of {name}")
        files[name] = f
    return files


@pytest.fixture
def unprefixed_file(temp_dir: Path) -> Path:
    """Create a file whose name does not contain the delimiter."""
    f = temp_dir / "notes.txt"
    f.write_text("no prefix here")
    return f


@pytest.fixture
def snapshot():
    """Return a function mapping every path below a directory to its bytes (None for directories)."""
    def take(directory: Path) -> dict:
        return {
            p.relative_to(directory): (p.read_bytes() if p.is_file() else None)
            for p in sorted(directory.rglob("*"))
        }
    return take


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers and structlog configuration left behind by a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    structlog.reset_defaults()
