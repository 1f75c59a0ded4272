"""
Logging setup for the prefix sorter.

structlog sits on top of the standard logging module. The console gets a
human-readable rendering, the optional logfile gets one JSON object per line.
The core never talks to structlog directly; it receives a RunLogger.
"""

import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import structlog

LOGGER_NAME = "prefix_sorter"

# Processors shared by records coming from structlog and from plain logging
_SHARED_PROCESSORS: List[Any] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def configure_logging(verbose: bool = False, logfile: Optional[Path] = None) -> logging.Logger:
    """
    Configure structlog and the handlers of the package logger.

    Calling this again replaces the handlers from the previous call.

    Args:
        verbose: Show trace (DEBUG) records on the console
        logfile: Write every record, trace included, as JSON to this file

    Returns:
        The configured stdlib logger
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
            ],
            foreign_pre_chain=_SHARED_PROCESSORS,
        )
    )
    logger.addHandler(console_handler)

    if logfile is not None:
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.format_exc_info,
                    structlog.processors.UnicodeDecoder(),
                    structlog.processors.JSONRenderer(),
                ],
                foreign_pre_chain=_SHARED_PROCESSORS,
            )
        )
        logger.addHandler(file_handler)

    return logger


class RunLogger:
    """
    The four severities the sorter reports with.

    Keyword arguments become structured fields on the record.
    """

    def __init__(self, logger: Optional[Any] = None):
        self._logger = logger if logger is not None else structlog.get_logger(LOGGER_NAME)

    def trace(self, event: str, **fields: Any) -> None:
        self._logger.debug(event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        self._logger.info(event, **fields)

    def warn(self, event: str, error: Optional[BaseException] = None, **fields: Any) -> None:
        if error is not None:
            fields["exc_info"] = error
        self._logger.warning(event, **fields)

    def critical(self, event: str, error: Optional[BaseException] = None, **fields: Any) -> None:
        if error is not None:
            fields["exc_info"] = error
        self._logger.critical(event, **fields)


def get_run_logger(name: str = LOGGER_NAME) -> RunLogger:
    """Return a RunLogger bound to a logger below the package logger."""
    return RunLogger(structlog.get_logger(name))
