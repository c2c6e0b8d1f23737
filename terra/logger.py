"""Engine, client and file-only loggers, and engine assertions."""

from __future__ import annotations

import inspect
import logging
import os
import sys
from pathlib import Path

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

CORE_LOGGER_NAME = "TERRA"
CLIENT_LOGGER_NAME = "APP"
FILE_LOGGER_NAME = "TERRA_F"

_SHORT_LEVEL_NAMES = {
    TRACE: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}


class AssertionFailure(AssertionError):
    """Raised when an engine assertion does not hold."""


class _SinkFormatter(logging.Formatter):
    def __init__(self, fmt: str) -> None:
        super().__init__(fmt, datefmt="%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        record.short_level = _SHORT_LEVEL_NAMES.get(
            record.levelno, record.levelname.lower()
        )
        return super().format(record)


def _detach_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def init_logging(log_file: str | os.PathLike = "terra.log") -> None:
    """Set up the three loggers; the log file is truncated."""
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(_SinkFormatter("[%(asctime)s] %(name)s: %(message)s"))

    file_sink = logging.FileHandler(Path(log_file), mode="w", encoding="utf-8")
    file_sink.setFormatter(
        _SinkFormatter("[%(asctime)s] [%(short_level)s] %(name)s: %(message)s")
    )

    setups = (
        (CORE_LOGGER_NAME, (console, file_sink)),
        (CLIENT_LOGGER_NAME, (console, file_sink)),
        (FILE_LOGGER_NAME, (file_sink,)),
    )
    for name, handlers in setups:
        logger = logging.getLogger(name)
        _detach_handlers(logger)
        for handler in handlers:
            logger.addHandler(handler)
        logger.setLevel(TRACE)
        logger.propagate = False


def get_core_logger() -> logging.Logger:
    return logging.getLogger(CORE_LOGGER_NAME)


def get_client_logger() -> logging.Logger:
    return logging.getLogger(CLIENT_LOGGER_NAME)


def get_file_logger() -> logging.Logger:
    return logging.getLogger(FILE_LOGGER_NAME)


def core_assert(condition: object, message: str | None = None) -> None:
    """Log an error and raise :class:`AssertionFailure` if ``condition`` is false."""
    if condition:
        return
    if message is not None:
        text = f"Assertion failed: {message}"
    else:
        caller = inspect.currentframe()
        caller = caller.f_back if caller is not None else None
        if caller is not None:
            location = f"{Path(caller.f_code.co_filename).name}:{caller.f_lineno}"
        else:
            location = "<unknown>"
        text = f"Assertion failed at {location}"
    get_core_logger().error(text)
    raise AssertionFailure(text)