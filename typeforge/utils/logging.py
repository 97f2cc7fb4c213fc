"""
Logging configuration for TypeForge.

All loggers live under the ``typeforge`` tree. The console handler writes
to stderr so that JSON printed on stdout by the CLI stays parseable; a log
file is added only when a directory is configured.
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Literal

ROOT_LOGGER_NAME = "typeforge"
LOG_FILENAME = "typeforge.log"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class TypeForgeFormatter(logging.Formatter):
    """``LEVEL [component] message``, optionally coloured and timestamped.

    The component is the logger name without the ``typeforge.`` prefix.
    """

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = False, include_timestamp: bool = False):
        super().__init__()
        self.use_colors = use_colors
        self.include_timestamp = include_timestamp

    def component(self, record: logging.LogRecord) -> str:
        prefix = f"{ROOT_LOGGER_NAME}."
        return record.name[len(prefix):] if record.name.startswith(prefix) else record.name

    def format(self, record: logging.LogRecord) -> str:
        level = f"{record.levelname:8}"
        if self.use_colors:
            level = f"{self.LEVEL_COLORS.get(record.levelname, '')}{level}{self.RESET}"

        line = f"{level} [{self.component(record)}] {record.getMessage()}"
        if self.include_timestamp:
            stamp = datetime.fromtimestamp(record.created, UTC).strftime("%Y-%m-%d %H:%M:%S")
            line = f"[{stamp}] {line}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(TypeForgeFormatter(use_colors=sys.stderr.isatty()))
    return handler


def _file_handler(log_dir: Path, level: int) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_dir / LOG_FILENAME, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(TypeForgeFormatter(include_timestamp=True))
    return handler


def setup_logging(
    level: LogLevel = "WARNING",
    log_dir: str | Path | None = None,
    console_output: bool = True,
    file_output: bool = True,
) -> logging.Logger:
    """(Re)configure the ``typeforge`` logger tree.

    Args:
        level: Minimum level for every handler
        log_dir: Directory for ``typeforge.log``; no file without it
        console_output: Log to stderr
        file_output: Log to the file in ``log_dir``

    Returns:
        The root ``typeforge`` logger
    """
    numeric_level = logging.getLevelName(level)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(numeric_level)
    root.propagate = False

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    if console_output:
        root.addHandler(_console_handler(numeric_level))
    if file_output and log_dir is not None:
        root.addHandler(_file_handler(Path(log_dir), numeric_level))

    return root


def get_logger(name: str) -> logging.Logger:
    """Logger for a TypeForge component, e.g. ``get_logger("extraction")``."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def _format_details(details: dict) -> str:
    return ", ".join(f"{k}={v}" for k, v in details.items())


def log_operation(logger: logging.Logger, operation: str, details: dict | None = None) -> None:
    """Log a completed operation at INFO, with ``key=value`` details."""
    logger.info(f"{operation}: {_format_details(details)}" if details else operation)


def log_error(
    logger: logging.Logger,
    operation: str,
    error: Exception,
    context: dict | None = None,
) -> None:
    """Log a failed operation at ERROR with its traceback before it propagates."""
    msg = f"FAILED {operation}: {type(error).__name__}: {error}"
    if context:
        msg = f"{msg} | {_format_details(context)}"
    logger.error(msg, exc_info=error)


# Console-only until a host calls setup_logging
setup_logging(file_output=False)
