"""Logging setup built on loguru.

Level names follow the config file's ``log_level`` values. Integers use Go's
slog scale, as written by the Go ``hotaisle`` tool (-6 trace, -4 debug,
0 info, 4 warn, 8 error), and are converted to loguru severities.
"""

from __future__ import annotations

import sys

from loguru import logger

LEVELS = {
    "": "INFO",
    "trace": "TRACE",
    "debug": "DEBUG",
    "info": "INFO",
    "warn": "WARNING",
    "warning": "WARNING",
    "error": "ERROR",
}

_FORMAT = "<level>{level: <7}</level> {message}"
_TRACE_FORMAT = (
    "<level>{level: <7}</level> <cyan>{extra[name]}:{function}:{line}</cyan> {message}"
)


def slog_to_severity(level: int) -> int:
    """Map a slog level onto loguru's scale (0 -> INFO 20, -4 -> DEBUG 10)."""
    return max(0, 20 + level * 5 // 2)


def parse_level(level: str) -> str | int:
    """Translate a config level string into a loguru level."""
    key = level.strip().lower()
    if key in LEVELS:
        return LEVELS[key]
    try:
        return slog_to_severity(int(key))
    except ValueError:
        raise ValueError(f"failed to parse level: {level!r}") from None


def configure_logging(level: str | int = "INFO") -> None:
    """Route all log output to stderr at the given level."""
    logger.remove()
    logger.configure(extra={"name": "hotaisle"})
    trace = level == "TRACE" or (isinstance(level, int) and level <= logger.level("TRACE").no)
    logger.add(
        sys.stderr,
        level=level,
        format=_TRACE_FORMAT if trace else _FORMAT,
        colorize=None,
    )


def get_logger(name: str):
    """A logger whose records are tagged with *name* at trace level."""
    return logger.bind(name=name)
