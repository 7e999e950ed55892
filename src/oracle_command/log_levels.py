# Area: Logging
"""
oracle_command.log_levels - Severity to --log.level mapping
===========================================================

The oracle server understands six level tokens. Severities are given
either as a LogLevel, a stdlib logging level number, or a name.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Union

from .errors import LevelMappingError

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class LogLevel(Enum):
    """
    Severities in ascending order.

    Each member's value is its --log.level token; ``number`` is the
    matching stdlib logging level.
    """
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    CRITICAL = "CRIT"

    @property
    def token(self) -> str:
        return self.value

    @property
    def number(self) -> int:
        return _NUMBERS[self]


_NUMBERS = {
    LogLevel.TRACE: TRACE,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
}

_BY_NUMBER = {number: level for level, number in _NUMBERS.items()}

_BY_NAME = {
    "trace": LogLevel.TRACE,
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "warn": LogLevel.WARN,
    "warning": LogLevel.WARN,
    "error": LogLevel.ERROR,
    "critical": LogLevel.CRITICAL,
    "crit": LogLevel.CRITICAL,
}

LevelLike = Union[LogLevel, int, str]


def to_log_level(level: LevelLike) -> LogLevel:
    """
    Resolve a severity to a LogLevel.

    Raises:
        LevelMappingError: If the severity is not one of the six levels
    """
    if isinstance(level, LogLevel):
        return level
    if isinstance(level, bool):
        raise LevelMappingError(level)
    if isinstance(level, int):
        if level in _BY_NUMBER:
            return _BY_NUMBER[level]
        raise LevelMappingError(level)
    if isinstance(level, str) and level.strip().lower() in _BY_NAME:
        return _BY_NAME[level.strip().lower()]
    raise LevelMappingError(level)


def log_level_token(level: LevelLike) -> str:
    """Return the --log.level token for a severity."""
    return to_log_level(level).token


def logger_level(logger: logging.Logger) -> LogLevel:
    """Severity a logger is configured to emit at."""
    return to_log_level(logger.getEffectiveLevel())
