# Area: Logging
"""
oracle_command.logging_config - Structured logging setup
========================================================

Configures dual logging: terminal (colored, stderr) + optional file
(JSON lines). Also provides the no-op logger used when a caller does
not inject one, and the error reporting helper used by the CLI.
"""

from __future__ import annotations
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from .log_levels import LevelLike, to_log_level

if TYPE_CHECKING:
    from .errors import OracleCommandError

# Package logger
logger = logging.getLogger("oracle_command")


class FileOnlyFilter(logging.Filter):
    """Filter that keeps records marked ``file_only`` off the terminal.

    Used for records whose content was already printed to the terminal
    in another form.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return not getattr(record, "file_only", False)


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "TRACE": "\033[34m",     # Blue
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    level: LevelLike = logging.INFO,
    log_file_path: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for the package.

    Parameters
    ----------
    level : LogLevel, int or str
        Logging level, e.g. "trace" or logging.DEBUG. Defaults to INFO.
    log_file_path : str, optional
        Path to a JSON-lines log file. No file handler when omitted.

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    number = to_log_level(level).number

    pkg_logger = logging.getLogger("oracle_command")
    pkg_logger.setLevel(number)
    pkg_logger.handlers.clear()

    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(number)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(FileOnlyFilter())
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(number)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False
    return pkg_logger


def no_op_logger(level: LevelLike = logging.INFO) -> logging.Logger:
    """
    Return a detached logger that discards every record.

    The logger is not registered with the logging manager, so configuring
    it has no process-wide effect.
    """
    noop = logging.Logger("oracle_command.noop", to_log_level(level).number)
    noop.addHandler(logging.NullHandler())
    noop.propagate = False
    return noop


def log_error(error: "OracleCommandError") -> None:
    """Print the structured error block and record it in the log file."""
    print(error.format_error_log(), file=sys.stderr)
    # The block is already on the terminal
    logger.error(
        f"Command build failed: {error.__class__.__name__}: {error}",
        extra={"error_type": error.error_type, "file_only": True},
    )
