# Area: Shared
"""
oracle_command.errors - Custom exception classes
================================================

Defines the exception hierarchy raised while assembling an oracle
server command. Each exception stores full context for structured logging.
No exception is ever raised after a partial argument list was handed out.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json


class OracleCommandError(Exception):
    """Base exception for all oracle_command errors."""

    error_type = "ORACLE_COMMAND_ERROR"

    def context(self) -> Dict[str, Any]:
        return {}

    def details(self) -> List[str]:
        return [str(self)]

    def format_error_log(self) -> str:
        return format_error_block(
            error_type=self.error_type,
            context=self.context(),
            details=self.details(),
        )


class ConfigurationError(OracleCommandError):
    """Raised when a required configuration field is empty or malformed."""

    error_type = "CONFIGURATION_ERROR"

    def __init__(
        self,
        message: str,
        missing_fields: Optional[List[str]] = None,
        validation_errors: Optional[List[str]] = None,
    ):
        self.missing_fields = list(missing_fields or [])
        self.validation_errors = list(validation_errors or [])
        super().__init__(message)

    def context(self) -> Dict[str, Any]:
        return {"missing_fields": self.missing_fields}

    def details(self) -> List[str]:
        if self.validation_errors:
            return self.validation_errors
        return [f"Missing required field: {name}" for name in self.missing_fields] or [str(self)]


class LevelMappingError(OracleCommandError):
    """Raised when a severity has no --log.level token."""

    error_type = "LEVEL_MAPPING_ERROR"

    def __init__(self, level: Any):
        self.level = level
        super().__init__(f"Unsupported log level: {level!r}")

    def context(self) -> Dict[str, Any]:
        return {"level": repr(self.level)}


class GameInputError(OracleCommandError):
    """Raised when a game input (hash or block number) is malformed."""

    error_type = "GAME_INPUT_ERROR"

    def __init__(self, field_name: str, value: Any, reason: str):
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid game input '{field_name}': {reason}")

    def context(self) -> Dict[str, Any]:
        return {"field": self.field_name, "value": repr(self.value)}


def format_error_block(
    error_type: str,
    context: Dict[str, Any],
    details: Optional[List[str]],
) -> str:
    """Format a structured error block for terminal output."""
    lines = [
        "",
        "=" * 64,
        " ORACLE COMMAND ERROR: COMMAND NOT BUILT",
        "=" * 64,
        f" Error Type:   {error_type}",
        "",
        " ── CONTEXT " + "─" * 52,
        _indent_json(context),
    ]

    if details:
        lines.append("")
        lines.append(" ── DETAILS " + "─" * 52)
        for detail in details:
            lines.append(f" • {detail}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    formatted = json.dumps(data, indent=indent, default=str)
    return "\n".join(" " + line for line in formatted.split("\n"))
