"""cljindent error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Input

The indentation engine itself never raises; these errors belong to the
configuration layer and the command line front end.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Input (3xxx)
    INPUT_MISSING_CURSOR = 3001
    INPUT_CURSOR_OUT_OF_RANGE = 3002


@dataclass(frozen=True, slots=True)
class CljIndentError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CljIndentError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class InputError(CljIndentError):
    """Errors in text handed to the command line front end."""

    @classmethod
    def missing_cursor(cls, marker: str) -> "InputError":
        return cls(
            code=ErrorCode.INPUT_MISSING_CURSOR,
            message=f"Cursor marker {marker!r} not found in input",
            details={"marker": marker},
        )

    @classmethod
    def cursor_out_of_range(cls, pos: int, length: int) -> "InputError":
        return cls(
            code=ErrorCode.INPUT_CURSOR_OUT_OF_RANGE,
            message=f"Cursor position {pos} outside document of length {length}",
            details={"pos": pos, "length": length},
        )

