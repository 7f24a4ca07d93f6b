"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CLJINDENT__SECTION__KEY)
3. Project YAML (.cljindent.yaml)
4. Global YAML (~/.config/cljindent/config.yaml)
5. Built-in defaults (this file)

Examples:
    CLJINDENT__LOGGING__LEVEL=DEBUG
    CLJINDENT__EDITOR__CURSOR_MARKER=@

The body-form symbol set lives in cljindent.indent.forms and has no
config entry.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        CLJINDENT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG logs each computed column and every unbalanced closer.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class EditorConfig(BaseModel):
    """Editor front end configuration.

    Env vars:
        CLJINDENT__EDITOR__CURSOR_MARKER: Character marking the cursor in CLI input
    """

    cursor_marker: str = Field(
        default="|",
        description="Marker locating the cursor in text passed to the CLI.",
    )

    @field_validator("cursor_marker")
    @classmethod
    def validate_cursor_marker(cls, v: str) -> str:
        if not v:
            raise ValueError("Cursor marker must not be empty")
        if v.isspace():
            raise ValueError("Cursor marker must not be whitespace")
        return v


class CljIndentConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)
