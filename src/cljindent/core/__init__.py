"""Core module exports."""

from cljindent.core.errors import (
    CljIndentError,
    ConfigError,
    ErrorCode,
    InputError,
)
from cljindent.core.logging import (
    configure_logging,
    get_logger,
)

__all__ = [
    # Errors
    "CljIndentError",
    "ConfigError",
    "ErrorCode",
    "InputError",
    # Logging
    "configure_logging",
    "get_logger",
]
