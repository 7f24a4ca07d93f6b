"""Config module exports."""

from cljindent.config.loader import load_config
from cljindent.config.models import (
    CljIndentConfig,
    EditorConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "CljIndentConfig",
    "EditorConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
