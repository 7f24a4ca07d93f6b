"""Tests for structured logging."""

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

from cljindent.config.models import LoggingConfig, LogOutputConfig
from cljindent.core.logging import configure_logging, get_logger
from cljindent.editor.adapter import StringDocument, clojure_smart_indent
from cljindent.indent.engine import calculate_indentation


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    structlog.reset_defaults()


def _read_events(path: Path) -> list[dict[str, object]]:
    return [json.loads(line) for line in path.read_text().splitlines() if line.strip()]


class TestConfigureLogging:
    """configure_logging behavior tests."""

    def test_given_file_output_when_logging_then_writes_json(self, tmp_path: Path) -> None:
        # Given
        log_file = tmp_path / "cljindent.log"
        configure_logging(
            config=LoggingConfig(
                level="INFO",
                outputs=[LogOutputConfig(format="json", destination=str(log_file))],
            )
        )

        # When
        get_logger("test").warning("hello", key=1)

        # Then
        events = _read_events(log_file)
        assert events[-1]["event"] == "hello"
        assert events[-1]["key"] == 1
        assert events[-1]["logger"] == "test"
        assert events[-1]["level"] == "warning"

    def test_given_error_level_when_warning_then_filtered(self, tmp_path: Path) -> None:
        log_file = tmp_path / "cljindent.log"
        configure_logging(
            config=LoggingConfig(
                level="ERROR",
                outputs=[LogOutputConfig(format="json", destination=str(log_file))],
            )
        )

        get_logger().warning("dropped")

        assert _read_events(log_file) == []

    def test_given_nested_file_output_then_parent_created(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "cljindent.log"
        configure_logging(
            config=LoggingConfig(outputs=[LogOutputConfig(destination=str(log_file))])
        )
        assert log_file.parent.is_dir()

    def test_given_reconfigured_then_previous_handlers_replaced(self) -> None:
        configure_logging(level="INFO")
        configure_logging(json_format=True, level="DEBUG")

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_given_debug_level_when_closer_unbalanced_then_logged(self, tmp_path: Path) -> None:
        # Given
        log_file = tmp_path / "cljindent.log"
        configure_logging(
            config=LoggingConfig(
                level="DEBUG",
                outputs=[LogOutputConfig(format="json", destination=str(log_file))],
            )
        )

        # When
        column = calculate_indentation("  foo)")

        # Then
        assert column == 2
        events = _read_events(log_file)
        assert any(
            e["event"] == "unbalanced_closer"
            and e["index"] == 5
            and e["logger"] == "cljindent.indent.engine"
            for e in events
        )

    def test_given_debug_level_when_smart_indent_then_column_logged(self, tmp_path: Path) -> None:
        log_file = tmp_path / "cljindent.log"
        configure_logging(
            config=LoggingConfig(
                level="DEBUG",
                outputs=[LogOutputConfig(format="json", destination=str(log_file))],
            )
        )

        column = clojure_smart_indent(StringDocument("(defn f [x]"), 11)

        assert column == 2
        events = _read_events(log_file)
        assert [e["event"] for e in events] == ["smart_indent"]
        assert events[0]["column"] == 2
        assert events[0]["logger"] == "cljindent.editor.adapter"
