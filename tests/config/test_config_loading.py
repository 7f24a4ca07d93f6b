"""Tests for config/loader.py and config/models.py modules.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence
- model validation
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from cljindent.config.loader import _deep_merge, _load_yaml, load_config
from cljindent.config.models import CljIndentConfig, EditorConfig, LoggingConfig, LogOutputConfig
from cljindent.core.errors import ConfigError, ErrorCode


@pytest.fixture(autouse=True)
def no_global_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("cljindent.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "global.yaml")
    monkeypatch.delenv("CLJINDENT__EDITOR__CURSOR_MARKER", raising=False)
    monkeypatch.delenv("CLJINDENT__LOGGING__LEVEL", raising=False)


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("logging:\n  level: DEBUG\n")
        assert _load_yaml(yaml_file) == {"logging": {"level": "DEBUG"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_override_wins(self) -> None:
        assert _deep_merge({"a": 1}, {"a": 2}) == {"a": 2}

    def test_nested_merge(self) -> None:
        base = {"editor": {"cursor_marker": "|"}, "logging": {"level": "INFO"}}
        override = {"logging": {"level": "DEBUG"}}
        assert _deep_merge(base, override) == {
            "editor": {"cursor_marker": "|"},
            "logging": {"level": "DEBUG"},
        }

    def test_base_not_mutated(self) -> None:
        base = {"a": {"b": 1}}
        _deep_merge(base, {"a": {"b": 2}})
        assert base == {"a": {"b": 1}}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert isinstance(config, CljIndentConfig)
        assert config.editor.cursor_marker == "|"
        assert config.logging.level == "WARNING"

    def test_project_file(self, tmp_path: Path) -> None:
        (tmp_path / ".cljindent.yaml").write_text("editor:\n  cursor_marker: '@'\n")
        assert load_config(tmp_path).editor.cursor_marker == "@"

    def test_project_overrides_global(self, tmp_path: Path) -> None:
        (tmp_path / "global.yaml").write_text(
            "editor:\n  cursor_marker: '@'\nlogging:\n  level: INFO\n"
        )
        (tmp_path / ".cljindent.yaml").write_text("editor:\n  cursor_marker: '^'\n")

        config = load_config(tmp_path)

        assert config.editor.cursor_marker == "^"
        assert config.logging.level == "INFO"

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".cljindent.yaml").write_text("editor:\n  cursor_marker: '^'\n")
        monkeypatch.setenv("CLJINDENT__EDITOR__CURSOR_MARKER", "@")
        assert load_config(tmp_path).editor.cursor_marker == "@"

    def test_kwargs_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLJINDENT__LOGGING__LEVEL", "DEBUG")
        config = load_config(tmp_path, logging={"level": "ERROR"})
        assert config.logging.level == "ERROR"

    def test_invalid_value(self, tmp_path: Path) -> None:
        (tmp_path / ".cljindent.yaml").write_text("logging:\n  level: LOUD\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert exc_info.value.details["field"] == "logging.level"


class TestModels:
    """Tests for configuration models."""

    def test_log_output_defaults(self) -> None:
        config = LogOutputConfig()
        assert config.format == "console"
        assert config.destination == "stderr"
        assert config.level is None

    def test_relative_log_destination_fails(self) -> None:
        with pytest.raises(ValidationError):
            LogOutputConfig(destination="relative/path.log")

    def test_absolute_log_destination(self, tmp_path: Path) -> None:
        path = str(tmp_path / "cljindent.log")
        assert LogOutputConfig(destination=path).destination == path

    def test_invalid_level(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")  # type: ignore[arg-type]

    @pytest.mark.parametrize("marker", ["", " ", "\n"])
    def test_invalid_cursor_marker(self, marker: str) -> None:
        with pytest.raises(ValidationError):
            EditorConfig(cursor_marker=marker)
