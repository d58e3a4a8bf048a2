"""Tests for configuration loading."""

from __future__ import annotations

import json
import pytest
from pathlib import Path

from path_update.config import (
    Config,
    DisplayConfig,
    LoggingConfig,
    SourceConfig,
    find_config_file,
    load_config,
    load_default_config,
)
from path_update.conventions import NATIVE, WINDOWS


class TestSourceConfig:
    """Tests for SourceConfig."""

    def test_defaults(self) -> None:
        """Defaults read PATH from the process with native rules."""
        config = SourceConfig()
        assert config.platform == "native"
        assert config.source == "process"
        assert config.variable == "PATH"
        assert config.shell is None

    def test_convention(self) -> None:
        """platform resolves to a convention."""
        assert SourceConfig(platform="windows").convention is WINDOWS
        assert SourceConfig().convention is NATIVE

    def test_invalid_platform_raises(self) -> None:
        """Unknown platforms are rejected."""
        with pytest.raises(ValueError, match="Invalid platform"):
            SourceConfig(platform="amiga")

    def test_invalid_source_raises(self) -> None:
        """Unknown sources are rejected."""
        with pytest.raises(ValueError, match="Invalid source"):
            SourceConfig(source="registry")

    def test_empty_variable_raises(self) -> None:
        """The variable name can't be empty."""
        with pytest.raises(ValueError, match="must not be empty"):
            SourceConfig(variable="")


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_default_level(self) -> None:
        """Default level is WARNING."""
        assert LoggingConfig().level == "WARNING"

    def test_no_file_by_default(self) -> None:
        """Without a file, expanded_file is None."""
        assert LoggingConfig().expanded_file is None

    def test_expanded_file(self) -> None:
        """~ is expanded in the log file path."""
        config = LoggingConfig(file="~/logs/path-update.log")
        assert not str(config.expanded_file).startswith("~")
        assert str(config.expanded_file).endswith("path-update.log")

    def test_invalid_level_raises(self) -> None:
        """Unknown levels are rejected."""
        with pytest.raises(ValueError, match="Invalid log level"):
            LoggingConfig(level="VERBOSE")

    def test_trace_level_accepted(self) -> None:
        """TRACE is a valid level."""
        assert LoggingConfig(level="TRACE").level == "TRACE"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_full_config(self, tmp_path: Path) -> None:
        """All sections are parsed."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "source": {"platform": "windows", "source": "process", "variable": "Path"},
            "display": {"show_index": False, "mark_empty": False, "show_legend": False},
            "logging": {"level": "DEBUG", "file": "/tmp/path-update.log", "backup_count": 2},
        }))

        config = load_config(config_file)

        assert config.source.platform == "windows"
        assert config.source.variable == "Path"
        assert config.display == DisplayConfig(show_index=False, mark_empty=False, show_legend=False)
        assert config.logging.level == "DEBUG"
        assert config.logging.backup_count == 2
        assert config.logging.max_bytes == 10485760

    def test_empty_object_uses_defaults(self, tmp_path: Path) -> None:
        """Every section is optional."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{}")
        assert load_config(config_file) == Config()

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        """Invalid JSON raises JSONDecodeError."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{ not json")
        with pytest.raises(json.JSONDecodeError):
            load_config(config_file)

    def test_non_object_raises(self, tmp_path: Path) -> None:
        """A JSON array is not a config."""
        config_file = tmp_path / "config.json"
        config_file.write_text("[]")
        with pytest.raises(ValueError, match="JSON object"):
            load_config(config_file)

    def test_invalid_value_raises(self, tmp_path: Path) -> None:
        """Invalid values surface as ValueError."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"source": {"source": "registry"}}))
        with pytest.raises(ValueError, match="Invalid source"):
            load_config(config_file)

    def test_project_config_loads(self) -> None:
        """The shipped config/config.json is valid."""
        config_path = Path(__file__).parent.parent / "config" / "config.json"
        config = load_config(config_path)
        assert config.source.variable == "PATH"


class TestFindConfigFile:
    """Tests for find_config_file function."""

    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        """Finds config/config.json in the start directory."""
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.json").write_text("{}")
        assert find_config_file(tmp_path) == tmp_path / "config" / "config.json"

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        """Walks up to parent directories."""
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.json").write_text("{}")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == tmp_path / "config" / "config.json"


class TestLoadDefaultConfig:
    """Tests for load_default_config function."""

    def test_uses_found_file(self, tmp_path: Path) -> None:
        """A config found on the way up is loaded."""
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.json").write_text(
            json.dumps({"source": {"variable": "MANPATH"}})
        )
        assert load_default_config(tmp_path).source.variable == "MANPATH"

    def test_falls_back_to_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Without a config file, defaults are used."""
        def not_found(start_path: Path | None = None) -> Path:
            raise FileNotFoundError("No config/config.json found")

        monkeypatch.setattr("path_update.config.find_config_file", not_found)
        assert load_default_config(tmp_path) == Config()
