"""Configuration schema and loader for path-update."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .conventions import PathConvention, convention_for

VALID_PLATFORMS = ("native", "unix", "windows")
VALID_SOURCES = ("process", "user", "shell", "system")
VALID_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SourceConfig:
    """Which search path to read and how to interpret it."""

    platform: str = "native"  # "native", "unix" or "windows"
    source: str = "process"  # "process", "user", "shell" or "system"
    variable: str = "PATH"
    shell: str | None = None  # Only used by the shell source

    def __post_init__(self) -> None:
        if self.platform.lower() not in VALID_PLATFORMS:
            raise ValueError(
                f"Invalid platform: {self.platform}. Must be one of {VALID_PLATFORMS}"
            )
        if self.source.lower() not in VALID_SOURCES:
            raise ValueError(
                f"Invalid source: {self.source}. Must be one of {VALID_SOURCES}"
            )
        if not self.variable:
            raise ValueError("Source variable must not be empty")

    @property
    def convention(self) -> PathConvention:
        """Return the path convention named by ``platform``."""
        return convention_for(self.platform)


@dataclass
class DisplayConfig:
    """Configuration for the rendered report."""

    show_index: bool = True
    mark_empty: bool = True  # Show empty entries as "(empty)"
    show_legend: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "WARNING"
    file: str | None = None  # No log file unless configured
    max_bytes: int = 10485760  # 10MB
    backup_count: int = 5

    @property
    def expanded_file(self) -> Path | None:
        """Return log file path with ~ and environment variables expanded."""
        if not self.file:
            return None
        return Path(os.path.expanduser(os.path.expandvars(self.file)))

    def __post_init__(self) -> None:
        if self.level.upper() not in VALID_LEVELS:
            raise ValueError(f"Invalid log level: {self.level}. Must be one of {VALID_LEVELS}")


@dataclass
class Config:
    """Root configuration object."""

    source: SourceConfig = field(default_factory=SourceConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _parse_source_config(data: dict[str, Any] | None) -> SourceConfig:
    """Parse source configuration from dict."""
    if data is None:
        return SourceConfig()
    return SourceConfig(
        platform=data.get("platform", "native"),
        source=data.get("source", "process"),
        variable=data.get("variable", "PATH"),
        shell=data.get("shell"),
    )


def _parse_display_config(data: dict[str, Any] | None) -> DisplayConfig:
    """Parse display configuration from dict."""
    if data is None:
        return DisplayConfig()
    return DisplayConfig(
        show_index=data.get("show_index", True),
        mark_empty=data.get("mark_empty", True),
        show_legend=data.get("show_legend", True),
    )


def _parse_logging_config(data: dict[str, Any] | None) -> LoggingConfig:
    """Parse logging configuration from dict."""
    if data is None:
        return LoggingConfig()
    return LoggingConfig(
        level=data.get("level", "WARNING"),
        file=data.get("file"),
        max_bytes=data.get("max_bytes", 10485760),
        backup_count=data.get("backup_count", 5),
    )


def load_config(config_path: str | Path) -> Config:
    """Load configuration from a JSON file.

    Args:
        config_path: Path to the config.json file

    Returns:
        Parsed Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        json.JSONDecodeError: If config file is invalid JSON
        ValueError: If config has invalid values
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError("Config must be a JSON object")

    return Config(
        source=_parse_source_config(data.get("source")),
        display=_parse_display_config(data.get("display")),
        logging=_parse_logging_config(data.get("logging")),
    )


def find_config_file(start_path: Path | None = None) -> Path:
    """Find config/config.json in current directory or parent directories.

    Args:
        start_path: Starting directory (defaults to current working directory)

    Returns:
        Path to config/config.json

    Raises:
        FileNotFoundError: If no config/config.json found
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path
    while current != current.parent:
        config_path = current / "config" / "config.json"
        if config_path.exists():
            return config_path
        current = current.parent

    # Check root too
    config_path = current / "config" / "config.json"
    if config_path.exists():
        return config_path

    raise FileNotFoundError("No config/config.json found in current directory or parents")


def load_default_config(start_path: Path | None = None) -> Config:
    """Load the nearest config/config.json, or fall back to defaults."""
    try:
        return load_config(find_config_file(start_path))
    except FileNotFoundError:
        return Config()
