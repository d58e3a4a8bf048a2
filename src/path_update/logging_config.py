"""Logging configuration for path-update."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from .config import LoggingConfig

# Custom TRACE level (more verbose than DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def trace(self: logging.Logger, message: str, *args: object, **kwargs: object) -> None:
    """Log a message at TRACE level."""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)


logging.Logger.trace = trace  # type: ignore[attr-defined]


class ColoredFormatter(logging.Formatter):
    """Formatter that adds colors to console output."""

    COLORS = {
        "TRACE": "\033[90m",  # Gray
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        message = super().format(record)
        if color:
            return f"{color}{message}{self.RESET}"
        return message


def resolve_level(level_name: str) -> int:
    """Translate a level name (including TRACE) to its numeric value."""
    if level_name.upper() == "TRACE":
        return TRACE
    return getattr(logging, level_name.upper())


def setup_logging(
    config: LoggingConfig,
    level_override: str | None = None,
) -> logging.Logger:
    """Configure the package logger.

    Console output goes to stderr and is only attached when stderr is a TTY,
    so piping the report elsewhere stays clean. A rotating log file is added
    when the config names one.

    Args:
        config: Logging configuration
        level_override: Optional level to override config (from CLI)

    Returns:
        The package logger
    """
    level = resolve_level(level_override or config.level)

    logger = logging.getLogger("path_update")
    logger.setLevel(level)
    logger.handlers.clear()

    log_path = config.expanded_file
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(file_handler)

    if sys.stderr.isatty():
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
            datefmt="%H:%M:%S",
        ))
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module.

    Args:
        name: Module name (will be prefixed with 'path_update.')

    Returns:
        Logger instance
    """
    if name.startswith("path_update."):
        return logging.getLogger(name)
    return logging.getLogger(f"path_update.{name}")
