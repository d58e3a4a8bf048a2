"""Main entry point for path-update.

Reads a search path (from the process environment, or from a value given on
the command line), parses it with the selected platform convention, and
prints one row per entry.

Exit codes:

- 0: the path was parsed and printed
- 1: the configuration or the command line was invalid
- 2: the requested source is not implemented on this platform
"""

from __future__ import annotations

import json
import sys
from dataclasses import replace

import click
from rich.console import Console

from .cli import CLIArgs, parse_args
from .config import Config, load_config, load_default_config
from .conventions import convention_for
from .errors import SourceNotImplementedError
from .logging_config import get_logger, setup_logging
from .path import SearchPath
from .report import render_path
from .sources import PathSource, adapter_for, load_path

logger = get_logger("main")

EXIT_CONFIG_ERROR = 1
EXIT_UNSUPPORTED_SOURCE = 2


def _load_config(args: CLIArgs) -> Config:
    if args.config_path is not None:
        return load_config(args.config_path)
    return load_default_config()


def _apply_overrides(config: Config, args: CLIArgs) -> None:
    """Let command-line flags take precedence over the config file."""
    overrides = {
        "platform": args.platform,
        "source": args.source,
        "variable": args.variable,
        "shell": args.shell,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if overrides:
        # replace() runs SourceConfig validation again
        config.source = replace(config.source, **overrides)


def resolve_path(config: Config, value: str | None = None) -> tuple[SearchPath, str]:
    """Produce the search path to display and a title for it.

    Raises:
        SourceNotImplementedError: The configured source cannot be read here
    """
    convention = convention_for(config.source.platform)

    if value is not None:
        logger.debug(f"Parsing value from the command line ({convention.name} rules)")
        return SearchPath.parse(value, convention), "Command-line value"

    source = PathSource(config.source.source.lower())
    path = load_path(
        source,
        adapter=adapter_for(convention),
        shell=config.source.shell,
        variable=config.source.variable,
    )
    return path, f"{config.source.variable} ({source.value})"


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code
    """
    try:
        args = parse_args(argv)
    except click.ClickException as e:
        e.show()
        return EXIT_CONFIG_ERROR

    try:
        config = _load_config(args)
        _apply_overrides(config, args)
    except (FileNotFoundError, json.JSONDecodeError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    setup_logging(config.logging, args.log_level)
    logger.trace(f"Effective configuration: {config}")  # type: ignore[attr-defined]

    try:
        path, title = resolve_path(config, args.value)
    except SourceNotImplementedError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_UNSUPPORTED_SOURCE

    return render_path(path, Console(), config.display, title)


if __name__ == "__main__":
    sys.exit(main())
