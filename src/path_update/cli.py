"""Command-line interface for path-update."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

import click

from . import __version__


@dataclass
class CLIArgs:
    """Parsed command-line arguments."""

    value: str | None  # Path list given on the command line instead of a source
    source: str | None
    platform: str | None
    variable: str | None
    shell: str | None
    config_path: Path | None
    log_level: str | None


@click.command()
@click.argument("value", required=False)
@click.option(
    "--source",
    "-s",
    "source",
    type=click.Choice(["process", "user", "shell", "system"], case_sensitive=False),
    default=None,
    help="Where to read the path from (default: process environment)",
)
@click.option(
    "--platform",
    "-p",
    "platform",
    type=click.Choice(["native", "unix", "windows"], case_sensitive=False),
    default=None,
    help="Separator and variable tag convention (default: native)",
)
@click.option(
    "--variable",
    "variable",
    default=None,
    help="Environment variable holding the path list (default: PATH)",
)
@click.option(
    "--shell",
    "shell",
    default=None,
    help="Shell to query when --source=shell",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, path_type=Path),
    default=None,
    help="Path to config file (default: nearest config/config.json)",
)
@click.option(
    "--log-level",
    "-l",
    "log_level",
    type=click.Choice(["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=True),
    default=None,
    help="Override log level from config",
)
@click.version_option(version=__version__, prog_name="path-update")
@click.pass_context
def cli(
    ctx: click.Context,
    value: str | None,
    source: str | None,
    platform: str | None,
    variable: str | None,
    shell: str | None,
    config_path: Path | None,
    log_level: str | None,
) -> None:
    """Show the entries of a search path and the variables it references.

    Examples:

    \b
      path-update                          Parse PATH of this process
      path-update --variable=PYTHONPATH    Parse another path-like variable
      path-update -p windows "%A%;C:\\bin"   Parse a value with Windows rules
      path-update --source=user            Read the per-user path
      path-update --log-level=DEBUG        Enable debug logging
    """
    ctx.obj = CLIArgs(
        value=value,
        source=source.lower() if source else None,
        platform=platform.lower() if platform else None,
        variable=variable,
        shell=shell,
        config_path=config_path,
        log_level=log_level,
    )


def parse_args(args: list[str] | None = None) -> CLIArgs:
    """Parse command-line arguments.

    This is a compatibility wrapper that invokes the Click CLI
    and returns the parsed CLIArgs object.

    Args:
        args: List of arguments (defaults to sys.argv[1:])

    Returns:
        Parsed CLIArgs object

    Raises:
        SystemExit: For --help and --version (exits with code 0)
    """
    if args is None:
        args = sys.argv[1:]
    try:
        with cli.make_context("path-update", args) as ctx:
            cli.invoke(ctx)
            return ctx.obj
    except click.exceptions.Exit as e:
        sys.exit(e.exit_code)
