"""Rendering of a parsed search path as a table.

Each entry is shown in search order with its kind: a literal path, or a
variable reference together with the bare variable name.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import DisplayConfig
from .path_item import VariableReference

if TYPE_CHECKING:
    from .path import SearchPath
    from .path_item import PathItem


class EntryKind(Enum):
    """Kind of a path entry as shown in the report."""

    LITERAL = "path"
    VARIABLE = "variable"


@dataclass
class EntryRow:
    """Display values for a single entry."""

    kind: EntryKind
    value: str  # Entry text as written in the path list
    name: str | None  # Variable name, None for literal paths


def describe_entry(item: PathItem) -> EntryRow:
    """Build the display values for one entry."""
    if isinstance(item, VariableReference):
        return EntryRow(kind=EntryKind.VARIABLE, value=item.display(), name=item.name)
    return EntryRow(kind=EntryKind.LITERAL, value=item.text, name=None)


def _format_value(row: EntryRow, display: DisplayConfig) -> str:
    if row.kind == EntryKind.VARIABLE:
        return f"[magenta]{escape(row.value)}[/magenta]"
    if not row.value and display.mark_empty:
        return "[dim](empty)[/dim]"
    return escape(row.value)


def render_path(
    path: SearchPath,
    console: Console | None = None,
    display: DisplayConfig | None = None,
    title: str | None = None,
) -> int:
    """Print a parsed search path.

    Args:
        path: Parsed search path
        console: Console to print to (defaults to stdout)
        display: Display options
        title: Heading shown above the table

    Returns:
        Exit code (0 for success)
    """
    console = console or Console()
    display = display or DisplayConfig()

    rows = [describe_entry(item) for item in path]
    variables = sum(1 for row in rows if row.kind == EntryKind.VARIABLE)

    console.print(Panel(
        f"[bold]{escape(title or 'Search path')}[/bold]\n"
        f"[bold]Platform:[/bold] {path.convention.name} "
        f"(separator {escape(repr(path.convention.separator))}, "
        f"tag {escape(repr(path.convention.tag))})\n"
        f"[bold]Entries:[/bold] {len(rows)} ({variables} variable)",
        expand=False,
    ))

    if not rows:
        console.print("[dim]No entries[/dim]")
        return 0

    table = Table(show_header=True, header_style="bold")
    if display.show_index:
        table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", justify="center")
    table.add_column("Entry", style="cyan", no_wrap=False)
    table.add_column("Variable")

    for index, row in enumerate(rows, start=1):
        cells = [str(index)] if display.show_index else []
        if row.kind == EntryKind.VARIABLE:
            cells.append("[magenta]var[/magenta]")
        else:
            cells.append("[green]path[/green]")
        cells.append(_format_value(row, display))
        cells.append(escape(row.name) if row.name is not None else "[dim]-[/dim]")
        table.add_row(*cells)

    console.print(table)

    if display.show_legend:
        console.print(
            "[dim]Legend: [green]path[/green] = literal directory, "
            "[magenta]var[/magenta] = unexpanded variable reference[/dim]"
        )

    return 0
