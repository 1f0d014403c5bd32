# Copyright (c) 2025 Rémy Olson
"""Terminal formatting utilities using Rich."""

from typing import Iterable

import click
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

console = Console()


def print_screen(name: str, text: str, identifiers: Iterable[str]) -> None:
    """Print the screen the app would show, with its automation identifiers.

    Example:
        >>> print_screen("content", "Our main app flow", ["automation.content.title"])
        ╔══════════════════════════════╗
        ║  Screen: content             ║
        ╚══════════════════════════════╝
    """
    style = "bold yellow" if name == "onboarding" else "bold green"
    panel = Panel(
        Text(f"Screen: {name}", style=style),
        box=box.DOUBLE,
        border_style=style.split()[-1],
        padding=(0, 1),
    )
    console.print(panel)
    click.echo(f"  {text}")
    for identifier in identifiers:
        print_dim(identifier)


def print_identifier_table(rows: Iterable[tuple]) -> None:
    """Print (screen, element, identifier) rows as a table."""
    table = Table(box=box.SIMPLE)
    table.add_column("Screen", style="cyan")
    table.add_column("Element")
    table.add_column("Identifier", style="bold")
    for row in rows:
        table.add_row(*row)
    console.print(table)


def print_success(message: str, prefix: str = "✓") -> None:
    click.echo(f"  {prefix} {message}")


def print_info(message: str, prefix: str = "ℹ") -> None:
    click.echo(f"  {prefix} {message}")


def print_dim(message: str) -> None:
    click.echo(f"  • {message}")
