"""
plain.py

PURPOSE: Plain text output formatting for the CLI.
DEPENDENCIES: rich

ARCHITECTURE NOTES:
This module provides formatted console output using Rich.
Game text is escaped before printing, so item names containing
square brackets are not mistaken for markup.
"""

import json
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dungeon_mini.storage.scores import ScoreEntry

# Global console instance
console = Console()


def configure_logging(level: str) -> None:
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def print_room(text: str) -> None:
    """Print a room description."""
    console.print(escape(text))


def print_message(text: str) -> None:
    """Print a normal game message."""
    console.print(escape(text))


def print_error(text: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {escape(text)}[/red]")


def print_success(text: str) -> None:
    """Print a success message."""
    console.print(f"[green]{escape(text)}[/green]")


def print_prompt() -> str:
    """Print the input prompt and get user input."""
    return console.input("[bold cyan]>[/bold cyan] ")


def print_title(title: str) -> None:
    """Print a game title in a panel."""
    panel = Panel(
        Text(title, justify="center", style="bold"),
        border_style="blue",
    )
    console.print(panel)


def print_scores(entries: list[ScoreEntry]) -> None:
    """Print the scoreboard as a table."""
    if not entries:
        console.print("No scores yet.")
        return
    table = Table(title="High Scores")
    table.add_column("#", justify="right")
    table.add_column("Player")
    table.add_column("Score", justify="right")
    for rank, entry in enumerate(entries, start=1):
        table.add_row(str(rank), escape(entry.name), str(entry.score))
    console.print(table)


def print_debug(data: dict[str, object] | str) -> None:
    """Print debug information."""
    console.print("[dim]--- DEBUG ---[/dim]")
    if isinstance(data, dict):
        console.print(f"[dim]{escape(json.dumps(data, indent=2, default=str))}[/dim]")
    else:
        console.print(f"[dim]{escape(data)}[/dim]")
    console.print("[dim]-------------[/dim]")


def print_game_over(died: bool, message: str) -> None:
    """Print the final message of a session."""
    if died:
        style = "bold red"
        border = "red"
    else:
        style = "bold green"
        border = "green"

    panel = Panel(
        Text(message, justify="center", style=style),
        title="Game Over",
        border_style=border,
    )
    console.print(panel)


def flush() -> None:
    """Flush anything buffered on stdout."""
    console.file.flush()
