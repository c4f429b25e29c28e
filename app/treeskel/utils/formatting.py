"""Console output helpers.

Transcript and failure lines go through click so their text is written
byte for byte; color is dropped automatically when the stream is not a
terminal. Warnings and verbose logging use a Rich console on stderr.
"""

import sys

import typer
from rich.console import Console

from treeskel.core.theme import get_colors, get_rich_theme
from treeskel.models.entry import VisitedEntry

err_console = Console(
    theme=get_rich_theme(get_colors()),
    stderr=True,
    color_system="truecolor" if sys.stderr.isatty() else None,
)


def print_transcript(entry: VisitedEntry) -> None:
    """Print the transcript line for a visited entry, unaltered."""
    style = "directory" if entry.is_dir else "file"
    typer.secho(entry.transcript, fg=get_colors().rgb(style), bold=entry.is_dir)


def print_failure(message: str) -> None:
    """Print a fatal error message on stderr as a single unaltered line."""
    typer.secho(message, fg=get_colors().rgb("error"), bold=True, err=True)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")
