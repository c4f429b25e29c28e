"""Main CLI application entry point.

Defines the Typer application: a single command that mirrors the
skeleton of each ROOT into the current working directory.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from treeskel import __version__
from treeskel.agents import create_agent
from treeskel.core.exceptions import WalkError
from treeskel.core.walker import walk_roots
from treeskel.models.mode import RunMode
from treeskel.utils.formatting import err_console, print_failure, print_transcript, print_warning

app = typer.Typer(
    name="treeskel",
    help="Replicate the directories and empty files of source trees.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"treeskel version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Send debug logging to stderr when --verbose is given."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command(no_args_is_help=True)
def main(
    roots: Annotated[
        list[str],
        typer.Argument(
            help="Source trees whose structure is mirrored into the current directory.",
            show_default=False,
        ),
    ],
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Print the transcript only; change nothing.",
        ),
    ] = False,
    undo: Annotated[
        bool,
        typer.Option(
            "--undo",
            "-u",
            help="Remove a previously created skeleton. Non-empty files are refused.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging on stderr.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Mirror the skeleton of each ROOT relative to the current directory.

    Directories are created as directories and every other entry as an
    empty file. A transcript line is printed for each entry in all modes.

    Examples:
        treeskel src              # Create x/, x/y.txt, ...
        treeskel -n src           # Preview only
        treeskel -u src           # Undo a previous run
    """
    _configure_logging(verbose)

    if dry_run and undo:
        print_warning("--undo is ignored with --dry-run")

    agent = create_agent(RunMode.from_flags(dry_run=dry_run, undo=undo))

    try:
        walk_roots(roots, agent, echo=print_transcript)
    except WalkError as e:
        print_failure(str(e))
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
