"""Main callback for the commitrefs helper app."""

import typer

from commitrefs import __version__


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"commitrefs {__version__}")
        raise typer.Exit()


def main_command(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """commitrefs: add issue and merge request references to commits."""
