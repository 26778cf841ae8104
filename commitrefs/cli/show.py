"""CLI command for previewing the references for the current state."""

from typing import Optional

import typer

from commitrefs.composer import build_template
from commitrefs.cli.utils import gather_references, load_config_safe


def show_command(
    branch: Optional[str] = typer.Option(
        None,
        "--branch",
        "-b",
        help="Use this branch name instead of the current branch",
    ),
    clipboard: Optional[str] = typer.Option(
        None,
        "--clipboard",
        "-c",
        help="Use this text instead of the clipboard contents",
    ),
    message: Optional[str] = typer.Option(
        None,
        "--message",
        "-m",
        help="Render the template with this commit message",
    ),
) -> None:
    """Show the commit template that git-refcommit would use."""
    config = load_config_safe()
    references = gather_references(config, branch=branch, clipboard=clipboard)

    if not references:
        typer.echo("No references found.", err=True)
        return

    typer.echo(build_template(references, message), nl=False)
