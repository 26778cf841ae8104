"""CLI command for use as a prepare-commit-msg hook."""

from pathlib import Path
from typing import Optional

import typer

from commitrefs.composer import annotate_message_file
from commitrefs.cli.utils import gather_references, load_config_safe

# Message sources for which the hook leaves the message alone
SKIPPED_SOURCES = {"merge", "squash", "commit"}


def hook_command(
    message_file: Path = typer.Argument(
        ...,
        help="Commit message file passed by git",
    ),
    source: Optional[str] = typer.Argument(
        None,
        help="Source of the message (message, template, merge, squash, commit)",
    ),
    sha: Optional[str] = typer.Argument(
        None,
        help="Commit SHA, given for amended commits",
    ),
) -> None:
    """Add references to a commit message file (prepare-commit-msg hook).

    Install with:
        echo 'exec commitrefs hook "$@"' > .git/hooks/prepare-commit-msg
    """
    if source in SKIPPED_SOURCES:
        return

    if not message_file.exists():
        typer.echo(f"Error: Commit message file not found: {message_file}", err=True)
        raise typer.Exit(1)

    config = load_config_safe()
    references = gather_references(config)

    try:
        # git writes -m messages without its comment section
        changed = annotate_message_file(
            message_file,
            references,
            split_comments=source != "message",
        )
    except OSError as e:
        typer.echo(f"Error updating commit message file: {e}", err=True)
        raise typer.Exit(1)

    if changed and not config.quiet:
        typer.echo(f"Added {len(references)} reference(s) to commit message", err=True)
