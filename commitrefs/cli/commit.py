"""The git-refcommit entry point: git commit with references added.

Not a typer command: every argument except -m/--message belongs to git
commit, including "--" and "--help", so argv is handled directly.
"""

import sys
from typing import Optional

import typer

from commitrefs.args import ArgumentError, normalize_args
from commitrefs.composer import commit_with_references
from commitrefs.git import CommitTemplateError, GitError
from commitrefs.cli.utils import gather_references, load_config_safe

# git's exit status for usage errors
USAGE_EXIT_CODE = 129

# Shell convention for a process ended by SIGINT
INTERRUPTED_EXIT_CODE = 130


def run_commit_command(argv: list[str]) -> int:
    """Run git commit with references from the branch and clipboard.

    Args:
        argv: Command-line arguments, without the program name.

    Returns:
        The exit code to terminate with (git's own on success or failure).
    """
    try:
        commit_args = normalize_args(argv)
    except ArgumentError as e:
        typer.echo(f"error: {e}", err=True)
        return USAGE_EXIT_CODE

    config = load_config_safe()
    references = gather_references(config)

    if references and not config.quiet:
        typer.echo(f"Adding {len(references)} reference(s) to commit message", err=True)

    try:
        return commit_with_references(references, commit_args.message, commit_args.passthrough)
    except CommitTemplateError as e:
        typer.echo(f"Error: {e}", err=True)
        return 1
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        return 1


def main(argv: Optional[list[str]] = None) -> None:
    """Console script entry point for git-refcommit."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        code = run_commit_command(argv)
    except KeyboardInterrupt:
        typer.echo("", err=True)
        code = INTERRUPTED_EXIT_CODE
    sys.exit(code)
