"""Shared utility functions for CLI commands."""

from typing import Optional

import typer

from commitrefs.clipboard import read_clipboard
from commitrefs.config import ConfigError, RefsConfig, load_config
from commitrefs.extractors import collect_references
from commitrefs.git import get_branch_safe


def load_config_safe() -> RefsConfig:
    """Load the user configuration, falling back to defaults on error.

    A broken config file is reported but never blocks a commit.

    Returns:
        The loaded RefsConfig, or the defaults.
    """
    try:
        return load_config()
    except ConfigError as e:
        typer.echo(f"Warning: {e}", err=True)
        typer.echo("Warning: using default configuration.", err=True)
        return RefsConfig()


def gather_references(
    config: RefsConfig,
    branch: Optional[str] = None,
    clipboard: Optional[str] = None,
) -> list[str]:
    """Read the branch and clipboard once and run the extractors.

    Args:
        config: Effective configuration.
        branch: Branch name override; read from git when None.
        clipboard: Clipboard override; read from the clipboard when None.

    Returns:
        Reference lines in extractor order.
    """
    if branch is None:
        branch = get_branch_safe()
    if clipboard is None:
        clipboard = read_clipboard(config.clipboard_command, config.clipboard_timeout)
    return collect_references(branch, clipboard, config)
