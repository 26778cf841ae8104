"""CLI entry points for commitrefs.

- git-refcommit: drop-in replacement for git commit (commitrefs.cli.commit.main)
- commitrefs: helper app with show, hook and config commands
"""

import typer

from commitrefs.cli.config import config_app
from commitrefs.cli.hook import hook_command
from commitrefs.cli.show import show_command
from commitrefs.cli.commit import main as commit_main, run_commit_command
from commitrefs.cli.main import main_command

# Main application
app = typer.Typer(
    name="commitrefs",
    help="commitrefs: add issue and merge request references to commits",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("show")(show_command)
app.command("hook")(hook_command)

# Set the main callback (includes --version flag)
app.callback()(main_command)


__all__ = [
    "app",
    "config_app",
    "show_command",
    "hook_command",
    "main_command",
    "commit_main",
    "run_commit_command",
]
