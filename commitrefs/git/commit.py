"""Delegate invocation of `git commit`.

Contains:
- build_commit_command: Build the git commit arguments for a message/template mode
- run_commit: Run git commit and return its exit code
"""

from pathlib import Path
from typing import Optional

from commitrefs.git.runner import _run_git_attached


def build_commit_command(
    passthrough: list[str],
    message: Optional[str] = None,
    template: Optional[Path] = None,
) -> list[str]:
    """Build the git commit arguments.

    Mode flags come before the passthrough arguments so that a "--"
    pathspec separator in the passthrough cannot swallow them.

    Args:
        passthrough: Arguments forwarded verbatim to git commit.
        message: Literal commit message supplied by the user.
        template: Path to a generated commit template.

    Returns:
        Arguments for git, starting with "commit".
    """
    args = ["commit"]
    if template is not None:
        if message is not None:
            # Message is already in the template
            args += ["-F", str(template)]
        else:
            args += ["-t", str(template)]
    elif message is not None:
        args += ["-m", message]
    return args + list(passthrough)


def run_commit(args: list[str]) -> int:
    """Run git commit.

    Args:
        args: Arguments built by build_commit_command.

    Returns:
        The exit code of git commit, unchanged.

    Raises:
        GitError: If git cannot be executed.
    """
    return _run_git_attached(args)
