"""Git command runners.

Contains:
- _run_git_command: Run git with captured output (queries)
- _run_git_attached: Run git attached to the terminal (commit, editor)
"""

import subprocess

from commitrefs.git.exceptions import GitError

GIT_NOT_FOUND = "Git is not installed or not in PATH."


def _run_git_command(args: list[str]) -> str:
    """Run a git query and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stripped stdout of the git command.

    Raises:
        GitError: If the command fails or git is missing.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr.strip()}")
    except FileNotFoundError:
        raise GitError(GIT_NOT_FOUND)
    return result.stdout.strip()


def _run_git_attached(args: list[str]) -> int:
    """Run git with the terminal attached so an editor can open.

    A non-zero exit is not an error here; the caller forwards the code.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The exit code of git.

    Raises:
        GitError: If git is missing.
    """
    try:
        result = subprocess.run(["git"] + args, check=False)
    except FileNotFoundError:
        raise GitError(GIT_NOT_FOUND)
    return result.returncode
