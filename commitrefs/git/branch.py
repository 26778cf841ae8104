"""Git branch utilities.

Contains:
- get_branch: Get the current branch name
- get_branch_safe: Get the current branch name, never raising
"""

from commitrefs.git.runner import _run_git_command
from commitrefs.git.exceptions import GitError


def get_branch() -> str:
    """Get the current branch name.

    Returns:
        The current branch name, or an empty string in detached HEAD state.

    Raises:
        GitError: If git fails (e.g. not in a repository).
    """
    return _run_git_command(["branch", "--show-current"])


def get_branch_safe() -> str:
    """Get the current branch name without raising errors.

    Returns:
        The branch name, or an empty string if it cannot be determined.
    """
    try:
        return get_branch()
    except GitError:
        return ""
