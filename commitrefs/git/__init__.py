"""Git access module for commitrefs.

This package provides:
- exceptions: GitError, CommitTemplateError
- runner: _run_git_command, _run_git_attached
- branch: get_branch, get_branch_safe
- commit: build_commit_command, run_commit
"""

# Exceptions
from commitrefs.git.exceptions import (
    CommitTemplateError,
    GitError,
)

# Runner utilities
from commitrefs.git.runner import (
    _run_git_attached,
    _run_git_command,
)

# Branch utilities
from commitrefs.git.branch import (
    get_branch,
    get_branch_safe,
)

# Delegate commit
from commitrefs.git.commit import (
    build_commit_command,
    run_commit,
)


__all__ = [
    # Exceptions
    "GitError",
    "CommitTemplateError",
    # Runner
    "_run_git_command",
    "_run_git_attached",
    # Branch
    "get_branch",
    "get_branch_safe",
    # Commit
    "build_commit_command",
    "run_commit",
]
