"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- CommitTemplateError: Raised when the commit template cannot be written
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class CommitTemplateError(GitError):
    """Raised when the temporary commit template cannot be created."""

    pass
