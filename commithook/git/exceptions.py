"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- EmptyDiffError: Raised when there is nothing staged to commit
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class EmptyDiffError(GitError):
    """Raised when the staged diff is empty."""

    pass
