"""Staged diff lookup."""

from commithook.git.runner import _run_git_command


def get_staged_diff() -> str:
    """Get the staged changes as a unified diff.

    Non-ASCII paths are kept readable (core.quotePath=false); paths with
    quotes, backslashes or control characters are still C-quoted by git.

    Returns:
        The diff text; empty when nothing is staged.

    Raises:
        GitError: If the git command fails.
    """
    return _run_git_command(["-c", "core.quotePath=false", "diff", "--cached", "--no-color"])
