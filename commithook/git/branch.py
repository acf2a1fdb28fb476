"""Current branch lookup."""

from commithook.git.runner import _run_git_command

DETACHED_HEAD = "HEAD (detached)"


def get_branch() -> str:
    """Get the current branch name.

    Returns:
        The current branch name, or 'HEAD (detached)' if in detached state.
    """
    branch = _run_git_command(["branch", "--show-current"])
    if not branch:
        return DETACHED_HEAD
    return branch
