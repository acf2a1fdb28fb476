"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- get_git_dir: Get the .git directory of the current repository
"""

import subprocess
from pathlib import Path

from commithook.git.exceptions import GitError


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{(e.stderr or '').strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def get_git_dir() -> Path:
    """Get the .git directory of the current repository.

    Works from subdirectories and worktrees, where .git is not in the cwd.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        git_dir = _run_git_command(["rev-parse", "--absolute-git-dir"])
        return Path(git_dir)
    except GitError:
        raise GitError("Not in a git repository. Please run this command from within a git repo.")
