"""Git access for commithook.

This package reads the little the hook needs from git:
- exceptions: GitError, EmptyDiffError
- runner: _run_git_command, get_git_dir
- branch: get_branch
- diff: get_staged_diff
"""

from commithook.git.exceptions import EmptyDiffError, GitError
from commithook.git.runner import _run_git_command, get_git_dir
from commithook.git.branch import DETACHED_HEAD, get_branch
from commithook.git.diff import get_staged_diff


__all__ = [
    "DETACHED_HEAD",
    "EmptyDiffError",
    "GitError",
    "_run_git_command",
    "get_branch",
    "get_git_dir",
    "get_staged_diff",
]
