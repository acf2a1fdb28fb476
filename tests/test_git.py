"""Tests for commithook.git package."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from commithook.git import (
    DETACHED_HEAD,
    GitError,
    _run_git_command,
    get_branch,
    get_git_dir,
    get_staged_diff,
)


def _completed(stdout):
    result = MagicMock()
    result.stdout = stdout
    result.returncode = 0
    return result


class TestRunGitCommand:
    """Tests for _run_git_command function."""

    def test_successful_command(self, mocker):
        mocker.patch("subprocess.run", return_value=_completed("output\n"))

        assert _run_git_command(["status"]) == "output"

    def test_failed_command_raises_error(self, mocker):
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(1, "git", stderr="error"),
        )

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["invalid"])

        assert "Git command failed" in str(exc_info.value)

    def test_git_not_found_raises_error(self, mocker):
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["status"])

        assert "not installed" in str(exc_info.value)


class TestGetGitDir:
    """Tests for get_git_dir function."""

    def test_returns_path(self, mocker):
        mocker.patch("subprocess.run", return_value=_completed("/path/to/repo/.git\n"))

        assert get_git_dir() == Path("/path/to/repo/.git")

    def test_raises_error_if_not_repo(self, mocker):
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(128, "git", stderr="not a git repo"),
        )

        with pytest.raises(GitError) as exc_info:
            get_git_dir()

        assert "Not in a git repository" in str(exc_info.value)


class TestGetBranch:
    """Tests for get_branch function."""

    def test_returns_branch(self, mocker):
        mock_run = mocker.patch("subprocess.run", return_value=_completed("feature/CAM-1-x\n"))

        assert get_branch() == "feature/CAM-1-x"
        assert mock_run.call_args[0][0] == ["git", "branch", "--show-current"]

    def test_detached_head(self, mocker):
        mocker.patch("subprocess.run", return_value=_completed(""))

        assert get_branch() == DETACHED_HEAD


class TestGetStagedDiff:
    """Tests for get_staged_diff function."""

    def test_reads_cached_diff(self, mocker, readme_diff):
        mock_run = mocker.patch("subprocess.run", return_value=_completed(readme_diff))

        assert get_staged_diff() == readme_diff.strip()
        assert mock_run.call_args[0][0] == [
            "git", "-c", "core.quotePath=false", "diff", "--cached", "--no-color"
        ]

    def test_nothing_staged(self, mocker):
        mocker.patch("subprocess.run", return_value=_completed(""))

        assert get_staged_diff() == ""
