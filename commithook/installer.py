"""Install and remove the prepare-commit-msg hook script.

The installed script only forwards git's arguments to ``python -m commithook
run``, using the interpreter that ran the installer.
"""

import stat
import sys
from pathlib import Path
from typing import Optional

HOOK_NAME = "prepare-commit-msg"
HOOK_MARKER = "# Installed by commithook"

HOOK_TEMPLATE = """#!/bin/sh
{marker}
# Generates commit messages with Claude. Remove with: commithook uninstall
exec "{python}" -m commithook run "$@"
"""


class HookInstallError(Exception):
    """Raised when the hook cannot be installed or removed."""
    pass


def get_hook_path(git_dir: Path) -> Path:
    """Path of the prepare-commit-msg hook inside a .git directory."""
    return git_dir / "hooks" / HOOK_NAME


def build_hook_script(python: Optional[str] = None) -> str:
    """Render the hook script for the given interpreter path."""
    return HOOK_TEMPLATE.format(marker=HOOK_MARKER, python=python or sys.executable)


def is_hook_installed(git_dir: Path) -> bool:
    """Check whether our hook script is present."""
    hook_path = get_hook_path(git_dir)
    if not hook_path.is_file():
        return False
    try:
        return HOOK_MARKER in hook_path.read_text()
    except (OSError, UnicodeDecodeError):
        return False


def install_hook(git_dir: Path, force: bool = False, python: Optional[str] = None) -> Path:
    """Write the hook script and make it executable.

    Args:
        git_dir: The repository's .git directory.
        force: Overwrite a prepare-commit-msg hook that was not installed by us.
        python: Interpreter the hook should run. Defaults to sys.executable.

    Returns:
        Path to the installed hook.

    Raises:
        HookInstallError: If a foreign hook exists and force is False, or the
            file cannot be written.
    """
    hook_path = get_hook_path(git_dir)

    if hook_path.exists() and not force and not is_hook_installed(git_dir):
        raise HookInstallError(
            f"A different {HOOK_NAME} hook already exists at {hook_path}. "
            "Use --force to replace it."
        )

    try:
        hook_path.parent.mkdir(parents=True, exist_ok=True)
        hook_path.write_text(build_hook_script(python))
        hook_path.chmod(
            stat.S_IRWXU | stat.S_IRGRP | stat.S_IXGRP | stat.S_IROTH | stat.S_IXOTH
        )
    except OSError as e:
        raise HookInstallError(f"Failed to write {hook_path}: {e}")

    return hook_path


def uninstall_hook(git_dir: Path) -> bool:
    """Remove our hook script.

    Returns:
        True if the hook was removed, False if it was not installed.

    Raises:
        HookInstallError: If the file cannot be removed.
    """
    if not is_hook_installed(git_dir):
        return False

    hook_path = get_hook_path(git_dir)
    try:
        hook_path.unlink()
    except OSError as e:
        raise HookInstallError(f"Failed to remove {hook_path}: {e}")
    return True
