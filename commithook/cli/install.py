"""CLI commands for installing, removing and inspecting the hook."""

import typer

from commithook.config import API_KEY_ENV_VARS, resolve_api_key
from commithook.git import GitError, get_git_dir
from commithook.global_config import GlobalConfigError
from commithook.installer import (
    HookInstallError,
    get_hook_path,
    install_hook,
    is_hook_installed,
    uninstall_hook,
)


def install_command(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Replace an existing prepare-commit-msg hook",
    ),
) -> None:
    """Install the prepare-commit-msg hook in the current repository."""
    try:
        git_dir = get_git_dir()
    except GitError:
        typer.echo("⚠️  No git repository detected. Run 'git init' first, then install again.")
        raise typer.Exit(1)

    try:
        hook_path = install_hook(git_dir, force=force)
    except HookInstallError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("✅ Commit hook installed successfully!")
    typer.echo(f"   {hook_path}")
    typer.echo("📋 To use the hook:")
    typer.echo(f"   1. Set your API key: export {API_KEY_ENV_VARS[0]}=\"your-key-here\"")
    typer.echo("      (or run: commithook config set-key)")
    typer.echo("   2. Get your API key from: https://console.anthropic.com/")
    typer.echo("   3. Use: git add . && git commit")


def uninstall_command() -> None:
    """Remove the prepare-commit-msg hook from the current repository."""
    try:
        git_dir = get_git_dir()
        removed = uninstall_hook(git_dir)
    except (GitError, HookInstallError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if removed:
        typer.echo("✅ Commit hook uninstalled")
    else:
        typer.echo("❌ Hook not found")


def status_command() -> None:
    """Show whether the hook is installed and an API key is available."""
    typer.echo("🔍 Checking commit hook status...")

    try:
        git_dir = get_git_dir()
    except GitError:
        typer.echo("⚠️  Not in a git repository")
        raise typer.Exit(1)

    if is_hook_installed(git_dir):
        typer.echo(f"✅ Hook installed: {get_hook_path(git_dir)}")
    else:
        typer.echo("❌ Hook not installed (run: commithook install)")

    try:
        api_key = resolve_api_key()
    except GlobalConfigError as e:
        typer.echo(f"Error reading credentials: {e}", err=True)
        raise typer.Exit(1)

    if api_key:
        typer.echo("✅ API key configured")
    else:
        typer.echo(f"❌ API key not configured (set {API_KEY_ENV_VARS[0]})")
