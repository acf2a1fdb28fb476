"""The prepare-commit-msg hook entry point."""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from commithook.config import API_KEY_ENV_VARS, HookConfig, load_config, resolve_api_key
from commithook.diffstat import analyze_diff
from commithook.formatters import render_commit_message
from commithook.generator import generate_message
from commithook.git import EmptyDiffError, GitError, get_branch, get_staged_diff
from commithook.global_config import GlobalConfigError

# Commit sources where git already has the message the user wants
SKIP_SOURCES = ("message", "merge", "squash", "commit")


def _default_config(timeout: Optional[float]) -> HookConfig:
    """Built-in defaults for when config.yaml cannot be loaded.

    Only the API key and a valid --timeout are carried over.
    """
    try:
        api_key = resolve_api_key()
    except GlobalConfigError:
        api_key = None

    if timeout is not None:
        try:
            return HookConfig(api_key=api_key, timeout=timeout)
        except ValidationError:
            pass
    return HookConfig(api_key=api_key)


def run_command(
    message_file: Path = typer.Argument(
        ...,
        help="Commit message file passed by git",
    ),
    source: Optional[str] = typer.Argument(
        None,
        help="Source of the commit message (message, template, merge, squash, commit)",
    ),
    commit_sha: Optional[str] = typer.Argument(
        None,
        help="Commit SHA when amending",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        "-t",
        help="API request timeout in seconds",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Show why the API answer was rejected and the diff statistics",
    ),
) -> None:
    """Generate a commit message for the staged changes (called by git)."""
    if source in SKIP_SOURCES:
        if debug:
            typer.echo(f"Commit message source is '{source}', leaving it unchanged.")
        raise typer.Exit(0)

    try:
        config = load_config(timeout=timeout)
    except (GlobalConfigError, ValidationError) as e:
        typer.echo(f"Configuration error, using defaults: {e}", err=True)
        config = _default_config(timeout)

    if config.require_api_key and not config.has_api_key:
        typer.echo(f"Error: {API_KEY_ENV_VARS[0]} is not configured")
        typer.echo(f"Set it with: export {API_KEY_ENV_VARS[0]}='your-key-here'")
        raise typer.Exit(1)

    try:
        diff = get_staged_diff()
        branch = get_branch() if diff.strip() else ""
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    if diff.strip():
        typer.echo("🔍 Analyzing changes with Claude...")
        typer.echo(f"📋 Branch: {branch}")

    try:
        result = generate_message(diff, branch, config)
    except EmptyDiffError:
        typer.echo("No staged changes for commit")
        raise typer.Exit(0)

    if result.used_fallback:
        typer.echo("⚠️  Claude API unavailable, generating basic message...")
        if debug:
            stats = analyze_diff(diff)
            typer.echo(f"  Reason: {result.rejection_reason}", err=True)
            typer.echo(
                f"  Diff: {stats.files_changed} files, "
                f"+{stats.additions} -{stats.deletions}",
                err=True,
            )
    elif debug:
        typer.echo(f"  Model: {config.model}", err=True)

    message = render_commit_message(result.message)

    try:
        message_file.write_text(message + "\n")
    except OSError as e:
        typer.echo(f"Failed to write {message_file}: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("✅ Commit message generated:")
    for line in message.splitlines():
        typer.echo(f"   {line}")
