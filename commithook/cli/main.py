"""Top-level CLI callback."""

from typing import Optional

import typer

from commithook import __version__


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"commithook {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Generate commit messages with Claude from a git hook."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
