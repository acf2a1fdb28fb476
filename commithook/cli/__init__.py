"""CLI entry point for commithook.

This module combines the hook entry point, the install commands and the
config subcommands into a single typer application.
"""

import typer

from commithook.cli.config import config_app
from commithook.cli.hook import run_command
from commithook.cli.install import install_command, status_command, uninstall_command
from commithook.cli.main import main_command

# Main application
app = typer.Typer(
    name="commithook",
    help="commithook: Claude-written commit messages from a git hook",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("run")(run_command)
app.command("install")(install_command)
app.command("uninstall")(uninstall_command)
app.command("status")(status_command)

# Show help when no command is given (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "install_command",
    "main_command",
    "run_command",
    "status_command",
    "uninstall_command",
]
