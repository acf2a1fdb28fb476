"""CLI commands for global configuration management."""

import typer
from pydantic import ValidationError

from commithook import global_config
from commithook.config import API_KEY_ENV_VARS, CONFIGURABLE_KEYS, HookConfig, load_config

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global commithook configuration in ~/.commithook/",
    add_completion=False,
)


def _mask_key(api_key: str) -> str:
    return api_key[:8] + "..." + api_key[-4:] if len(api_key) > 12 else "***"


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    try:
        config = load_config()
    except (global_config.GlobalConfigError, ValidationError) as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    source = global_config.get_config_file_path() if global_config.is_configured() else "defaults"
    typer.echo(f"Current commithook configuration ({source}):")
    typer.echo()
    typer.echo(f"  API URL: {config.api_base_url}")
    typer.echo(f"  Model: {config.model}")
    typer.echo(f"  Max Tokens: {config.max_tokens}")
    typer.echo(f"  Timeout: {config.timeout}s")
    typer.echo(f"  Require API Key: {config.require_api_key}")
    typer.echo()

    if config.api_key:
        typer.echo(f"  API Key: {_mask_key(config.api_key)}")
    else:
        typer.echo("  API Key: not set")


@config_app.command("set-key")
def config_set_key() -> None:
    """Set or update the Claude API key in ~/.commithook/credentials."""
    api_key = typer.prompt("Enter your Claude API key", hide_input=True)

    if not api_key.strip():
        typer.echo("❌ API key cannot be empty", err=True)
        raise typer.Exit(1)

    try:
        global_config.save_credential(API_KEY_ENV_VARS[0], api_key.strip())
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ API key saved to {global_config.get_credentials_file_path()}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help=f"Setting name ({', '.join(CONFIGURABLE_KEYS)})"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a value in ~/.commithook/config.yaml."""
    if key not in CONFIGURABLE_KEYS:
        typer.echo(f"Invalid setting: {key}", err=True)
        typer.echo(f"Valid settings: {', '.join(CONFIGURABLE_KEYS)}")
        raise typer.Exit(1)

    # Let the model coerce and validate the string before it is stored
    try:
        validated = HookConfig(**{key: value})
    except ValidationError as e:
        typer.echo(f"Invalid value for {key}: {e.errors()[0]['msg']}", err=True)
        raise typer.Exit(1)

    try:
        global_config.set_config_value(key, getattr(validated, key))
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ {key} set to {getattr(validated, key)}")
