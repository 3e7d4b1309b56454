"""Configuration management commands."""

import json

import typer

from studymate_cli.commands.decorators import command_wrapper
from studymate_cli.services.config_service import get_config_service
from studymate_cli.utils.ui.console import get_console
from studymate_cli.utils.ui.formatters import format_success

app = typer.Typer(help="Configuration management commands")
console = get_console()


def parse_value(value: str):
    """Convert a CLI string to bool, int, float or JSON list where it looks like one."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.lstrip("-").isdigit():
        return int(value)
    try:
        return float(value)
    except ValueError:
        pass
    if value.startswith("["):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            pass
    return value


@app.command("show")
@command_wrapper
def show_config() -> None:
    """Show the current configuration."""
    config = get_config_service().config
    console.print_json(config.model_dump_json())


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., chat.reply_delay_ms)"),
) -> None:
    """Get a configuration value."""
    value = get_config_service().get_value(key)
    if isinstance(value, (dict, list)):
        console.print_json(data=value)
    else:
        console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., focus.default_seconds)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    parsed_value = parse_value(value)
    get_config_service().set_value(key, parsed_value)
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Reset all configuration to defaults?"):
        console.print("[yellow]Reset cancelled.[/yellow]")
        return
    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
