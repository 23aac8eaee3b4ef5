"""Configuration management commands."""

import typer

from tempo_cli.utils import exit_codes
from tempo_cli.utils.typer_helpers import SuggestingGroup
from tempo_cli.utils.ui.console import get_console
from tempo_cli.utils.ui.formatters import format_info, format_output, format_success

from .decorators import AppError, command_wrapper
from .dependencies import get_config_service

app = typer.Typer(cls=SuggestingGroup, help="Configuration management")
console = get_console()


@app.command("show")
@command_wrapper
def show_config(
    output: str = typer.Option("json", "--output", "-o", help="Output format (json/yaml)"),
) -> None:
    """Show the whole configuration."""
    service = get_config_service()
    format_output(service.config.model_dump(mode="json"), output)
    console.print(f"[dim]{service.config_path}[/dim]")


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Dotted key (e.g. scoring.energy_weight)"),
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get_value(key)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", exit_codes.ERROR_CONFIG) from e
    if isinstance(value, (dict, list)):
        format_output(value, "json")
    else:
        console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Dotted key (e.g. settings.auto_archive_days)"),
    value: str = typer.Argument(..., help="New value (JSON for numbers, booleans and lists)"),
) -> None:
    """Set a configuration value."""
    service = get_config_service()
    try:
        service.set_value(key, value)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", exit_codes.ERROR_CONFIG) from e
    format_success(f"Configuration '{key}' set to '{service.get_value(key)}'")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration (profile included) to defaults."""
    if not yes:
        confirm = typer.confirm("Are you sure you want to reset the entire configuration?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
