"""Data management commands (export, import)."""

from pathlib import Path

import typer

from tempo_cli.utils.typer_helpers import SuggestingGroup
from tempo_cli.utils.ui.console import get_console
from tempo_cli.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper
from .dependencies import get_export_service, get_now

app = typer.Typer(cls=SuggestingGroup, help="Data management (export, import)")
console = get_console()


@app.command("export")
@command_wrapper
async def export_data(
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (default: tempo-export-{timestamp}.json)",
    ),
    compress: bool = typer.Option(
        False,
        "--compress",
        "-z",
        help="Compress output with gzip",
    ),
) -> None:
    """
    Export every task, daily note, the energy profile and settings to JSON.

    Examples:
        tempo data export
        tempo data export --output backup.json
        tempo data export --compress
    """
    path = Path(output or f"tempo-export-{get_now():%Y%m%d-%H%M%S}.json")
    summary = await get_export_service().export_data(path, compress=compress)
    format_success(
        f"Exported {summary.tasks} task(s) and {summary.notes} note(s) to {summary.path}"
    )


@app.command("import")
@command_wrapper
async def import_data(
    input_file: Path = typer.Argument(..., help="Export file (.json or .json.gz)"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """
    Import a tempo export.

    Tasks and notes with the same id (or date) are replaced; the energy
    profile and settings are restored from the file.
    """
    if not yes:
        confirm = typer.confirm(
            f"Import {input_file}? Existing tasks with the same ids will be replaced."
        )
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    summary = await get_export_service().import_data(input_file)
    format_success(
        f"Imported {summary.tasks} task(s) and {summary.notes} note(s) from {summary.path}"
    )
