"""Daily note commands (intention and notebook)."""

from datetime import date

import typer

from tempo_cli.utils import exit_codes
from tempo_cli.utils.typer_helpers import SuggestingGroup
from tempo_cli.utils.ui.console import get_console
from tempo_cli.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper
from .dependencies import get_note_service, get_now

app = typer.Typer(cls=SuggestingGroup, help="Daily notes: intention and notebook")
console = get_console()


def _day(value: str | None):
    if value is None:
        return get_now()
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise AppError(f"Expected a YYYY-MM-DD date, got {value!r}", exit_codes.ERROR_INVALID_ARGS) from e


@app.command("intention")
@command_wrapper
async def set_intention(
    text: str = typer.Argument(..., help="What today is about"),
    day: str | None = typer.Option(None, "--date", "-d", help="YYYY-MM-DD (default: today)"),
) -> None:
    """Set the day's intention."""
    note = await get_note_service().set_intention(_day(day), text)
    format_success(f"🎯 Intention for {note.date}: {note.intention}")


@app.command("write")
@command_wrapper
async def write_note(
    text: str = typer.Argument(..., help="Line to add to the notebook"),
    day: str | None = typer.Option(None, "--date", "-d", help="YYYY-MM-DD (default: today)"),
) -> None:
    """Append a line to the day's notebook."""
    note = await get_note_service().append_notebook(_day(day), text)
    format_success(f"Added to the notebook of {note.date}")


@app.command("show")
@command_wrapper
async def show_note(
    day: str | None = typer.Option(None, "--date", "-d", help="YYYY-MM-DD (default: today)"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Show a daily note."""
    note = await get_note_service().get_note(_day(day))
    if output not in ("table", "pretty"):
        format_output(note.model_dump(mode="json"), output)
        return

    console.print(f"[bold cyan]📓 {note.date}[/bold cyan]")
    console.print(f"🎯 {note.intention or '[dim]no intention set[/dim]'}")
    if note.notebook:
        console.print()
        console.print(note.notebook)
    if note.energy_checks:
        levels = " ".join(f"{c.timestamp:%H:%M}={c.level}" for c in note.energy_checks)
        console.print(f"\n[dim]Energy: {levels}[/dim]")
