"""Command 'energy' of tempo - quick energy check-ins."""

from datetime import timedelta

import typer

from tempo_cli.models import EnergyCheckSession
from tempo_cli.utils.ui.console import get_console
from tempo_cli.utils.ui.formatters import format_info, format_success, format_warning

from .decorators import command_wrapper
from .dependencies import get_app_config, get_note_service, get_now

app = typer.Typer()
console = get_console()

LEVEL_LABELS = {1: "🪫 drained", 2: "😴 low", 3: "🙂 ok", 4: "😊 good", 5: "⚡ great"}


@app.command("energy")
@command_wrapper
async def energy_command(
    level: int | None = typer.Argument(None, min=1, max=5, help="Energy level, 1-5"),
    note: str | None = typer.Option(None, "--note", "-m", help="Short note"),
) -> None:
    """Record how you feel (1-5), or see whether a check-in is due."""
    settings = get_app_config().settings
    now = get_now()
    note_service = get_note_service()

    today = await note_service.get_note(now)
    session = EnergyCheckSession(interval_minutes=settings.energy_check_interval_minutes)
    if today.energy_checks:
        last = today.energy_checks[-1].timestamp
        session.last_check_at = last
        session.next_prompt_due_at = last + timedelta(minutes=session.interval_minutes)

    if level is None:
        if not settings.enable_energy_tracking:
            format_info("Energy tracking is disabled (settings.enable_energy_tracking)")
            return
        for check in today.energy_checks:
            console.print(f"  {check.timestamp:%H:%M} {LEVEL_LABELS[check.level]}")
        if session.is_due(now):
            format_warning("Energy check-in due: run 'tempo energy <1-5>'")
        else:
            console.print(f"[dim]Next check-in at {session.next_prompt_due_at:%H:%M}[/dim]")
        return

    check = await note_service.record_energy_check(level, now, note=note, session=session)
    format_success(
        f"Energy {LEVEL_LABELS[check.level]} recorded at {check.timestamp:%H:%M} "
        f"(next check-in {session.next_prompt_due_at:%H:%M})"
    )
