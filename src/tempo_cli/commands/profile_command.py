"""Energy profile commands."""

import typer
from rich.table import Table

from tempo_cli.models import DAY_NAMES, EnergyProfile, TimeRange
from tempo_cli.utils import exit_codes
from tempo_cli.utils.typer_helpers import SuggestingGroup
from tempo_cli.utils.ui.console import get_console
from tempo_cli.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper
from .dependencies import get_config_service

app = typer.Typer(cls=SuggestingGroup, help="Energy profile (peaks, dips, work days)")
console = get_console()


def _parse_ranges(values: list[str]) -> list[TimeRange]:
    try:
        return [TimeRange.parse(value) for value in values]
    except ValueError as e:
        raise AppError(str(e), exit_codes.ERROR_INVALID_ARGS) from e


def _parse_days(values: list[str]) -> list[int]:
    names = [name.lower() for name in DAY_NAMES]
    days = []
    for value in values:
        if value.isdigit():
            days.append(int(value))
        elif value[:3].lower() in names:
            days.append(names.index(value[:3].lower()))
        else:
            raise AppError(f"Unknown day: {value}", exit_codes.ERROR_INVALID_ARGS)
    return days


@app.command("show")
@command_wrapper
def show_profile(
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Show the current energy profile."""
    profile = get_config_service().config.profile
    if output not in ("table", "pretty"):
        format_output(profile.model_dump(mode="json"), output)
        return

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()
    table.add_row("Chronotype", profile.chronotype)
    table.add_row("⚡ Peaks", ", ".join(str(r) for r in profile.peaks) or "[dim]none[/dim]")
    table.add_row("🌙 Dips", ", ".join(str(r) for r in profile.dips) or "[dim]none[/dim]")
    table.add_row("Work days", " ".join(DAY_NAMES[d] for d in profile.work_days))
    table.add_row("Focus", f"{profile.focus_duration} min")
    table.add_row("Break", f"{profile.break_preference} min")
    table.add_row("Caffeine", ", ".join(profile.caffeine_times) or "[dim]none[/dim]")
    console.print(table)


@app.command("set-peaks")
@command_wrapper
def set_peaks(
    ranges: list[str] = typer.Argument(..., help="Windows like 09:00-12:00"),
) -> None:
    """Replace the peak energy windows."""
    service = get_config_service()
    profile = service.config.profile.model_copy(update={"peaks": _parse_ranges(ranges)})
    service.update_profile(profile)
    format_success(f"Peaks set to {', '.join(str(r) for r in profile.peaks)}")


@app.command("set-dips")
@command_wrapper
def set_dips(
    ranges: list[str] = typer.Argument(None, help="Windows like 14:00-16:00 (none to clear)"),
) -> None:
    """Replace the low energy windows."""
    service = get_config_service()
    profile = service.config.profile.model_copy(update={"dips": _parse_ranges(ranges or [])})
    service.update_profile(profile)
    if profile.dips:
        format_success(f"Dips set to {', '.join(str(r) for r in profile.dips)}")
    else:
        format_success("Dips cleared")


@app.command("set-work-days")
@command_wrapper
def set_work_days(
    days: list[str] = typer.Argument(..., help="Day names or numbers (Mon=0)"),
) -> None:
    """Set the working days used by the weekly suggestions."""
    service = get_config_service()
    data = service.config.profile.model_dump()
    data["work_days"] = _parse_days(days)
    profile = EnergyProfile.model_validate(data)
    service.update_profile(profile)
    format_success(f"Work days: {' '.join(DAY_NAMES[d] for d in profile.work_days)}")


@app.command("set-chronotype")
@command_wrapper
def set_chronotype(
    chronotype: str = typer.Argument(..., help="morning, evening or flexible"),
) -> None:
    """Set the chronotype."""
    service = get_config_service()
    data = service.config.profile.model_dump()
    data["chronotype"] = chronotype
    profile = EnergyProfile.model_validate(data)
    service.update_profile(profile)
    format_success(f"Chronotype: {profile.chronotype}")
