"""Command 'stats' of tempo - productivity insights."""

from dataclasses import asdict

import typer
from rich.table import Table

from tempo_cli.models import ENERGY_EMOJIS
from tempo_cli.services.insights_service import calculate_productivity_stats
from tempo_cli.utils.ui.console import get_console
from tempo_cli.utils.ui.formatters import format_output, get_progress_bar

from .decorators import command_wrapper
from .dependencies import get_app_config, get_now, get_task_service

app = typer.Typer()
console = get_console()


@app.command("stats")
@command_wrapper
async def stats_command(
    json_opt: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Completion rates, deep work and the last four weeks."""
    tasks = await get_task_service().list_tasks(include_completed=True)
    stats = calculate_productivity_stats(tasks, get_now(), get_app_config().profile)

    if json_opt:
        format_output(asdict(stats), "json")
        return

    console.print("\n[bold cyan]📊 Productivity[/bold cyan]\n")
    console.print(
        f"Completed: [bold]{stats.completed_tasks}[/bold]/{stats.total_tasks} "
        f"{get_progress_bar(stats.completion_rate)} {stats.completion_rate:.0f}%"
    )
    console.print(
        f"Deep work: [bold]{stats.deep_work_hours}h[/bold] "
        f"({stats.deep_work_percentage:.0f}% of completed tasks)"
    )
    console.print(f"Done during peaks: {stats.peak_time_completion_rate:.0f}%")

    if stats.completed_tasks:
        console.print("\n[bold]By energy[/bold]")
        for energy, count in stats.energy_distribution.items():
            console.print(f"  {ENERGY_EMOJIS[energy]} {energy:<9} {count}")

    table = Table(show_header=True, header_style="bold magenta", title="Last 4 weeks")
    table.add_column("Week")
    table.add_column("Starts")
    table.add_column("Completed", justify="right")
    table.add_column("Deep (h)", justify="right")
    for week in stats.weekly_trend:
        table.add_row(
            week.label,
            f"{week.week_start:%d/%m}",
            str(week.completed),
            str(week.deep_work_hours),
        )
    console.print()
    console.print(table)
