"""Command 'week' of tempo"""

from datetime import timedelta

import typer
from rich.table import Table

from tempo_cli.models import DAY_NAMES, ENERGY_EMOJIS, ENERGY_TYPES, WEEK_LEVEL_DAY
from tempo_cli.services.weekly_service import generate_weekly_data, get_week_start
from tempo_cli.utils.ui.console import get_console
from tempo_cli.utils.ui.formatters import format_output, get_intensity_color

from .decorators import command_wrapper
from .dependencies import get_app_config, get_now, get_task_service

app = typer.Typer()
console = get_console()


@app.command("week")
@command_wrapper
async def week_command(
    offset: int = typer.Option(
        0, "--offset", help="Weeks from the current one (-1 = last week)"
    ),
    json_opt: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the weekly energy grid, with balance suggestions."""
    config = get_app_config()
    week_start = get_week_start(get_now()) + timedelta(weeks=offset)
    tasks = await get_task_service().list_tasks(include_completed=True)
    data = generate_weekly_data(tasks, week_start, config.profile)

    if json_opt:
        format_output(data.model_dump(mode="json"), "json")
        return

    days = [week_start + timedelta(days=day) for day in range(7)]
    table = Table(
        show_header=True,
        header_style="bold magenta",
        title=f"Week of {week_start:%d/%m/%Y}",
    )
    table.add_column("Energy")
    for day in days:
        table.add_column(f"{DAY_NAMES[day.weekday()]} {day:%d}", justify="center")

    for energy in ENERGY_TYPES:
        row = [f"{ENERGY_EMOJIS[energy]} {energy}"]
        for day in range(7):
            cell = data.cell(day, energy)
            if cell.total_hours:
                color = get_intensity_color(cell.intensity)
                row.append(f"[{color}]{cell.total_hours:g}h[/{color}]")
            else:
                row.append("[dim]·[/dim]")
        table.add_row(*row)
    table.add_row(
        "[bold]Total[/bold]",
        *(f"[bold]{data.day_hours(day):g}h[/bold]" for day in range(7)),
    )
    console.print(table)

    stats = data.stats
    console.print(
        f"[bold]{stats.total_tasks}[/bold] tasks ({stats.completed_tasks} done) • "
        f"[bold]{stats.total_hours:g}h[/bold] planned • "
        f"🧠 {stats.deep_work_hours:g}h deep • "
        f"balance [bold]{stats.balance_score}[/bold]/100"
    )
    if stats.most_productive_day is not None:
        busiest = days[stats.most_productive_day]
        lightest = days[stats.least_productive_day]
        console.print(
            f"[dim]Busiest: {DAY_NAMES[busiest.weekday()]} • "
            f"Lightest: {DAY_NAMES[lightest.weekday()]}[/dim]"
        )

    if data.suggestions:
        console.print()
        console.print("[bold cyan]💡 Suggestions[/bold cyan]")
        for suggestion in data.suggestions:
            where = (
                "Week"
                if suggestion.day == WEEK_LEVEL_DAY
                else DAY_NAMES[days[suggestion.day].weekday()]
            )
            console.print(f"  [yellow]{where}[/yellow] {suggestion.message}")
