"""Command 'rank' of tempo"""

import json

import typer
from rich.table import Table

from tempo_cli.models import ENERGY_EMOJIS
from tempo_cli.utils.ui.console import get_console

from .decorators import command_wrapper
from .dependencies import get_app_config, get_now, get_scoring_engine, get_task_service

app = typer.Typer()
console = get_console()


@app.command("rank")
@command_wrapper
async def rank_command(
    limit: int = typer.Option(20, "--limit", "-n", min=1, help="How many tasks to show"),
    json_opt: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Rank the whole backlog by urgency and fit with your current energy."""
    config = get_app_config()
    now = get_now()
    tasks = await get_task_service().list_tasks(include_completed=False)
    ranked = get_scoring_engine(config).rank_backlog(tasks, now)[:limit]

    if json_opt:
        print(
            json.dumps(
                [
                    {"id": item.task.id, "title": item.task.title, "score": item.score, **item.components}
                    for item in ranked
                ],
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    if not ranked:
        console.print("[yellow]No active tasks[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta", title=f"Backlog at {now:%H:%M}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Score", justify="right", style="bold")
    table.add_column("Opp.", justify="right")
    table.add_column("Energy", justify="right")
    table.add_column("Task")
    table.add_column("ID", style="dim")
    for position, item in enumerate(ranked, start=1):
        emoji = ENERGY_EMOJIS.get(item.task.energy, "") if item.task.energy else ""
        table.add_row(
            str(position),
            str(item.score),
            str(item.components["opportunity"]),
            str(item.components["energy"]),
            f"{emoji} {item.task.title}".strip(),
            item.task.id[:8],
        )
    console.print(table)
