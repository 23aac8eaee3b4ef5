"""Command 'today' of tempo"""

import json

import typer
from rich.panel import Panel

from tempo_cli.services.insights_service import reality_check
from tempo_cli.utils.ui.console import get_console
from tempo_cli.utils.ui.formatters import format_task_item

from .decorators import command_wrapper
from .dependencies import get_app_config, get_now, get_scoring_engine, get_task_service

app = typer.Typer()
console = get_console()


@app.command("today")
@command_wrapper
async def today_command(
    json_opt: bool = typer.Option(False, "--json", help="Output as JSON"),
    compact: bool = typer.Option(False, "--compact", help="Compact output"),
) -> None:
    """Show today's playlist: the few tasks worth doing now."""
    config = get_app_config()
    now = get_now()
    task_service = get_task_service()

    if config.settings.auto_archive:
        await task_service.auto_archive(config.settings.auto_archive_days)

    tasks = await task_service.list_tasks(include_completed=False)
    engine = get_scoring_engine(config)
    playlist = engine.build_playlist(tasks, now)
    check = reality_check(tasks) if config.settings.enable_reality_check else None

    if json_opt:
        payload = {
            "tasks": [
                {
                    **item.task.model_dump(mode="json"),
                    "score": item.score,
                    "suggested_hour": engine.suggest_time_slot(item.task, now),
                }
                for item in playlist
            ],
            "reality_check": (
                {
                    "total_effort": check.total_effort,
                    "tasks": check.task_titles,
                    "remaining": check.remaining,
                }
                if check
                else None
            ),
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    if not playlist:
        console.print("[green]🎉 No tasks in your playlist. Enjoy your day![/green]")
        return

    console.print(
        f"[bold cyan]🎵 Today's playlist[/bold cyan] "
        f"[dim]({len(playlist)} of {len(tasks)} active)[/dim]"
    )
    console.print()
    for item in playlist:
        format_task_item(item.task.model_dump(mode="json"), compact=compact, score=item.score)
        hour = engine.suggest_time_slot(item.task, now)
        console.print(f"   [dim]⏰ best around {hour:02d}:00[/dim]")

    if check is not None:
        lines = [check.message, ""]
        lines += [f"• {title}" for title in check.task_titles]
        if check.remaining:
            lines.append(f"[dim]+ {check.remaining} more[/dim]")
        console.print()
        console.print(
            Panel("\n".join(lines), title="Reality check", border_style="yellow", padding=(0, 1))
        )
