"""Command 'complete' of tempo"""

from typing import Annotated

import typer

from tempo_cli.utils.ui.console import get_console
from tempo_cli.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper
from .dependencies import get_task_service

app = typer.Typer()
console = get_console()


@app.command("complete")
@command_wrapper
async def complete_command(
    task_ids: Annotated[
        list[str], typer.Argument(help="Task ID(s) or unique prefixes")
    ],
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format")
    ] = "pretty",
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
) -> None:
    """Mark one or more tasks as completed."""
    if json_opt:
        output = "json"

    task_service = get_task_service()
    completed = []
    for task_id in task_ids:
        task = await task_service.resolve_task(task_id)
        completed.append(await task_service.complete_task(task.id))

    if output not in ("table", "pretty"):
        format_output([task.model_dump(mode="json") for task in completed], output)
        return

    for task in completed:
        title = task.title if len(task.title) <= 60 else task.title[:57] + "..."
        format_success(f"✓ Completed: {title}")
    if len(task_ids) == 1:
        console.print(f"[dim]To undo: tempo reopen {task_ids[0]}[/dim]")
