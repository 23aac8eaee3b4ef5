"""Command 'reopen' of tempo"""

from typing import Annotated

import typer

from tempo_cli.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper
from .dependencies import get_task_service

app = typer.Typer()


@app.command("reopen")
@command_wrapper
async def reopen_command(
    task_id: Annotated[str, typer.Argument(help="Task ID or unique prefix")],
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format")
    ] = "pretty",
) -> None:
    """Reopen a completed task."""
    task_service = get_task_service()
    task = await task_service.resolve_task(task_id)
    task = await task_service.reopen_task(task.id)

    if output in ("table", "pretty"):
        format_success(f"Reopened: {task.title}")
    else:
        format_output(task.model_dump(mode="json"), output)
