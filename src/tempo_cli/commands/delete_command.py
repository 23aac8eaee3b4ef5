"""Command 'delete' of tempo"""

import typer

from tempo_cli.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper
from .dependencies import get_task_service

app = typer.Typer()


@app.command("delete")
@command_wrapper
async def delete_command(
    task_id: str = typer.Argument(..., help="Task ID or unique prefix"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a task for good (prefer archive to keep history)."""
    task_service = get_task_service()
    task = await task_service.resolve_task(task_id)

    if not force:
        confirm = typer.confirm(f"Delete task '{task.title}'?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    await task_service.delete_task(task.id)
    format_success(f"Deleted: {task.title}")
