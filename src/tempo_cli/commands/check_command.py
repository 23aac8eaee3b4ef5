"""Command 'check' of tempo - tick a subtask."""

import typer

from tempo_cli.utils import exit_codes
from tempo_cli.utils.ui.console import get_console
from tempo_cli.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper
from .dependencies import get_task_service

app = typer.Typer()
console = get_console()


@app.command("check")
@command_wrapper
async def check_command(
    task_id: str = typer.Argument(..., help="Task ID or unique prefix"),
    subtask: str = typer.Argument(..., help="Subtask number (1-based) or ID"),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Complete the task without asking once all subtasks are done"
    ),
) -> None:
    """Toggle a subtask; offers to complete the task when the checklist is done."""
    task_service = get_task_service()
    task = await task_service.resolve_task(task_id)

    subtask_id = subtask
    if subtask.isdigit():
        position = int(subtask) - 1
        if not 0 <= position < len(task.subtasks):
            raise AppError(
                f"Task has {len(task.subtasks)} subtask(s), no #{subtask}",
                exit_codes.ERROR_NOT_FOUND,
            )
        subtask_id = task.subtasks[position].id

    try:
        task, all_done = await task_service.toggle_subtask(task.id, subtask_id)
    except KeyError as e:
        raise AppError(f"Subtask not found: {subtask}", exit_codes.ERROR_NOT_FOUND) from e

    for position, item in enumerate(task.subtasks, start=1):
        mark = "[green]☑[/green]" if item.completed else "☐"
        console.print(f"  {mark} {position}. {item.text}")

    if all_done and not task.completed:
        if yes or typer.confirm("All subtasks are done. Complete the task?", default=True):
            await task_service.complete_task(task.id)
            format_success(f"✓ Completed: {task.title}")
