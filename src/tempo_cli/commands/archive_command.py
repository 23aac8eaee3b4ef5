"""Commands 'archive' and 'unarchive' of tempo"""

import typer

from tempo_cli.utils import exit_codes
from tempo_cli.utils.ui.formatters import format_info, format_success

from .decorators import AppError, command_wrapper
from .dependencies import get_app_config, get_task_service

app = typer.Typer()


@app.command("archive")
@command_wrapper
async def archive_command(
    task_id: str | None = typer.Argument(None, help="Task ID or unique prefix"),
    completed: bool = typer.Option(
        False,
        "--completed",
        help="Archive every task completed more than auto_archive_days ago",
    ),
) -> None:
    """Archive a task, or sweep old completed tasks with --completed."""
    task_service = get_task_service()

    if completed:
        days = get_app_config().settings.auto_archive_days
        archived = await task_service.auto_archive(days)
        if archived:
            format_success(f"Archived {len(archived)} task(s) completed over {days} days ago")
        else:
            format_info("Nothing to archive")
        return

    if task_id is None:
        raise AppError("Give a task ID or use --completed", exit_codes.ERROR_INVALID_ARGS)

    task = await task_service.resolve_task(task_id)
    task = await task_service.archive_task(task.id)
    format_success(f"Archived: {task.title}")


@app.command("unarchive")
@command_wrapper
async def unarchive_command(
    task_id: str = typer.Argument(..., help="Task ID or unique prefix"),
) -> None:
    """Bring an archived task back."""
    task_service = get_task_service()
    task = await task_service.resolve_task(task_id)
    task = await task_service.unarchive_task(task.id)
    format_success(f"Unarchived: {task.title}")
