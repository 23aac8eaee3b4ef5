"""Command 'list' of tempo"""

import typer

from tempo_cli.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .dependencies import get_app_config, get_task_service

app = typer.Typer()


@app.command("list")
@command_wrapper
async def list_tasks(
    show_all: bool = typer.Option(False, "--all", "-a", help="Include completed tasks"),
    archived: bool = typer.Option(False, "--archived", help="Include archived tasks"),
    energy: str | None = typer.Option(None, "--energy", "-e", help="Filter by energy type"),
    tag: str | None = typer.Option(None, "--tag", "-t", help="Filter by tag"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
    json_opt: bool = typer.Option(False, "--json", help="Output as JSON"),
    compact: bool = typer.Option(False, "--compact", help="Compact output"),
) -> None:
    """List tasks (active only unless --all)."""
    settings = get_app_config().output
    output = "json" if json_opt else (output or settings.format)

    tasks = await get_task_service().list_tasks(
        include_completed=show_all,
        include_archived=archived,
        energy=energy,
        tag=tag,
    )
    format_output(
        [task.model_dump(mode="json") for task in tasks],
        output,
        compact=compact or settings.compact,
    )
