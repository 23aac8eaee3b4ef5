"""Command 'search' of tempo"""

import json

import typer

from tempo_cli.services.search_service import NoteSearchIndex, TaskSearchIndex
from tempo_cli.utils.ui.console import get_console
from tempo_cli.utils.ui.formatters import format_task_item, format_warning

from .decorators import command_wrapper
from .dependencies import get_app_config, get_note_service, get_task_service

app = typer.Typer()
console = get_console()


@app.command("search")
@command_wrapper
async def search_command(
    query: str = typer.Argument(..., help="Words to look for (typos are tolerated)"),
    notes: bool = typer.Option(False, "--notes", help="Search daily notes instead of tasks"),
    limit: int | None = typer.Option(None, "--limit", "-n", min=1, help="Maximum results"),
    json_opt: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Full-text search over tasks (or daily notes).

    Examples:
      tempo search reunion
      tempo search "rapport client" --limit 5
      tempo search calme --notes
    """
    limit = limit or get_app_config().search.default_limit

    if notes:
        index = NoteSearchIndex()
        index.build_index(await get_note_service().list_notes())
    else:
        index = TaskSearchIndex()
        index.build_index(await get_task_service().list_tasks(include_archived=True))

    if not index.available:
        format_warning(f"Search is unavailable: {index.degraded_reason}")
        return

    results = index.search(query)[:limit]

    if json_opt:
        print(
            json.dumps(
                [
                    {
                        "item": result.item.model_dump(mode="json"),
                        "score": round(result.score, 4),
                        "fields": result.fields,
                    }
                    for result in results
                ],
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    if not results:
        console.print(f"[yellow]No results for '{query}'[/yellow]")
        return

    console.print(f"[bold cyan]🔎 {len(results)} result(s) for '{query}'[/bold cyan]")
    console.print()
    for result in results:
        if notes:
            note = result.item
            console.print(f"[bold]{note.date}[/bold] [dim]({', '.join(result.fields)})[/dim]")
            if note.intention:
                console.print(f"   🎯 {note.intention}")
            if note.notebook:
                first_line = note.notebook.splitlines()[0]
                console.print(f"   [dim]{first_line}[/dim]")
        else:
            format_task_item(result.item.model_dump(mode="json"), compact=True)
