"""Command 'add' of tempo"""

import sys

import typer

from tempo_cli.models import ENERGY_TYPES
from tempo_cli.utils.ui.console import get_console
from tempo_cli.utils.ui.formatters import format_info, format_output, format_warning

from .decorators import AppError, command_wrapper
from .dependencies import get_task_service

app = typer.Typer()
console = get_console()


@app.command("add")
@command_wrapper
async def add(
    text: str | None = typer.Argument(None, help="Natural language task entry"),
    energy: str | None = typer.Option(
        None, "--energy", "-e", help=f"Energy type ({', '.join(ENERGY_TYPES)})"
    ),
    priority: str | None = typer.Option(None, "--priority", "-p", help="low/medium/high/urgent"),
    size: str | None = typer.Option(None, "--size", "-s", help="S/M/L"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """
    Quick add a task using natural language.

    Examples:
      tempo add "Réunion Jean demain #ProjetX !! @S 🧠"
      tempo add "Write the report next week #work @L"

    Syntax:
      ! / !! / !!! - low / high / urgent priority
      @S @M @L     - size
      #tag         - tag
      🧠 ✨ 📚 💬 🔧 - deep / creative / learning / admin / light energy
      demain, dans 3 jours, tomorrow, next week... - due date
    """
    if json_opt:
        output = "json"

    text = text.strip() if text else ""
    if not text and not sys.stdin.isatty():
        text = sys.stdin.read().strip()
    if not text:
        raise AppError("Nothing to add: pass the task text as an argument", 2)

    task_service = get_task_service()
    task, parsed = await task_service.create_from_text(text)

    overrides = {
        key: value
        for key, value in (("energy", energy), ("priority", priority), ("size", size.upper() if size else None))
        if value is not None
    }
    if overrides:
        task = await task_service.update_task(task.id, **overrides)

    format_output(task.model_dump(mode="json"), output)
    if output == "pretty" and parsed.needs_review and not overrides:
        format_warning(
            f"Parsed with low confidence ({parsed.confidence:.2f}). "
            "Check the fields above, or pass --energy/--priority/--size."
        )
        if task.energy is None:
            format_info(f"Energy types: {', '.join(ENERGY_TYPES)}")
