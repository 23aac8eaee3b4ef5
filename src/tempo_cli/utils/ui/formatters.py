"""Output formatters for different formats."""

import json
from datetime import datetime
from typing import Any

import yaml
from rich.table import Table
from rich.text import Text

from tempo_cli.models import ENERGY_EMOJIS, PRIORITY_LEVELS, TASK_TYPE_EMOJIS

from .console import get_console

console = get_console()


def calculate_unique_prefixes(task_ids: list[str], minimum: int = 4) -> dict[str, int]:
    """
    Calculate the shortest unique prefix length for each task ID.

    Args:
        task_ids: List of full task IDs
        minimum: Never show fewer characters than this

    Returns:
        Dict mapping task_id -> required prefix length
    """
    result = {}
    for task_id in task_ids:
        for length in range(minimum, len(task_id) + 1):
            prefix = task_id[:length]
            if not any(tid != task_id and tid.startswith(prefix) for tid in task_ids):
                result[task_id] = length
                break
        else:
            result[task_id] = len(task_id)
    return result


def format_output(data: Any, output_format: str = "pretty", compact: bool = False) -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True))
    elif output_format == "table":
        format_table(data)
    elif output_format == "quiet":
        format_quiet(data)
    else:
        format_pretty(data, compact=compact)


def format_table(data: Any) -> None:
    """Format a list of dicts (or one dict) as a table."""
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return
    items = data if isinstance(data, list) else [data]
    if not isinstance(items[0], dict):
        for item in items:
            console.print(item)
        return

    columns = list(items[0].keys())
    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())
    for item in items:
        table.add_row(*(_cell(item.get(col)) for col in columns))
    console.print(table)


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return ", ".join(str(v.get("text", v)) if isinstance(v, dict) else str(v) for v in value)
    if value is None:
        return "-"
    return str(value)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


# ============================================================================
# Pretty Format Implementation
# ============================================================================

PRIORITY_ICONS = {
    "urgent": "🔴",
    "high": "🟠",
    "medium": "🟡",
    "low": "🟢",
}

PRIORITY_COLORS = {
    "urgent": "bold red",
    "high": "bold orange3",
    "medium": "yellow",
    "low": "green",
}

STATUS_ICONS = {
    "open": "⬜",
    "completed": "☑️",
    "archived": "🗃️",
}


def format_pretty(data: Any, compact: bool = False) -> None:
    """Format task dumps in pretty format with colors and icons."""
    if not data:
        console.print("[yellow]No items found[/yellow]")
        return
    if isinstance(data, dict):
        data = [data]
    if isinstance(data[0], dict) and "title" in data[0]:
        format_tasks_pretty(data, compact)
    else:
        for item in data:
            console.print(item)


def format_tasks_pretty(tasks: list[dict], compact: bool = False) -> None:
    active = [t for t in tasks if not t.get("completed") and not t.get("archived")]

    header = Text()
    header.append("📋 Tasks ", style="bold cyan")
    header.append(f"({len(active)} active, {len(tasks)} shown)", style="dim")
    console.print(header)
    console.print()

    prefixes = calculate_unique_prefixes([t["id"] for t in tasks if t.get("id")])
    for task in tasks:
        format_task_item(task, compact=compact, prefix_map=prefixes)


def format_task_item(
    task: dict,
    compact: bool = False,
    indent: str = "",
    prefix_map: dict[str, int] | None = None,
    score: int | None = None,
) -> None:
    """Format a single task item."""
    if task.get("archived"):
        status_icon = STATUS_ICONS["archived"]
    elif task.get("completed"):
        status_icon = STATUS_ICONS["completed"]
    else:
        status_icon = STATUS_ICONS["open"]

    priority = task.get("priority", "medium")
    title = Text(task.get("title", "Untitled"))
    if task.get("completed") or task.get("archived"):
        title.stylize("dim")
    elif PRIORITY_LEVELS.get(priority, 2) >= 3:
        title.stylize("bold")

    line = Text(f"{indent}{status_icon} ")
    if score is not None:
        line.append(f"{score:>3} ", style="bold magenta")
    line.append(TASK_TYPE_EMOJIS.get(task.get("type", "task"), "") + " ")
    line.append_text(title)
    if task.get("energy"):
        line.append(f" {ENERGY_EMOJIS[task['energy']]}")
    for tag in task.get("tags", [])[: 3 if compact else None]:
        line.append(f" #{tag}", style="blue")
    console.print(line)
    if compact:
        return

    meta: list[tuple[str, str]] = [
        (f"{PRIORITY_ICONS.get(priority, '')} {priority}", PRIORITY_COLORS.get(priority, ""))
    ]
    if task.get("size"):
        meta.append((f"@{task['size']}", "cyan"))
    if task.get("due_date"):
        meta.append((f"📅 {format_due_date(task['due_date'])}", "cyan"))
    subtasks = task.get("subtasks") or []
    if subtasks:
        done = sum(1 for st in subtasks if st.get("completed"))
        meta.append((f"{done}/{len(subtasks)} subtasks", "magenta"))
    if task.get("id"):
        length = (prefix_map or {}).get(task["id"], 8)
        meta.append((f"#{task['id'][:length]}", "dim"))

    meta_line = Text()
    meta_line.append(f"{indent}   └─ ", style="dim")
    for i, (text, style) in enumerate(meta):
        if i > 0:
            meta_line.append(" • ", style="dim")
        meta_line.append(text, style=style)
    console.print(meta_line)


def format_quiet(data: Any) -> None:
    """Format output in quiet mode (IDs only)."""
    items = data if isinstance(data, list) else [data]
    for item in items:
        if isinstance(item, dict) and "id" in item:
            print(item["id"])


# ============================================================================
# Helper Functions
# ============================================================================


def format_due_date(value: str | datetime) -> str:
    """Format a due date as ``DD/MM Day`` (with the year when not this year)."""
    try:
        date = value if isinstance(value, datetime) else datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return str(value) if value else ""

    day_str = date.strftime("%d/%m")
    if date.year != datetime.now().year:
        day_str = date.strftime("%d/%m/%Y")
    return f"{day_str} {date.strftime('%a')}"


def get_progress_bar(percentage: float) -> str:
    """Get a progress bar representation."""
    filled = int(percentage / 10)
    empty = 10 - filled
    return "▓" * filled + "░" * empty


def get_intensity_color(percentage: float) -> str:
    """Heat-map color for a weekly cell."""
    if percentage >= 75:
        return "red"
    if percentage >= 40:
        return "yellow"
    if percentage > 0:
        return "green"
    return "dim"
