"""Weekly energy grid: 7 days x 5 energy types, stats and suggestions."""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import date, datetime, timedelta

from tempo_cli.models import (
    ENERGY_TYPES,
    EnergyProfile,
    SuggestionAction,
    Task,
    WeeklyCell,
    WeeklyData,
    WeeklyStats,
    WeeklySuggestion,
)
from tempo_cli.models.weekly import DAY_NAMES, WEEK_LEVEL_DAY

# Hours per size for planning purposes; not the effort units used by scoring.
SIZE_HOURS = {"S": 0.5, "M": 2.0, "L": 4.0}
UNSIZED_HOURS = 1.0
FULL_DAY_HOURS = 8.0

OVERLOAD_HOURS = 10
ADMIN_LIMIT_HOURS = 3
MIN_DEEP_HOURS = 2
MIN_DEEP_DAYS = 3
DEEP_BLOCK_HOURS = 2


def task_hours(task: Task) -> float:
    return SIZE_HOURS.get(task.size, UNSIZED_HOURS) if task.size else UNSIZED_HOURS


def get_week_start(now: datetime, first_weekday: int = 0) -> datetime:
    """Midnight of the first day of the week containing ``now``.

    Args:
        now: Reference moment
        first_weekday: 0 for Monday (default) ... 6 for Sunday
    """
    offset = (now.weekday() - first_weekday) % 7
    start = now - timedelta(days=offset)
    return start.replace(hour=0, minute=0, second=0, microsecond=0)


def _day_index(task: Task, week_start: date) -> int | None:
    if task.due_date is None:
        return None
    offset = (task.due_date.date() - week_start).days
    return offset if 0 <= offset < 7 else None


def _build_cells(tasks: Iterable[Task], week_start: date) -> list[WeeklyCell]:
    grid: dict[tuple[int, str], list[Task]] = {
        (day, energy): [] for day in range(7) for energy in ENERGY_TYPES
    }
    for task in tasks:
        if task.archived or task.energy is None:
            continue
        day = _day_index(task, week_start)
        if day is not None:
            grid[(day, task.energy)].append(task)

    cells = []
    for (day, energy), day_tasks in grid.items():
        total_hours = sum(task_hours(task) for task in day_tasks)
        cells.append(
            WeeklyCell(
                day=day,
                energy_type=energy,
                tasks=day_tasks,
                total_hours=total_hours,
                intensity=min(100.0, total_hours / FULL_DAY_HOURS * 100),
            )
        )
    return cells


def _hours_by_day(cells: list[WeeklyCell]) -> list[float]:
    hours = [0.0] * 7
    for cell in cells:
        hours[cell.day] += cell.total_hours
    return hours


def _hours_of(cells: list[WeeklyCell], day: int, energy: str) -> float:
    return next(
        (c.total_hours for c in cells if c.day == day and c.energy_type == energy), 0.0
    )


def _deep_block() -> SuggestionAction:
    return SuggestionAction(
        type="block-time", energy_type="deep", suggested_hours=DEEP_BLOCK_HOURS
    )


def generate_suggestions(
    cells: list[WeeklyCell],
    week_start: date,
    profile: EnergyProfile | None = None,
) -> list[WeeklySuggestion]:
    """Heuristic hints for the grid, per day first, then for the week.

    A week with nothing planned yields no suggestions at all.
    """
    day_hours = _hours_by_day(cells)
    if sum(day_hours) == 0:
        return []

    suggestions: list[WeeklySuggestion] = []
    for day in range(7):
        if day_hours[day] > OVERLOAD_HOURS:
            suggestions.append(
                WeeklySuggestion(
                    id=f"overload-{day}",
                    type="overload",
                    day=day,
                    message=(
                        f"Overload on {DAY_NAMES[(week_start.weekday() + day) % 7]}: "
                        f"{day_hours[day]:.1f}h planned. Consider moving some tasks."
                    ),
                )
            )

        admin_hours = _hours_of(cells, day, "admin")
        if admin_hours > ADMIN_LIMIT_HOURS:
            suggestions.append(
                WeeklySuggestion(
                    id=f"balance-admin-{day}",
                    type="balance",
                    day=day,
                    message=(
                        f"Too much admin work ({admin_hours:.1f}h). "
                        "Block time for deep work."
                    ),
                    action=_deep_block(),
                )
            )

        weekday = (week_start.weekday() + day) % 7
        if profile is not None and weekday not in profile.work_days:
            continue
        if _hours_of(cells, day, "deep") < MIN_DEEP_HOURS:
            suggestions.append(
                WeeklySuggestion(
                    id=f"optimize-deep-{day}",
                    type="optimize",
                    day=day,
                    message="Little deep work planned. Block 2-3h in the morning for important tasks.",
                    action=_deep_block(),
                )
            )

    deep_days = sum(
        1 for c in cells if c.energy_type == "deep" and c.total_hours > 0
    )
    if deep_days < MIN_DEEP_DAYS:
        suggestions.append(
            WeeklySuggestion(
                id="balance-week",
                type="balance",
                day=WEEK_LEVEL_DAY,
                message=(
                    f"Only {deep_days} day(s) with deep work. "
                    "Aim for at least 3-4 days for a balanced week."
                ),
            )
        )
    return suggestions


def calculate_stats(cells: list[WeeklyCell]) -> WeeklyStats:
    energy_hours = {energy: 0.0 for energy in ENERGY_TYPES}
    for cell in cells:
        energy_hours[cell.energy_type] += cell.total_hours
    total_hours = sum(energy_hours.values())

    day_hours = _hours_by_day(cells)
    most_productive = least_productive = None
    balance_score = 0
    if total_hours > 0:
        # index() keeps the earliest day on ties
        most_productive = day_hours.index(max(day_hours))
        least_productive = day_hours.index(min(h for h in day_hours if h > 0))
        ideal = total_hours / len(ENERGY_TYPES)
        spread = sum(abs(hours - ideal) for hours in energy_hours.values())
        balance_score = max(0, math.floor(100 - spread / total_hours * 100 + 0.5))

    unique: dict[str, Task] = {}
    for cell in cells:
        for task in cell.tasks:
            unique.setdefault(task.id, task)

    return WeeklyStats(
        total_tasks=len(unique),
        completed_tasks=sum(1 for task in unique.values() if task.completed),
        energy_hours=energy_hours,
        total_hours=total_hours,
        most_productive_day=most_productive,
        least_productive_day=least_productive,
        balance_score=balance_score,
    )


def generate_weekly_data(
    tasks: Iterable[Task],
    week_start: datetime,
    profile: EnergyProfile | None = None,
) -> WeeklyData:
    """Aggregate ``tasks`` into the week starting at ``week_start``.

    Tasks count on the calendar day of their due date. Archived tasks and
    tasks without a due date or energy type are left out; completed ones
    stay since they were planned for that week.
    """
    start = week_start.date()
    cells = _build_cells(tasks, start)
    return WeeklyData(
        week_start=week_start,
        cells=cells,
        suggestions=generate_suggestions(cells, start, profile),
        stats=calculate_stats(cells),
    )
