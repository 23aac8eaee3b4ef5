"""Productivity insights and the deep-work reality check."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from tempo_cli.models import ENERGY_TYPES, PRIORITY_LEVELS, EnergyProfile, Task
from tempo_cli.services.scoring_service import estimate_effort
from tempo_cli.services.weekly_service import get_week_start

# Hours per size for completed work; unsized tasks count as M.
INSIGHT_SIZE_HOURS = {"S": 1, "M": 2, "L": 4}
TREND_WEEKS = 4
REALITY_CHECK_LIMIT = 3
REALITY_CHECK_SHOWN = 3


def _completed_hours(task: Task) -> int:
    return INSIGHT_SIZE_HOURS[task.size or "M"]


@dataclass
class WeekTrend:
    label: str
    week_start: datetime
    completed: int = 0
    deep_work_hours: int = 0


@dataclass
class ProductivityStats:
    """Completion figures over the non-archived task set."""

    total_tasks: int = 0
    completed_tasks: int = 0
    completion_rate: float = 0.0
    deep_work_hours: int = 0
    deep_work_percentage: float = 0.0
    peak_time_completion_rate: float = 0.0
    energy_distribution: dict[str, int] = field(default_factory=dict)
    priority_completion: dict[str, dict[str, int]] = field(default_factory=dict)
    type_distribution: dict[str, int] = field(default_factory=dict)
    weekly_trend: list[WeekTrend] = field(default_factory=list)


def _weekly_trend(tasks: list[Task], now: datetime) -> list[WeekTrend]:
    current = get_week_start(now)
    trend = []
    for weeks_back in range(TREND_WEEKS - 1, -1, -1):
        start = current - timedelta(weeks=weeks_back)
        end = start + timedelta(weeks=1)
        week = WeekTrend(
            label="W" if weeks_back == 0 else f"W-{weeks_back}", week_start=start
        )
        for task in tasks:
            if not (start <= task.created_at < end) or not task.completed:
                continue
            week.completed += 1
            if task.energy == "deep":
                week.deep_work_hours += _completed_hours(task)
        trend.append(week)
    return trend


def calculate_productivity_stats(
    tasks: Iterable[Task],
    now: datetime,
    profile: EnergyProfile | None = None,
) -> ProductivityStats:
    """Summarise completion, deep work and distributions.

    Archived tasks are ignored everywhere. The weekly trend buckets tasks by
    creation date over the current week and the three before it. A task
    counts as done in peak time when it was completed (or, lacking a
    completion time, created) during one of the profile's peak windows.
    """
    profile = profile or EnergyProfile()
    live = [task for task in tasks if not task.archived]
    done = [task for task in live if task.completed]

    stats = ProductivityStats(total_tasks=len(live), completed_tasks=len(done))
    stats.energy_distribution = {
        energy: sum(1 for task in done if task.energy == energy)
        for energy in ENERGY_TYPES
    }
    stats.priority_completion = {
        priority: {
            "total": sum(1 for task in live if task.priority == priority),
            "completed": sum(1 for task in done if task.priority == priority),
        }
        for priority in PRIORITY_LEVELS
    }
    stats.type_distribution = {
        task_type: sum(1 for task in done if task.type == task_type)
        for task_type in ("task", "question", "idea", "link")
    }
    stats.deep_work_hours = sum(
        _completed_hours(task) for task in done if task.energy == "deep"
    )

    if live:
        stats.completion_rate = len(done) / len(live) * 100
    if done:
        stats.deep_work_percentage = stats.energy_distribution["deep"] / len(done) * 100
        in_peak = sum(
            1 for task in done if profile.in_peak((task.completed_at or task.created_at).hour)
        )
        stats.peak_time_completion_rate = in_peak / len(done) * 100

    stats.weekly_trend = _weekly_trend(live, now)
    return stats


@dataclass
class RealityCheck:
    """Warning raised when too much deep work is still open."""

    total_effort: int
    task_titles: list[str]
    remaining: int = 0

    @property
    def message(self) -> str:
        return (
            f"You have {self.total_effort}h of deep work planned. "
            "That may be too ambitious for one day."
        )


def reality_check(tasks: Iterable[Task]) -> RealityCheck | None:
    """Check the open deep-work load.

    Returns None while the effort of active deep tasks stays at or below 3
    units (S=1, M=2, L=3, unset=2).
    """
    deep = [task for task in tasks if task.is_active and task.energy == "deep"]
    total = estimate_effort(deep)
    if total <= REALITY_CHECK_LIMIT:
        return None
    return RealityCheck(
        total_effort=total,
        task_titles=[task.title for task in deep[:REALITY_CHECK_SHOWN]],
        remaining=max(0, len(deep) - REALITY_CHECK_SHOWN),
    )
