"""Task scoring: opportunity, energy fit, hybrid ranking and the daily playlist.

Every function here is pure: scores depend only on the task, the energy
profile and the ``now`` passed in, never on the wall clock.

Two effort tables coexist on purpose. Weekly hours use their own mapping
(see weekly_service); the playlist sizing below counts effort *units*.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from tempo_cli.models import PRIORITY_LEVELS, EnergyProfile, Task
from tempo_cli.models.config_models import ScoringConfig

SCORE_MIN = 0
SCORE_MAX = 100
SCORE_BASELINE = 50

PRIORITY_OPPORTUNITY = {"urgent": 40, "high": 30, "medium": 20, "low": 10}
SIZE_OPPORTUNITY = {"S": 10, "M": 5, "L": 3}
TAG_OPPORTUNITY = {"deepwork": 15, "urgent": 10}
OVERDUE_PENALTY = -30
# (upper bound in hours, bonus), checked in order
DUE_WINDOWS = ((24, 20), (48, 15), (72, 10))

ENERGY_TYPE_BONUS = {"deep": 10, "creative": 8, "learning": 7, "admin": 5, "light": 3}

PLAYLIST_SIZE_BONUS = {"S": 5, "M": 3, "L": 1}
EFFORT_UNITS = {"S": 1, "M": 2, "L": 3}
DEFAULT_EFFORT = 2


@dataclass(frozen=True)
class ScoreWeights:
    """Relative weights of the opportunity and energy scores."""

    opportunity: int = 70
    energy: int = 30


DEFAULT_WEIGHTS = ScoreWeights()


@dataclass
class ScoredTask:
    """A task together with its score and the per-factor breakdown."""

    task: Task
    score: int
    components: dict[str, int] = field(default_factory=dict)


def _clamp(score: float) -> int:
    return int(max(SCORE_MIN, min(SCORE_MAX, score)))


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _opportunity_components(task: Task, now: datetime) -> dict[str, int]:
    components = {
        "baseline": SCORE_BASELINE,
        "priority": PRIORITY_OPPORTUNITY[task.priority],
        "due_date": 0,
        "size": SIZE_OPPORTUNITY.get(task.size, 0) if task.size else 0,
        "tags": sum(bonus for tag, bonus in TAG_OPPORTUNITY.items() if tag in task.tags),
    }
    if task.due_date is not None:
        if task.due_date.date() < now.date():
            components["due_date"] = OVERDUE_PENALTY
        else:
            hours_until_due = (task.due_date - now).total_seconds() / 3600
            for limit, bonus in DUE_WINDOWS:
                if hours_until_due < limit:
                    components["due_date"] = bonus
                    break
    return components


def calculate_opportunity_score(task: Task, now: datetime) -> int:
    """Urgency/priority/size based score in [0, 100], baseline 50."""
    return _clamp(sum(_opportunity_components(task, now).values()))


def _energy_components(task: Task, profile: EnergyProfile, now: datetime) -> dict[str, int]:
    hour = now.hour
    components = {"baseline": SCORE_BASELINE, "peak": 0, "dip": 0, "type": 0}

    if profile.peaks:
        in_peak = profile.in_peak(hour)
        if task.energy == "deep":
            components["peak"] = 30 if in_peak else -20
        elif task.energy == "light" and not in_peak:
            components["peak"] = 20

    if profile.dips and profile.in_dip(hour):
        if task.energy in ("admin", "light"):
            components["dip"] = 15
        elif task.energy == "deep":
            components["dip"] = -25

    if task.energy:
        components["type"] = ENERGY_TYPE_BONUS.get(task.energy, 0)
    return components


def calculate_energy_score(task: Task, profile: EnergyProfile, now: datetime) -> int:
    """How well the task's energy type fits the current hour, in [0, 100]."""
    return _clamp(sum(_energy_components(task, profile, now).values()))


def calculate_hybrid_score(
    task: Task,
    profile: EnergyProfile,
    now: datetime,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> int:
    """Weighted average of the opportunity and energy scores, rounded."""
    total_weight = weights.opportunity + weights.energy
    if total_weight <= 0:
        weights, total_weight = DEFAULT_WEIGHTS, 100
    opportunity = calculate_opportunity_score(task, now)
    energy = calculate_energy_score(task, profile, now)
    hybrid = (opportunity * weights.opportunity + energy * weights.energy) / total_weight
    return _clamp(_round_half_up(hybrid))


def _playlist_components(task: Task, now: datetime) -> dict[str, int]:
    components = {
        "priority": PRIORITY_LEVELS[task.priority] * 10,
        "due_date": 0,
        "age": 0,
        "size": PLAYLIST_SIZE_BONUS.get(task.size, 0) if task.size else 0,
    }
    if task.due_date is not None:
        days_until_due = (task.due_date.date() - now.date()).days
        if days_until_due < 0:
            components["due_date"] = 40
        elif days_until_due == 0:
            components["due_date"] = 30
        elif days_until_due <= 3:
            components["due_date"] = 20

    age_days = max(0, math.ceil((now - task.created_at).total_seconds() / 86400))
    components["age"] = min(age_days * 2, 20)
    return components


def calculate_playlist_score(task: Task, now: datetime) -> int:
    """Score used for the "today" list; favours age and raw urgency."""
    return sum(_playlist_components(task, now).values())


def estimate_effort(tasks: Iterable[Task]) -> int:
    """Total effort units (S=1, M=2, L=3, unset=2)."""
    return sum(EFFORT_UNITS.get(task.size, DEFAULT_EFFORT) if task.size else DEFAULT_EFFORT for task in tasks)


def _next_hour(hours: list[int], current: int) -> int | None:
    if not hours:
        return None
    return next((h for h in hours if h > current), hours[0])


def suggest_time_slot(task: Task, profile: EnergyProfile, now: datetime) -> int:
    """Suggest the hour of day (0-23) to work on ``task``.

    Deep work goes to the next peak hour after now, light work to the next
    dip hour; both wrap to the first configured hour. Anything else gets
    the next hour.
    """
    if task.energy == "deep":
        hour = _next_hour(sorted(profile.peak_hours), now.hour)
        if hour is not None:
            return hour
    if task.energy == "light":
        hour = _next_hour(sorted(profile.dip_hours), now.hour)
        if hour is not None:
            return hour
    return (now.hour + 1) % 24


class TaskScoringEngine:
    """Rank the backlog and build the daily playlist."""

    def __init__(
        self,
        profile: EnergyProfile,
        config: ScoringConfig | None = None,
    ):
        """Initialize scoring engine.

        Args:
            profile: The user's energy profile.
            config: Weights and playlist sizing; defaults when omitted.
        """
        self.profile = profile
        self.config = config or ScoringConfig()
        self.weights = ScoreWeights(
            opportunity=self.config.opportunity_weight,
            energy=self.config.energy_weight,
        )

    def score(self, task: Task, now: datetime) -> ScoredTask:
        """Hybrid score with the opportunity and energy sub-scores."""
        return ScoredTask(
            task=task,
            score=calculate_hybrid_score(task, self.profile, now, self.weights),
            components={
                "opportunity": calculate_opportunity_score(task, now),
                "energy": calculate_energy_score(task, self.profile, now),
            },
        )

    def rank_backlog(self, tasks: list[Task], now: datetime) -> list[ScoredTask]:
        """Active tasks by hybrid score, highest first.

        The sort is stable, so equal scores keep the collection order.
        """
        scored = [self.score(task, now) for task in tasks if task.is_active]
        scored.sort(key=lambda item: item.score, reverse=True)
        return scored

    def playlist_size(self, tasks: list[Task]) -> int:
        active = [task for task in tasks if task.is_active]
        if estimate_effort(active) > self.config.playlist_effort_threshold:
            return self.config.playlist_size_busy
        return self.config.playlist_size

    def build_playlist(self, tasks: list[Task], now: datetime) -> list[ScoredTask]:
        """Top active tasks by playlist score.

        Three items when the active backlog is heavy (more than 10 effort
        units by default), five otherwise. Ties keep collection order.
        """
        scored = [
            ScoredTask(
                task=task,
                score=calculate_playlist_score(task, now),
                components=_playlist_components(task, now),
            )
            for task in tasks
            if task.is_active
        ]
        scored.sort(key=lambda item: item.score, reverse=True)
        return scored[: self.playlist_size(tasks)]

    def suggest_time_slot(self, task: Task, now: datetime) -> int:
        return suggest_time_slot(task, self.profile, now)
