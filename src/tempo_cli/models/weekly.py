"""Weekly energy grid models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from .core import EnergyType, Task

SuggestionType = Literal["balance", "overload", "optimize", "block"]

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# Marks a suggestion that applies to the whole week.
WEEK_LEVEL_DAY = -1


class WeeklyCell(BaseModel):
    """Aggregated load for one (day, energy type) pair.

    Attributes:
        day: Offset from the week start (0-6)
        energy_type: Energy category of the cell
        tasks: Tasks due that day with that energy
        total_hours: Estimated hours for those tasks
        intensity: Heat-map value, 0-100
    """

    day: int = Field(..., ge=0, le=6)
    energy_type: EnergyType
    tasks: list[Task] = Field(default_factory=list)
    total_hours: float = 0.0
    intensity: float = 0.0


class SuggestionAction(BaseModel):
    """Structured follow-up attached to a suggestion."""

    type: Literal["create-task", "reschedule", "block-time"] = "block-time"
    energy_type: EnergyType = "deep"
    suggested_hours: float = 2


class WeeklySuggestion(BaseModel):
    """A heuristic hint derived from the weekly grid."""

    id: str
    type: SuggestionType
    day: int
    message: str
    action: SuggestionAction | None = None


class WeeklyStats(BaseModel):
    """Summary numbers for a week."""

    total_tasks: int = 0
    completed_tasks: int = 0
    energy_hours: dict[str, float] = Field(default_factory=dict)
    total_hours: float = 0.0
    most_productive_day: int | None = None
    least_productive_day: int | None = None
    balance_score: int = 0

    @property
    def deep_work_hours(self) -> float:
        return self.energy_hours.get("deep", 0.0)


class WeeklyData(BaseModel):
    """Grid, suggestions and stats for one week."""

    week_start: datetime
    cells: list[WeeklyCell]
    suggestions: list[WeeklySuggestion]
    stats: WeeklyStats

    def cell(self, day: int, energy_type: str) -> WeeklyCell:
        for cell in self.cells:
            if cell.day == day and cell.energy_type == energy_type:
                return cell
        raise KeyError(f"no cell for day {day} / {energy_type}")

    def day_hours(self, day: int) -> float:
        return sum(cell.total_hours for cell in self.cells if cell.day == day)
