"""tempo domain models.

This package contains the Pydantic models (and a few dataclasses) that
represent the core domain entities: tasks, daily notes, the energy profile,
the weekly grid and the application configuration.
"""

from .config_models import AppConfig, BehaviorConfig, ScoringConfig
from .core import (
    ENERGY_EMOJIS,
    ENERGY_TYPES,
    PRIORITY_LEVELS,
    TASK_TYPE_EMOJIS,
    DailyNote,
    EnergyType,
    Priority,
    Size,
    Subtask,
    Task,
    TaskCreate,
    TaskFilters,
    TaskType,
    TaskUpdate,
)
from .profile import EnergyCheck, EnergyCheckSession, EnergyProfile, TimeRange
from .weekly import (
    DAY_NAMES,
    WEEK_LEVEL_DAY,
    SuggestionAction,
    WeeklyCell,
    WeeklyData,
    WeeklyStats,
    WeeklySuggestion,
)

__all__ = [
    # Task models
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "TaskFilters",
    "Subtask",
    "TaskType",
    "Priority",
    "Size",
    "EnergyType",
    "PRIORITY_LEVELS",
    "ENERGY_TYPES",
    "ENERGY_EMOJIS",
    "TASK_TYPE_EMOJIS",
    # Notes
    "DailyNote",
    # Profile
    "EnergyProfile",
    "TimeRange",
    "EnergyCheck",
    "EnergyCheckSession",
    # Weekly grid
    "DAY_NAMES",
    "WEEK_LEVEL_DAY",
    "WeeklyCell",
    "WeeklySuggestion",
    "SuggestionAction",
    "WeeklyStats",
    "WeeklyData",
    # Config models
    "AppConfig",
    "ScoringConfig",
    "BehaviorConfig",
]
