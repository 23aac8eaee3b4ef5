"""Task and note data models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from .profile import EnergyCheck

TaskType = Literal["task", "question", "idea", "link"]
Priority = Literal["low", "medium", "high", "urgent"]
Size = Literal["S", "M", "L"]
EnergyType = Literal["deep", "light", "creative", "admin", "learning"]

PRIORITY_LEVELS: dict[str, int] = {
    "low": 1,
    "medium": 2,
    "high": 3,
    "urgent": 4,
}

ENERGY_TYPES: tuple[str, ...] = ("deep", "light", "creative", "admin", "learning")

ENERGY_EMOJIS: dict[str, str] = {
    "deep": "🧠",
    "light": "🔧",
    "creative": "✨",
    "admin": "💬",
    "learning": "📚",
}

TASK_TYPE_EMOJIS: dict[str, str] = {
    "task": "✅",
    "question": "❓",
    "idea": "💡",
    "link": "🔗",
}


def normalize_tags(tags: list[str]) -> list[str]:
    """Lowercase tags and drop duplicates, keeping first-seen order."""
    seen: list[str] = []
    for tag in tags:
        tag = tag.strip().lower()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


class Subtask(BaseModel):
    """A checklist item inside a task.

    Attributes:
        id: Unique identifier, assigned when the subtask is created
        text: Subtask label
        completed: Whether the item is checked
    """

    id: str
    text: str
    completed: bool = False


class Task(BaseModel):
    """Task model representing a complete task entity.

    Attributes:
        id: Opaque unique identifier, immutable once assigned
        type: Entry kind (task, question, idea, link)
        title: Display title, the parser's cleaned text
        description: Optional detailed description
        content: Optional free-form edits distinct from the title
        tags: Lowercase tags, display order preserved
        priority: Priority level (low < medium < high < urgent)
        size: Rough effort estimate (S, M, L)
        energy: Cognitive energy category needed for the work
        due_date: Optional deadline; compared by calendar date
        created_at: Creation timestamp, used for age scoring
        updated_at: Last update timestamp
        completed: Completion status
        completed_at: When the task was last completed
        archived: Whether the task is archived
        archived_at: Archive timestamp, set iff archived
        subtasks: Ordered checklist items
    """

    id: str
    type: TaskType = "task"
    title: str
    description: str | None = None
    content: str | None = None
    tags: list[str] = Field(default_factory=list)
    priority: Priority = "medium"
    size: Size | None = None
    energy: EnergyType | None = None
    due_date: datetime | None = None
    created_at: datetime
    updated_at: datetime | None = None
    completed: bool = False
    completed_at: datetime | None = None
    archived: bool = False
    archived_at: datetime | None = None
    subtasks: list[Subtask] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, v: list[str]) -> list[str]:
        return normalize_tags(v)

    @model_validator(mode="after")
    def _check_archive_state(self) -> Task:
        if self.archived and self.archived_at is None:
            raise ValueError("archived tasks must carry archived_at")
        if not self.archived and self.archived_at is not None:
            raise ValueError("archived_at is only allowed on archived tasks")
        return self

    @property
    def is_active(self) -> bool:
        """Active tasks are neither completed nor archived."""
        return not self.completed and not self.archived

    @property
    def priority_level(self) -> int:
        return PRIORITY_LEVELS[self.priority]

    @property
    def all_subtasks_completed(self) -> bool:
        """True when there is at least one subtask and every one is checked.

        This only signals that the user may want to complete the whole task;
        it never completes the task by itself.
        """
        return bool(self.subtasks) and all(st.completed for st in self.subtasks)


class TaskCreate(BaseModel):
    """Model for creating a new task.

    Attributes:
        title: Display title (required)
        type: Entry kind
        description: Optional detailed description
        content: Optional free-form content
        tags: Tags (normalised to lowercase)
        priority: Priority level
        size: Effort estimate
        energy: Energy category
        due_date: Optional deadline
        subtasks: Subtask labels, in order
    """

    title: str
    type: TaskType = "task"
    description: str | None = None
    content: str | None = None
    tags: list[str] = Field(default_factory=list)
    priority: Priority = "medium"
    size: Size | None = None
    energy: EnergyType | None = None
    due_date: datetime | None = None
    subtasks: list[str] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, v: list[str]) -> list[str]:
        return normalize_tags(v)


class TaskUpdate(BaseModel):
    """Model for updating an existing task.

    All fields are optional - only fields explicitly set are applied, so
    passing ``None`` clears a value (e.g. ``archived_at`` on unarchive).
    """

    type: TaskType | None = None
    title: str | None = None
    description: str | None = None
    content: str | None = None
    tags: list[str] | None = None
    priority: Priority | None = None
    size: Size | None = None
    energy: EnergyType | None = None
    due_date: datetime | None = None
    completed: bool | None = None
    completed_at: datetime | None = None
    archived: bool | None = None
    archived_at: datetime | None = None
    subtasks: list[Subtask] | None = None

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, v: list[str] | None) -> list[str] | None:
        return normalize_tags(v) if v is not None else None


class TaskFilters(BaseModel):
    """Filters for querying tasks.

    Attributes:
        include_completed: Also return completed tasks
        include_archived: Also return archived tasks
        energy: Only tasks of this energy category
        tag: Only tasks carrying this tag
    """

    include_completed: bool = True
    include_archived: bool = False
    energy: EnergyType | None = None
    tag: str | None = None

    def matches(self, task: Task) -> bool:
        if not self.include_completed and task.completed:
            return False
        if not self.include_archived and task.archived:
            return False
        if self.energy is not None and task.energy != self.energy:
            return False
        if self.tag is not None and self.tag.lower() not in task.tags:
            return False
        return True


class DailyNote(BaseModel):
    """Daily note holding the day's intention, free notes and energy checks."""

    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")
    intention: str | None = None
    notebook: str | None = None
    energy_checks: list[EnergyCheck] = Field(default_factory=list)
