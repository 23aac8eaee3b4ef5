"""Repository abstraction layer for tempo.

This module defines the abstract base classes (interfaces) for the storage
collaborators, following the Ports & Adapters pattern. The scoring, weekly
and search code never talk to a repository; services pass data between them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from tempo_cli.models import DailyNote, Task, TaskCreate, TaskFilters, TaskUpdate


class TaskNotFoundError(LookupError):
    """Raised when a task id does not exist."""

    def __init__(self, task_id: str):
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class TaskRepository(ABC):
    """Abstract base class for task persistence operations."""

    @abstractmethod
    async def list_all(self, filters: TaskFilters | None = None) -> list[Task]:
        """List tasks in creation order.

        Args:
            filters: TaskFilters object specifying filter criteria

        Returns:
            List of Task objects matching the filters
        """
        raise NotImplementedError(
            "TaskRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    async def get(self, task_id: str) -> Task | None:
        """Get a specific task by ID, or None when it does not exist."""
        raise NotImplementedError("TaskRepository.get() must be implemented by adapter")

    @abstractmethod
    async def add(self, task_data: TaskCreate) -> Task:
        """Create a new task.

        Args:
            task_data: TaskCreate object with task details

        Returns:
            Created Task object with generated ID and timestamps
        """
        raise NotImplementedError("TaskRepository.add() must be implemented by adapter")

    @abstractmethod
    async def update(self, task_id: str, updates: TaskUpdate) -> Task:
        """Apply the fields explicitly set on ``updates``.

        Raises:
            TaskNotFoundError: If task does not exist
        """
        raise NotImplementedError(
            "TaskRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    async def delete(self, task_id: str) -> bool:
        """Delete a task.

        Returns:
            True if a task was deleted
        """
        raise NotImplementedError(
            "TaskRepository.delete() must be implemented by adapter"
        )

    @abstractmethod
    async def upsert(self, task: Task) -> Task:
        """Store a complete task as is, keeping its id (used by import)."""
        raise NotImplementedError(
            "TaskRepository.upsert() must be implemented by adapter"
        )


class NoteRepository(ABC):
    """Abstract base class for daily note persistence."""

    @abstractmethod
    async def list_all(self) -> list[DailyNote]:
        """All notes, oldest date first."""
        raise NotImplementedError(
            "NoteRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    async def get(self, date: str) -> DailyNote | None:
        """Get the note for ``date`` (YYYY-MM-DD), or None."""
        raise NotImplementedError("NoteRepository.get() must be implemented by adapter")

    @abstractmethod
    async def save(self, note: DailyNote) -> DailyNote:
        """Insert or replace the note for ``note.date``."""
        raise NotImplementedError("NoteRepository.save() must be implemented by adapter")

    @abstractmethod
    async def delete(self, date: str) -> bool:
        raise NotImplementedError(
            "NoteRepository.delete() must be implemented by adapter"
        )
