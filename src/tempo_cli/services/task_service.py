"""Task service - Business logic for task operations.

This service layer sits between commands and repositories. It owns the task
lifecycle (complete, reopen, archive) and stamps every transition with the
injected clock, never the wall clock directly.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from tempo_cli.models import Task, TaskCreate, TaskFilters, TaskUpdate
from tempo_cli.repositories import TaskNotFoundError, TaskRepository
from tempo_cli.utils.logger import get_logger
from tempo_cli.utils.nlp_parser import ParseResult, TaskParser

logger = get_logger(__name__)


class TaskService:
    """Service for task business logic."""

    def __init__(
        self,
        task_repository: TaskRepository,
        clock: Callable[[], datetime] | None = None,
        parser: TaskParser | None = None,
    ):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
            clock: Source of "now"; datetime.now by default
            parser: Text parser used by create_from_text
        """
        self.repository = task_repository
        self.clock = clock or datetime.now
        self.parser = parser or TaskParser()

    async def create_from_text(self, text: str) -> tuple[Task, ParseResult]:
        """Parse a free-form entry and store the resulting task.

        Returns:
            The created task and the parse result, so the caller can look at
            ``needs_review`` and offer corrections.
        """
        parsed = self.parser.parse(text, self.clock())
        task = await self.repository.add(parsed.to_task_create())
        logger.info(
            "Created task %s from text (confidence %.2f)", task.id, parsed.confidence
        )
        return task, parsed

    async def add_task(self, task_data: TaskCreate) -> Task:
        return await self.repository.add(task_data)

    async def get_task(self, task_id: str) -> Task:
        """Get a specific task by ID.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        task = await self.repository.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def resolve_task(self, id_or_prefix: str) -> Task:
        """Find a task by full id or by a unique id prefix."""
        task = await self.repository.get(id_or_prefix)
        if task is not None:
            return task
        candidates = [
            t
            for t in await self.repository.list_all(
                TaskFilters(include_completed=True, include_archived=True)
            )
            if t.id.startswith(id_or_prefix)
        ]
        if len(candidates) != 1:
            raise TaskNotFoundError(id_or_prefix)
        return candidates[0]

    async def list_tasks(
        self,
        *,
        include_completed: bool = True,
        include_archived: bool = False,
        energy: str | None = None,
        tag: str | None = None,
    ) -> list[Task]:
        """List tasks in creation order.

        Args:
            include_completed: Also return completed tasks
            include_archived: Also return archived tasks
            energy: Only tasks of this energy category
            tag: Only tasks carrying this tag
        """
        filters = TaskFilters(
            include_completed=include_completed,
            include_archived=include_archived,
            energy=energy,
            tag=tag,
        )
        return await self.repository.list_all(filters)

    async def update_task(self, task_id: str, **fields: Any) -> Task:
        """Update the given fields only; pass ``None`` to clear one."""
        return await self.repository.update(task_id, TaskUpdate(**fields))

    async def complete_task(self, task_id: str) -> Task:
        """Mark a task as completed and stamp completed_at."""
        return await self.update_task(task_id, completed=True, completed_at=self.clock())

    async def reopen_task(self, task_id: str) -> Task:
        """Reopen a completed task."""
        return await self.update_task(task_id, completed=False, completed_at=None)

    async def archive_task(self, task_id: str) -> Task:
        return await self.update_task(task_id, archived=True, archived_at=self.clock())

    async def unarchive_task(self, task_id: str) -> Task:
        return await self.update_task(task_id, archived=False, archived_at=None)

    async def toggle_subtask(self, task_id: str, subtask_id: str) -> tuple[Task, bool]:
        """Flip one subtask.

        Returns:
            The updated task and whether every subtask is now done. The task
            itself is never completed here; the caller may offer to.

        Raises:
            TaskNotFoundError: If the task does not exist
            KeyError: If the task has no such subtask
        """
        task = await self.get_task(task_id)
        subtasks = [st.model_copy() for st in task.subtasks]
        for subtask in subtasks:
            if subtask.id == subtask_id:
                subtask.completed = not subtask.completed
                break
        else:
            raise KeyError(f"Subtask not found: {subtask_id}")

        updated = await self.update_task(task_id, subtasks=subtasks)
        return updated, updated.all_subtasks_completed

    async def delete_task(self, task_id: str) -> bool:
        """Delete a task.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        if not await self.repository.delete(task_id):
            raise TaskNotFoundError(task_id)
        return True

    async def auto_archive(self, days: int) -> list[Task]:
        """Archive completed tasks finished more than ``days`` days ago."""
        cutoff = self.clock() - timedelta(days=days)
        archived = []
        for task in await self.list_tasks(include_completed=True):
            if task.completed and task.completed_at is not None and task.completed_at < cutoff:
                archived.append(await self.archive_task(task.id))
        if archived:
            logger.info("Auto-archived %d completed task(s)", len(archived))
        return archived
