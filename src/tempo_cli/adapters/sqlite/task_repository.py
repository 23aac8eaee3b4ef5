"""SQLite implementation of TaskRepository."""

from __future__ import annotations

import sqlite3
from collections.abc import Callable
from datetime import datetime
from typing import Any

from tempo_cli.adapters.sqlite.connection import get_connection
from tempo_cli.adapters.sqlite.utils import dump_json, generate_uuid, load_json, row_to_dict, to_iso
from tempo_cli.models import Subtask, Task, TaskCreate, TaskFilters, TaskUpdate
from tempo_cli.repositories import TaskNotFoundError, TaskRepository

COLUMNS = (
    "id",
    "type",
    "title",
    "description",
    "content",
    "tags",
    "priority",
    "size",
    "energy",
    "due_date",
    "created_at",
    "updated_at",
    "completed",
    "completed_at",
    "archived",
    "archived_at",
    "subtasks",
)

_UPSERT_SQL = (
    f"INSERT INTO tasks ({', '.join(COLUMNS)}) VALUES ({', '.join('?' for _ in COLUMNS)}) "
    "ON CONFLICT(id) DO UPDATE SET "
    + ", ".join(f"{col} = excluded.{col}" for col in COLUMNS if col != "id")
)


def _row_to_task(row: sqlite3.Row) -> Task:
    data = row_to_dict(row)
    data["tags"] = load_json(data["tags"])
    data["subtasks"] = load_json(data["subtasks"])
    data["completed"] = bool(data["completed"])
    data["archived"] = bool(data["archived"])
    return Task.model_validate(data)


def _task_to_row(task: Task) -> tuple[Any, ...]:
    return (
        task.id,
        task.type,
        task.title,
        task.description,
        task.content,
        dump_json(task.tags),
        task.priority,
        task.size,
        task.energy,
        to_iso(task.due_date),
        to_iso(task.created_at),
        to_iso(task.updated_at),
        int(task.completed),
        to_iso(task.completed_at),
        int(task.archived),
        to_iso(task.archived_at),
        dump_json([st.model_dump() for st in task.subtasks]),
    )


class SqliteTaskRepository(TaskRepository):
    """SQLite implementation of task repository."""

    def __init__(
        self,
        db_path: str | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize SQLite task repository.

        Args:
            db_path: Optional database file path. If None, uses default location.
            clock: Source of "now" for created_at/updated_at stamps.
        """
        self.db_path = db_path
        self.clock = clock or datetime.now
        self._connection: sqlite3.Connection | None = None

    @property
    def connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    async def list_all(self, filters: TaskFilters | None = None) -> list[Task]:
        """List tasks in creation order, oldest first."""
        filters = filters or TaskFilters()
        query = "SELECT * FROM tasks WHERE 1=1"
        params: list[Any] = []

        if not filters.include_completed:
            query += " AND completed = 0"
        if not filters.include_archived:
            query += " AND archived = 0"
        if filters.energy:
            query += " AND energy = ?"
            params.append(filters.energy)

        # rowid keeps insertion order for tasks created in the same instant
        query += " ORDER BY created_at ASC, rowid ASC"

        rows = self.connection.execute(query, params).fetchall()
        tasks = [_row_to_task(row) for row in rows]
        if filters.tag:
            tasks = [task for task in tasks if filters.matches(task)]
        return tasks

    async def get(self, task_id: str) -> Task | None:
        row = self.connection.execute(
            "SELECT * FROM tasks WHERE id = ?", (task_id,)
        ).fetchone()
        return _row_to_task(row) if row else None

    async def add(self, task_data: TaskCreate) -> Task:
        """Create a new task; subtask labels get their ids here."""
        now = self.clock()
        data = task_data.model_dump(exclude={"subtasks"})
        task = Task(
            id=generate_uuid(),
            created_at=now,
            updated_at=now,
            subtasks=[Subtask(id=generate_uuid(), text=text) for text in task_data.subtasks],
            **data,
        )
        self.connection.execute(_UPSERT_SQL, _task_to_row(task))
        self.connection.commit()
        return task

    async def update(self, task_id: str, updates: TaskUpdate) -> Task:
        """Apply explicitly set fields; the merged task is re-validated."""
        current = await self.get(task_id)
        if current is None:
            raise TaskNotFoundError(task_id)

        changes = updates.model_dump(exclude_unset=True)
        if not changes:
            return current

        merged = current.model_dump()
        merged.update(changes)
        merged["updated_at"] = self.clock()
        task = Task.model_validate(merged)

        self.connection.execute(_UPSERT_SQL, _task_to_row(task))
        self.connection.commit()
        return task

    async def delete(self, task_id: str) -> bool:
        cursor = self.connection.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
        self.connection.commit()
        return cursor.rowcount > 0

    async def upsert(self, task: Task) -> Task:
        self.connection.execute(_UPSERT_SQL, _task_to_row(task))
        self.connection.commit()
        return task
