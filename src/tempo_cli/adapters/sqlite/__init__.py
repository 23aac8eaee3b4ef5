"""SQLite adapter module - Local database storage implementation."""

from tempo_cli.adapters.sqlite.note_repository import SqliteNoteRepository
from tempo_cli.adapters.sqlite.task_repository import SqliteTaskRepository

__all__ = [
    "SqliteTaskRepository",
    "SqliteNoteRepository",
]
