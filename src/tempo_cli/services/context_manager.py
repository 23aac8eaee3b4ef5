"""Storage bootstrap for tempo.

Usage Pattern:
    from tempo_cli.services.context_manager import get_storage_context

    storage = get_storage_context()
    tasks = await storage.task_repository.list_all()
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from tempo_cli.adapters.sqlite import SqliteNoteRepository, SqliteTaskRepository
from tempo_cli.repositories import NoteRepository, TaskRepository
from tempo_cli.services.config_service import get_config_service


@dataclass
class StorageContext:
    """Repositories bound to one database."""

    db_path: str
    task_repository: TaskRepository
    note_repository: NoteRepository


def create_storage_context(db_path: str) -> StorageContext:
    return StorageContext(
        db_path=db_path,
        task_repository=SqliteTaskRepository(db_path=db_path),
        note_repository=SqliteNoteRepository(db_path=db_path),
    )


@lru_cache(maxsize=1)
def get_storage_context() -> StorageContext:
    """Get a cached StorageContext for the configured database.

    The database path comes from ``database_path`` in the config, falling
    back to ``tempo.db`` in the user data directory.
    """
    return create_storage_context(get_config_service().db_path)
