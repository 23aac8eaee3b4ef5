"""Fixtures for command tests.

Commands get real services over a temporary database; the factories each
command module imported from ``.dependencies`` are patched to return them.
"""

from __future__ import annotations

import asyncio

import pytest

from tempo_cli.adapters.sqlite import SqliteNoteRepository, SqliteTaskRepository
from tempo_cli.models import AppConfig, TaskCreate
from tempo_cli.services.note_service import NoteService
from tempo_cli.services.task_service import TaskService
from tempo_cli.utils.nlp_parser import TaskParser


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(profile={"peaks": ["09:00-12:00"], "dips": ["14:00-16:00"]})


@pytest.fixture()
def task_service(db_path, now) -> TaskService:
    repo = SqliteTaskRepository(db_path=db_path, clock=lambda: now)
    return TaskService(repo, clock=lambda: now, parser=TaskParser())


@pytest.fixture()
def note_service(db_path) -> NoteService:
    return NoteService(SqliteNoteRepository(db_path=db_path))


@pytest.fixture()
def wire(monkeypatch, task_service, note_service, app_config, now):
    """Point a command module's service factories at the test services."""

    def _wire(module, **overrides):
        factories = {
            "get_task_service": lambda: task_service,
            "get_note_service": lambda: note_service,
            "get_app_config": lambda: app_config,
            "get_now": lambda: now,
        }
        factories.update(overrides)
        for name, factory in factories.items():
            if hasattr(module, name):
                monkeypatch.setattr(module, name, factory)

    return _wire


@pytest.fixture()
def seed(task_service):
    """Synchronously add a task; commands run their own event loop."""

    def _seed(title: str, **fields):
        return asyncio.run(task_service.add_task(TaskCreate(title=title, **fields)))

    return _seed
