"""Service factories shared by the command modules.

Commands import these names into their own namespace, so tests can patch
``tempo_cli.commands.<module>.get_task_service`` and friends.
"""

from __future__ import annotations

from datetime import datetime

from tempo_cli.models import AppConfig
from tempo_cli.services.config_service import get_config_service
from tempo_cli.services.context_manager import get_storage_context
from tempo_cli.services.export_service import ExportService
from tempo_cli.services.note_service import NoteService
from tempo_cli.services.scoring_service import TaskScoringEngine
from tempo_cli.services.task_service import TaskService
from tempo_cli.utils.nlp_parser import DateparserResolver, TaskParser


def get_now() -> datetime:
    """The CLI's clock."""
    return datetime.now()


def get_app_config() -> AppConfig:
    return get_config_service().config


def get_task_service() -> TaskService:
    return TaskService(
        get_storage_context().task_repository,
        clock=get_now,
        parser=TaskParser(date_resolver=DateparserResolver()),
    )


def get_note_service() -> NoteService:
    return NoteService(get_storage_context().note_repository)


def get_export_service() -> ExportService:
    storage = get_storage_context()
    return ExportService(
        storage.task_repository,
        storage.note_repository,
        get_config_service(),
        clock=get_now,
    )


def get_scoring_engine(config: AppConfig | None = None) -> TaskScoringEngine:
    config = config or get_app_config()
    return TaskScoringEngine(config.profile, config.scoring)
