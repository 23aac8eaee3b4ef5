"""Versioned JSON backup and restore.

Document layout (version 1)::

    {
      "version": 1,
      "exported_at": "2025-03-10T09:00:00",
      "tasks": [...],       # Task.model_dump(mode="json")
      "notes": [...],       # DailyNote.model_dump(mode="json")
      "profile": {...},     # EnergyProfile
      "settings": {...}     # BehaviorConfig
    }

Dates are ISO-8601 strings on the wire and datetimes again after import.
Files ending in ``.gz`` are gzip-compressed.
"""

from __future__ import annotations

import gzip
import json
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tempo_cli.models import BehaviorConfig, DailyNote, EnergyProfile, Task, TaskFilters
from tempo_cli.repositories import NoteRepository, TaskRepository
from tempo_cli.services.config_service import ConfigService
from tempo_cli.utils.logger import get_logger

logger = get_logger(__name__)

EXPORT_VERSION = 1


class ExportFormatError(ValueError):
    """The file is not a tempo export this version can read."""


@dataclass
class ExportSummary:
    path: Path
    tasks: int
    notes: int


def build_export(
    tasks: list[Task],
    notes: list[DailyNote],
    profile: EnergyProfile,
    settings: BehaviorConfig,
    now: datetime,
) -> dict[str, Any]:
    return {
        "version": EXPORT_VERSION,
        "exported_at": now.isoformat(),
        "tasks": [task.model_dump(mode="json") for task in tasks],
        "notes": [note.model_dump(mode="json") for note in notes],
        "profile": profile.model_dump(mode="json"),
        "settings": settings.model_dump(mode="json"),
    }


def parse_export(
    document: Any,
) -> tuple[list[Task], list[DailyNote], EnergyProfile | None, BehaviorConfig | None]:
    """Validate an export document.

    Raises:
        ExportFormatError: Wrong shape, unsupported version or invalid records
    """
    if not isinstance(document, dict):
        raise ExportFormatError("Export must be a JSON object")
    version = document.get("version")
    if version != EXPORT_VERSION:
        raise ExportFormatError(f"Unsupported export version: {version!r}")

    try:
        tasks = [Task.model_validate(item) for item in document.get("tasks", [])]
        notes = [DailyNote.model_validate(item) for item in document.get("notes", [])]
        profile = (
            EnergyProfile.model_validate(document["profile"])
            if document.get("profile")
            else None
        )
        settings = (
            BehaviorConfig.model_validate(document["settings"])
            if document.get("settings")
            else None
        )
    except ValidationError as e:
        raise ExportFormatError(f"Invalid export data: {e}") from e
    return tasks, notes, profile, settings


class ExportService:
    """Export and import all local data."""

    def __init__(
        self,
        task_repository: TaskRepository,
        note_repository: NoteRepository,
        config_service: ConfigService,
        clock: Callable[[], datetime] | None = None,
    ):
        self.task_repository = task_repository
        self.note_repository = note_repository
        self.config_service = config_service
        self.clock = clock or datetime.now

    async def export_data(self, path: str | Path, compress: bool = False) -> ExportSummary:
        """Write every task (archived included), note, the profile and settings."""
        path = Path(path)
        if compress and path.suffix != ".gz":
            path = path.with_name(path.name + ".gz")

        tasks = await self.task_repository.list_all(
            TaskFilters(include_completed=True, include_archived=True)
        )
        notes = await self.note_repository.list_all()
        config = self.config_service.config
        document = build_export(tasks, notes, config.profile, config.settings, self.clock())

        payload = json.dumps(document, ensure_ascii=False, indent=2)
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.suffix == ".gz":
            with gzip.open(path, "wt", encoding="utf-8") as f:
                f.write(payload)
        else:
            path.write_text(payload, encoding="utf-8")

        logger.info("Exported %d tasks and %d notes to %s", len(tasks), len(notes), path)
        return ExportSummary(path=path, tasks=len(tasks), notes=len(notes))

    async def import_data(self, path: str | Path) -> ExportSummary:
        """Restore an export; existing records with the same ids are replaced.

        Raises:
            ExportFormatError: If the file is not a readable version 1 export
        """
        path = Path(path)
        try:
            if path.suffix == ".gz":
                with gzip.open(path, "rt", encoding="utf-8") as f:
                    document = json.load(f)
            else:
                document = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ExportFormatError(f"Cannot read {path}: {e}") from e

        tasks, notes, profile, settings = parse_export(document)
        for task in tasks:
            await self.task_repository.upsert(task)
        for note in notes:
            await self.note_repository.save(note)

        config = self.config_service.config
        if profile is not None:
            config.profile = profile
        if settings is not None:
            config.settings = settings
        if profile is not None or settings is not None:
            self.config_service.save_config()

        logger.info("Imported %d tasks and %d notes from %s", len(tasks), len(notes), path)
        return ExportSummary(path=path, tasks=len(tasks), notes=len(notes))
