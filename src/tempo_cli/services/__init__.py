"""Services module for tempo - scoring, aggregation, search and business logic."""

from .export_service import ExportFormatError, ExportService
from .note_service import NoteService
from .task_service import TaskService

__all__ = [
    "TaskService",
    "NoteService",
    "ExportService",
    "ExportFormatError",
]
