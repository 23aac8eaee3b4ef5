"""Repository interfaces for tempo.

This package contains abstract base classes (ABCs) that define the contracts
for data persistence operations. These are the "Ports" in the Hexagonal
Architecture.

Implementations (Adapters) are in:
- tempo_cli.adapters.sqlite (local storage)
"""

from .repository import (
    NoteRepository,
    TaskNotFoundError,
    TaskRepository,
)

__all__ = [
    "TaskRepository",
    "NoteRepository",
    "TaskNotFoundError",
]
