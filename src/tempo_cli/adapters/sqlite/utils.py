"""Utility functions for SQLite adapter."""

from __future__ import annotations

import json
import uuid
from datetime import datetime
from typing import Any


def generate_uuid() -> str:
    """Generate a new UUID as string.

    Returns:
        UUID string (e.g., "123e4567-e89b-12d3-a456-426614174000")
    """
    return str(uuid.uuid4())


def to_iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def row_to_dict(row: Any) -> dict[str, Any]:
    """Convert sqlite3.Row to dictionary.

    Args:
        row: sqlite3.Row object

    Returns:
        Dictionary with column names as keys
    """
    if row is None:
        return {}
    return dict(row)


def dump_json(value: Any) -> str:
    """Serialise a list column (tags, subtasks, energy checks) to JSON text."""
    return json.dumps(value, ensure_ascii=False)


def load_json(value: str | None, default: Any = None) -> Any:
    if not value:
        return [] if default is None else default
    return json.loads(value)
