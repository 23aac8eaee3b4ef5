"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state and a
fixed clock for the scoring and aggregation code.
"""

from __future__ import annotations

from datetime import datetime
from itertools import count
from unittest.mock import patch

import pytest

from tempo_cli.models import EnergyProfile, Task

# A Monday, mid-morning
NOW = datetime(2025, 3, 10, 10, 0, 0)

_ids = count(1)


def make_task(title: str = "Sample task", **fields) -> Task:
    """Build a Task with sensible defaults; any field can be overridden."""
    fields.setdefault("id", f"task-{next(_ids):04d}")
    fields.setdefault("created_at", NOW)
    if fields.get("archived") and "archived_at" not in fields:
        fields["archived_at"] = NOW
    return Task(title=title, **fields)


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def task_factory():
    return make_task


@pytest.fixture()
def profile() -> EnergyProfile:
    """Peak 09-12, dip 14-16, Monday to Friday."""
    return EnergyProfile(peaks=["09:00-12:00"], dips=["14:00-16:00"])


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True, scope="session")
def isolated_log_dir(tmp_path_factory):
    """Keep the rotating log file out of the user's real log directory."""
    from tempo_cli.utils import logger as logger_module

    log_dir = str(tmp_path_factory.mktemp("logs"))
    with patch.object(logger_module, "user_log_dir", return_value=log_dir):
        yield log_dir


@pytest.fixture(autouse=True)
def reset_singletons():
    """Close the shared connection and drop cached services between tests."""
    from tempo_cli.adapters.sqlite.connection import DatabaseConnection
    from tempo_cli.services.config_service import get_config_service
    from tempo_cli.services.context_manager import get_storage_context

    yield
    DatabaseConnection.close_connection()
    get_config_service.cache_clear()
    get_storage_context.cache_clear()


@pytest.fixture()
def db_path(tmp_path) -> str:
    return str(tmp_path / "tempo.db")


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory."""
    from tempo_cli.services.config_service import ConfigService

    return ConfigService(config_dir=tmp_path / "config", data_dir=tmp_path / "data")
