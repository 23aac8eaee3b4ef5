"""Tests for the archive and unarchive commands."""

from asyncio import run
from datetime import timedelta

import pytest
from typer.testing import CliRunner

from tempo_cli.commands import archive_command
from tempo_cli.commands.archive_command import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _wired(wire):
    wire(archive_command)


def test_archive_task(seed, task_service, now):
    task = seed("Old plan")

    result = runner.invoke(app, ["archive", task.id])

    assert result.exit_code == 0, result.output
    assert "Archived: Old plan" in result.stdout
    stored = run(task_service.get_task(task.id))
    assert stored.archived
    assert stored.archived_at == now


def test_unarchive_task(seed, task_service):
    task = seed("Old plan")
    run(task_service.archive_task(task.id))

    result = runner.invoke(app, ["unarchive", task.id[:6]])

    assert result.exit_code == 0, result.output
    stored = run(task_service.get_task(task.id))
    assert not stored.archived
    assert stored.archived_at is None


def test_archive_completed_sweep(seed, task_service, now):
    old = seed("Finished in January")
    recent = seed("Finished yesterday")
    run(task_service.update_task(old.id, completed=True, completed_at=now - timedelta(days=45)))
    run(task_service.update_task(recent.id, completed=True, completed_at=now - timedelta(days=1)))

    result = runner.invoke(app, ["archive", "--completed"])

    assert result.exit_code == 0, result.output
    assert "Archived 1 task(s)" in result.stdout
    assert run(task_service.get_task(old.id)).archived
    assert not run(task_service.get_task(recent.id)).archived


def test_archive_completed_nothing_to_do():
    result = runner.invoke(app, ["archive", "--completed"])
    assert "Nothing to archive" in result.stdout


def test_archive_needs_an_id():
    result = runner.invoke(app, ["archive"])
    assert result.exit_code == 2
