"""Tests for the delete command."""

from asyncio import run

import pytest
from typer.testing import CliRunner

from tempo_cli.commands import delete_command
from tempo_cli.commands.delete_command import app
from tempo_cli.repositories import TaskNotFoundError

runner = CliRunner()


@pytest.fixture(autouse=True)
def _wired(wire):
    wire(delete_command)


def test_delete_with_force(seed, task_service):
    task = seed("Typo task")

    result = runner.invoke(app, [task.id, "--force"])

    assert result.exit_code == 0, result.output
    assert "Deleted: Typo task" in result.stdout
    with pytest.raises(TaskNotFoundError):
        run(task_service.get_task(task.id))


def test_delete_confirmed(seed, task_service):
    task = seed("Typo task")
    result = runner.invoke(app, [task.id], input="y\n")
    assert result.exit_code == 0
    assert run(task_service.list_tasks()) == []


def test_delete_cancelled(seed, task_service):
    task = seed("Keep me")

    result = runner.invoke(app, [task.id], input="n\n")

    assert result.exit_code == 0
    assert "Cancelled" in result.stdout
    assert run(task_service.get_task(task.id)).title == "Keep me"


def test_delete_missing():
    result = runner.invoke(app, ["nope", "-f"])
    assert result.exit_code == 5
