"""Tests for the today command (daily playlist)."""

import json
from asyncio import run
from datetime import timedelta

import pytest
from typer.testing import CliRunner

from tempo_cli.commands import today_command
from tempo_cli.commands.today_command import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _wired(wire):
    wire(today_command)


@pytest.fixture()
def backlog(seed):
    return [
        seed("Water plants", priority="low", energy="light"),
        seed("Ship release", priority="urgent", energy="deep"),
        seed("Review PR", priority="medium"),
    ]


def _payload(result) -> dict:
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


def test_playlist_order_and_slots(backlog):
    data = _payload(runner.invoke(app, ["--json"]))

    assert [t["title"] for t in data["tasks"]] == ["Ship release", "Review PR", "Water plants"]
    # 10:00 on a Monday: next peak hour is 11, the dip starts at 14
    assert [t["suggested_hour"] for t in data["tasks"]] == [11, 11, 14]
    assert data["tasks"][0]["score"] == 40
    assert data["reality_check"] is None


def test_busy_backlog_shrinks_playlist(seed):
    for n in range(6):
        seed(f"Task {n}", size="M")
    data = _payload(runner.invoke(app, ["--json"]))
    assert len(data["tasks"]) == 3


def test_reality_check(seed):
    seed("Write thesis chapter", energy="deep", size="L")
    seed("Refactor parser", energy="deep", size="S")

    data = _payload(runner.invoke(app, ["--json"]))

    assert data["reality_check"] == {
        "total_effort": 4,
        "tasks": ["Write thesis chapter", "Refactor parser"],
        "remaining": 0,
    }


def test_reality_check_disabled(seed, app_config):
    app_config.settings.enable_reality_check = False
    seed("Write thesis chapter", energy="deep", size="L")
    seed("Refactor parser", energy="deep", size="S")

    assert _payload(runner.invoke(app, ["--json"]))["reality_check"] is None


def test_old_completed_tasks_are_archived(seed, task_service, now):
    task = seed("Done long ago")
    run(task_service.update_task(task.id, completed=True, completed_at=now - timedelta(days=40)))

    runner.invoke(app, ["--json"])

    assert run(task_service.get_task(task.id)).archived


def test_pretty_output(backlog):
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "Today's playlist" in result.stdout
    assert "(3 of 3 active)" in result.stdout
    assert "best around 14:00" in result.stdout


def test_empty_playlist():
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "No tasks in your playlist" in result.stdout
