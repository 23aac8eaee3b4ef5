"""Tests for the note sub-commands."""

import json
from asyncio import run

import pytest
from typer.testing import CliRunner

from tempo_cli.commands import note_command
from tempo_cli.commands.note_command import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _wired(wire):
    wire(note_command)


def test_set_intention_today(note_service):
    result = runner.invoke(app, ["intention", "Stay focused"])

    assert result.exit_code == 0, result.output
    assert "Intention for 2025-03-10: Stay focused" in result.stdout
    assert run(note_service.get_note("2025-03-10")).intention == "Stay focused"


def test_write_appends_lines(note_service):
    runner.invoke(app, ["write", "first"])
    runner.invoke(app, ["write", "second"])
    assert run(note_service.get_note("2025-03-10")).notebook == "first\nsecond"


def test_explicit_date(note_service):
    result = runner.invoke(app, ["write", "retro", "--date", "2025-03-07"])
    assert result.exit_code == 0, result.output
    assert run(note_service.get_note("2025-03-07")).notebook == "retro"


def test_bad_date():
    result = runner.invoke(app, ["write", "retro", "-d", "07/03/2025"])
    assert result.exit_code == 2


def test_show(note_service, now):
    run(note_service.set_intention(now, "Ship it"))
    run(note_service.append_notebook(now, "call Sam"))
    run(note_service.record_energy_check(4, now))

    result = runner.invoke(app, ["show"])

    assert result.exit_code == 0, result.output
    assert "Ship it" in result.stdout
    assert "call Sam" in result.stdout
    assert "10:00=4" in result.stdout


def test_show_empty_day_as_json():
    result = runner.invoke(app, ["show", "-d", "2025-01-01", "-o", "json"])
    data = json.loads(result.stdout)
    assert data == {"date": "2025-01-01", "intention": None, "notebook": None, "energy_checks": []}
