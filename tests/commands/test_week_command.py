"""Tests for the week command."""

import json
from datetime import datetime

import pytest
from typer.testing import CliRunner

from tempo_cli.commands import week_command
from tempo_cli.commands.week_command import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _wired(wire):
    wire(week_command)


@pytest.fixture()
def planned(seed):
    seed("Write chapter", energy="deep", size="L", due_date=datetime(2025, 3, 11, 18))
    seed("File expenses", energy="admin", size="S", due_date=datetime(2025, 3, 12, 9))
    seed("Someday", energy="creative")


def test_week_json(planned):
    result = runner.invoke(app, ["--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["week_start"] == "2025-03-10T00:00:00"
    assert data["stats"]["total_tasks"] == 2
    assert data["stats"]["total_hours"] == 4.5
    assert data["stats"]["energy_hours"]["deep"] == 4
    assert len(data["cells"]) == 35


def test_offset_moves_the_week(planned):
    data = json.loads(runner.invoke(app, ["--json", "--offset", "1"]).stdout)
    assert data["week_start"] == "2025-03-17T00:00:00"
    assert data["stats"]["total_tasks"] == 0
    assert data["suggestions"] == []


def test_week_table(planned):
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "Week of 10/03/2025" in result.stdout
    assert "2 tasks (0 done)" in result.stdout
    assert "Busiest: Tue" in result.stdout
