"""Tests for the profile sub-commands."""

import json

import pytest
from typer.testing import CliRunner

from tempo_cli.commands import profile_command
from tempo_cli.commands.profile_command import app
from tempo_cli.services.config_service import ConfigService

runner = CliRunner()


@pytest.fixture(autouse=True)
def _wired(wire, tmp_config):
    wire(profile_command, get_config_service=lambda: tmp_config)


def _reload(tmp_path):
    return ConfigService(config_dir=tmp_path / "config", data_dir=tmp_path / "data").config.profile


def test_show_json():
    result = runner.invoke(app, ["show", "-o", "json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["peaks"] == [{"start": "09:00", "end": "12:00"}]
    assert data["work_days"] == [0, 1, 2, 3, 4]


def test_show_pretty():
    result = runner.invoke(app, ["show"])
    assert result.exit_code == 0
    assert "09:00-12:00" in result.stdout
    assert "Mon Tue Wed Thu Fri" in result.stdout


def test_set_peaks_persists(tmp_path):
    result = runner.invoke(app, ["set-peaks", "08:00-10:00", "20:00-21:00"])

    assert result.exit_code == 0, result.output
    assert _reload(tmp_path).peak_hours == [8, 9, 20]


@pytest.mark.parametrize("bad", ["noon", "9-12", "25:00-26:00"])
def test_set_peaks_rejects_bad_ranges(bad, tmp_path):
    result = runner.invoke(app, ["set-peaks", bad])
    assert result.exit_code == 2
    assert _reload(tmp_path).peak_hours == [9, 10, 11]


def test_clear_dips(tmp_path):
    result = runner.invoke(app, ["set-dips"])
    assert result.exit_code == 0, result.output
    assert "Dips cleared" in result.stdout
    assert _reload(tmp_path).dips == []


def test_set_work_days_by_name_and_number(tmp_path):
    result = runner.invoke(app, ["set-work-days", "mon", "Wednesday", "4"])
    assert result.exit_code == 0, result.output
    assert _reload(tmp_path).work_days == [0, 2, 4]


def test_set_work_days_unknown_day():
    result = runner.invoke(app, ["set-work-days", "funday"])
    assert result.exit_code == 2


def test_set_chronotype(tmp_path):
    assert runner.invoke(app, ["set-chronotype", "evening"]).exit_code == 0
    assert _reload(tmp_path).chronotype == "evening"
    assert runner.invoke(app, ["set-chronotype", "night"]).exit_code == 2
