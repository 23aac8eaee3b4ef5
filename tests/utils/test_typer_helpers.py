"""Unit tests for SuggestingGroup (typer_helpers.py)."""

from __future__ import annotations

import typer
from typer.testing import CliRunner

from tempo_cli.utils.typer_helpers import SuggestingGroup

runner = CliRunner()


def _make_app() -> typer.Typer:
    app = typer.Typer(cls=SuggestingGroup)

    @app.command()
    def today():
        typer.echo("today ran")

    @app.command()
    def week():
        typer.echo("week ran")

    return app


def test_known_command_runs():
    result = runner.invoke(_make_app(), ["today"])
    assert result.exit_code == 0
    assert "today ran" in result.stdout


def test_typo_suggests_closest_command():
    result = runner.invoke(_make_app(), ["tday"])
    assert result.exit_code == 2
    assert "Did you mean this?" in result.stdout
    assert "today" in result.stdout


def test_unrelated_word_falls_back_to_usage_error():
    result = runner.invoke(_make_app(), ["zzzzzz"])
    assert result.exit_code == 2
    assert "Did you mean" not in result.stdout


def test_normalized_command_name_is_not_a_typo():
    app = typer.Typer(cls=SuggestingGroup, context_settings={"token_normalize_func": str.lower})

    @app.command()
    def today():
        typer.echo("today ran")

    @app.command()
    def week():
        typer.echo("week ran")

    result = runner.invoke(app, ["TODAY"])
    assert result.exit_code == 0
    assert "today ran" in result.stdout


def test_typo_does_not_run_any_command():
    result = runner.invoke(_make_app(), ["wek"])
    assert result.exit_code == 2
    assert "week" in result.stdout
    assert "week ran" not in result.stdout
