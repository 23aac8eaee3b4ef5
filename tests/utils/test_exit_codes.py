"""Unit tests for tempo_cli.utils.exit_codes."""

from __future__ import annotations

import pytest

from tempo_cli.utils.exit_codes import (
    ERROR_CONFIG,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_STORAGE,
    SUCCESS,
    get_exit_code_name,
)


def test_codes_are_distinct():
    codes = [SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_CONFIG, ERROR_STORAGE, ERROR_NOT_FOUND]
    assert codes == [0, 1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    ("code", "name"),
    [
        (SUCCESS, "SUCCESS"),
        (ERROR_INVALID_ARGS, "ERROR_INVALID_ARGS"),
        (ERROR_NOT_FOUND, "ERROR_NOT_FOUND"),
    ],
)
def test_get_exit_code_name(code, name):
    assert get_exit_code_name(code) == name


def test_unknown_code():
    assert get_exit_code_name(42) == "UNKNOWN(42)"
