"""Unit tests for moveit_cli.utils.exit_codes."""

from __future__ import annotations

import pytest

from moveit_cli.utils.exit_codes import (
    ERROR_DISPLAY,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOTIFICATION,
    SUCCESS,
    get_exit_code_description,
    get_exit_code_name,
)

ALL_CODES = [SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_NOTIFICATION, ERROR_DISPLAY]


class TestExitCodeConstants:
    def test_values(self):
        assert ALL_CODES == [0, 1, 2, 3, 4]

    def test_invalid_args_matches_cli_usage_error(self):
        from typer.testing import CliRunner

        from moveit_cli.main import app

        result = CliRunner().invoke(app, ["not-a-number", "5"])
        assert result.exit_code == ERROR_INVALID_ARGS


class TestNames:
    @pytest.mark.parametrize(
        "code, name",
        [
            (SUCCESS, "SUCCESS"),
            (ERROR_NOTIFICATION, "ERROR_NOTIFICATION"),
            (ERROR_DISPLAY, "ERROR_DISPLAY"),
        ],
    )
    def test_known_names(self, code, name):
        assert get_exit_code_name(code) == name

    def test_unknown_code(self):
        assert get_exit_code_name(99) == "UNKNOWN(99)"


class TestDescriptions:
    @pytest.mark.parametrize("code", ALL_CODES)
    def test_every_code_described(self, code):
        assert get_exit_code_description(code) != "Unknown error"

    def test_unknown_code(self):
        assert get_exit_code_description(-1) == "Unknown error"
