"""Unit tests for commands/decorators.py."""

from __future__ import annotations

import pytest
import typer

from moveit_cli.commands.decorators import command_wrapper
from moveit_cli.errors import DisplayError, MoveItError, NotificationError


class TestCommandWrapper:
    def test_returns_function_result(self):
        @command_wrapper
        def ok(x):
            return x * 2

        assert ok(21) == 42

    def test_preserves_name(self):
        @command_wrapper
        def named():
            return None

        assert named.__name__ == "named"

    @pytest.mark.parametrize(
        "error, code",
        [
            (NotificationError("notification error: boom"), 3),
            (DisplayError("timer error: boom"), 4),
            (MoveItError("custom", exit_code=7), 7),
        ],
    )
    def test_app_errors_become_exit_codes(self, mocker, error, code):
        fmt = mocker.patch("moveit_cli.commands.decorators.format_error")

        @command_wrapper
        def failing():
            raise error

        with pytest.raises(typer.Exit) as exc_info:
            failing()
        assert exc_info.value.exit_code == code
        fmt.assert_called_once_with(str(error))

    def test_typer_exit_passes_through(self):
        @command_wrapper
        def exiting():
            raise typer.Exit(0)

        with pytest.raises(typer.Exit) as exc_info:
            exiting()
        assert exc_info.value.exit_code == 0

    def test_unexpected_error_exits_one(self, mocker):
        fmt = mocker.patch("moveit_cli.commands.decorators.format_error")

        @command_wrapper
        def crashing():
            raise RuntimeError("kaboom")

        with pytest.raises(typer.Exit) as exc_info:
            crashing()
        assert exc_info.value.exit_code == 1
        assert "kaboom" in fmt.call_args[0][0]

    def test_failures_are_logged(self, isolated_dirs, mocker):
        mocker.patch("moveit_cli.commands.decorators.format_error")

        @command_wrapper
        def failing():
            raise DisplayError("timer error: no tty")

        with pytest.raises(typer.Exit):
            failing()

        log = (isolated_dirs / "logs" / "moveit.log").read_text()
        assert "command failed: failing" in log
        assert "timer error: no tty" in log
