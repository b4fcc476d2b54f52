"""Shared test fixtures and configuration.

Keeps tests away from the real log and config directories and provides a
controllable clock.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs lookups at *tmp_path* and reset the logger singleton."""
    import moveit_cli.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("moveit_cli").handlers.clear()

    with patch(
        "moveit_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")
    ):
        with patch(
            "moveit_cli.config.user_config_dir", return_value=str(tmp_path / "config")
        ):
            yield tmp_path

    for handler in logging.getLogger("moveit_cli").handlers:
        handler.close()
    logging.getLogger("moveit_cli").handlers.clear()
    logger_mod._logger = None
