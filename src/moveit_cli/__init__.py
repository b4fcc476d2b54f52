"""MoveIt CLI - Pomodoro timer with exercise breaks."""

__version__ = "0.1.0"
