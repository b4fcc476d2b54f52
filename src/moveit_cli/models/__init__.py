"""Domain models for MoveIt CLI."""

from .exercise import DEFAULT_CATALOG, Exercise, select_exercise

__all__ = ["DEFAULT_CATALOG", "Exercise", "select_exercise"]
