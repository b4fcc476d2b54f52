"""Break-time exercise catalog."""

import time
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Exercise:
    """A suggested exercise shown during a break."""

    name: str
    description: str
    duration_hint: str


DEFAULT_CATALOG: tuple[Exercise, ...] = (
    Exercise(
        name="Push-ups",
        description=(
            "Place your hands shoulder-width apart, keep your body straight, "
            "lower yourself until your chest nearly touches the ground, then push back up."
        ),
        duration_hint="Do 3 sets of 15 repetitions",
    ),
    Exercise(
        name="Bodyweight Squats",
        description="Squat down as deep as possible. Alternatively do wide leg squats.",
        duration_hint="Do 3 sets of 15 repetitions",
    ),
    Exercise(
        name="Plank",
        description=(
            "Hold a push-up position with your forearms on the ground. "
            "Alternatively do side planks."
        ),
        duration_hint="Hold for 30 seconds, rest, repeat 3 times",
    ),
    Exercise(
        name="Curls",
        description=(
            "Grab some dumbbells and work them guns. "
            "If you don't have dumbbells do close grip push-ups."
        ),
        duration_hint="20-30 reps, 5 sets",
    ),
    Exercise(
        name="Lunges",
        description="Walking lunges.",
        duration_hint="3 sets of 15 each leg",
    ),
    Exercise(
        name="Overhead Press",
        description="Grab some dumbbells and press them overhead.",
        duration_hint="5 sets of 15-20",
    ),
    Exercise(
        name="Side Delt Raise",
        description=(
            "Grab some dumbbells. Start with hands at your sides, raise them out "
            "to slightly above shoulder level, lower controlled."
        ),
        duration_hint="5 sets of 15-20",
    ),
)


def exercise_index(now: float, size: int) -> int:
    """Map a wall-clock timestamp onto a catalog index in ``[0, size - 1]``."""
    if size <= 0:
        raise ValueError("Exercise catalog is empty")
    return int(now) % size


def select_exercise(
    catalog: Sequence[Exercise] = DEFAULT_CATALOG, now: float | None = None
) -> Exercise:
    """
    Pick one exercise for a break.

    The index is the current second modulo the catalog size: cheap and
    deterministic per second, with no guarantee against repeats.
    """
    if now is None:
        now = time.time()
    return catalog[exercise_index(now, len(catalog))]
