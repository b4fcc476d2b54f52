"""Work/break session loop."""

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Literal

from rich.console import Console

from moveit_cli.errors import NotificationError
from moveit_cli.models.exercise import DEFAULT_CATALOG, Exercise, select_exercise
from moveit_cli.models.timer.phase import PhaseRunner
from moveit_cli.utils.logger import get_logger

from .notification_service import Notifier

QUIT_SENTINEL = "q"
NEXT_SESSION_PROMPT = "Press Enter to start next session or press 'q' to quit: "
WORK_LABEL = "Work Period"
BREAK_LABEL = "Break Period"

SessionEndReason = Literal["cancelled", "quit", "eof"]


@dataclass
class SessionSummary:
    """How a session loop ended."""

    cycles_completed: int
    reason: SessionEndReason


class SessionLoop:
    """
    Alternates work and break phases until the user stops.

    Each cycle notifies, runs a work phase, picks an exercise, runs a break
    phase with it, notifies again and asks whether to continue. Cancelling
    any phase ends the loop immediately.
    """

    def __init__(
        self,
        work_minutes: int,
        break_minutes: int,
        runner: PhaseRunner,
        notifier: Notifier,
        catalog: Sequence[Exercise] = DEFAULT_CATALOG,
        prompt: Callable[[str], str] | None = None,
        clock: Callable[[], float] = time.time,
        strict_notifications: bool = False,
        console: Console | None = None,
    ):
        if work_minutes <= 0 or break_minutes <= 0:
            raise ValueError("Work and break durations must be positive")
        if not catalog:
            raise ValueError("Exercise catalog is empty")

        self.work_minutes = work_minutes
        self.break_minutes = break_minutes
        self.runner = runner
        self.notifier = notifier
        self.catalog = tuple(catalog)
        self.clock = clock
        self.strict_notifications = strict_notifications
        self.console = console or runner.console
        self.prompt = prompt or self.console.input
        self.phase: Literal["work", "break"] = "work"
        self.exercise: Exercise | None = None
        self.logger = get_logger()

    def _notify(self, title: str, message: str) -> None:
        try:
            self.notifier.notify(title, message)
        except NotificationError as e:
            self.logger.warning("notification failed: %s - %s", title, e)
            if self.strict_notifications:
                raise
            self.console.print(f"[bold yellow]Warning:[/bold yellow] {e}")

    def pick_exercise(self) -> Exercise:
        exercise = select_exercise(self.catalog, now=self.clock())
        self.logger.info("exercise selected: %s", exercise.name)
        return exercise

    def run_cycle(self) -> bool:
        """Run one work/break pair. Returns False if a phase was cancelled."""
        self.phase = "work"
        self.exercise = None
        self._notify(
            "Work Period Starting", f"Focus for the next {self.work_minutes} minutes"
        )
        state = self.runner.run(self.work_minutes * 60, WORK_LABEL)
        if state.cancelled:
            return False

        self.phase = "break"
        self.exercise = self.pick_exercise()
        self._notify("Break Time", f"Time for {self.exercise.name}")
        state = self.runner.run(self.break_minutes * 60, BREAK_LABEL, self.exercise)
        self.exercise = None
        if state.cancelled:
            return False

        self._notify("Time to Focus", "Good Job, Start Focus Time")
        return True

    def run(self) -> SessionSummary:
        """Loop over work/break cycles until cancelled or the user quits."""
        cycles = 0
        self.logger.info(
            "session started: work=%dm break=%dm", self.work_minutes, self.break_minutes
        )
        while True:
            if not self.run_cycle():
                reason: SessionEndReason = "cancelled"
                break
            cycles += 1

            try:
                answer = self.prompt(NEXT_SESSION_PROMPT)
            except EOFError:
                reason = "eof"
                break
            except KeyboardInterrupt:
                reason = "quit"
                break
            if answer.strip() == QUIT_SENTINEL:
                reason = "quit"
                break

        self.logger.info("session ended: %s after %d cycle(s)", reason, cycles)
        return SessionSummary(cycles_completed=cycles, reason=reason)
