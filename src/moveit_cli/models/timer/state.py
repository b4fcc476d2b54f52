"""Timer state for a single work or break phase."""

import math
import time
from dataclasses import dataclass
from typing import Literal

from ..exercise import Exercise

TimerStatus = Literal["running", "complete", "cancelled"]


@dataclass
class TimerState:
    """
    Progress of one phase against its target duration.

    ``start`` and the ``now`` values given to :meth:`advance` come from the
    same monotonic clock. ``fraction`` and ``elapsed`` never decrease, and
    ``fraction`` is exactly 1.0 once the target is reached.
    """

    start: float
    target: float  # seconds
    phase_label: str
    exercise: Exercise | None = None
    elapsed: float = 0.0
    fraction: float = 0.0
    cancelled: bool = False

    @classmethod
    def begin(
        cls,
        target_seconds: float,
        phase_label: str,
        exercise: Exercise | None = None,
        now: float | None = None,
    ) -> "TimerState":
        """Create a running state for a new phase."""
        if target_seconds <= 0:
            raise ValueError("Phase duration must be positive")
        return cls(
            start=time.monotonic() if now is None else now,
            target=float(target_seconds),
            phase_label=phase_label,
            exercise=exercise,
        )

    @property
    def complete(self) -> bool:
        return not self.cancelled and self.fraction >= 1.0

    @property
    def status(self) -> TimerStatus:
        if self.cancelled:
            return "cancelled"
        if self.fraction >= 1.0:
            return "complete"
        return "running"

    @property
    def is_terminal(self) -> bool:
        return self.status != "running"

    def advance(self, now: float) -> None:
        """Recompute progress for the instant *now*."""
        if self.is_terminal:
            return

        elapsed = min(max(now - self.start, 0.0), self.target)
        if elapsed < self.elapsed:
            return

        self.elapsed = elapsed
        if elapsed >= self.target:
            self.fraction = 1.0
        else:
            self.fraction = min(1.0, elapsed / self.target)

    def cancel(self) -> None:
        """Cancel the phase regardless of progress."""
        self.cancelled = True

    def remaining_seconds(self) -> int:
        """Seconds left, floored at zero and rounded to the nearest second."""
        remaining = max(0.0, self.target - self.elapsed)
        return int(math.floor(remaining + 0.5))
