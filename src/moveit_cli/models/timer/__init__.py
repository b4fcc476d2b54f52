"""Interval timer: state, event producers, renderer and phase runner."""

from .events import KeyPress, Resize, Tick
from .keyboard import KeyboardHandler
from .phase import PhaseRunner
from .state import TimerState
from .ui import TimerDisplay

__all__ = [
    "KeyPress",
    "KeyboardHandler",
    "PhaseRunner",
    "Resize",
    "Tick",
    "TimerDisplay",
    "TimerState",
]
