"""Runs one timed phase as a single-consumer event loop."""

import queue
import time
from collections.abc import Callable

from rich.console import Console, RenderableType
from rich.live import Live

from moveit_cli.errors import DisplayError
from moveit_cli.utils.logger import get_logger

from ..exercise import Exercise
from .clock import InputPump, Ticker
from .events import KeyPress, Resize, Tick
from .keyboard import CTRL_C, KeyboardHandler
from .state import TimerState
from .ui import TimerDisplay


class PhaseRunner:
    """
    Drives a :class:`TimerState` to completion or cancellation.

    The ticker and the input pump only produce events; this runner is the
    sole consumer, so state updates and redraws are never concurrent.
    """

    def __init__(
        self,
        console: Console | None = None,
        tick_interval: float = 0.1,
        max_bar_width: int = 80,
        bar_margin: int = 20,
        quit_key: str = "q",
        screen: bool = True,
        clock: Callable[[], float] = time.monotonic,
        keyboard_factory: Callable[[], KeyboardHandler] = KeyboardHandler,
    ):
        self.console = console or Console()
        self.tick_interval = tick_interval
        self.max_bar_width = max_bar_width
        self.bar_margin = bar_margin
        self.quit_key = quit_key
        self.screen = screen
        self.clock = clock
        self.keyboard_factory = keyboard_factory

    @property
    def quit_keys(self) -> tuple[str, ...]:
        return (self.quit_key, CTRL_C)

    def make_display(self) -> TimerDisplay:
        return TimerDisplay(
            self.console,
            max_bar_width=self.max_bar_width,
            bar_margin=self.bar_margin,
            quit_key=self.quit_key,
        )

    def run(
        self,
        duration_seconds: float,
        phase_label: str,
        exercise: Exercise | None = None,
    ) -> TimerState:
        """
        Run the full-screen timer for one phase.

        Returns the final state, which is either complete or cancelled.
        Raises DisplayError if the terminal display cannot be driven.
        """
        logger = get_logger()
        state = TimerState.begin(duration_seconds, phase_label, exercise, now=self.clock())
        display = self.make_display()
        events: queue.Queue = queue.Queue()
        logger.info("phase started: %s (%.0fs)", phase_label, duration_seconds)

        keyboard = None
        ticker = Ticker(events, self.tick_interval, self.clock)
        pump = None
        try:
            keyboard = self.keyboard_factory()
            pump = InputPump(events, keyboard, self.console, self.tick_interval)
            with Live(
                display.render(state),
                console=self.console,
                screen=self.screen,
                auto_refresh=False,
                transient=not self.screen,
            ) as live:
                ticker.start()
                pump.start()

                def draw(frame: RenderableType) -> None:
                    live.update(frame, refresh=True)

                self.consume(state, events, display, draw)

        except KeyboardInterrupt:
            state.cancel()
        except Exception as e:
            logger.error("phase failed: %s - %s", phase_label, e)
            raise DisplayError(f"timer error: {e}") from e
        finally:
            ticker.stop()
            if pump is not None:
                pump.stop()
            if keyboard is not None:
                keyboard.stop()

        if state.cancelled:
            self.console.print(display.render(state))
        logger.info("phase finished: %s (%s)", phase_label, state.status)
        return state

    def consume(
        self,
        state: TimerState,
        events: queue.Queue,
        display: TimerDisplay,
        draw: Callable[[RenderableType], None],
    ) -> TimerState:
        """Apply queued events to *state* until it reaches a terminal status."""
        while not state.is_terminal:
            event = events.get()
            if isinstance(event, Tick):
                state.advance(event.at)
            elif isinstance(event, KeyPress):
                if event.key in self.quit_keys:
                    state.cancel()
            elif isinstance(event, Resize):
                display.resize(event.width)
            draw(display.render(state))
        return state
