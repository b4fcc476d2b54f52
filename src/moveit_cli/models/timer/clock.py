"""Event producers for a running phase: the ticker and the input pump."""

import queue
import threading
import time
from collections.abc import Callable

from rich.console import Console

from .events import KeyPress, Resize, Tick
from .keyboard import KeyboardHandler


class Ticker:
    """Puts a :class:`Tick` on the queue every *interval* seconds until stopped."""

    def __init__(
        self,
        events: queue.Queue,
        interval: float = 0.1,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.events = events
        self.interval = interval
        self.clock = clock
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._run, name="moveit-ticker", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._stopped.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout=self.interval * 2)

    def _run(self) -> None:
        while not self._stopped.wait(self.interval):
            self.events.put(Tick(at=self.clock()))


class InputPump:
    """
    Forwards keypresses and terminal resizes into the event queue.

    Polls the keyboard with the tick interval as timeout, so a quit key is
    seen within one tick.
    """

    def __init__(
        self,
        events: queue.Queue,
        keyboard: KeyboardHandler,
        console: Console,
        interval: float = 0.1,
    ):
        self.events = events
        self.keyboard = keyboard
        self.console = console
        self.interval = interval
        self._size = (console.size.width, console.size.height)
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._run, name="moveit-input", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._stopped.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout=self.interval * 2)

    def poll(self) -> None:
        """Read at most one key and check the terminal size once."""
        key = self.keyboard.get_key(timeout=self.interval)
        if key is not None:
            self.events.put(KeyPress(key=key))

        size = (self.console.size.width, self.console.size.height)
        if size != self._size:
            self._size = size
            self.events.put(Resize(width=size[0], height=size[1]))

    def _run(self) -> None:
        while not self._stopped.is_set():
            self.poll()
