"""Non-blocking keyboard input for the live timer."""

import select
import sys
import termios
import time
import tty
from typing import Optional

CTRL_C = "\x03"


class KeyboardHandler:
    """Reads single keypresses from stdin in cbreak mode."""

    def __init__(self):
        self.fd: Optional[int] = None
        self.old_settings = None
        self.eof = False
        self._setup()

    def _setup(self):
        """Setup terminal for non-blocking input."""
        try:
            self.fd = sys.stdin.fileno()
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except (termios.error, OSError, ValueError):
            # Not a TTY (piped stdin, CI); keys simply never arrive
            self.old_settings = None

    def get_key(self, timeout: float = 0) -> Optional[str]:
        """
        Wait up to *timeout* seconds for a keypress.

        Returns the key as typed, or None if nothing was pressed. Once stdin
        is closed or unusable this just waits out the timeout.
        """
        if self.eof:
            time.sleep(timeout)
            return None
        try:
            ready, _, _ = select.select([sys.stdin], [], [], timeout)
        except (OSError, ValueError):
            self.eof = True
            time.sleep(timeout)
            return None
        if not ready:
            return None
        key = sys.stdin.read(1)
        if not key:
            self.eof = True
            time.sleep(timeout)
            return None
        return key

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings:
            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            except termios.error:
                pass
            self.old_settings = None
