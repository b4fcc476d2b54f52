"""Desktop notifications via macOS Notification Center."""

import subprocess
from typing import Protocol

from moveit_cli.errors import NotificationError


class Notifier(Protocol):
    """Anything that can show a (title, message) notification."""

    def notify(self, title: str, message: str) -> None: ...


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def build_script(title: str, message: str, subtitle: str, sound: str) -> str:
    """Build the AppleScript that displays one notification."""
    return f"""
        tell application "System Events"
            display notification "{_escape(message)}" with title "{_escape(title)}" subtitle "{_escape(subtitle)}" sound name "{_escape(sound)}"
        end tell
        tell application "NotificationCenter"
            activate
        end tell"""


class OsaScriptNotifier:
    """Shows notifications by running ``osascript``."""

    def __init__(self, subtitle: str = "Workout Timer", sound: str = "Glass"):
        self.subtitle = subtitle
        self.sound = sound

    def notify(self, title: str, message: str) -> None:
        """
        Display a notification.

        Raises:
            NotificationError: osascript is missing or exited non-zero.
        """
        script = build_script(title, message, self.subtitle, self.sound)
        try:
            result = subprocess.run(
                ["osascript", "-e", script],
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise NotificationError(f"notification error: {e}") from e

        if result.returncode != 0:
            output = (result.stdout + result.stderr).strip()
            raise NotificationError(
                f"notification error: exit status {result.returncode}, output: {output}"
            )


class NullNotifier:
    """Notifier used when notifications are switched off."""

    def notify(self, title: str, message: str) -> None:
        return None
