"""Exception hierarchy for MoveIt CLI."""

from moveit_cli.utils.exit_codes import ERROR_DISPLAY, ERROR_GENERAL, ERROR_NOTIFICATION


class MoveItError(Exception):
    """Application error carrying the exit code the CLI should use."""

    exit_code = ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class NotificationError(MoveItError):
    """The desktop notifier could not display a notification."""

    exit_code = ERROR_NOTIFICATION


class DisplayError(MoveItError):
    """The live timer display failed to start or run."""

    exit_code = ERROR_DISPLAY
