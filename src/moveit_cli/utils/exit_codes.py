"""
Exit codes for MoveIt CLI.

Each failure class of the timer maps to its own code so wrapper scripts can
tell a bad invocation apart from a broken notifier or terminal.
"""

# Success (includes the user quitting or cancelling a phase)
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Desktop notification could not be delivered (strict mode only)
ERROR_NOTIFICATION = 3

# Live display failed to start or crashed while running
ERROR_DISPLAY = 4


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOTIFICATION: "ERROR_NOTIFICATION",
        ERROR_DISPLAY: "ERROR_DISPLAY",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Session ended normally",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_NOTIFICATION: "Desktop notification failed",
        ERROR_DISPLAY: "Timer display error - check the terminal",
    }
    return descriptions.get(code, "Unknown error")
