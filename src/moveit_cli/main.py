"""Main entry point for MoveIt CLI."""

import typer

from moveit_cli import __version__
from moveit_cli.commands.decorators import command_wrapper
from moveit_cli.config import get_config_manager
from moveit_cli.models.timer.phase import PhaseRunner
from moveit_cli.services.notification_service import (
    Notifier,
    NullNotifier,
    OsaScriptNotifier,
)
from moveit_cli.services.session_service import SessionLoop
from moveit_cli.utils.ui.console import get_console

app = typer.Typer(
    name="moveit",
    help="Pomodoro timer that suggests an exercise for every break",
    add_completion=False,
)

console = get_console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]MoveIt CLI[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


@app.command()
@command_wrapper
def run(
    work_minutes: int = typer.Argument(..., min=1, help="Work period length in minutes"),
    break_minutes: int = typer.Argument(..., min=1, help="Break length in minutes"),
    no_notify: bool = typer.Option(
        False, "--no-notify", help="Do not show desktop notifications"
    ),
    strict_notifications: bool | None = typer.Option(
        None,
        "--strict-notifications/--lenient-notifications",
        help="Abort when a desktop notification fails (default from config)",
    ),
    profile: str = typer.Option("default", "--profile", help="Config profile name"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Alternate work and break periods until you quit.

    Example:
      moveit 25 5
    """
    config = get_config_manager(profile).config

    notifier: Notifier
    if no_notify or not config.notifications.enabled:
        notifier = NullNotifier()
    else:
        notifier = OsaScriptNotifier(
            subtitle=config.notifications.subtitle,
            sound=config.notifications.sound,
        )

    if strict_notifications is None:
        strict_notifications = config.notifications.strict

    runner = PhaseRunner(
        console=console,
        tick_interval=config.timer.tick_interval_ms / 1000,
        max_bar_width=config.timer.max_bar_width,
        bar_margin=config.timer.bar_margin,
        quit_key=config.timer.quit_key,
        screen=config.timer.screen,
    )
    session = SessionLoop(
        work_minutes,
        break_minutes,
        runner=runner,
        notifier=notifier,
        strict_notifications=strict_notifications,
        console=console,
    )
    summary = session.run()
    console.print(
        f"[dim]Session ended ({summary.reason}) after "
        f"{summary.cycles_completed} completed cycle(s).[/dim]"
    )


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
