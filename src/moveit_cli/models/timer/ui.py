"""Full-screen progress view for a running phase."""

from rich.console import Console, Group, RenderableType
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from .state import TimerState

CANCELLED_MESSAGE = "Stay Active!"


def format_remaining(seconds: int) -> str:
    """Format whole seconds as MM:SS, or H:MM:SS from one hour up."""
    hours, rest = divmod(max(0, seconds), 3600)
    mins, secs = divmod(rest, 60)
    if hours:
        return f"{hours}:{mins:02d}:{secs:02d}"
    return f"{mins:02d}:{secs:02d}"


class TimerDisplay:
    """Turns a :class:`TimerState` into a frame for the live display."""

    def __init__(
        self,
        console: Console | None = None,
        max_bar_width: int = 80,
        bar_margin: int = 20,
        quit_key: str = "q",
    ):
        self.console = console or Console()
        self.max_bar_width = max_bar_width
        self.bar_margin = bar_margin
        self.quit_key = quit_key
        self.bar_width = self.bar_width_for(self.console.size.width)

    def bar_width_for(self, available: int) -> int:
        """Progress bar width for a terminal *available* columns wide."""
        return max(1, min(self.max_bar_width, available - self.bar_margin))

    def resize(self, width: int) -> None:
        self.bar_width = self.bar_width_for(width)

    def render(self, state: TimerState) -> RenderableType:
        """Build the frame for *state*."""
        if state.cancelled:
            return Text(CANCELLED_MESSAGE, style="bold magenta")

        components: list[RenderableType] = [
            Text(""),
            Text.assemble(
                " ",
                (state.phase_label, "bold cyan"),
                " - ",
                (format_remaining(state.remaining_seconds()), "bold"),
                " remaining",
            ),
            Text(""),
            self._progress_row(state.fraction),
            Text(""),
        ]

        if state.exercise is not None:
            components.append(
                Text(f" Exercise: {state.exercise.name}", style="bold color(205)")
            )
            components.append(Text(f" {state.exercise.description}"))
            components.append(Text(f" {state.exercise.duration_hint}", style="dim"))
            components.append(Text(""))

        components.append(Text(f" Press {self.quit_key} to quit", style="dim"))
        return Group(*components)

    def _progress_row(self, fraction: float) -> Table:
        row = Table.grid(padding=(0, 1))
        row.add_column(width=1)
        row.add_column(width=self.bar_width)
        row.add_column(justify="right", width=4)
        row.add_row(
            "",
            ProgressBar(
                total=1.0,
                completed=fraction,
                width=self.bar_width,
                complete_style="color(212)",
                finished_style="color(228)",
            ),
            f"{int(fraction * 100)}%",
        )
        return row
