"""Textual focus screen: study mode, countdown and app roster."""

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header, Static

from studymate_cli.core.scheduler import AsyncioScheduler
from studymate_cli.models.config_models import FocusConfig
from studymate_cli.services.focus_session_service import FocusSessionController
from studymate_cli.utils.ui.formatters import roster_table, sessions_table

PHASE_STYLES = {
    "idle": "cyan",
    "running": "bold green",
    "paused": "yellow",
    "finished": "bold red",
}


class FocusApp(App):
    """Distraction blocking and the study countdown."""

    TITLE = "StudyMate Focus"

    CSS = """
    #timer {
        content-align: center middle;
        height: 5;
        border: round $accent;
    }
    #study-mode {
        content-align: center middle;
        height: 3;
    }
    #left {
        width: 1fr;
    }
    #right {
        width: 1fr;
    }
    """

    BINDINGS = [
        Binding("escape", "quit", "Back"),
        Binding("m", "toggle_study_mode", "Study mode"),
        Binding("s", "start_timer", "Start"),
        Binding("p", "pause_timer", "Pause"),
        Binding("r", "reset_timer", "Reset"),
    ] + [
        Binding(str(n), f"toggle_block({n - 1})", f"Toggle {n}", show=False)
        for n in range(1, 10)
    ]

    def __init__(self, config: FocusConfig | None = None):
        super().__init__()
        self.controller = FocusSessionController.from_config(
            config or FocusConfig(), AsyncioScheduler()
        )
        self.controller.subscribe(self.refresh_view)
        self.controller.on_timer_finished(self._timer_finished)

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Vertical(id="left"):
                yield Static(id="study-mode")
                yield Static(id="timer")
                yield Static(id="sessions")
            with Vertical(id="right"):
                yield Static(id="roster")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_view()

    def action_toggle_study_mode(self) -> None:
        self.controller.toggle_study_mode()

    def action_start_timer(self) -> None:
        self.controller.start_timer()

    def action_pause_timer(self) -> None:
        self.controller.pause_timer()

    def action_reset_timer(self) -> None:
        self.controller.reset_timer()

    def action_toggle_block(self, index: int) -> None:
        # Digit keys beyond the roster size are ignored.
        if index < len(self.controller.roster):
            self.controller.toggle_block(index)

    def _timer_finished(self) -> None:
        self.notify("Study session complete!", title="Time's up")
        self.bell()

    def refresh_view(self) -> None:
        session = self.controller.session
        mode = self.query_one("#study-mode", Static)
        if session.study_mode_active:
            mode.update(Text("Study mode ON - apps blocked", style="bold green"))
        else:
            mode.update(Text("Press 'm' to enable study mode", style="dim"))

        self.query_one("#timer", Static).update(
            Text(
                f"{self.controller.display_time}  ({session.phase})",
                style=PHASE_STYLES[session.phase],
            )
        )
        self.query_one("#roster", Static).update(roster_table(self.controller.roster))
        self.query_one("#sessions", Static).update(sessions_table(self.controller.sessions))
