"""Textual chat screen backed by a MessageTimeline."""

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, Input, Static

from studymate_cli.core.scheduler import AsyncioScheduler
from studymate_cli.models.chat import ChatMessage
from studymate_cli.models.config_models import ChatConfig
from studymate_cli.services.message_timeline import MessageTimeline
from studymate_cli.utils.ui.formatters import render_transcript


class ChatApp(App):
    """Assistant chat: transcript, quick prompts and an input line."""

    TITLE = "StudyMate Assistant"

    CSS = """
    #transcript-scroll {
        height: 1fr;
        padding: 0 1;
    }
    #quick-prompts {
        color: $text-muted;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("escape", "quit", "Back"),
        Binding("f1", "quick_prompt(0)", "Prompt 1"),
        Binding("f2", "quick_prompt(1)", "Prompt 2"),
        Binding("f3", "quick_prompt(2)", "Prompt 3"),
        Binding("f4", "quick_prompt(3)", "Prompt 4"),
    ]

    def __init__(self, config: ChatConfig | None = None):
        super().__init__()
        self.timeline = MessageTimeline.from_config(config or ChatConfig(), AsyncioScheduler())
        self.timeline.subscribe(self._on_timeline_message)

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="transcript-scroll"):
            yield Static(id="transcript")
        yield Static(id="quick-prompts")
        yield Input(placeholder="Ask about your lessons...", id="chat-input")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_view()
        self.query_one("#chat-input", Input).focus()

    @on(Input.Submitted)
    def handle_submit(self, event: Input.Submitted) -> None:
        self.timeline.submit(event.value)
        event.input.value = ""

    def action_quick_prompt(self, index: int) -> None:
        if self.timeline.show_quick_prompts and index < len(self.timeline.quick_prompts):
            self.timeline.submit_quick_prompt(index)

    def _on_timeline_message(self, message: ChatMessage) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        self.query_one("#transcript", Static).update(
            render_transcript(self.timeline.messages, self.timeline.composing)
        )
        prompts = self.query_one("#quick-prompts", Static)
        if self.timeline.show_quick_prompts:
            prompts.update(
                "\n".join(
                    f"F{i}  {prompt}"
                    for i, prompt in enumerate(self.timeline.quick_prompts, start=1)
                )
            )
        else:
            prompts.update("")
        self.query_one("#transcript-scroll", VerticalScroll).scroll_end(animate=False)
