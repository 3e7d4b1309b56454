"""Rich renderables and message helpers shared by commands and Textual apps."""

from collections.abc import Sequence

from rich.console import Group
from rich.table import Table
from rich.text import Text

from studymate_cli.models.chat import ChatMessage
from studymate_cli.models.focus import BlockableTarget, StudySessionRecord
from studymate_cli.utils.ui.console import get_console

SENDER_LABELS = {"user": "You", "assistant": "Assistant"}


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(f"[bold blue]Info:[/bold blue] {message}")


def render_message(message: ChatMessage) -> Text:
    """One transcript line: time, sender and text."""
    color = "cyan" if message.from_user else "magenta"
    line = Text()
    line.append(f"[{message.timestamp.strftime('%H:%M')}] ", style="dim")
    line.append(f"{SENDER_LABELS[message.sender]}: ", style=f"bold {color}")
    line.append(message.text)
    return line


def render_transcript(messages: Sequence[ChatMessage], composing: bool = False) -> Group:
    lines = [render_message(message) for message in messages]
    if composing:
        lines.append(Text("Assistant is typing...", style="italic dim"))
    return Group(*lines)


def roster_table(targets: Sequence[BlockableTarget], numbered: bool = True) -> Table:
    """Table of blockable apps with their current block flag."""
    table = Table(title="Apps", show_header=True)
    if numbered:
        table.add_column("#", justify="right", style="dim")
    table.add_column("App")
    table.add_column("Time spent", justify="right")
    table.add_column("Status", justify="center")

    for index, target in enumerate(targets, start=1):
        status = "[red]Blocked[/red]" if target.blocked else "[green]Allowed[/green]"
        row = [f"{target.icon} {target.name}", target.time_spent, status]
        if numbered:
            row.insert(0, str(index))
        table.add_row(*row)
    return table


def sessions_table(records: Sequence[StudySessionRecord]) -> Table:
    """Table of today's study sessions with a completion summary caption."""
    completed = sum(1 for record in records if record.completed)
    table = Table(
        title="Study sessions",
        caption=f"{completed}/{len(records)} completed",
        show_header=True,
    )
    table.add_column("Subject")
    table.add_column("Duration", justify="right")
    table.add_column("Status", justify="center")

    for record in records:
        status = "[green]✓ Done[/green]" if record.completed else "[dim]Pending[/dim]"
        table.add_row(record.subject, record.duration, status)
    return table
