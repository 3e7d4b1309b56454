"""Main entry point for StudyMate CLI."""

import typer

from studymate_cli import __version__
from studymate_cli.commands import chat, config, focus
from studymate_cli.utils.ui.console import get_console

app = typer.Typer(
    name="studymate",
    help="Study companion: an assistant chat and a distraction-free focus timer",
    no_args_is_help=True,
)

console = get_console()


app.add_typer(chat.app, name="chat", help="Chat with the study assistant")
app.add_typer(focus.app, name="focus", help="Study timer and app blocking")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]StudyMate CLI[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
