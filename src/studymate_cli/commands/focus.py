"""Focus mode commands: study timer and distraction blocking."""

import typer

from studymate_cli.commands.decorators import AppError, command_wrapper
from studymate_cli.core.scheduler import ManualScheduler
from studymate_cli.models.focus import format_time
from studymate_cli.services.config_service import get_config_service
from studymate_cli.services.focus_session_service import FocusSessionController
from studymate_cli.utils.exit_codes import ERROR_INVALID_ARGS
from studymate_cli.utils.ui.console import get_console
from studymate_cli.utils.ui.formatters import roster_table, sessions_table

console = get_console()
app = typer.Typer(help="Focus mode with study timer and app blocking")


def _preview_controller() -> FocusSessionController:
    """Controller for one-shot commands; nothing is ever scheduled on it."""
    return FocusSessionController.from_config(
        get_config_service().config.focus, ManualScheduler()
    )


@app.command("run")
@command_wrapper
def run_focus() -> None:
    """Open the interactive focus screen."""
    from studymate_cli.ui.focus_app import FocusApp

    FocusApp(config=get_config_service().config.focus).run()


@app.command("roster")
@command_wrapper
def show_roster(
    study_mode: bool = typer.Option(
        False, "--study-mode", help="Show the roster as it looks with study mode on"
    ),
    toggle: list[int] = typer.Option(
        [], "--toggle", "-t", help="Toggle app N before showing (repeatable)"
    ),
) -> None:
    """Show the blockable apps."""
    controller = _preview_controller()
    size = len(controller.roster)
    for number in toggle:
        if not 1 <= number <= size:
            raise AppError(
                f"App number must be between 1 and {size}", exit_code=ERROR_INVALID_ARGS
            )
        controller.toggle_block(number - 1)
    if study_mode:
        controller.toggle_study_mode()

    console.print(roster_table(controller.roster))
    console.print(
        f"[bold]{controller.blocked_count}[/bold] of {len(controller.roster)} apps blocked"
    )


@app.command("sessions")
@command_wrapper
def show_sessions() -> None:
    """Show today's study sessions."""
    controller = _preview_controller()
    console.print(sessions_table(controller.sessions))


@app.command("status")
@command_wrapper
def show_status() -> None:
    """Show the timer length and a summary of the focus screen."""
    controller = _preview_controller()
    default_seconds = get_config_service().config.focus.default_seconds
    console.print(f"Timer: [cyan]{format_time(default_seconds)}[/cyan]")
    console.print(f"Blocked apps: {controller.blocked_count}/{len(controller.roster)}")
    console.print(
        f"Sessions completed: {controller.completed_count}/{controller.total_sessions}"
    )
