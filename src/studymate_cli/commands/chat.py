"""Assistant chat commands."""

import asyncio

import typer
from pydantic import ValidationError

from studymate_cli.commands.decorators import AppError, command_wrapper
from studymate_cli.core.scheduler import AsyncioScheduler
from studymate_cli.models.config_models import ChatConfig
from studymate_cli.services.config_service import get_config_service
from studymate_cli.services.message_timeline import MessageTimeline
from studymate_cli.utils.exit_codes import ERROR_INVALID_ARGS
from studymate_cli.utils.ui.console import get_console
from studymate_cli.utils.ui.formatters import render_transcript

app = typer.Typer(help="Chat with the study assistant")
console = get_console()


def _chat_config(delay_ms: int | None) -> ChatConfig:
    config = get_config_service().config.chat
    if delay_ms is None:
        return config
    try:
        return ChatConfig.model_validate({**config.model_dump(), "reply_delay_ms": delay_ms})
    except ValidationError as e:
        raise AppError(
            f"Invalid --delay-ms: {e.errors()[0]['msg']}", exit_code=ERROR_INVALID_ARGS
        ) from e


async def ask_once(config: ChatConfig, text: str) -> MessageTimeline:
    """Submit one message and wait for the assistant's reply."""
    timeline = MessageTimeline.from_config(config, AsyncioScheduler())
    replied = asyncio.Event()

    def _on_message(message) -> None:
        if message.sender == "assistant" and not timeline.composing:
            replied.set()

    timeline.subscribe(_on_message)
    if timeline.submit(text) is None:
        raise AppError("Message is empty", exit_code=ERROR_INVALID_ARGS)

    with console.status("Assistant is typing..."):
        await replied.wait()
    return timeline


@app.command("start")
@command_wrapper
def start_chat() -> None:
    """Open the interactive chat screen."""
    from studymate_cli.ui.chat_app import ChatApp

    ChatApp(config=get_config_service().config.chat).run()


@app.command("ask")
@command_wrapper
async def ask(
    text: str | None = typer.Argument(None, help="Message to send"),
    quick: int | None = typer.Option(
        None, "--quick", "-q", help="Send quick prompt N (see 'chat prompts')"
    ),
    delay_ms: int | None = typer.Option(
        None, "--delay-ms", help="Override the reply latency in milliseconds"
    ),
) -> None:
    """Send one message and print the conversation."""
    config = _chat_config(delay_ms)
    if quick is not None:
        if not 1 <= quick <= len(config.quick_prompts):
            raise AppError(
                f"Quick prompt must be between 1 and {len(config.quick_prompts)}",
                exit_code=ERROR_INVALID_ARGS,
            )
        text = config.quick_prompts[quick - 1]
    if text is None:
        raise AppError("Provide a message or --quick N", exit_code=ERROR_INVALID_ARGS)

    timeline = await ask_once(config, text)
    console.print(render_transcript(timeline.messages))


@app.command("prompts")
@command_wrapper
def list_prompts() -> None:
    """List the quick prompts."""
    for index, prompt in enumerate(get_config_service().config.chat.quick_prompts, start=1):
        console.print(f"[dim]{index}.[/dim] {prompt}")
