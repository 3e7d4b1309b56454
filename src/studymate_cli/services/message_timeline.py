"""Chat timeline with a simulated, delayed assistant reply."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from studymate_cli.core.scheduler import Scheduler
from studymate_cli.models.chat import (
    DEFAULT_GREETING,
    DEFAULT_QUICK_PROMPTS,
    ChatMessage,
    Sender,
)
from studymate_cli.models.config_models import ChatConfig
from studymate_cli.models.exceptions import InvalidIndexError
from studymate_cli.services.reply_service import RandomReplySelector, ReplySelector

logger = logging.getLogger(__name__)

DEFAULT_REPLY_DELAY = 1.5

MessageListener = Callable[[ChatMessage], None]


def _now() -> datetime:
    return datetime.now().astimezone()


class MessageTimeline:
    """Append-only list of chat messages plus a composing flag.

    Each ``submit`` schedules its own reply. When several replies are in
    flight they are appended in the order their timers fire, and the
    composing flag stays set until the last one lands.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        selector: ReplySelector | None = None,
        *,
        reply_delay: float = DEFAULT_REPLY_DELAY,
        greeting: str = DEFAULT_GREETING,
        quick_prompts: Sequence[str] = DEFAULT_QUICK_PROMPTS,
        clock: Callable[[], datetime] = _now,
    ):
        if reply_delay < 0:
            raise ValueError(f"reply_delay must be non-negative, got {reply_delay}")
        self._scheduler = scheduler
        self._selector = selector or RandomReplySelector()
        self._reply_delay = reply_delay
        self._clock = clock
        self._ids = itertools.count(1)
        self._messages: list[ChatMessage] = []
        self._pending_replies = 0
        self._listeners: list[MessageListener] = []
        self.quick_prompts = tuple(quick_prompts)

        self._append(greeting, "assistant")

    @classmethod
    def from_config(
        cls,
        config: ChatConfig,
        scheduler: Scheduler,
        selector: ReplySelector | None = None,
    ) -> "MessageTimeline":
        """Build a timeline from the ``chat`` config section."""
        return cls(
            scheduler,
            selector or RandomReplySelector(config.replies),
            reply_delay=config.reply_delay,
            greeting=config.greeting,
            quick_prompts=config.quick_prompts,
        )

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    @property
    def composing(self) -> bool:
        return self._pending_replies > 0

    @property
    def pending_replies(self) -> int:
        return self._pending_replies

    @property
    def show_quick_prompts(self) -> bool:
        """Quick prompts are offered until the first exchange starts."""
        return len(self._messages) == 1

    def __len__(self) -> int:
        return len(self._messages)

    def subscribe(self, listener: MessageListener) -> None:
        """Call ``listener`` with every message appended from now on."""
        self._listeners.append(listener)

    def submit(self, text: str) -> ChatMessage | None:
        """Append a user message and schedule the assistant's reply.

        Blank input is ignored and returns None. The caller may clear its
        input buffer once this returns.
        """
        trimmed = text.strip()
        if not trimmed:
            logger.debug("blank submission ignored")
            return None

        self._scheduler.schedule(self._reply_delay, lambda: self._deliver_reply(trimmed))
        message = self._append(trimmed, "user")
        self._pending_replies += 1
        logger.info("message %d submitted, reply due in %.2fs", message.id, self._reply_delay)
        self._notify(message)
        return message

    def submit_quick_prompt(self, index: int) -> ChatMessage | None:
        """Submit one of the canned prompts by position."""
        if not 0 <= index < len(self.quick_prompts):
            raise InvalidIndexError(index, len(self.quick_prompts), "Quick prompt")
        return self.submit(self.quick_prompts[index])

    def select_reply(self, user_text: str) -> str:
        return self._selector.select_reply(user_text)

    def _deliver_reply(self, user_text: str) -> None:
        reply = self._append(self.select_reply(user_text), "assistant")
        self._pending_replies -= 1
        logger.info("reply %d delivered (%d pending)", reply.id, self._pending_replies)
        self._notify(reply)

    def _append(self, text: str, sender: Sender) -> ChatMessage:
        message = ChatMessage(
            id=next(self._ids), text=text, sender=sender, timestamp=self._clock()
        )
        self._messages.append(message)
        return message

    def _notify(self, message: ChatMessage) -> None:
        for listener in list(self._listeners):
            listener(message)
