"""Assistant reply selection.

The timeline only depends on the ReplySelector interface, so a real reasoning
engine can replace the random catalog without touching MessageTimeline.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Sequence

from studymate_cli.models.chat import DEFAULT_REPLIES


class ReplySelector(ABC):
    """Produces the assistant's answer to a user message."""

    @abstractmethod
    def select_reply(self, user_text: str) -> str:
        """Return the reply text for ``user_text``."""


class RandomReplySelector(ReplySelector):
    """Uniform random choice from a fixed catalog; ``user_text`` is ignored."""

    def __init__(self, catalog: Sequence[str] = DEFAULT_REPLIES, rng: random.Random | None = None):
        if not catalog:
            raise ValueError("reply catalog must not be empty")
        self.catalog = tuple(catalog)
        self._rng = rng or random.Random()

    def select_reply(self, user_text: str) -> str:
        return self._rng.choice(self.catalog)
