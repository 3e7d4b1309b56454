"""
Delayed-action scheduling.

A scheduler runs a callback once after a delay and lets the caller cancel it
before it fires. Repeating behaviour (the focus countdown) is layered on top by
re-scheduling from inside the callback.

Two implementations are provided:

- AsyncioScheduler runs actions on the current asyncio event loop. This is what
  the Textual apps and the ``chat ask`` command use.
- ManualScheduler keeps a virtual clock that only moves when ``advance`` is
  called, so tests and scripted drivers can step time deterministically.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Literal

logger = logging.getLogger(__name__)

ActionState = Literal["pending", "fired", "cancelled"]


class ScheduledAction:
    """Handle returned by ``Scheduler.schedule``."""

    def __init__(self, action: Callable[[], None], due: float, seq: int):
        self.action = action
        self.due = due
        self.seq = seq
        self.state: ActionState = "pending"
        self._timer: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self.state == "pending"

    def fire(self) -> None:
        """Run the action unless it already fired or was cancelled."""
        if self.state != "pending":
            return
        self.state = "fired"
        self.action()

    def __lt__(self, other: "ScheduledAction") -> bool:
        return (self.due, self.seq) < (other.due, other.seq)

    def __repr__(self) -> str:
        return f"ScheduledAction(due={self.due:.3f}, seq={self.seq}, state={self.state})"


class Scheduler(ABC):
    """Single-shot deferred callbacks with cancellation."""

    def __init__(self) -> None:
        self._seq = itertools.count()

    @abstractmethod
    def now(self) -> float:
        """Current time on this scheduler's clock, in seconds."""

    @abstractmethod
    def schedule(self, delay: float, action: Callable[[], None]) -> ScheduledAction:
        """Run ``action`` once after ``delay`` seconds."""

    def cancel(self, handle: ScheduledAction | None) -> None:
        """Cancel a pending action. Fired or cancelled handles are ignored."""
        if handle is None or not handle.pending:
            logger.debug("cancel ignored for %r", handle)
            return
        handle.state = "cancelled"
        if handle._timer is not None:
            handle._timer.cancel()
            handle._timer = None

    def _make_action(self, delay: float, action: Callable[[], None]) -> ScheduledAction:
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        return ScheduledAction(action, self.now() + delay, next(self._seq))


class AsyncioScheduler(Scheduler):
    """Scheduler backed by ``loop.call_later``.

    The loop is resolved lazily at schedule time, so the scheduler can be
    built before the event loop starts (e.g. in a Textual app's ``__init__``).
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        super().__init__()
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return self.loop.time()

    def schedule(self, delay: float, action: Callable[[], None]) -> ScheduledAction:
        handle = self._make_action(delay, action)
        handle._timer = self.loop.call_later(delay, handle.fire)
        return handle


class ManualScheduler(Scheduler):
    """Scheduler driven by an explicit virtual clock.

    Due actions fire in (due time, scheduling order). Actions scheduled from
    inside a callback are picked up by the same ``advance`` call if they fall
    inside the advanced window.
    """

    def __init__(self, start: float = 0.0):
        super().__init__()
        self._now = start
        self._queue: list[ScheduledAction] = []

    def now(self) -> float:
        return self._now

    def schedule(self, delay: float, action: Callable[[], None]) -> ScheduledAction:
        handle = self._make_action(delay, action)
        heapq.heappush(self._queue, handle)
        return handle

    @property
    def pending_count(self) -> int:
        return sum(1 for handle in self._queue if handle.pending)

    def next_due(self) -> float | None:
        """Due time of the earliest pending action, if any."""
        self._discard_inactive()
        return self._queue[0].due if self._queue else None

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing everything that becomes due.

        Returns the number of actions fired.
        """
        if seconds < 0:
            raise ValueError(f"cannot move the clock backwards ({seconds})")
        target = self._now + seconds
        fired = 0
        while True:
            self._discard_inactive()
            if not self._queue or self._queue[0].due > target:
                break
            handle = heapq.heappop(self._queue)
            self._now = handle.due
            handle.fire()
            fired += 1
        self._now = target
        return fired

    def run_pending(self) -> int:
        """Fire actions already due at the current time."""
        return self.advance(0)

    def _discard_inactive(self) -> None:
        while self._queue and not self._queue[0].pending:
            heapq.heappop(self._queue)
