"""Countdown timer state machine for focus sessions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

logger = logging.getLogger(__name__)

TimerPhase = Literal["idle", "running", "paused", "finished"]

DEFAULT_FOCUS_SECONDS = 25 * 60


def format_time(seconds: int) -> str:
    """Format a second count as zero-padded ``MM:SS``."""
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")
    mins, secs = divmod(int(seconds), 60)
    return f"{mins:02d}:{secs:02d}"


@dataclass(frozen=True)
class FocusSession:
    """Read-only snapshot of the focus screen's session state."""

    study_mode_active: bool
    remaining_seconds: int
    timer_running: bool
    phase: TimerPhase = "idle"


class CountdownTimer:
    """Explicit FSM over idle / running / paused / finished.

    Every transition method returns True when the state changed. Events that
    do not apply to the current phase are ignored, which is what keeps a tick
    that was already in flight from decrementing a paused or reset timer.
    """

    def __init__(self, default_seconds: int = DEFAULT_FOCUS_SECONDS):
        if default_seconds <= 0:
            raise ValueError(f"default_seconds must be positive, got {default_seconds}")
        self.default_seconds = default_seconds
        self.remaining_seconds = default_seconds
        self.phase: TimerPhase = "idle"

    @property
    def running(self) -> bool:
        return self.phase == "running"

    @property
    def finished(self) -> bool:
        return self.phase == "finished"

    def start(self) -> bool:
        if self.phase not in ("idle", "paused"):
            return False
        return self._move("running")

    def pause(self) -> bool:
        if self.phase != "running":
            return False
        return self._move("paused")

    def reset(self) -> bool:
        changed = self.phase != "idle" or self.remaining_seconds != self.default_seconds
        self.remaining_seconds = self.default_seconds
        self._move("idle")
        return changed

    def tick(self) -> bool:
        """Decrement by one second; only valid while running."""
        if self.phase != "running":
            logger.debug("tick discarded in phase %s", self.phase)
            return False
        self.remaining_seconds = max(0, self.remaining_seconds - 1)
        if self.remaining_seconds == 0:
            self._move("finished")
        return True

    def _move(self, phase: TimerPhase) -> bool:
        if phase != self.phase:
            logger.debug(
                "timer %s -> %s at %s", self.phase, phase, format_time(self.remaining_seconds)
            )
        self.phase = phase
        return True
