"""Focus screen controller: study mode, app blocking and the countdown.

The controller owns the roster, the study-session list and the countdown for
the lifetime of one focus screen. Callers read snapshots through the
properties and change state only through the methods below.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from studymate_cli.core.scheduler import ScheduledAction, Scheduler
from studymate_cli.models.config_models import FocusConfig
from studymate_cli.models.exceptions import InvalidIndexError
from studymate_cli.models.focus.roster import (
    BlockableTarget,
    StudySessionRecord,
    default_roster,
    default_study_sessions,
)
from studymate_cli.models.focus.timer import (
    DEFAULT_FOCUS_SECONDS,
    CountdownTimer,
    FocusSession,
    TimerPhase,
    format_time,
)

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class FocusSessionController:
    """Drives the focus screen state."""

    def __init__(
        self,
        scheduler: Scheduler,
        roster: Sequence[BlockableTarget] | None = None,
        sessions: Sequence[StudySessionRecord] | None = None,
        *,
        default_seconds: int = DEFAULT_FOCUS_SECONDS,
        tick_seconds: float = 1.0,
        restore_blocks_on_exit: bool = False,
    ):
        self._scheduler = scheduler
        self._targets = list(default_roster() if roster is None else roster)
        self._sessions = tuple(default_study_sessions() if sessions is None else sessions)
        self._timer = CountdownTimer(default_seconds)
        self._tick_seconds = tick_seconds
        self._restore_blocks_on_exit = restore_blocks_on_exit
        self._saved_blocks: list[bool] | None = None
        self._study_mode = False
        self._pending_tick: ScheduledAction | None = None
        self._listeners: list[Listener] = []
        self._finished_listeners: list[Listener] = []

    @classmethod
    def from_config(
        cls,
        config: FocusConfig,
        scheduler: Scheduler,
        roster: Sequence[BlockableTarget] | None = None,
        sessions: Sequence[StudySessionRecord] | None = None,
    ) -> "FocusSessionController":
        """Build a controller from the ``focus`` config section."""
        return cls(
            scheduler,
            roster,
            sessions,
            default_seconds=config.default_seconds,
            tick_seconds=config.tick_seconds,
            restore_blocks_on_exit=config.restore_blocks_on_exit,
        )

    # -- read access -------------------------------------------------------

    @property
    def roster(self) -> tuple[BlockableTarget, ...]:
        return tuple(self._targets)

    @property
    def sessions(self) -> tuple[StudySessionRecord, ...]:
        return self._sessions

    @property
    def session(self) -> FocusSession:
        return FocusSession(
            study_mode_active=self._study_mode,
            remaining_seconds=self._timer.remaining_seconds,
            timer_running=self._timer.running,
            phase=self._timer.phase,
        )

    @property
    def phase(self) -> TimerPhase:
        return self._timer.phase

    @property
    def display_time(self) -> str:
        return format_time(self._timer.remaining_seconds)

    @property
    def blocked_count(self) -> int:
        return sum(1 for target in self._targets if target.blocked)

    @property
    def completed_count(self) -> int:
        return sum(1 for record in self._sessions if record.completed)

    @property
    def total_sessions(self) -> int:
        return len(self._sessions)

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener`` after every state change."""
        self._listeners.append(listener)

    def on_timer_finished(self, listener: Listener) -> None:
        """Call ``listener`` once each time the countdown reaches zero."""
        self._finished_listeners.append(listener)

    # -- roster --------------------------------------------------------------

    def toggle_block(self, index: int) -> BlockableTarget:
        """Flip the block flag of one target."""
        if not 0 <= index < len(self._targets):
            raise InvalidIndexError(index, len(self._targets))
        target = self._targets[index].toggled()
        self._targets[index] = target
        logger.info("%s %s", target.name, "blocked" if target.blocked else "allowed")
        self._notify()
        return target

    def toggle_study_mode(self) -> bool:
        """Turn study mode on or off; entering it blocks every target.

        Returns the new study-mode flag.
        """
        self._study_mode = not self._study_mode
        if self._study_mode:
            if self._restore_blocks_on_exit:
                self._saved_blocks = [target.blocked for target in self._targets]
            self._targets = [target.with_blocked(True) for target in self._targets]
            logger.info("study mode on, %d apps blocked", len(self._targets))
        else:
            if self._saved_blocks is not None:
                self._targets = [
                    target.with_blocked(blocked)
                    for target, blocked in zip(self._targets, self._saved_blocks)
                ]
                self._saved_blocks = None
            logger.info("study mode off")
        self._notify()
        return self._study_mode

    # -- countdown -------------------------------------------------------------

    def start_timer(self) -> None:
        if not self._timer.start():
            logger.debug("start ignored in phase %s", self._timer.phase)
            return
        self._schedule_tick()
        self._notify()

    def pause_timer(self) -> None:
        self._cancel_tick()
        if self._timer.pause():
            self._notify()

    def reset_timer(self) -> None:
        self._cancel_tick()
        if self._timer.reset():
            self._notify()

    def format_time(self, seconds: int) -> str:
        return format_time(seconds)

    def _schedule_tick(self) -> None:
        self._pending_tick = self._scheduler.schedule(self._tick_seconds, self._on_tick)

    def _cancel_tick(self) -> None:
        self._scheduler.cancel(self._pending_tick)
        self._pending_tick = None

    def _on_tick(self) -> None:
        self._pending_tick = None
        # The running check happens here, at fire time.
        if not self._timer.tick():
            return
        if self._timer.running:
            self._schedule_tick()
        self._notify()
        if self._timer.finished:
            logger.info("focus countdown finished")
            for listener in list(self._finished_listeners):
                listener()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
