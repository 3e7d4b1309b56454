"""Focus screen models - app roster, study sessions and countdown timer."""

from .roster import (
    BlockableTarget,
    StudySessionRecord,
    default_roster,
    default_study_sessions,
)
from .timer import (
    DEFAULT_FOCUS_SECONDS,
    CountdownTimer,
    FocusSession,
    TimerPhase,
    format_time,
)

__all__ = [
    "BlockableTarget",
    "StudySessionRecord",
    "default_roster",
    "default_study_sessions",
    "CountdownTimer",
    "FocusSession",
    "TimerPhase",
    "DEFAULT_FOCUS_SECONDS",
    "format_time",
]
