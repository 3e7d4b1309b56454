"""Core scheduling primitives shared by the chat and focus components."""

from studymate_cli.core.scheduler import (
    AsyncioScheduler,
    ManualScheduler,
    ScheduledAction,
    Scheduler,
)

__all__ = [
    "Scheduler",
    "ScheduledAction",
    "AsyncioScheduler",
    "ManualScheduler",
]
