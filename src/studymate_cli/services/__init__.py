"""Service layer for StudyMate CLI."""

from studymate_cli.services.focus_session_service import FocusSessionController
from studymate_cli.services.message_timeline import MessageTimeline
from studymate_cli.services.reply_service import RandomReplySelector, ReplySelector

__all__ = [
    "MessageTimeline",
    "FocusSessionController",
    "ReplySelector",
    "RandomReplySelector",
]
