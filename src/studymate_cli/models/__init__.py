"""Data models for StudyMate CLI."""

from studymate_cli.models.chat import ChatMessage, Sender
from studymate_cli.models.exceptions import (
    ConfigError,
    InvalidIndexError,
    StudyMateError,
)

__all__ = [
    "ChatMessage",
    "Sender",
    "StudyMateError",
    "InvalidIndexError",
    "ConfigError",
]
