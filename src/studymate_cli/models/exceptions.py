"""Exception types raised by StudyMate components."""

from __future__ import annotations


class StudyMateError(Exception):
    """Base class for StudyMate errors."""


class InvalidIndexError(StudyMateError, IndexError):
    """Raised when an index does not address an existing roster entry or prompt."""

    def __init__(self, index: int, size: int, what: str = "Roster index"):
        super().__init__(f"{what} {index} out of range (0..{size - 1})")
        self.index = index
        self.size = size


class ConfigError(StudyMateError, RuntimeError):
    """Raised when configuration cannot be loaded, saved or updated."""
