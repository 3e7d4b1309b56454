"""StudyMate CLI - study companion with an assistant chat and focus timer."""

__version__ = "0.1.0"
