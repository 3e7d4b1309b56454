"""Blockable app roster and study-session records for the focus screen."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class BlockableTarget:
    """An app that can be blocked while studying.

    ``icon`` and ``time_spent`` are display strings supplied with the seed
    data; nothing here computes them.
    """

    name: str
    icon: str
    blocked: bool = False
    time_spent: str = ""

    def toggled(self) -> "BlockableTarget":
        return replace(self, blocked=not self.blocked)

    def with_blocked(self, blocked: bool) -> "BlockableTarget":
        return replace(self, blocked=blocked)


@dataclass(frozen=True)
class StudySessionRecord:
    """A planned study session shown on the focus screen."""

    subject: str
    duration: str
    completed: bool = False


def default_roster() -> list[BlockableTarget]:
    """Seed roster of social apps."""
    return [
        BlockableTarget("فيسبوك", "📘", False, "2h 15m"),
        BlockableTarget("إنستغرام", "📷", True, "1h 45m"),
        BlockableTarget("تيك توك", "🎵", True, "3h 20m"),
        BlockableTarget("سناب شات", "👻", False, "45m"),
        BlockableTarget("تويتر", "🐦", True, "1h 10m"),
        BlockableTarget("يوتيوب", "📺", False, "2h 30m"),
        BlockableTarget("واتساب", "💬", False, "1h 5m"),
        BlockableTarget("تلغرام", "✈️", False, "30m"),
    ]


def default_study_sessions() -> list[StudySessionRecord]:
    """Seed list of today's study sessions."""
    return [
        StudySessionRecord("الرياضيات", "45 دقيقة", True),
        StudySessionRecord("الإنجليزية", "30 دقيقة", True),
        StudySessionRecord("العلوم", "60 دقيقة", False),
        StudySessionRecord("الجغرافيا", "25 دقيقة", False),
    ]
