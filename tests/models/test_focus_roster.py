"""Tests for roster and study-session models."""

from __future__ import annotations

import dataclasses

import pytest

from studymate_cli.models.focus import (
    BlockableTarget,
    StudySessionRecord,
    default_roster,
    default_study_sessions,
)


class TestBlockableTarget:
    """Tests for the BlockableTarget dataclass."""

    def test_toggled_returns_new_instance(self) -> None:
        """toggled() flips the flag on a copy and keeps other fields."""
        target = BlockableTarget("Facebook", "📘", False, "2h 15m")

        flipped = target.toggled()

        assert flipped.blocked is True
        assert target.blocked is False
        assert flipped.name == "Facebook"
        assert flipped.time_spent == "2h 15m"

    def test_with_blocked(self) -> None:
        """with_blocked() sets an explicit flag."""
        target = BlockableTarget("TikTok", "🎵", False)
        assert target.with_blocked(True).blocked is True
        assert target.with_blocked(False) == target

    def test_frozen(self) -> None:
        """Targets are immutable."""
        target = BlockableTarget("YouTube", "📺")
        with pytest.raises(dataclasses.FrozenInstanceError):
            target.blocked = True  # type: ignore[misc]


class TestSeedData:
    """Tests for the built-in roster and sessions."""

    def test_default_roster_has_eight_apps(self) -> None:
        """Eight apps, three of them blocked."""
        roster = default_roster()
        assert len(roster) == 8
        assert [t.blocked for t in roster].count(True) == 3

    def test_default_roster_returns_fresh_list(self) -> None:
        """Each call returns an independent list."""
        first = default_roster()
        first.pop()
        assert len(default_roster()) == 8

    def test_default_sessions(self) -> None:
        """Four sessions, two completed."""
        sessions = default_study_sessions()
        assert len(sessions) == 4
        assert sum(1 for s in sessions if s.completed) == 2
        assert all(isinstance(s, StudySessionRecord) for s in sessions)
