"""Shared test fixtures and configuration.

Keeps tests away from the real config/log directories and provides the
virtual-clock scheduler used by the chat and focus tests.
"""

from __future__ import annotations

import logging
import random
from unittest.mock import patch

import pytest

from studymate_cli.core.scheduler import ManualScheduler
from studymate_cli.models.focus import BlockableTarget, StudySessionRecord
from studymate_cli.services.focus_session_service import FocusSessionController
from studymate_cli.services.message_timeline import MessageTimeline
from studymate_cli.services.reply_service import RandomReplySelector


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point config and log directories at *tmp_path* for every test."""
    import studymate_cli.utils.logger as logger_mod
    from studymate_cli.services.config_service import get_config_service

    config_dir = tmp_path / "config"
    log_dir = tmp_path / "logs"

    get_config_service.cache_clear()
    logger_mod._logger = None
    with patch(
        "studymate_cli.services.config_service.user_config_dir",
        return_value=str(config_dir),
    ):
        with patch("studymate_cli.utils.logger.user_log_dir", return_value=str(log_dir)):
            yield tmp_path

    get_config_service.cache_clear()
    app_logger = logging.getLogger("studymate_cli")
    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)
    app_logger.propagate = True
    logger_mod._logger = None


# ---------------------------------------------------------------------------
# Core fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def scheduler() -> ManualScheduler:
    """Virtual-clock scheduler starting at t=0."""
    return ManualScheduler()


@pytest.fixture()
def timeline(scheduler) -> MessageTimeline:
    """Timeline with the default greeting and a seeded reply selector."""
    return MessageTimeline(scheduler, RandomReplySelector(rng=random.Random(7)))


@pytest.fixture()
def small_roster() -> list[BlockableTarget]:
    return [
        BlockableTarget("Facebook", "📘", False, "2h 15m"),
        BlockableTarget("Instagram", "📷", True, "1h 45m"),
        BlockableTarget("TikTok", "🎵", False, "3h 20m"),
    ]


@pytest.fixture()
def small_sessions() -> list[StudySessionRecord]:
    return [
        StudySessionRecord("Math", "45 min", True),
        StudySessionRecord("Science", "60 min", False),
    ]


@pytest.fixture()
def controller(scheduler) -> FocusSessionController:
    """Controller over the default seed roster and sessions."""
    return FocusSessionController(scheduler)
