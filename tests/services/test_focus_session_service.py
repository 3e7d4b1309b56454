"""Unit tests for FocusSessionController.

The countdown is stepped with the ManualScheduler virtual clock, one second
per tick.
"""

from __future__ import annotations

import pytest

from studymate_cli.models.config_models import FocusConfig
from studymate_cli.models.exceptions import InvalidIndexError, StudyMateError
from studymate_cli.services.focus_session_service import FocusSessionController


# ---------------------------------------------------------------------------
# Initial state
# ---------------------------------------------------------------------------


class TestInitialState:
    """Tests for a freshly built controller."""

    def test_fresh_session(self, controller) -> None:
        """Study mode is off and the timer is idle at 25:00."""
        session = controller.session
        assert session.study_mode_active is False
        assert session.remaining_seconds == 1500
        assert session.timer_running is False
        assert session.phase == "idle"
        assert controller.display_time == "25:00"

    def test_seed_data(self, controller) -> None:
        """The default roster and sessions are loaded."""
        assert len(controller.roster) == 8
        assert controller.blocked_count == 3
        assert controller.completed_count == 2
        assert controller.total_sessions == 4

    def test_custom_seed(self, scheduler, small_roster, small_sessions) -> None:
        """Injected roster and sessions replace the defaults."""
        controller = FocusSessionController(scheduler, small_roster, small_sessions)
        assert controller.roster == tuple(small_roster)
        assert controller.completed_count == 1

    def test_roster_copy_is_isolated(self, scheduler, small_roster) -> None:
        """Mutating the input list does not affect the controller."""
        controller = FocusSessionController(scheduler, small_roster)
        small_roster.clear()
        assert len(controller.roster) == 3


# ---------------------------------------------------------------------------
# toggle_block
# ---------------------------------------------------------------------------


class TestToggleBlock:
    """Tests for FocusSessionController.toggle_block()."""

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_flips_only_target(self, scheduler, small_roster, index) -> None:
        """Only the addressed app changes."""
        controller = FocusSessionController(scheduler, small_roster)
        before = [t.blocked for t in controller.roster]

        controller.toggle_block(index)

        after = [t.blocked for t in controller.roster]
        for i, (was, now) in enumerate(zip(before, after)):
            assert now == (not was if i == index else was)

    def test_single_entry_roster(self, scheduler, small_roster) -> None:
        """A one-app roster can be toggled."""
        controller = FocusSessionController(scheduler, small_roster[:1])
        controller.toggle_block(0)
        assert controller.roster[0].blocked is True

    def test_toggle_twice_restores(self, controller) -> None:
        """Two toggles restore the original flag."""
        before = controller.roster
        controller.toggle_block(4)
        controller.toggle_block(4)
        assert controller.roster == before

    def test_does_not_touch_session(self, controller) -> None:
        """Toggling an app leaves the timer and study mode alone."""
        before = controller.session
        controller.toggle_block(0)
        assert controller.session == before

    @pytest.mark.parametrize("index", [8, 100, -1])
    def test_out_of_range_raises(self, controller, index) -> None:
        """Indices outside the roster, negative included, raise InvalidIndexError."""
        with pytest.raises(InvalidIndexError) as exc_info:
            controller.toggle_block(index)

        assert exc_info.value.index == index
        assert isinstance(exc_info.value, IndexError)
        assert isinstance(exc_info.value, StudyMateError)


# ---------------------------------------------------------------------------
# toggle_study_mode
# ---------------------------------------------------------------------------


class TestStudyMode:
    """Tests for FocusSessionController.toggle_study_mode()."""

    def test_entering_blocks_everything(self, controller) -> None:
        """Entering study mode blocks every app."""
        assert controller.toggle_study_mode() is True
        assert controller.session.study_mode_active is True
        assert all(t.blocked for t in controller.roster)

    def test_exiting_keeps_blocks(self, controller) -> None:
        """Leaving study mode keeps every app blocked."""
        controller.toggle_study_mode()
        controller.toggle_block(0)
        snapshot = [t.blocked for t in controller.roster]

        assert controller.toggle_study_mode() is False
        assert [t.blocked for t in controller.roster] == snapshot

    def test_prior_states_not_restored_by_default(self, controller) -> None:
        """Apps allowed before study mode stay blocked after it."""
        controller.toggle_study_mode()
        controller.toggle_study_mode()
        assert all(t.blocked for t in controller.roster)

    def test_restore_option_brings_back_prior_flags(self, scheduler, small_roster) -> None:
        """With restore enabled, leaving study mode restores the saved flags."""
        controller = FocusSessionController(
            scheduler, small_roster, restore_blocks_on_exit=True
        )
        before = [t.blocked for t in controller.roster]

        controller.toggle_study_mode()
        assert all(t.blocked for t in controller.roster)
        controller.toggle_study_mode()

        assert [t.blocked for t in controller.roster] == before

    def test_individual_toggle_allowed_in_study_mode(self, controller) -> None:
        """Single apps can still be toggled while study mode is on."""
        controller.toggle_study_mode()
        controller.toggle_block(2)
        assert controller.roster[2].blocked is False

    def test_does_not_touch_timer(self, scheduler, controller) -> None:
        """Study mode does not start or stop the countdown."""
        controller.start_timer()
        controller.toggle_study_mode()
        scheduler.advance(1)
        assert controller.session.remaining_seconds == 1499


# ---------------------------------------------------------------------------
# Countdown
# ---------------------------------------------------------------------------


class TestCountdown:
    """Tests for start, pause and reset driven by the virtual clock."""

    def test_three_ticks(self, scheduler, controller) -> None:
        """Three seconds of running removes three seconds."""
        controller.start_timer()
        scheduler.advance(3)

        assert controller.session.remaining_seconds == 1497
        assert controller.session.timer_running is True

    def test_no_decrement_before_first_second(self, scheduler, controller) -> None:
        """Nothing is counted before the first full second."""
        controller.start_timer()
        scheduler.advance(0.999)
        assert controller.session.remaining_seconds == 1500

    def test_double_start_does_not_double_tick(self, scheduler, controller) -> None:
        """A second start() does not schedule a second tick chain."""
        controller.start_timer()
        controller.start_timer()
        scheduler.advance(2)

        assert controller.session.remaining_seconds == 1498
        assert scheduler.pending_count == 1

    def test_pause_preserves_remaining(self, scheduler, controller) -> None:
        """Pausing freezes the remaining time."""
        controller.start_timer()
        scheduler.advance(10)
        controller.pause_timer()
        scheduler.advance(30)

        session = controller.session
        assert session.remaining_seconds == 1490
        assert session.timer_running is False
        assert session.phase == "paused"
        assert scheduler.pending_count == 0

    def test_pause_then_start_resumes_exactly(self, scheduler, controller) -> None:
        """Resuming counts on from the paused value."""
        controller.start_timer()
        scheduler.advance(5.5)
        controller.pause_timer()
        held = controller.session.remaining_seconds

        controller.start_timer()
        assert controller.session.remaining_seconds == held
        scheduler.advance(1)
        assert controller.session.remaining_seconds == held - 1

    def test_redundant_pause_is_noop(self, controller) -> None:
        """Pausing a paused timer changes nothing."""
        controller.pause_timer()
        controller.pause_timer()
        assert controller.session.phase == "idle"

    @pytest.mark.parametrize("elapsed", [0, 1, 42])
    def test_reset_restores_default(self, scheduler, controller, elapsed) -> None:
        """reset() stops the countdown and restores 25:00."""
        controller.start_timer()
        scheduler.advance(elapsed)
        if elapsed % 2:
            controller.pause_timer()

        controller.reset_timer()
        scheduler.advance(5)

        assert controller.session.remaining_seconds == 1500
        assert controller.session.timer_running is False
        assert controller.session.phase == "idle"

    def test_reset_when_fresh(self, controller) -> None:
        """Resetting an untouched controller is harmless."""
        controller.reset_timer()
        assert controller.session.remaining_seconds == 1500
        assert controller.session.timer_running is False

    def test_stray_tick_after_pause_discarded(self, scheduler, controller) -> None:
        """A tick firing after pause does not count."""
        controller.start_timer()
        controller._timer.pause()  # pause without cancelling the pending tick
        scheduler.advance(1)
        assert controller.session.remaining_seconds == 1500


class TestCountdownCompletion:
    """Tests for the countdown reaching zero."""

    def test_stops_at_zero(self, scheduler) -> None:
        """The countdown stops at zero and schedules nothing more."""
        controller = FocusSessionController(scheduler, default_seconds=3)
        finished = []
        controller.on_timer_finished(lambda: finished.append(controller.display_time))

        controller.start_timer()
        scheduler.advance(10)

        session = controller.session
        assert session.remaining_seconds == 0
        assert session.timer_running is False
        assert session.phase == "finished"
        assert finished == ["00:00"]
        assert scheduler.pending_count == 0

    def test_start_after_finish_is_noop(self, scheduler) -> None:
        """start() does nothing once the timer has finished."""
        controller = FocusSessionController(scheduler, default_seconds=1)
        controller.start_timer()
        scheduler.advance(1)

        controller.start_timer()

        assert controller.session.phase == "finished"
        assert scheduler.pending_count == 0

    def test_finish_leaves_study_mode(self, scheduler) -> None:
        """Finishing does not change study mode."""
        controller = FocusSessionController(scheduler, default_seconds=1)
        controller.toggle_study_mode()
        controller.start_timer()
        scheduler.advance(1)
        assert controller.session.study_mode_active is True

    def test_reset_after_finish(self, scheduler) -> None:
        """reset() brings a finished timer back to idle."""
        controller = FocusSessionController(scheduler, default_seconds=2)
        controller.start_timer()
        scheduler.advance(2)

        controller.reset_timer()

        assert controller.session.remaining_seconds == 2
        assert controller.session.phase == "idle"


# ---------------------------------------------------------------------------
# Listeners, config and helpers
# ---------------------------------------------------------------------------


class TestListenersAndConfig:
    """Tests for change listeners and config wiring."""

    def test_listener_called_on_changes(self, scheduler, controller) -> None:
        """Listeners are told about each state change."""
        calls = []
        controller.subscribe(lambda: calls.append(controller.session.remaining_seconds))

        controller.start_timer()
        scheduler.advance(2)
        controller.toggle_block(0)

        assert calls == [1500, 1499, 1498, 1498]

    def test_from_config(self, scheduler) -> None:
        """Timer length and tick interval come from FocusConfig."""
        config = FocusConfig(default_seconds=90, tick_seconds=0.5)
        controller = FocusSessionController.from_config(config, scheduler)

        controller.start_timer()
        scheduler.advance(1)

        assert controller.session.remaining_seconds == 88

    def test_format_time_helper(self, controller) -> None:
        """The controller formats times as MM:SS."""
        assert controller.format_time(65) == "01:05"
        assert controller.format_time(0) == "00:00"
        assert controller.format_time(1500) == "25:00"
