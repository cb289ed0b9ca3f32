"""
Tests for the round state machine.

Covers tap scoring, countdown ticks, the end-of-round transition,
reset, and snapshot/restore including clamping of bad input.
"""

import pytest

from core.round import GameRoundController, RoundState


# ── Initial state ───────────────────────────────────────────────────────────


class TestInitialState:
    def test_starts_idle(self, controller):
        assert controller.state == RoundState.IDLE
        assert not controller.is_running
        assert not controller.is_ended

    def test_starts_with_zero_score(self, controller):
        assert controller.score == 0

    def test_starts_with_full_time(self, controller):
        assert controller.remaining_ms == 60000
        assert controller.fill() == 1.0
        assert controller.seconds_left() == 60

    def test_exposes_configuration(self):
        c = GameRoundController(10000, 250)
        assert c.initial_duration_ms == 10000
        assert c.tick_interval_ms == 250


# ── Tapping ─────────────────────────────────────────────────────────────────


class TestTap:
    def test_first_tap_starts_round(self, controller):
        assert controller.tap() == 1
        assert controller.state == RoundState.RUNNING

    def test_score_counts_taps(self, controller):
        for _ in range(25):
            controller.tap()
        assert controller.score == 25

    def test_taps_between_ticks_all_count(self, controller):
        controller.tap()
        controller.tick(1000)
        controller.tap()
        controller.tick(1000)
        controller.tap()
        assert controller.score == 3

    def test_tap_after_end_is_ignored(self, controller):
        controller.tap()
        controller.tick(60000)
        assert controller.tap() == 1
        assert controller.score == 1
        assert controller.state == RoundState.ENDED


# ── Ticking ─────────────────────────────────────────────────────────────────


class TestTick:
    def test_tick_while_idle_is_noop(self, controller):
        assert controller.tick(1000) is False
        assert controller.remaining_ms == 60000
        assert controller.state == RoundState.IDLE

    def test_five_ticks(self):
        c = GameRoundController()
        c.reset(10000, 1000)
        c.tap()
        for _ in range(5):
            assert c.tick(1000) is False
        assert c.remaining_ms == 5000
        assert c.state == RoundState.RUNNING

    def test_tick_reaching_zero_ends_round(self, controller):
        controller.tap()
        assert controller.tick(60000) is True
        assert controller.remaining_ms == 0
        assert controller.state == RoundState.ENDED

    def test_tick_never_goes_negative(self, controller):
        controller.tap()
        controller.tick(59500)
        assert controller.tick(1000) is True
        assert controller.remaining_ms == 0

    def test_round_over_signalled_once(self, controller):
        controller.tap()
        assert controller.tick(60000) is True
        assert controller.tick(1000) is False
        assert controller.remaining_ms == 0

    def test_negative_elapsed_does_not_add_time(self, controller):
        controller.tap()
        controller.tick(1000)
        controller.tick(-5000)
        assert controller.remaining_ms == 59000

    def test_seconds_left_rounds_down(self, controller):
        controller.tap()
        controller.tick(1500)
        assert controller.seconds_left() == 58

    def test_fill(self, controller):
        controller.tap()
        controller.tick(15000)
        assert controller.fill() == pytest.approx(0.75)


# ── Reset ───────────────────────────────────────────────────────────────────


class TestReset:
    def test_reset_after_end(self, controller):
        controller.tap()
        controller.tick(60000)
        controller.reset()
        assert controller.state == RoundState.IDLE
        assert controller.score == 0
        assert controller.remaining_ms == 60000

    def test_reset_with_new_duration(self, controller):
        controller.reset(30000, 500)
        assert controller.remaining_ms == 30000
        assert controller.initial_duration_ms == 30000
        assert controller.tick_interval_ms == 500

    def test_reset_without_args_keeps_config(self, controller):
        controller.reset(30000, 500)
        controller.tap()
        controller.reset()
        assert controller.remaining_ms == 30000
        assert controller.tick_interval_ms == 500

    def test_tap_after_reset_starts_new_round(self, controller):
        controller.tap()
        controller.tick(60000)
        controller.reset()
        assert controller.tap() == 1
        assert controller.state == RoundState.RUNNING

    def test_full_scenario(self):
        c = GameRoundController()
        c.reset(60000, 1000)
        assert c.tap() == 1
        assert c.state == RoundState.RUNNING
        c.tick(60000)
        assert c.remaining_ms == 0
        assert c.state == RoundState.ENDED
        c.tap()
        assert c.score == 1


# ── Snapshot / restore ──────────────────────────────────────────────────────


class TestSnapshotRestore:
    def test_snapshot_does_not_mutate(self, controller):
        controller.tap()
        controller.tick(2000)
        assert controller.snapshot() == (1, 58000)
        assert controller.snapshot() == (1, 58000)
        assert controller.state == RoundState.RUNNING

    def test_round_trip_mid_round(self, controller):
        for _ in range(7):
            controller.tap()
        controller.tick(12000)
        score, remaining = controller.snapshot()

        other = GameRoundController(60000, 1000)
        other.restore(score, remaining)
        assert other.snapshot() == (7, 48000)
        assert other.state == RoundState.RUNNING

    def test_restore_with_time_left_is_running(self, controller):
        controller.restore(4, 30000)
        assert controller.state == RoundState.RUNNING
        assert controller.tap() == 5

    def test_restore_fresh_round_resumes_running(self, controller):
        controller.restore(0, 60000)
        assert controller.state == RoundState.RUNNING

    def test_restore_with_no_time_left_is_ended(self, controller):
        controller.restore(3, 0)
        assert controller.state == RoundState.ENDED
        assert controller.tap() == 3

    def test_restore_clamps_negative_time(self, controller):
        controller.restore(2, -400)
        assert controller.remaining_ms == 0
        assert controller.state == RoundState.ENDED

    def test_restore_clamps_time_above_duration(self, controller):
        controller.restore(2, 90000)
        assert controller.remaining_ms == 60000

    def test_restore_clamps_negative_score(self, controller):
        controller.restore(-3, 1000)
        assert controller.score == 0

    def test_ticking_resumes_after_restore(self, controller):
        controller.restore(10, 1000)
        assert controller.tick(1000) is True
        assert controller.state == RoundState.ENDED
