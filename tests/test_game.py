"""
Tests for the play screen host.

Covers tap handling, countdown-driven round end, the round-over toast,
the about dialog, and the save-state / destroy / recreate lifecycle that
an orientation change goes through.
"""

import pygame
import pytest

from core.game import Game
from core.round import RoundState
from renderer import ui
from settings import SCORE_KEY, TIME_LEFT_KEY, TOAST_DURATION_S


def _click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def _tap_center(game):
    return ui.tap_button_rect(game.size).center


@pytest.fixture
def game(audio):
    g = Game(initial_duration_ms=10000, tick_interval_ms=1000)
    g.set_audio(audio)
    return g


# ── Tapping ─────────────────────────────────────────────────────────────────


class TestTapping:
    def test_fresh_game_is_idle(self, game):
        assert game.round.state == RoundState.IDLE
        assert not game.countdown.running

    def test_first_tap_starts_countdown(self, game, audio):
        game.tap()
        assert game.round.score == 1
        assert game.round.is_running
        assert game.countdown.running
        assert audio.played == ["round_start", "tap"]

    def test_click_on_button_taps(self, game):
        game.handle_event(_click(_tap_center(game)))
        game.handle_event(_click(_tap_center(game)))
        assert game.round.score == 2

    def test_click_outside_button_ignored(self, game):
        game.handle_event(_click((2, game.size[1] - 2)))
        assert game.round.score == 0

    def test_right_click_ignored(self, game):
        game.handle_event(_click(_tap_center(game), button=3))
        assert game.round.score == 0

    def test_space_taps(self, game):
        game.handle_event(_key(pygame.K_SPACE))
        assert game.round.score == 1

    def test_tap_starts_feedback_animations(self, game):
        game.tap()
        assert game.bounce.active
        assert game.blink.active

    def test_idle_round_does_not_count_down(self, game):
        game.update(5.0, (0, 0))
        assert game.round.remaining_ms == 10000


# ── Countdown and round end ─────────────────────────────────────────────────


class TestRoundEnd:
    def test_countdown_ticks_round(self, game):
        game.tap()
        for _ in range(3):
            game.update(1.0, (0, 0))
        assert game.round.remaining_ms == 7000

    def test_round_over_shows_toast_and_resets(self, game, audio):
        for _ in range(4):
            game.tap()
        for _ in range(10):
            game.update(1.0, (0, 0))

        assert game.toast == "Time's up! Your score was: 4"
        assert "round_over" in audio.played
        assert game.round.state == RoundState.IDLE
        assert game.round.score == 0
        assert game.round.remaining_ms == 10000
        assert not game.countdown.running

    def test_next_tap_starts_new_round(self, game):
        game.tap()
        for _ in range(10):
            game.update(1.0, (0, 0))
        game.tap()
        assert game.round.score == 1
        assert game.round.is_running

    def test_toast_expires(self, game):
        game.tap()
        for _ in range(10):
            game.update(1.0, (0, 0))
        game.update(TOAST_DURATION_S, (0, 0))
        assert game.toast is None


# ── About dialog ────────────────────────────────────────────────────────────


class TestAboutDialog:
    def test_options_button_opens_dialog(self, game, audio):
        game.handle_event(_click(ui.options_button_rect(game.size).center))
        assert game.about_open
        assert "dialog" in audio.played

    def test_f1_opens_dialog(self, game):
        game.handle_event(_key(pygame.K_F1))
        assert game.about_open

    def test_dialog_swallows_taps(self, game):
        game.open_about()
        game.handle_event(_key(pygame.K_SPACE))
        game.tap()
        assert game.round.score == 0

    def test_click_closes_dialog_without_tapping(self, game):
        game.open_about()
        game.handle_event(_click(_tap_center(game)))
        assert not game.about_open
        assert game.round.score == 0

    def test_escape_closes_dialog(self, game):
        game.open_about()
        game.handle_event(_key(pygame.K_ESCAPE))
        assert not game.about_open


# ── Lifecycle ───────────────────────────────────────────────────────────────


class TestLifecycle:
    def test_save_instance_state(self, game):
        game.tap()
        game.tap()
        game.update(3.0, (0, 0))
        state = game.save_instance_state()
        assert state == {SCORE_KEY: 2, TIME_LEFT_KEY: 7000}
        assert not game.countdown.running

    def test_recreate_resumes_running_round(self, game):
        game.tap()
        game.update(2.0, (0, 0))
        state = game.save_instance_state()
        game.destroy()

        rotated = Game(saved_state=state, orientation="landscape",
                       initial_duration_ms=10000, tick_interval_ms=1000)
        assert rotated.round.score == 1
        assert rotated.round.remaining_ms == 8000
        assert rotated.round.is_running
        assert rotated.countdown.running
        assert rotated.size == (640, 360)

        rotated.update(1.0, (0, 0))
        assert rotated.round.remaining_ms == 7000

    def test_recreate_from_fresh_round_starts_clock(self, game):
        state = game.save_instance_state()
        restored = Game(saved_state=state, initial_duration_ms=10000, tick_interval_ms=1000)
        assert restored.round.is_running
        assert restored.countdown.running

    def test_restore_finished_round_announces_and_resets(self):
        restored = Game(saved_state={SCORE_KEY: 3, TIME_LEFT_KEY: 0},
                        initial_duration_ms=10000, tick_interval_ms=1000)
        assert restored.toast == "Time's up! Your score was: 3"
        assert restored.round.state == RoundState.IDLE
        assert not restored.countdown.running

    def test_restore_with_missing_keys_uses_defaults(self):
        restored = Game(saved_state={}, initial_duration_ms=10000, tick_interval_ms=1000)
        assert restored.round.score == 0
        assert restored.round.remaining_ms == 10000

    def test_destroy_stops_clock(self, game):
        game.tap()
        game.destroy()
        assert not game.countdown.running
        game.update(5.0, (0, 0))
        assert game.round.remaining_ms == 10000


# ── Rendering ───────────────────────────────────────────────────────────────


class TestRender:
    @pytest.mark.parametrize("orientation", ["portrait", "landscape"])
    def test_render_all_overlays(self, pygame_init, orientation):
        game = Game(orientation=orientation, initial_duration_ms=1000, tick_interval_ms=1000)
        surface = pygame.Surface(game.size)

        game.tap()
        game.render(surface)

        game.update(1.0, (0, 0))
        game.open_about()
        game.render(surface)
        assert game.toast is not None
