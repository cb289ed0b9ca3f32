"""
core/game.py — Play screen host for Timefighter.

Game is the screen the player sees. It owns the round state machine and
the wall-clock countdown that feeds it, and it maps host lifecycle events
onto them:

    create      — Game(saved_state=...)       restore or start fresh
    save state  — save_instance_state()       snapshot, stop the clock
    destroy     — destroy()                   stop the clock

main.py destroys and recreates Game whenever the window flips between
portrait and landscape, carrying the saved state dict across.

Subsystems:
    - GameRoundController (score, remaining time, IDLE/RUNNING/ENDED)
    - CountdownTimer      (turns frame dt into one tick per interval)
    - Bounce / Blink      (tap feedback on the button and score label)
    - Audio               (injected via set_audio(), optional)

Round flow:
    IDLE     — first tap starts the countdown
    RUNNING  — every tap scores, the countdown ticks each interval
    ENDED    — a toast shows the final score and the round resets to
               IDLE straight away, so the next tap starts a new round

Game does NOT call pygame.display.flip() or manage the window.
That is main.py's responsibility.
"""

from __future__ import annotations
import logging
import pygame

from core.countdown import CountdownTimer
from core.round import GameRoundController, RoundState
from renderer import ui
from renderer.about import draw_about
from renderer.animation import Bounce, Blink
from settings import (
    COLOR, TEXT,
    SCREEN_SIZE,
    SCORE_KEY, TIME_LEFT_KEY,
    INITIAL_COUNTDOWN_MS, COUNTDOWN_INTERVAL_MS,
    TOAST_DURATION_S,
)

log = logging.getLogger("timefighter.game")

# Toast fades out over its last half second
_TOAST_FADE_S = 0.5


class Game:
    """Hosts one play screen for one orientation.

    Attributes:
        orientation:  "portrait" or "landscape"; selects the native canvas size.
        round:        GameRoundController for the current round.
        countdown:    CountdownTimer driving round.tick().
        bounce:       Tap button bounce animation.
        blink:        Score label blink animation.
        _audio:       Audio instance injected via set_audio(). None until set.
        _about_open:  True while the about dialog covers the screen.
        _toast_text:  Message of the active toast, or None.
        _toast_timer: Seconds left on the active toast.
        _hover_tap:   True if the mouse is over the tap button.
        _hover_menu:  True if the mouse is over the options button.
    """

    def __init__(
        self,
        saved_state: dict | None = None,
        orientation: str = "portrait",
        initial_duration_ms: int = INITIAL_COUNTDOWN_MS,
        tick_interval_ms: int = COUNTDOWN_INTERVAL_MS,
    ) -> None:
        """Create the screen, restoring from saved_state when given.

        Args:
            saved_state:         Dict produced by save_instance_state() on the
                                 previous instance, or None for a fresh start.
            orientation:         "portrait" or "landscape".
            initial_duration_ms: Round length.
            tick_interval_ms:    Countdown interval.
        """
        self.orientation: str                 = orientation
        self.round:       GameRoundController = GameRoundController(initial_duration_ms, tick_interval_ms)
        self.countdown:   CountdownTimer      = CountdownTimer(tick_interval_ms)
        self.bounce:      Bounce              = Bounce()
        self.blink:       Blink               = Blink()
        self._audio                           = None
        self._about_open: bool                = False
        self._toast_text: str | None          = None
        self._toast_timer: float              = 0.0
        self._hover_tap:  bool                = False
        self._hover_menu: bool                = False

        if saved_state is not None:
            self._restore(saved_state)
        else:
            self.round.reset()

        log.debug("Created (%s). Score is: %d", orientation, self.round.score)

    # ── Audio ─────────────────────────────────────────────────────────────────

    def set_audio(self, audio) -> None:
        """Inject the shared Audio instance.

        main.py keeps one Audio across recreations and hands it to every
        new Game.
        """
        self._audio = audio

    def _play(self, name: str) -> None:
        if self._audio:
            self._audio.play(name)

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def _restore(self, saved_state: dict) -> None:
        """Resume a round from a saved state dict.

        A round with time left resumes counting immediately. A round with
        no time left is finished off the same way a live one would be.
        """
        score     = saved_state.get(SCORE_KEY, 0)
        remaining = saved_state.get(TIME_LEFT_KEY, self.round.initial_duration_ms)
        self.round.restore(score, remaining)
        log.debug("Restored score %d with %d ms left", self.round.score, self.round.remaining_ms)

        if self.round.is_running:
            self.countdown.start()
        elif self.round.is_ended:
            self._end_round()

    def save_instance_state(self) -> dict:
        """Snapshot the round and stop the clock ahead of teardown.

        Returns:
            {SCORE_KEY: score, TIME_LEFT_KEY: remaining_ms}
        """
        score, remaining = self.round.snapshot()
        self.countdown.cancel()
        log.debug("Saving score: %d and time left: %d ms", score, remaining)
        return {SCORE_KEY: score, TIME_LEFT_KEY: remaining}

    def destroy(self) -> None:
        """Release the clock. The instance must not be used afterwards."""
        self.countdown.cancel()
        log.debug("Destroyed (%s)", self.orientation)

    # ── Round transitions ─────────────────────────────────────────────────────

    def tap(self) -> None:
        """Handle one press of the tap button.

        Ignored while the about dialog is open.
        """
        if self._about_open or self.round.is_ended:
            return

        starting = self.round.state == RoundState.IDLE
        self.round.tap()
        if starting:
            self._start_round()

        self.bounce.start()
        self.blink.start()
        self._play("tap")

    def _start_round(self) -> None:
        self.countdown.start()
        self._play("round_start")
        log.info("Round started (%d ms)", self.round.initial_duration_ms)

    def _end_round(self) -> None:
        """Announce the final score and reset for the next round."""
        self.countdown.cancel()
        final_score = self.round.score
        self._show_toast(TEXT["game_over"].format(final_score))
        self._play("round_over")
        log.info("Round over. Final score: %d", final_score)
        self.round.reset()

    def _show_toast(self, message: str) -> None:
        self._toast_text  = message
        self._toast_timer = TOAST_DURATION_S

    # ── About dialog ──────────────────────────────────────────────────────────

    def open_about(self) -> None:
        """Show the about dialog. The countdown keeps running underneath."""
        if not self._about_open:
            self._about_open = True
            self._play("dialog")

    def close_about(self) -> None:
        self._about_open = False

    @property
    def about_open(self) -> bool:
        return self._about_open

    @property
    def toast(self) -> str | None:
        """Text of the visible toast, or None."""
        return self._toast_text

    # ── Per-frame update ──────────────────────────────────────────────────────

    def update(self, dt: float, game_mouse_pos: tuple[int, int]) -> None:
        """Advance the clock, animations and toast by one frame.

        Args:
            dt:             Delta time in seconds since last frame.
            game_mouse_pos: Mouse position in native game coordinates.
        """
        for _ in range(self.countdown.update(dt)):
            if self.round.tick(self.countdown.interval_ms):
                self._end_round()
                break

        self.bounce.update(dt)
        self.blink.update(dt)

        if self._toast_text is not None:
            self._toast_timer = max(0.0, self._toast_timer - dt)
            if self._toast_timer == 0.0:
                self._toast_text = None

        size = self.size
        self._hover_tap  = ui.tap_button_rect(size).collidepoint(game_mouse_pos)
        self._hover_menu = ui.options_button_rect(size).collidepoint(game_mouse_pos)

    # ── Event handling ────────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route a pygame event. Mouse positions must be in game coordinates.

        While the about dialog is open it swallows all input: a left click
        or Escape closes it.

        Args:
            event: A pygame event with pos already translated by Scaler.to_game().
        """
        if self._about_open:
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.close_about()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.close_about()
            return

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            size = self.size
            if ui.options_button_rect(size).collidepoint(event.pos):
                self.open_about()
            elif ui.tap_button_rect(size).collidepoint(event.pos):
                self.tap()

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                self.tap()
            elif event.key == pygame.K_F1:
                self.open_about()

    # ── Rendering ─────────────────────────────────────────────────────────────

    @property
    def size(self) -> tuple[int, int]:
        """Native canvas size for this orientation."""
        return SCREEN_SIZE[self.orientation]

    def _timer_fill(self) -> float:
        """Remaining-time ratio, interpolated between whole ticks."""
        initial = self.round.initial_duration_ms
        if initial <= 0:
            return 0.0
        remaining = self.round.remaining_ms
        if self.round.is_running:
            remaining -= self.countdown.progress() * self.countdown.interval_ms
        return max(0.0, min(1.0, remaining / initial))

    def render(self, surface: pygame.Surface) -> None:
        """Draw the play screen onto the native surface.

        Args:
            surface: Native canvas matching self.size. Written to each frame.
        """
        surface.fill(COLOR["background"])

        ui.draw_header(surface, options_hovered=self._hover_menu)
        ui.draw_timer_bar(surface, fill=self._timer_fill())
        ui.draw_labels(
            surface,
            score=self.round.score,
            seconds_left=self.round.seconds_left(),
            score_alpha=self.blink.alpha(),
        )
        ui.draw_tap_button(surface, scale=self.bounce.scale(), hovered=self._hover_tap)

        if self._toast_text is not None:
            ui.draw_toast(surface, self._toast_text, alpha=min(1.0, self._toast_timer / _TOAST_FADE_S))

        if self._about_open:
            draw_about(surface)
