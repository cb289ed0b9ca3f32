"""
core/round.py — Round state machine for Timefighter.

GameRoundController owns one round's score and countdown and nothing else.
It does NOT own a timer, a clock, or any rendering. The host (core/game.py)
drives tick() at its own cadence, which keeps this module free of pygame
and testable without real time passing.

States:
    IDLE     — fresh round, timer not started, waiting for the first tap
    RUNNING  — timer active, taps score
    ENDED    — timer reached zero, taps ignored until reset()

Transitions:
    IDLE     → RUNNING  : first tap()
    RUNNING  → ENDED    : tick() drives remaining time to zero
    ENDED    → IDLE     : reset()
    any      → RUNNING  : restore() with time remaining
    any      → ENDED    : restore() with no time remaining

Usage:
    round_ = GameRoundController()
    round_.tap()                         # starts the round, score = 1

    # once per countdown interval:
    if round_.tick(round_.tick_interval_ms):
        # round over — show final score, then:
        round_.reset()

    score, remaining = round_.snapshot()
    round_.restore(score, remaining)
"""

from __future__ import annotations
from enum import Enum, auto

from settings import INITIAL_COUNTDOWN_MS, COUNTDOWN_INTERVAL_MS


class RoundState(Enum):
    """Round lifecycle states."""
    IDLE    = auto()
    RUNNING = auto()
    ENDED   = auto()


class GameRoundController:
    """Score and countdown state for a single round.

    Not thread-safe. Callers serialise tap() and tick() on one thread,
    which in practice is the pygame event loop.

    Attributes:
        _score:        Taps counted this round. Never negative.
        _remaining_ms: Milliseconds left, in [0, _initial_ms].
        _initial_ms:   Configured round duration.
        _interval_ms:  Configured tick interval, exposed for the host timer.
        _state:        Current RoundState.
    """

    def __init__(
        self,
        initial_duration_ms: int = INITIAL_COUNTDOWN_MS,
        tick_interval_ms: int = COUNTDOWN_INTERVAL_MS,
    ) -> None:
        """Create a controller with a fresh IDLE round.

        Args:
            initial_duration_ms: Round length in milliseconds.
            tick_interval_ms:    Countdown step in milliseconds.
        """
        self._score:        int        = 0
        self._remaining_ms: int        = initial_duration_ms
        self._initial_ms:   int        = initial_duration_ms
        self._interval_ms:  int        = tick_interval_ms
        self._state:        RoundState = RoundState.IDLE
        self.reset(initial_duration_ms, tick_interval_ms)

    # ── Transitions ───────────────────────────────────────────────────────────

    def reset(
        self,
        initial_duration_ms: int | None = None,
        tick_interval_ms: int | None = None,
    ) -> None:
        """Replace the round with a fresh IDLE one.

        Does not start anything; the first tap() does. Omitted arguments
        keep the previously configured values.

        Args:
            initial_duration_ms: New round length, or None to keep the current one.
            tick_interval_ms:    New tick interval, or None to keep the current one.
        """
        if initial_duration_ms is not None:
            self._initial_ms = max(0, initial_duration_ms)
        if tick_interval_ms is not None:
            self._interval_ms = max(1, tick_interval_ms)
        self._score        = 0
        self._remaining_ms = self._initial_ms
        self._state        = RoundState.IDLE

    def tap(self) -> int:
        """Register one tap and return the score.

        The first tap of an IDLE round starts it. Taps after the round
        ended are ignored.

        Returns:
            The score after this tap (unchanged if the round has ended).
        """
        if self._state == RoundState.ENDED:
            return self._score
        if self._state == RoundState.IDLE:
            self._state = RoundState.RUNNING
        self._score += 1
        return self._score

    def tick(self, elapsed_ms: int) -> bool:
        """Advance the countdown by elapsed_ms.

        Ignored unless RUNNING, so a stray timer callback that races a
        reset() cannot eat into the next round.

        Args:
            elapsed_ms: Milliseconds to subtract. Negative values count as 0.

        Returns:
            True exactly once, on the tick that ends the round.
        """
        if self._state != RoundState.RUNNING:
            return False

        self._remaining_ms = max(0, self._remaining_ms - max(0, elapsed_ms))
        if self._remaining_ms == 0:
            self._state = RoundState.ENDED
            return True
        return False

    # ── Snapshot / restore ────────────────────────────────────────────────────

    def snapshot(self) -> tuple[int, int]:
        """Return (score, remaining_ms) for external persistence."""
        return self._score, self._remaining_ms

    def restore(self, score: int, remaining_ms: int) -> None:
        """Load a prior snapshot and re-derive the state from it.

        Out-of-range values are clamped: score to >= 0 and remaining_ms to
        [0, initial duration]. Any time left resumes the round as RUNNING;
        no time left means it has ENDED.

        Args:
            score:        Saved score.
            remaining_ms: Saved milliseconds left.
        """
        self._score        = max(0, int(score))
        self._remaining_ms = min(self._initial_ms, max(0, int(remaining_ms)))
        if self._remaining_ms > 0:
            self._state = RoundState.RUNNING
        else:
            self._state = RoundState.ENDED

    # ── Queries ───────────────────────────────────────────────────────────────

    @property
    def score(self) -> int:
        return self._score

    @property
    def remaining_ms(self) -> int:
        return self._remaining_ms

    @property
    def initial_duration_ms(self) -> int:
        return self._initial_ms

    @property
    def tick_interval_ms(self) -> int:
        return self._interval_ms

    @property
    def state(self) -> RoundState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == RoundState.RUNNING

    @property
    def is_ended(self) -> bool:
        return self._state == RoundState.ENDED

    def seconds_left(self) -> int:
        """Return whole seconds left, rounded down, for the time label."""
        return self._remaining_ms // 1000

    def fill(self) -> float:
        """Return the remaining time as a fraction of the round length.

        Returns:
            Float in [0.0, 1.0]. 1.0 = full time remaining, 0.0 = ended.
        """
        if self._initial_ms <= 0:
            return 0.0
        return self._remaining_ms / self._initial_ms
