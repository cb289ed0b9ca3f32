"""
core/countdown.py — Wall-clock countdown driver for Timefighter.

CountdownTimer turns per-frame delta time into whole countdown intervals.
It owns only its own accumulator. It does not know about score or round
state: game.py asks it how many intervals passed this frame and forwards
each one to GameRoundController.tick().

Usage:
    countdown = CountdownTimer(interval_ms=1000)
    countdown.start()

    # each frame:
    for _ in range(countdown.update(dt)):
        if controller.tick(countdown.interval_ms):
            countdown.cancel()
            break
"""


class CountdownTimer:
    """Fixed-interval ticker fed by frame delta time.

    Attributes:
        interval_ms: Length of one tick in milliseconds.
        _carry_ms:   Elapsed milliseconds not yet spent on a whole tick.
        _running:    True between start() and cancel().
    """

    def __init__(self, interval_ms: int) -> None:
        """Create a stopped timer.

        Args:
            interval_ms: Tick length in milliseconds. Must be positive.
        """
        self.interval_ms: int   = max(1, interval_ms)
        self._carry_ms:   float = 0.0
        self._running:    bool  = False

    def start(self) -> None:
        """Start counting from a clean accumulator.

        Calling start() on a running timer restarts the current interval.
        """
        self._carry_ms = 0.0
        self._running  = True

    def cancel(self) -> None:
        """Stop counting and drop any partial interval."""
        self._running  = False
        self._carry_ms = 0.0

    @property
    def running(self) -> bool:
        return self._running

    def update(self, dt: float) -> int:
        """Advance by dt seconds and return the number of whole intervals passed.

        Partial intervals carry over to the next call. No-op while cancelled.

        Args:
            dt: Delta time in seconds since the last frame. Typically
                sourced from pygame.Clock.tick() / 1000.

        Returns:
            Number of ticks the caller should deliver, usually 0 or 1.
        """
        if not self._running or dt <= 0:
            return 0

        self._carry_ms += dt * 1000.0
        ticks = int(self._carry_ms // self.interval_ms)
        self._carry_ms -= ticks * self.interval_ms
        return ticks

    def progress(self) -> float:
        """Return how far into the current interval the timer is, in [0.0, 1.0).

        Used to smooth the timer bar between whole ticks.
        """
        if not self._running:
            return 0.0
        return self._carry_ms / self.interval_ms
