"""
renderer/animation.py — Tap feedback animations for Timefighter.

Two tiny time-driven animations:
    Bounce — squash-and-spring scale for the tap button
    Blink  — fade-out / fade-in alpha for the score label

Both are plain Python: game.py calls update(dt) each frame and reads
scale() / alpha() when rendering. Restarting an animation mid-flight
snaps it back to the beginning, so rapid tapping keeps it lively.
"""

import math

from settings import BOUNCE_DURATION_S, BLINK_DURATION_S


class _Animation:
    """Shared clock for a fixed-length animation.

    Attributes:
        duration: Total length in seconds.
        _t:       Seconds elapsed since start(). Equals duration when idle.
    """

    def __init__(self, duration: float) -> None:
        self.duration: float = duration
        self._t:       float = duration

    def start(self) -> None:
        """Restart the animation from the beginning."""
        self._t = 0.0

    def update(self, dt: float) -> None:
        """Advance by dt seconds, stopping at the end."""
        if self._t < self.duration:
            self._t = min(self.duration, self._t + max(0.0, dt))

    @property
    def active(self) -> bool:
        return self._t < self.duration

    def progress(self) -> float:
        """Return normalised time in [0.0, 1.0]."""
        if self.duration <= 0:
            return 1.0
        return self._t / self.duration


class Bounce(_Animation):
    """Damped spring scale: squashes on start, overshoots, settles at 1.0."""

    _SQUASH = 0.18      # scale lost at t = 0
    _CYCLES = 1.5       # oscillations over the full duration

    def __init__(self, duration: float = BOUNCE_DURATION_S) -> None:
        super().__init__(duration)

    def scale(self) -> float:
        """Return the current scale factor. 1.0 when idle."""
        if not self.active:
            return 1.0
        t = self.progress()
        return 1.0 - self._SQUASH * (1.0 - t) * math.cos(2 * math.pi * self._CYCLES * t)


class Blink(_Animation):
    """Alpha dip: fully visible → invisible at the midpoint → fully visible."""

    def __init__(self, duration: float = BLINK_DURATION_S) -> None:
        super().__init__(duration)

    def alpha(self) -> float:
        """Return the current opacity in [0.0, 1.0]. 1.0 when idle."""
        if not self.active:
            return 1.0
        return abs(math.cos(math.pi * self.progress()))
