"""
utils/color.py — Color helpers for Timefighter.

renderer/cuboid.py derives the shaded faces of the tap button from one
base color; renderer/ui.py and renderer/about.py use with_alpha() for
translucent overlays (toast, dialog scrim).
"""

from typing import Tuple

RGBColor = Tuple[int, int, int]


def clamp(value: int, lo: int = 0, hi: int = 255) -> int:
    """Clamp an integer channel value to [lo, hi]."""
    return max(lo, min(hi, value))


def lighter(color: RGBColor, amount: int = 40) -> RGBColor:
    """Return color with every channel raised by amount.

    Used for the top face of a cuboid.
    """
    r, g, b = color
    return (clamp(r + amount), clamp(g + amount), clamp(b + amount))


def darker(color: RGBColor, amount: int = 40) -> RGBColor:
    """Return color with every channel lowered by amount.

    Used for the right face of a cuboid and for the pressed button state.
    """
    r, g, b = color
    return (clamp(r - amount), clamp(g - amount), clamp(b - amount))


def with_alpha(color: RGBColor, alpha: float) -> Tuple[int, int, int, int]:
    """Return an RGBA tuple for drawing onto a SRCALPHA surface.

    Args:
        color: Base RGB tuple.
        alpha: Opacity as a fraction in [0.0, 1.0].

    Returns:
        (r, g, b, a) with a scaled to 0–255.
    """
    return (color[0], color[1], color[2], clamp(int(alpha * 255)))
