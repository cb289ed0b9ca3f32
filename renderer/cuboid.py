"""
renderer/cuboid.py — Vector block drawing for Timefighter.

The tap button is drawn as a raised cuboid; the header, timer bar and
other chrome are flat tiles. A cuboid is three filled polygons:
    - Front face  (base color)
    - Top face    (lighter)
    - Right face  (darker)

(x, y) is always the top-left corner of the front face. The depth `d`
shifts the top and right faces up-right.
"""

import pygame
from settings import COLOR, CUBOID_DEPTH
from utils.color import lighter, darker, RGBColor


def draw_cuboid(
    surface: pygame.Surface,
    x: int,
    y: int,
    w: int,
    h: int,
    color: RGBColor,
    d: int = CUBOID_DEPTH,
) -> None:
    """Draw a filled isometric cuboid.

    Args:
        surface: pygame Surface to draw onto.
        x:       Front face left edge.
        y:       Front face top edge.
        w:       Front face width in pixels.
        h:       Front face height in pixels.
        color:   Front face color; the other faces are derived from it.
        d:       Depth offset in pixels. 0 draws the front face only,
                 which is how a fully pressed button looks.
    """
    front = [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]

    if d > 0:
        top   = [(x, y), (x + w, y), (x + w + d, y - d), (x + d, y - d)]
        right = [(x + w, y), (x + w + d, y - d), (x + w + d, y + h - d), (x + w, y + h)]
        pygame.draw.polygon(surface, lighter(color), top)
        pygame.draw.polygon(surface, darker(color),  right)

    pygame.draw.polygon(surface, color, front)


def draw_flat_tile(
    surface: pygame.Surface,
    x: int,
    y: int,
    w: int,
    h: int,
    color: RGBColor,
    border_color: RGBColor | None = None,
    border_width: int = 1,
) -> None:
    """Draw a flat rectangle with an optional border."""
    rect = pygame.Rect(x, y, w, h)
    pygame.draw.rect(surface, color, rect)
    if border_color is not None:
        pygame.draw.rect(surface, border_color, rect, border_width)


def draw_progress_bar(
    surface: pygame.Surface,
    x: int,
    y: int,
    total_w: int,
    h: int,
    fill: float,
    fill_color: RGBColor,
    bg_color: RGBColor = COLOR["tile_border"],
) -> None:
    """Draw a flat horizontal bar that empties right-to-left as fill drops.

    Args:
        surface:    pygame Surface to draw onto.
        x:          Bar left edge.
        y:          Bar top edge.
        total_w:    Full bar width in pixels.
        h:          Bar height in pixels.
        fill:       Fill ratio, clamped to [0.0, 1.0].
        fill_color: Color of the filled portion.
        bg_color:   Color of the empty track.
    """
    fill = max(0.0, min(1.0, fill))
    draw_flat_tile(surface, x, y, total_w, h, bg_color)
    filled_w = int(total_w * fill)
    if filled_w > 0:
        draw_flat_tile(surface, x, y, filled_w, h, fill_color)
