"""
renderer/ui.py — Screen chrome rendering for Timefighter.

Draws everything on the play screen:
    - App bar (title + options button)
    - Timer bar (thin strip under the app bar)
    - Score and time-left labels
    - Tap button
    - Round-over toast

All draw functions are stateless — they take explicit data arguments and
draw to the provided surface. Layout is derived from the surface size, so
the same code serves the portrait (360x640) and landscape (640x360) canvas.
The *_rect() helpers expose the same layout for hit testing without
drawing anything.
"""

import pygame
from settings import (
    TITLE,
    HEADER_H, TIMER_BAR_H, TAP_BTN_SIZE, OPTIONS_BTN_W, TOAST_H,
    COLOR, TEXT,
    FONT_FAMILY, FONT_SIZE_XL, FONT_SIZE_LG, FONT_SIZE_MD, FONT_SIZE_SM,
    CUBOID_DEPTH,
)
from renderer.cuboid import draw_cuboid, draw_flat_tile, draw_progress_bar
from utils.color import darker, with_alpha


# ── Font cache ────────────────────────────────────────────────────────────────
_fonts: dict[int, pygame.font.Font] = {}


def _font(size: int) -> pygame.font.Font:
    """Return a cached font at the given size."""
    if size not in _fonts:
        _fonts[size] = pygame.font.Font(FONT_FAMILY, size)
    return _fonts[size]


def _is_landscape(size: tuple[int, int]) -> bool:
    return size[0] > size[1]


# ── Layout ────────────────────────────────────────────────────────────────────

def tap_button_rect(size: tuple[int, int]) -> pygame.Rect:
    """Return the resting rect of the tap button for a canvas size.

    Portrait: centered in the area below the labels.
    Landscape: centered in the right half of the content area.

    Args:
        size: (width, height) of the native canvas.

    Returns:
        pygame.Rect in native game coordinates.
    """
    w, h = size
    content_top = HEADER_H + TIMER_BAR_H
    rect = pygame.Rect(0, 0, TAP_BTN_SIZE, TAP_BTN_SIZE)
    if _is_landscape(size):
        rect.center = (w * 3 // 4, content_top + (h - content_top) // 2)
    else:
        rect.center = (w // 2, content_top + 150 + (h - content_top - 150) // 2)
    return rect


def options_button_rect(size: tuple[int, int]) -> pygame.Rect:
    """Return the rect of the options button at the right end of the app bar."""
    w, _ = size
    return pygame.Rect(w - OPTIONS_BTN_W, 0, OPTIONS_BTN_W, HEADER_H)


def _label_anchor(size: tuple[int, int]) -> tuple[int, int]:
    """Return the (center_x, top_y) where the score label is drawn."""
    w, h = size
    content_top = HEADER_H + TIMER_BAR_H
    if _is_landscape(size):
        return w // 4, content_top + (h - content_top) // 2 - 50
    return w // 2, content_top + 40


# ── App bar ───────────────────────────────────────────────────────────────────

def draw_header(surface: pygame.Surface, options_hovered: bool = False) -> pygame.Rect:
    """Draw the app bar and return the options button rect.

    Args:
        surface:         Native-resolution game surface.
        options_hovered: True if the mouse is over the options button.

    Returns:
        pygame.Rect of the options button.
    """
    size = surface.get_size()
    draw_flat_tile(surface, 0, 0, size[0], HEADER_H, COLOR["primary"])

    title = _font(FONT_SIZE_LG).render(TITLE, True, COLOR["text_light"])
    surface.blit(title, (16, (HEADER_H - title.get_height()) // 2))

    btn = options_button_rect(size)
    if options_hovered:
        draw_flat_tile(surface, btn.x, btn.y, btn.w, btn.h, darker(COLOR["primary"], 25))

    # Overflow menu glyph: three stacked dots
    for i in (-1, 0, 1):
        pygame.draw.circle(surface, COLOR["text_light"], (btn.centerx, btn.centery + i * 8), 3)

    return btn


# ── Timer bar ─────────────────────────────────────────────────────────────────

def draw_timer_bar(surface: pygame.Surface, fill: float) -> None:
    """Draw the remaining-time strip below the app bar.

    Args:
        surface: Native-resolution game surface.
        fill:    Remaining time ratio in [0.0, 1.0].
    """
    draw_progress_bar(
        surface,
        x=0, y=HEADER_H,
        total_w=surface.get_width(),
        h=TIMER_BAR_H,
        fill=fill,
        fill_color=COLOR["timer"],
    )


# ── Labels ────────────────────────────────────────────────────────────────────

def draw_labels(
    surface: pygame.Surface,
    score: int,
    seconds_left: int,
    score_alpha: float = 1.0,
) -> None:
    """Draw the score and time-left labels.

    Args:
        surface:      Native-resolution game surface.
        score:        Current score.
        seconds_left: Whole seconds left on the countdown.
        score_alpha:  Opacity of the score label, driven by the blink animation.
    """
    cx, top = _label_anchor(surface.get_size())

    score_surf = _font(FONT_SIZE_XL).render(TEXT["your_score"].format(score), True, COLOR["text"])
    score_surf.set_alpha(int(max(0.0, min(1.0, score_alpha)) * 255))
    surface.blit(score_surf, (cx - score_surf.get_width() // 2, top))

    time_surf = _font(FONT_SIZE_MD).render(TEXT["time_left"].format(seconds_left), True, COLOR["chrome"])
    surface.blit(time_surf, (cx - time_surf.get_width() // 2, top + score_surf.get_height() + 16))


# ── Tap button ────────────────────────────────────────────────────────────────

def draw_tap_button(
    surface: pygame.Surface,
    scale: float = 1.0,
    hovered: bool = False,
) -> pygame.Rect:
    """Draw the tap button and return its resting rect for hit detection.

    The drawn size follows the bounce animation scale, but the hit rect
    does not, so a bouncing button never dodges the next tap.

    Args:
        surface: Native-resolution game surface.
        scale:   Bounce scale factor, 1.0 at rest.
        hovered: True if the mouse is over the button.

    Returns:
        pygame.Rect of the button at rest.
    """
    rest = tap_button_rect(surface.get_size())

    size = max(1, int(rest.w * scale))
    drawn = pygame.Rect(0, 0, size, size)
    drawn.center = rest.center

    color = COLOR["accent_hover"] if hovered else COLOR["accent"]
    # A squashed button sinks into the screen
    depth = CUBOID_DEPTH if scale >= 1.0 else int(CUBOID_DEPTH * scale * 0.5)
    draw_cuboid(surface, drawn.x, drawn.y, drawn.w, drawn.h, color, d=depth)

    label = _font(FONT_SIZE_LG).render(TEXT["tap_me"], True, COLOR["text_light"])
    surface.blit(label, (drawn.centerx - label.get_width() // 2,
                         drawn.centery - label.get_height() // 2))

    return rest


# ── Toast ─────────────────────────────────────────────────────────────────────

def draw_toast(surface: pygame.Surface, message: str, alpha: float) -> None:
    """Draw a rounded notification pill near the bottom edge.

    Args:
        surface: Native-resolution game surface.
        message: Text to show.
        alpha:   Opacity in [0.0, 1.0]; the caller fades it out at the end.
    """
    if alpha <= 0.0:
        return

    w, h = surface.get_size()
    text = _font(FONT_SIZE_SM).render(message, True, COLOR["text_light"])
    box_w = min(w - 24, text.get_width() + 32)

    toast = pygame.Surface((box_w, TOAST_H), pygame.SRCALPHA)
    pygame.draw.rect(toast, with_alpha(COLOR["toast_bg"], 0.9), toast.get_rect(), border_radius=TOAST_H // 2)
    toast.blit(text, ((box_w - text.get_width()) // 2, (TOAST_H - text.get_height()) // 2))
    toast.set_alpha(int(min(1.0, alpha) * 255))

    surface.blit(toast, ((w - box_w) // 2, h - TOAST_H - 32))
