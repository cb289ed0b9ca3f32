"""
renderer/about.py — About dialog for Timefighter.

Opened from the options button in the app bar. Pure vector graphics:
a dimmed scrim over the play screen, a white card with a drop shadow,
the title with the app version, and the about message word-wrapped to
the card width. Any click or Escape closes it; game.py handles that.
"""

import pygame
from settings import (
    VERSION,
    COLOR, TEXT,
    FONT_FAMILY, FONT_SIZE_LG, FONT_SIZE_SM,
)

_CARD_MARGIN  = 28
_CARD_PADDING = 20
_LINE_GAP     = 4


def _wrap(text: str, font: pygame.font.Font, max_w: int) -> list[str]:
    """Greedy word wrap.

    Args:
        text:  Text to wrap.
        font:  Font used to measure line widths.
        max_w: Maximum line width in pixels.

    Returns:
        Lines in order. A single word wider than max_w gets its own line.
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}".strip()
        if current and font.size(candidate)[0] > max_w:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def draw_about(surface: pygame.Surface) -> pygame.Rect:
    """Draw the about dialog over the current frame.

    Args:
        surface: Native game surface, already holding the play screen.

    Returns:
        pygame.Rect of the dialog card.
    """
    w, h = surface.get_size()

    scrim = pygame.Surface((w, h), pygame.SRCALPHA)
    scrim.fill((0, 0, 0, 140))
    surface.blit(scrim, (0, 0))

    f_title = pygame.font.Font(FONT_FAMILY, FONT_SIZE_LG)
    f_body  = pygame.font.Font(FONT_FAMILY, FONT_SIZE_SM)

    card_w = min(w - _CARD_MARGIN * 2, 420)
    inner_w = card_w - _CARD_PADDING * 2

    title = f_title.render(TEXT["about_title"].format(VERSION), True, COLOR["text"])
    body = [f_body.render(line, True, COLOR["chrome"])
            for line in _wrap(TEXT["about_message"], f_body, inner_w)]

    body_h = sum(s.get_height() + _LINE_GAP for s in body)
    card_h = _CARD_PADDING * 3 + title.get_height() + body_h
    card = pygame.Rect((w - card_w) // 2, (h - card_h) // 2, card_w, card_h)

    shadow = pygame.Surface((card_w + 6, card_h + 6), pygame.SRCALPHA)
    pygame.draw.rect(shadow, (0, 0, 0, 50), shadow.get_rect(), border_radius=8)
    surface.blit(shadow, (card.x + 2, card.y + 3))

    pygame.draw.rect(surface, COLOR["tile"], card, border_radius=6)

    y = card.y + _CARD_PADDING
    surface.blit(title, (card.x + _CARD_PADDING, y))
    y += title.get_height() + _CARD_PADDING
    for line in body:
        surface.blit(line, (card.x + _CARD_PADDING, y))
        y += line.get_height() + _LINE_GAP

    return card
