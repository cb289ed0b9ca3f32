"""
utils/scaler.py — Resolution scaling and orientation for Timefighter.

The game has two native canvases: 360x640 portrait and 640x360 landscape.
Scaler picks the canvas that matches the window's aspect (a window wider
than it is tall is landscape), then letterboxes it into the window without
stretching.

A change of orientation is what a phone rotation looks like on the
desktop; update() reports it so main.py can recreate the play screen.

Usage:
    scaler = Scaler(window_w, window_h)
    game_surface = pygame.Surface(scaler.native_size)

    # draw everything onto game_surface at native resolution, then:
    scaler.blit(window_surface, game_surface)

    # convert a mouse position from window coords to game coords:
    game_x, game_y = scaler.to_game(mouse_x, mouse_y)
"""

import pygame
from settings import SCREEN_SIZE


def orientation_for(window_w: int, window_h: int) -> str:
    """Return "landscape" if the window is wider than tall, else "portrait"."""
    return "landscape" if window_w > window_h else "portrait"


class Scaler:
    """Letterboxes the native canvas for the current orientation into a window.

    Attributes:
        window_w:    Window width in pixels.
        window_h:    Window height in pixels.
        orientation: "portrait" or "landscape".
        scale:       Uniform scale factor applied to the game surface.
        offset_x:    Horizontal letterbox offset in window pixels.
        offset_y:    Vertical letterbox offset in window pixels.
        dest_rect:   Where the scaled game surface lands in the window.
    """

    def __init__(self, window_w: int, window_h: int) -> None:
        self.orientation = orientation_for(window_w, window_h)
        self._compute(window_w, window_h)

    @property
    def native_size(self) -> tuple[int, int]:
        """Native canvas size for the current orientation."""
        return SCREEN_SIZE[self.orientation]

    def _compute(self, window_w: int, window_h: int) -> None:
        """Recalculate scale and offsets for the window size."""
        self.window_w = window_w
        self.window_h = window_h

        native_w, native_h = self.native_size
        self.scale = min(window_w / native_w, window_h / native_h)

        scaled_w = int(native_w * self.scale)
        scaled_h = int(native_h * self.scale)

        self.offset_x = (window_w - scaled_w) // 2
        self.offset_y = (window_h - scaled_h) // 2

        self.dest_rect = pygame.Rect(self.offset_x, self.offset_y, scaled_w, scaled_h)

    def update(self, window_w: int, window_h: int) -> bool:
        """Recompute scaling after a resize.

        Args:
            window_w: New window width in pixels.
            window_h: New window height in pixels.

        Returns:
            True if the resize flipped the orientation.
        """
        previous = self.orientation
        self.orientation = orientation_for(window_w, window_h)
        self._compute(window_w, window_h)
        return self.orientation != previous

    def blit(self, window_surface: pygame.Surface, game_surface: pygame.Surface) -> None:
        """Scale the game surface into the window, black letterbox bars around it."""
        window_surface.fill((0, 0, 0))
        scaled = pygame.transform.scale(game_surface, self.dest_rect.size)
        window_surface.blit(scaled, self.dest_rect.topleft)

    def to_game(self, window_x: int, window_y: int) -> tuple[int, int]:
        """Convert window pixel coordinates to native game coordinates.

        Points inside a letterbox bar map outside the canvas; guard with
        in_bounds() where that matters.
        """
        game_x = (window_x - self.offset_x) / self.scale
        game_y = (window_y - self.offset_y) / self.scale
        return int(game_x), int(game_y)

    def in_bounds(self, window_x: int, window_y: int) -> bool:
        """Return True if a window coordinate falls inside the game viewport."""
        return self.dest_rect.collidepoint(window_x, window_y)
