"""
main.py — Entry point and game loop for Timefighter.

Responsibilities:
    - Initialise logging, pygame and the window
    - Own the Scaler (window → game coordinate translation)
    - Run the main loop: handle events → update → render → flip
    - Translate mouse positions to game coordinates before passing
      them to Game
    - Treat an orientation flip as a configuration change: save the
      play screen's state, destroy it, create a new one from that state
    - Wrap the loop in async for pygbag (WASM/browser export)

Controls:
    click / SPACE  tap
    F1             about dialog (also the ⋮ button in the app bar)
    R              rotate the window between portrait and landscape

Usage (local):
    python main.py

Usage (WASM export):
    pygbag main.py
"""

import asyncio
import logging
import pygame

from settings import SCREEN_W, SCREEN_H, FPS, TITLE
from utils.scaler import Scaler
from core.audio import Audio
from core.game import Game
from core.logging_config import setup_logging

log = logging.getLogger("timefighter.main")

# ── Window configuration ──────────────────────────────────────────────────────
# Desktop window starts portrait at 1.25x native.
_WINDOW_SCALE = 1.25
_WINDOW_W     = int(SCREEN_W * _WINDOW_SCALE)
_WINDOW_H     = int(SCREEN_H * _WINDOW_SCALE)


def recreate(game: Game, orientation: str, audio: Audio) -> Game:
    """Tear down the play screen and build a new one for orientation.

    Only the saved state dict crosses from the old instance to the new.

    Args:
        game:        The current Game; destroyed by this call.
        orientation: "portrait" or "landscape" for the new Game.
        audio:       Shared Audio instance.

    Returns:
        The new Game.
    """
    state = game.save_instance_state()
    game.destroy()
    new_game = Game(saved_state=state, orientation=orientation)
    new_game.set_audio(audio)
    return new_game


async def main() -> None:
    """Async main loop — compatible with both CPython and pygbag WASM."""
    setup_logging()
    pygame.init()

    pygame.display.set_mode((_WINDOW_W, _WINDOW_H), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)

    scaler = Scaler(_WINDOW_W, _WINDOW_H)
    game_surface = pygame.Surface(scaler.native_size)

    audio = Audio()
    audio.init()

    clock = pygame.Clock()
    game  = Game(orientation=scaler.orientation)
    game.set_audio(audio)
    log.info("%s started", TITLE)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0   # seconds since last frame
        dt = min(dt, 0.05)              # clamp to 50ms after a stall (tab switch, drag)

        # ── Event handling ────────────────────────────────────────────────────
        rotated = False
        for event in pygame.event.get():

            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.VIDEORESIZE:
                rotated = scaler.update(event.w, event.h) or rotated

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                window = pygame.display.set_mode(
                    (scaler.window_h, scaler.window_w), pygame.RESIZABLE)
                rotated = scaler.update(*window.get_size()) or rotated

            elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                if scaler.in_bounds(*event.pos):
                    translated = pygame.event.Event(
                        event.type, pos=scaler.to_game(*event.pos), button=event.button)
                    game.handle_event(translated)

            elif event.type == pygame.KEYDOWN:
                game.handle_event(event)

        if rotated:
            log.info("Orientation changed to %s", scaler.orientation)
            game = recreate(game, scaler.orientation, audio)
            game_surface = pygame.Surface(scaler.native_size)

        # ── Update ────────────────────────────────────────────────────────────
        mouse_game = scaler.to_game(*pygame.mouse.get_pos())
        game.update(dt, mouse_game)

        # ── Render ────────────────────────────────────────────────────────────
        game.render(game_surface)
        scaler.blit(pygame.display.get_surface(), game_surface)
        pygame.display.flip()

        # ── Yield to browser (pygbag) ─────────────────────────────────────────
        await asyncio.sleep(0)

    game.destroy()
    audio.quit()
    pygame.quit()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    asyncio.run(main())
