"""
settings.py — Global constants for Timefighter.

All magic numbers live here. No other module should hardcode colors,
dimensions, or timing values. Import what you need with:
    from settings import COLOR, SCREEN_W, ...

Round timing can be overridden from the environment:
    TIMEFIGHTER_COUNTDOWN_MS=10000 python main.py
"""

import os

TITLE   = "Timefighter"
VERSION = "1.0"

# ── Screen ────────────────────────────────────────────────────────────────────
# Native resolution per orientation. Portrait is the default, landscape is
# the same canvas rotated.
SCREEN_W = 360
SCREEN_H = 640
FPS = 60

SCREEN_SIZE = {
    "portrait":  (SCREEN_W, SCREEN_H),
    "landscape": (SCREEN_H, SCREEN_W),
}

# ── Round timing (milliseconds) ───────────────────────────────────────────────
INITIAL_COUNTDOWN_MS = int(os.environ.get("TIMEFIGHTER_COUNTDOWN_MS", 60000))
COUNTDOWN_INTERVAL_MS = int(os.environ.get("TIMEFIGHTER_INTERVAL_MS", 1000))

# ── Saved instance state keys ─────────────────────────────────────────────────
SCORE_KEY     = "SCORE_KEY"
TIME_LEFT_KEY = "TIME_LEFT_KEY"

# ── Colors ────────────────────────────────────────────────────────────────────
COLOR = {
    "background":   (250, 250, 250),   # #FAFAFA
    "tile":         (255, 255, 255),
    "tile_border":  (204, 204, 204),   # #CCCCCC
    "accent":       (255, 64, 129),    # #FF4081 — tap button
    "accent_hover": (245, 0, 87),      # #F50057
    "primary":      ( 63, 81, 181),    # #3F51B5 — header bar
    "timer":        (229,  57,  53),   # #E53935
    "chrome":       (117, 117, 117),   # #757575
    "text":         ( 33,  33,  33),   # #212121
    "text_light":   (255, 255, 255),
    "toast_bg":     ( 50,  50,  50),
}

# ── Cuboid ────────────────────────────────────────────────────────────────────
CUBOID_DEPTH = 8    # px offset for top/right faces (isometric illusion)

# ── UI Layout ─────────────────────────────────────────────────────────────────
HEADER_H      = 56    # px — app bar with title and options button
TIMER_BAR_H   = 8     # px — thin bar below header
TAP_BTN_SIZE  = 160   # px — square tap button
OPTIONS_BTN_W = 40    # px — options (about) button in the header
TOAST_H       = 44    # px

# ── Feedback timing (seconds) ─────────────────────────────────────────────────
BOUNCE_DURATION_S = 0.45
BLINK_DURATION_S  = 0.30
TOAST_DURATION_S  = 3.5     # matches a "long" toast

# ── Text ──────────────────────────────────────────────────────────────────────
TEXT = {
    "your_score":   "Your Score: {}",
    "time_left":    "Time Left: {}",
    "tap_me":       "TAP ME",
    "game_over":    "Time's up! Your score was: {}",
    "about_title":  "Timefighter {}",
    "about_message": (
        "Tap the button as many times as you can before the timer runs out. "
        "The first tap starts the clock."
    ),
}

# ── Fonts ─────────────────────────────────────────────────────────────────────
# None selects pygame's bundled default font, which exists on every platform
# (including pygbag).
FONT_FAMILY  = None
FONT_SIZE_XL = 44
FONT_SIZE_LG = 28
FONT_SIZE_MD = 22
FONT_SIZE_SM = 18
