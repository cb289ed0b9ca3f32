"""
core/logging_config.py — Logging setup for Timefighter.

main.py calls setup_logging() once at startup. Every other module logs
through a child of the "timefighter" namespace logger:
    log = logging.getLogger("timefighter.game")
"""

import logging
import os
import sys


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure the timefighter namespace logger.

    Args:
        level: Level name such as "DEBUG". Falls back to the LOG_LEVEL
               environment variable, then INFO.

    Returns:
        The configured "timefighter" logger.
    """
    log_level = level or os.environ.get("LOG_LEVEL", "INFO")
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger("timefighter")
    root.setLevel(numeric_level)
    # A second call must not stack handlers
    root.handlers.clear()
    root.addHandler(handler)
    root.propagate = False

    return root
