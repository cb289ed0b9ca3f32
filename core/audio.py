"""
core/audio.py — Sound effects for Timefighter.

Every sound is synthesised at startup from square and sine waves, packed
into 16-bit stereo PCM with struct and handed to pygame.mixer.Sound. No
audio files, no numpy, so it runs unchanged under pygbag.

Sound design (all in C major):
    tap          — short G5 blip (784Hz)                 — one per tap
    round_start  — C5→G5 rising sine sweep                — first tap of a round
    round_over   — G4 E4 C4 falling arpeggio              — countdown hit zero
    dialog       — soft C6 tick (1047Hz)                  — about dialog opens

Usage:
    audio = Audio()
    audio.init()
    audio.play("tap")
"""

from __future__ import annotations
import logging
import math
import struct
import pygame

log = logging.getLogger("timefighter.audio")

_SAMPLE_RATE = 22050
_MAX_AMP     = 32767   # int16 max


def _pack(samples: list[float]) -> bytes:
    """Pack float samples in [-1.0, 1.0] into interleaved int16 stereo PCM."""
    frames = bytearray()
    for s in samples:
        v = int(max(-1.0, min(1.0, s)) * _MAX_AMP)
        frames += struct.pack("<hh", v, v)
    return bytes(frames)


def _square(freq: float, duration: float, volume: float = 0.3) -> list[float]:
    n = int(_SAMPLE_RATE * duration)
    period = _SAMPLE_RATE / freq
    return [volume * (1.0 if (i % period) < (period / 2) else -1.0) for i in range(n)]


def _sweep(f_start: float, f_end: float, duration: float, volume: float = 0.3) -> list[float]:
    """Sine glide from f_start to f_end Hz.

    Phase is accumulated sample by sample so the pitch change is click-free.
    """
    n = int(_SAMPLE_RATE * duration)
    samples = []
    phase = 0.0
    for i in range(n):
        freq = f_start + (f_end - f_start) * (i / n)
        phase += 2 * math.pi * freq / _SAMPLE_RATE
        samples.append(volume * math.sin(phase))
    return samples


def _fade_out(samples: list[float], tail: float = 0.04) -> list[float]:
    """Linearly fade the last `tail` seconds to avoid a pop at the end."""
    fade_n = min(int(_SAMPLE_RATE * tail), len(samples))
    result = list(samples)
    start = len(result) - fade_n
    for i in range(fade_n):
        result[start + i] *= 1.0 - i / fade_n
    return result


def _make_sound(samples: list[float]) -> pygame.mixer.Sound:
    return pygame.mixer.Sound(buffer=_pack(_fade_out(samples)))


class Audio:
    """Owns the synthesised sound bank.

    Attributes:
        _sounds:    Sound name → pygame.mixer.Sound.
        _available: True once pygame.mixer initialised successfully.
    """

    def __init__(self) -> None:
        """Create an uninitialised manager. Call init() after pygame.init()."""
        self._sounds:    dict[str, pygame.mixer.Sound] = {}
        self._available: bool = False

    @property
    def available(self) -> bool:
        return self._available

    def init(self) -> None:
        """Initialise pygame.mixer and build the sound bank.

        If no audio device can be opened the game runs silently.
        """
        try:
            pygame.mixer.pre_init(_SAMPLE_RATE, -16, 2, 512)
            pygame.mixer.init()
        except pygame.error as exc:
            log.warning("Audio unavailable, running silent: %s", exc)
            self._available = False
            return

        self._available = True
        self._sounds = {
            "tap":         _make_sound(_square(784, 0.04, volume=0.20)),
            "round_start": _make_sound(_sweep(523, 784, 0.18, volume=0.30)),
            "round_over":  _make_sound(
                _square(392, 0.10, volume=0.30)
                + _square(329, 0.10, volume=0.30)
                + _square(261, 0.22, volume=0.28)
            ),
            "dialog":      _make_sound(_square(1047, 0.03, volume=0.12)),
        }
        log.debug("Synthesised %d sounds", len(self._sounds))

    def play(self, name: str) -> None:
        """Play a sound by name. Silent no-op if unavailable or unknown."""
        if not self._available:
            return
        sound = self._sounds.get(name)
        if sound:
            sound.play()

    def quit(self) -> None:
        """Shut down pygame.mixer on exit."""
        if self._available:
            pygame.mixer.quit()
            self._available = False
