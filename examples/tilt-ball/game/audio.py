"""Triangle oscillator behind a one-pole low-pass, played through pygame.mixer."""
from __future__ import annotations

import array
import logging
import math

import pygame

from tilt import SoundState

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
BUFFER_SECONDS = 0.1
RETUNE_RATIO = 0.03
CROSSFADE_FRAMES = 4
PEAK = 0.9


def triangle_wave(
    frequency: float,
    cutoff: float,
    sample_rate: int = SAMPLE_RATE,
    seconds: float = BUFFER_SECONDS,
) -> array.array:
    """Render a loopable, low-passed triangle wave as signed 16-bit samples.

    The buffer holds a whole number of cycles so looping it is seamless.
    The filter runs over the buffer twice and only the second pass is kept,
    so its state at the loop point is already settled.
    """
    cycles = max(1, round(frequency * seconds))
    n = max(1, round(cycles * sample_rate / frequency))
    rc = 1.0 / (2 * math.pi * cutoff)
    dt = 1.0 / sample_rate
    a = dt / (rc + dt)

    out = array.array("h")
    y = 0.0
    for keep in (False, True):
        for i in range(n):
            phase = (i * cycles / n) % 1.0
            raw = 4.0 * abs(phase - 0.5) - 1.0
            y += a * (raw - y)
            if keep:
                out.append(int(y * 32767 * PEAK))
    return out


class ToneVoice:
    """Keeps one looped tone playing and follows SoundState every frame.

    A retune renders the new buffer on the idle channel and crossfades to
    it over ``CROSSFADE_FRAMES`` frames, so the restart at phase 0 is
    masked by the outgoing tone. No retune starts while a crossfade runs.
    """

    def __init__(self) -> None:
        self._voices: list[pygame.mixer.Channel] = []
        self._active = 0
        self._fade = 1.0
        self._rate = SAMPLE_RATE
        self._channels = 1
        self._frequency = 0.0
        self._cutoff = 0.0

    def start(self) -> bool:
        if self._voices:
            return True
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
        except pygame.error as exc:
            logger.warning("audio unavailable, continuing silently: %s", exc)
            return False
        self._rate, _, self._channels = pygame.mixer.get_init()
        self._voices = [pygame.mixer.Channel(0), pygame.mixer.Channel(1)]
        for voice in self._voices:
            voice.set_volume(0.0)
        logger.info("audio started at %d Hz, %d channel(s)", self._rate, self._channels)
        return True

    def _drifted(self, state: SoundState) -> bool:
        if self._frequency <= 0.0:
            return True
        return (
            abs(state.frequency - self._frequency) > self._frequency * RETUNE_RATIO
            or abs(state.cutoff - self._cutoff) > self._cutoff * RETUNE_RATIO
        )

    def _retune(self, frequency: float, cutoff: float) -> None:
        samples = triangle_wave(frequency, cutoff, sample_rate=self._rate)
        if self._channels > 1:
            frames = array.array("h")
            for s in samples:
                frames.extend([s] * self._channels)
            samples = frames
        sound = pygame.mixer.Sound(buffer=samples.tobytes())

        first = self._frequency <= 0.0
        self._active = 1 - self._active
        incoming = self._voices[self._active]
        incoming.set_volume(0.0)
        incoming.play(sound, loops=-1)
        self._fade = 1.0 if first else 0.0
        self._frequency = frequency
        self._cutoff = cutoff

    def apply(self, state: SoundState) -> None:
        if not self._voices:
            return
        if self._fade < 1.0:
            self._fade = min(1.0, self._fade + 1.0 / CROSSFADE_FRAMES)
        elif self._drifted(state):
            self._retune(state.frequency, state.cutoff)

        level = min(1.0, max(state.volume, state.envelope))
        incoming = self._voices[self._active]
        outgoing = self._voices[1 - self._active]
        incoming.set_volume(level * self._fade)
        if self._fade < 1.0:
            outgoing.set_volume(level * (1.0 - self._fade))
        elif outgoing.get_busy():
            outgoing.stop()

    def stop(self) -> None:
        if self._voices:
            pygame.mixer.quit()
            self._voices = []
