"""Frame clock: frame count plus the time each frame actually took."""

from __future__ import annotations

import math
from typing import Callable

from tilt.types import TickContext


class Clock:
    """Counts frames for a loop that targets ``fps``.

    A host that measures its frames passes the measured duration to
    ``advance``; otherwise a frame lasts the nominal ``1 / fps``. Durations
    are capped at ``max_dt`` so a stalled window (dragged, minimised, paused
    in a debugger) does not fast-forward time-based effects in one frame.
    """

    def __init__(self, fps: int, max_dt: float = 0.25) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        if max_dt <= 0:
            raise ValueError("max_dt must be positive")
        self._fps = fps
        self._nominal_dt = 1.0 / fps
        self._max_dt = max_dt
        self._tick_number = 0
        self._dt = self._nominal_dt
        self._elapsed = 0.0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def nominal_dt(self) -> float:
        return self._nominal_dt

    @property
    def dt(self) -> float:
        """Duration of the most recent frame."""
        return self._dt

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self, dt: float | None = None) -> int:
        """Start the next frame, lasting ``dt`` seconds (nominal when None)."""
        if dt is None:
            dt = self._nominal_dt
        elif dt < 0 or not math.isfinite(dt):
            raise ValueError(f"frame duration must be a finite non-negative number, got {dt}")
        self._dt = min(dt, self._max_dt)
        self._elapsed += self._dt
        self._tick_number += 1
        return self._tick_number

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
        )

    def reset(self) -> None:
        self._tick_number = 0
        self._dt = self._nominal_dt
        self._elapsed = 0.0
