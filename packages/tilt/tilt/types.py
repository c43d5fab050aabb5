"""Shared data model for the tilt engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

DEFAULT_BALL_RADIUS = 12.5


@dataclass(frozen=True, slots=True)
class AccelerationSample:
    """Device-frame acceleration, gravity included when the sensor offers it."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True, slots=True)
class ScreenAcceleration:
    sx: float = 0.0
    sy: float = 0.0


@dataclass(slots=True)
class InversionFlags:
    invert_x: bool = False
    invert_y: bool = False

    def toggle_x(self) -> None:
        self.invert_x = not self.invert_x

    def toggle_y(self) -> None:
        self.invert_y = not self.invert_y

    def toggle_both(self) -> None:
        self.invert_x = not self.invert_x
        self.invert_y = not self.invert_y

    def set(self, x: bool | None = None, y: bool | None = None) -> None:
        """Checkbox-style setter. None leaves an axis unchanged."""
        if x is not None:
            self.invert_x = x
        if y is not None:
            self.invert_y = y


@dataclass(frozen=True, slots=True)
class Canvas:
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Canvas dimensions must be positive, got {self.width}x{self.height}"
            )

    @classmethod
    def fit(cls, window_w: float, window_h: float, fraction: float = 0.8) -> Canvas:
        """Square canvas sized to a fraction of the smaller window side."""
        if not 0.0 < fraction <= 1.0:
            raise ValueError(f"fraction must be in (0, 1], got {fraction}")
        side = min(window_w, window_h) * fraction
        return cls(side, side)

    def ensure_holds(self, radius: float) -> Canvas:
        """Return self, or raise ValueError if a ball of ``radius`` cannot fit."""
        if 2 * radius > min(self.width, self.height):
            raise ValueError(
                f"Canvas {self.width}x{self.height} cannot hold a ball of radius {radius}"
            )
        return self


@dataclass(frozen=True, slots=True)
class BallState:
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0

    @classmethod
    def centered(cls, canvas: Canvas) -> BallState:
        return cls(canvas.width / 2, canvas.height / 2)


@dataclass(frozen=True, slots=True)
class SoundState:
    """Smoothed oscillator parameters handed to the audio backend."""

    frequency: float
    volume: float
    cutoff: float
    envelope: float = 0.0


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


if TYPE_CHECKING:
    from tilt.context import SimulationContext

System = Callable[["SimulationContext", TickContext], None]
