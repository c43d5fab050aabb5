"""SimulationContext - the state shared by every per-frame system."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from tilt.types import (
    DEFAULT_BALL_RADIUS,
    AccelerationSample,
    BallState,
    Canvas,
    InversionFlags,
    ScreenAcceleration,
    SoundState,
)


def _no_rotation() -> float:
    return 0.0


@dataclass
class SimulationContext:
    """Last-writer-wins cells written by the sensor callback and the frame loop.

    ``screen_angle`` is called on every tick so a rotated screen takes
    effect on the next frame. ``sound`` stays None until sound is enabled.
    """

    canvas: Canvas
    ball: BallState
    acceleration: AccelerationSample = field(default_factory=AccelerationSample)
    screen_acceleration: ScreenAcceleration = field(default_factory=ScreenAcceleration)
    flags: InversionFlags = field(default_factory=InversionFlags)
    screen_angle: Callable[[], object] = _no_rotation
    sound: SoundState | None = None

    @classmethod
    def create(
        cls,
        width: float,
        height: float,
        radius: float = DEFAULT_BALL_RADIUS,
    ) -> SimulationContext:
        """Centered ball at rest. Raises ValueError if the canvas cannot hold it."""
        canvas = Canvas(width, height).ensure_holds(radius)
        return cls(canvas=canvas, ball=BallState.centered(canvas))
