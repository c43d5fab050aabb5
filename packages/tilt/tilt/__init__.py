"""tilt - Frame loop and shared state for a tilt-driven ball toy."""

from tilt import vec
from tilt.clock import Clock
from tilt.context import SimulationContext
from tilt.engine import Engine
from tilt.types import (
    DEFAULT_BALL_RADIUS,
    AccelerationSample,
    BallState,
    Canvas,
    InversionFlags,
    ScreenAcceleration,
    SoundState,
    System,
    TickContext,
)

__all__ = [
    "DEFAULT_BALL_RADIUS",
    "AccelerationSample",
    "BallState",
    "Canvas",
    "Clock",
    "Engine",
    "InversionFlags",
    "ScreenAcceleration",
    "SimulationContext",
    "SoundState",
    "System",
    "TickContext",
    "vec",
]
