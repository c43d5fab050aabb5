"""Simulation constants."""
from __future__ import annotations

from dataclasses import dataclass

from tilt import DEFAULT_BALL_RADIUS


@dataclass(frozen=True)
class SimulationConstants:
    """Immutable parameters of the ball simulation.

    Attributes:
        friction: Per-tick velocity retention, strictly between 0 and 1.
        accel_scale: Screen acceleration to velocity gain per tick.
        restitution: Fraction of speed kept (sign flipped) on a wall hit.
        radius: Ball radius in canvas units.
    """

    friction: float = 0.98
    accel_scale: float = 1.2
    restitution: float = 0.8
    radius: float = DEFAULT_BALL_RADIUS

    def __post_init__(self) -> None:
        if not 0.0 < self.friction < 1.0:
            raise ValueError(f"friction must be in (0, 1), got {self.friction}")
        if self.accel_scale <= 0.0:
            raise ValueError(f"accel_scale must be positive, got {self.accel_scale}")
        if not 0.0 <= self.restitution <= 1.0:
            raise ValueError(f"restitution must be in [0, 1], got {self.restitution}")
        if self.radius <= 0.0:
            raise ValueError(f"radius must be positive, got {self.radius}")
