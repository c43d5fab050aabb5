"""tilt-physics - Single-ball kinematics with friction and wall bounce for the tilt engine."""
from __future__ import annotations

from tilt_physics.ball import bounce_axis, clamp_to_canvas, step_ball
from tilt_physics.config import SimulationConstants
from tilt_physics.systems import make_ball_system, resize

__all__ = [
    "SimulationConstants",
    "bounce_axis",
    "clamp_to_canvas",
    "make_ball_system",
    "resize",
    "step_ball",
]
