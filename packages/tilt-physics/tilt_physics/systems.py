"""System factory for the ball simulation, plus canvas resize handling."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tilt import Canvas

from tilt_physics.ball import clamp_to_canvas, step_ball
from tilt_physics.config import SimulationConstants

if TYPE_CHECKING:
    from tilt import SimulationContext, System, TickContext


def make_ball_system(constants: SimulationConstants | None = None) -> System:
    """Integrate the ball once per tick from the mapped screen acceleration."""
    constants = constants or SimulationConstants()

    def ball_system(sim: SimulationContext, ctx: TickContext) -> None:
        sim.ball = step_ball(sim.ball, sim.screen_acceleration, constants, sim.canvas)

    return ball_system


def resize(sim: SimulationContext, width: float, height: float, radius: float) -> None:
    """Swap in a new canvas size and re-clamp the ball into it.

    Raises ValueError if the canvas cannot hold a ball of ``radius``.
    """
    canvas = Canvas(width, height).ensure_holds(radius)
    sim.ball = clamp_to_canvas(sim.ball, canvas, radius)
    sim.canvas = canvas
