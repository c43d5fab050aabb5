"""System factory for motion mapping."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tilt_motion.mapper import map_motion_to_screen
from tilt_motion.orientation import read_screen_angle
from tilt_motion.sensor import SampleChannel

if TYPE_CHECKING:
    from tilt import SimulationContext, System, TickContext


def make_motion_system(channel: SampleChannel) -> System:
    """Drain the newest sample and map it into the screen frame.

    When nothing arrived since the last frame the previous sample is kept,
    so a quiet sensor holds the ball's forcing rather than zeroing it.
    """

    def motion_system(sim: SimulationContext, ctx: TickContext) -> None:
        sample = channel.drain()
        if sample is not None:
            sim.acceleration = sample
        angle = read_screen_angle(sim.screen_angle)
        sim.screen_acceleration = map_motion_to_screen(
            sim.acceleration, angle, sim.flags
        )

    return motion_system
