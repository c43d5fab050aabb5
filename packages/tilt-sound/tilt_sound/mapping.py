"""Sound targets derived from simulation state, and smoothing toward them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from tilt import AccelerationSample, BallState, Canvas, SoundState, vec

from tilt_sound.config import SoundConfig
from tilt_sound.curves import constrain, ema, power_curve, remap

if TYPE_CHECKING:
    from tilt import SimulationContext


@dataclass(frozen=True)
class SoundTarget:
    frequency: float
    volume: float
    cutoff: float


def acceleration_magnitude(sample: AccelerationSample) -> float:
    return vec.magnitude((sample.x, sample.y, sample.z))


def position_target(ball: BallState, canvas: Canvas, config: SoundConfig) -> SoundTarget:
    """Height drives volume and filter, horizontal position drives pitch.

    The top of the canvas is loudest. The canvas center sits at the middle
    of the frequency range; each half uses its own exponent, so the pitch
    bends differently toward the left and right walls.
    """
    height = 1.0 - constrain(ball.y / canvas.height, 0.0, 1.0)
    volume = max(
        config.min_volume,
        config.max_volume * power_curve(height, config.volume_exponent),
    )

    nx = constrain(ball.x / canvas.width, 0.0, 1.0)
    mid = (config.min_frequency + config.max_frequency) / 2
    if nx < 0.5:
        t = power_curve((0.5 - nx) / 0.5, config.left_exponent)
        frequency = mid - (mid - config.min_frequency) * t
    else:
        t = power_curve((nx - 0.5) / 0.5, config.right_exponent)
        frequency = mid + (config.max_frequency - mid) * t
    frequency = constrain(frequency, config.min_frequency, config.max_frequency)

    cutoff = config.min_cutoff + (config.brightness - config.min_cutoff) * height
    return SoundTarget(frequency=frequency, volume=volume, cutoff=cutoff)


def magnitude_target(sample: AccelerationSample, config: SoundConfig) -> SoundTarget:
    """Stronger shaking raises pitch, volume, and filter cutoff."""
    mag = acceleration_magnitude(sample)
    frequency = constrain(
        remap(mag * config.sensitivity, 0.0, config.frequency_span,
              config.min_frequency, config.max_frequency),
        config.min_frequency,
        config.max_frequency,
    )
    volume = constrain(
        remap(mag, 0.0, config.volume_span, 0.0, config.max_volume),
        0.0,
        config.max_volume,
    )
    cutoff = constrain(
        remap(mag, 0.0, config.cutoff_span, config.min_cutoff, config.brightness),
        config.min_cutoff,
        config.brightness,
    )
    return SoundTarget(frequency=frequency, volume=volume, cutoff=cutoff)


def smooth(state: SoundState, target: SoundTarget, alpha: float) -> SoundState:
    return SoundState(
        frequency=ema(state.frequency, target.frequency, alpha),
        volume=ema(state.volume, target.volume, alpha),
        cutoff=ema(state.cutoff, target.cutoff, alpha),
        envelope=state.envelope,
    )


def silent_state(config: SoundConfig) -> SoundState:
    return SoundState(
        frequency=config.min_frequency,
        volume=0.0,
        cutoff=config.min_cutoff,
    )


MAPPERS: dict[str, Callable[["SimulationContext", SoundConfig], SoundTarget]] = {
    "position": lambda sim, config: position_target(sim.ball, sim.canvas, config),
    "magnitude": lambda sim, config: magnitude_target(sim.acceleration, config),
}
