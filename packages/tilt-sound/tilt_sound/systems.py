"""System factory for sound parameter smoothing."""
from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from tilt import SoundState

from tilt_sound.config import SoundConfig
from tilt_sound.envelope import DecayEnvelope
from tilt_sound.mapping import MAPPERS, acceleration_magnitude, silent_state, smooth

if TYPE_CHECKING:
    from tilt import SimulationContext, System, TickContext


def enable_sound(sim: SimulationContext, config: SoundConfig | None = None) -> SoundState:
    """Start sound from silence. No-op if sound is already running."""
    if sim.sound is None:
        sim.sound = silent_state(config or SoundConfig())
    return sim.sound


def make_sound_system(
    config: SoundConfig | None = None,
    envelope: DecayEnvelope | None = None,
    mode_ref: list[str] | None = None,
    config_ref: list[SoundConfig] | None = None,
) -> System:
    """Ease the audio parameters toward the current target every tick.

    Does nothing until ``enable_sound`` has run. ``mode_ref`` and
    ``config_ref`` are mutable one-item lists read on every tick, so the
    host can switch mapping mode or swap in a retuned config (sensitivity,
    brightness) at runtime. ``config_ref`` takes precedence over ``config``
    and ``mode_ref`` over the config's own mode. In magnitude mode the
    envelope fires when the magnitude crosses above ``envelope_threshold``.
    """
    if config_ref is None:
        config_ref = [config or SoundConfig()]
    envelope = envelope if envelope is not None else DecayEnvelope()
    was_above = [False]

    def sound_system(sim: SimulationContext, ctx: TickContext) -> None:
        if sim.sound is None:
            return
        current = config_ref[0]
        mode = mode_ref[0] if mode_ref is not None else current.mode
        mapper = MAPPERS.get(mode)
        if mapper is None:
            raise ValueError(f"Unknown sound mode {mode!r}")

        target = mapper(sim, current)
        if mode == "magnitude":
            above = acceleration_magnitude(sim.acceleration) > current.envelope_threshold
            if above and not was_above[0]:
                envelope.trigger()
            was_above[0] = above
        else:
            was_above[0] = False

        level = envelope.advance(ctx.dt)
        sim.sound = replace(smooth(sim.sound, target, current.smoothing), envelope=level)

    return sound_system
