"""tilt-sound - Oscillator parameters derived from ball and sensor state."""
from __future__ import annotations

from tilt_sound.config import MODES, SoundConfig
from tilt_sound.envelope import DecayEnvelope
from tilt_sound.mapping import (
    MAPPERS,
    SoundTarget,
    acceleration_magnitude,
    magnitude_target,
    position_target,
    silent_state,
    smooth,
)
from tilt_sound.systems import enable_sound, make_sound_system

__all__ = [
    "DecayEnvelope",
    "MAPPERS",
    "MODES",
    "SoundConfig",
    "SoundTarget",
    "acceleration_magnitude",
    "enable_sound",
    "magnitude_target",
    "make_sound_system",
    "position_target",
    "silent_state",
    "smooth",
]
