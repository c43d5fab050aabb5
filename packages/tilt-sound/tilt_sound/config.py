"""Sound mapping configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

MODES = ("position", "magnitude")


@dataclass(frozen=True)
class SoundConfig:
    """Immutable configuration for deriving oscillator parameters.

    Attributes:
        mode: "position" follows the ball on screen, "magnitude" follows
            the strength of the raw device acceleration.
        smoothing: EMA retention per tick, in (0, 1). Higher is smoother.
        min_frequency: Lowest oscillator frequency in Hz.
        max_frequency: Highest oscillator frequency in Hz.
        min_volume: Volume floor in position mode.
        max_volume: Loudest amplitude, at most 1.
        volume_exponent: Response curve for height to volume.
        left_exponent: Response curve for the left half of the canvas.
        right_exponent: Response curve for the right half of the canvas.
        sensitivity: Gain on the magnitude before the frequency mapping.
        frequency_span: Scaled magnitude that reaches max_frequency.
        volume_span: Magnitude that reaches max_volume.
        cutoff_span: Magnitude that opens the filter to brightness.
        min_cutoff: Closed low-pass cutoff in Hz.
        brightness: Fully open low-pass cutoff in Hz.
        envelope_threshold: Magnitude above which the decay envelope fires.
    """

    mode: str = "position"
    smoothing: float = 0.94
    min_frequency: float = 80.0
    max_frequency: float = 800.0
    min_volume: float = 0.02
    max_volume: float = 0.8
    volume_exponent: float = 1.8
    left_exponent: float = 1.5
    right_exponent: float = 2.0
    sensitivity: float = 1.0
    frequency_span: float = 30.0
    volume_span: float = 25.0
    cutoff_span: float = 20.0
    min_cutoff: float = 200.0
    brightness: float = 2000.0
    envelope_threshold: float = 12.0

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode!r}")
        if not 0.0 < self.smoothing < 1.0:
            raise ValueError(f"smoothing must be in (0, 1), got {self.smoothing}")
        if not 0.0 < self.min_frequency < self.max_frequency:
            raise ValueError(
                f"need 0 < min_frequency < max_frequency, got "
                f"{self.min_frequency}..{self.max_frequency}"
            )
        if not 0.0 <= self.min_volume <= self.max_volume <= 1.0:
            raise ValueError(
                f"need 0 <= min_volume <= max_volume <= 1, got "
                f"{self.min_volume}..{self.max_volume}"
            )
        if not 0.0 < self.min_cutoff <= self.brightness:
            raise ValueError(
                f"need 0 < min_cutoff <= brightness, got {self.min_cutoff}..{self.brightness}"
            )
        for name in (
            "volume_exponent",
            "left_exponent",
            "right_exponent",
            "sensitivity",
            "frequency_span",
            "volume_span",
            "cutoff_span",
        ):
            if getattr(self, name) <= 0.0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.envelope_threshold < 0.0:
            raise ValueError(
                f"envelope_threshold must be non-negative, got {self.envelope_threshold}"
            )
