"""Device-motion samples: event parsing and the sensor-to-frame channel."""
from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Callable

from tilt import AccelerationSample

_PREFERRED_FIELDS = ("accelerationIncludingGravity", "acceleration")


def _axis(reading: Any, name: str) -> float:
    if isinstance(reading, Mapping):
        value = reading.get(name)
    else:
        value = getattr(reading, name, None)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return float(value)


def sample_from_motion_event(event: Mapping[str, Any]) -> AccelerationSample | None:
    """Extract an AccelerationSample from a device-motion event payload.

    The gravity-inclusive reading wins when present, the gravity-excluded
    one is the fallback. Returns None when neither is usable. Individual
    axes that are missing or not finite numbers read as 0.
    """
    for name in _PREFERRED_FIELDS:
        reading = event.get(name)
        if reading:
            return AccelerationSample(
                x=_axis(reading, "x"),
                y=_axis(reading, "y"),
                z=_axis(reading, "z"),
            )
    return None


class SampleChannel:
    """Hands the newest sensor sample to the frame loop.

    The sensor side pushes at its own cadence; each frame drains whatever
    arrived since the previous frame. Only the newest sample is kept,
    ``pending`` counts how many arrived since the last drain.
    """

    def __init__(self) -> None:
        self._fresh: AccelerationSample | None = None
        self._latest: AccelerationSample | None = None
        self._pending = 0

    @property
    def latest(self) -> AccelerationSample | None:
        return self._latest

    @property
    def pending(self) -> int:
        return self._pending

    def push(self, sample: AccelerationSample | None) -> None:
        if sample is None:
            return
        self._fresh = sample
        self._latest = sample
        self._pending += 1

    def drain(self) -> AccelerationSample | None:
        sample, self._fresh = self._fresh, None
        self._pending = 0
        return sample

    def clear(self) -> None:
        self._fresh = None
        self._pending = 0


def make_motion_listener(
    channel: SampleChannel,
) -> Callable[[Mapping[str, Any]], None]:
    """Build the device-motion event callback that feeds ``channel``."""

    def on_device_motion(event: Mapping[str, Any]) -> None:
        channel.push(sample_from_motion_event(event))

    return on_device_motion
