"""Keyboard-driven stand-in for a phone's accelerometer."""
from __future__ import annotations

import math
from typing import Any, Callable

from ui.constants import GRAVITY, MAX_TILT_DEG, TILT_STEP_DEG

MotionListener = Callable[[dict[str, Any]], None]


class VirtualDevice:
    """Holds a pitch/roll pose and emits device-motion style events.

    Rolling right gives positive device x and pitching up gives positive
    device y, which the frame loop turns into rightward and upward motion
    on screen.
    """

    def __init__(self) -> None:
        self.roll = 0.0
        self.pitch = 0.0
        self.rotation = 0
        self._listeners: list[MotionListener] = []

    def add_listener(self, listener: MotionListener) -> None:
        self._listeners.append(listener)

    @property
    def listening(self) -> bool:
        return bool(self._listeners)

    def tilt(self, d_roll: float, d_pitch: float) -> None:
        self.roll = max(-MAX_TILT_DEG, min(MAX_TILT_DEG, self.roll + d_roll * TILT_STEP_DEG))
        self.pitch = max(-MAX_TILT_DEG, min(MAX_TILT_DEG, self.pitch + d_pitch * TILT_STEP_DEG))

    def level(self) -> None:
        self.roll = 0.0
        self.pitch = 0.0

    def rotate_screen(self) -> None:
        self.rotation = (self.rotation + 90) % 360

    def screen_angle(self) -> int:
        return self.rotation

    def reading(self) -> dict[str, float]:
        roll = math.radians(self.roll)
        pitch = math.radians(self.pitch)
        return {
            "x": GRAVITY * math.sin(roll),
            "y": GRAVITY * math.sin(pitch),
            "z": GRAVITY * math.cos(roll) * math.cos(pitch),
        }

    def emit(self) -> None:
        event = {"accelerationIncludingGravity": self.reading()}
        for listener in self._listeners:
            listener(event)


def make_requester(deny: bool) -> Callable[[], str]:
    """Permission prompt stand-in; answers like the browser would."""

    def request() -> str:
        return "denied" if deny else "granted"

    return request
