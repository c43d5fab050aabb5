"""tilt-motion - Device motion input and screen-frame mapping for the tilt engine."""
from __future__ import annotations

from tilt_motion.controls import KEY_BINDINGS, handle_key
from tilt_motion.mapper import map_motion_to_screen, rotate2d
from tilt_motion.orientation import read_screen_angle
from tilt_motion.permission import (
    Denied,
    Granted,
    PermissionResult,
    initialize_motion,
    request_motion_permission,
)
from tilt_motion.sensor import SampleChannel, make_motion_listener, sample_from_motion_event
from tilt_motion.systems import make_motion_system

__all__ = [
    "Denied",
    "Granted",
    "KEY_BINDINGS",
    "PermissionResult",
    "SampleChannel",
    "handle_key",
    "initialize_motion",
    "make_motion_listener",
    "make_motion_system",
    "map_motion_to_screen",
    "read_screen_angle",
    "request_motion_permission",
    "rotate2d",
    "sample_from_motion_event",
]
