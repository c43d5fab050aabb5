"""Device-frame to screen-frame acceleration mapping."""
from __future__ import annotations

from tilt import AccelerationSample, InversionFlags, ScreenAcceleration, vec


def rotate2d(x: float, y: float, degrees: float) -> tuple[float, float]:
    """Rotate (x, y) counter-clockwise by ``degrees``."""
    rx, ry = vec.rotate((x, y), degrees)
    return rx, ry


def map_motion_to_screen(
    sample: AccelerationSample,
    angle: float,
    flags: InversionFlags,
) -> ScreenAcceleration:
    """Rotate the device x/y axes into the screen frame, then apply inversion.

    ``sample.z`` does not take part in the mapping.
    """
    rotated = vec.rotate((sample.x, sample.y), angle)
    sx, sy = vec.negate_axes(rotated, (flags.invert_x, flags.invert_y))
    return ScreenAcceleration(sx=sx, sy=sy)
