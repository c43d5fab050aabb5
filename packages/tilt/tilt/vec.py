"""Small vector helpers operating on tuple[float, ...]."""
from __future__ import annotations

import math

Vec = tuple[float, ...]


def add(a: Vec, b: Vec) -> Vec:
    return tuple(ai + bi for ai, bi in zip(a, b, strict=True))


def scale(v: Vec, s: float) -> Vec:
    return tuple(vi * s for vi in v)


def negate_axes(v: Vec, mask: tuple[bool, ...]) -> Vec:
    """Flip the sign of every component whose ``mask`` entry is set."""
    return tuple(-vi if flip else vi for vi, flip in zip(v, mask, strict=True))


def magnitude(v: Vec) -> float:
    return math.sqrt(sum(vi * vi for vi in v))


def rotate(v: Vec, degrees: float) -> Vec:
    """Rotate a 2D vector counter-clockwise by ``degrees``."""
    if len(v) != 2:
        raise ValueError(f"rotate needs a 2D vector, got {len(v)} components")
    x, y = v
    rad = degrees * math.pi / 180
    cos_r = math.cos(rad)
    sin_r = math.sin(rad)
    return (x * cos_r - y * sin_r, x * sin_r + y * cos_r)


def clamp(value: float, low: float, high: float) -> float:
    if low > high:
        raise ValueError(f"empty range [{low}, {high}]")
    return max(low, min(value, high))
