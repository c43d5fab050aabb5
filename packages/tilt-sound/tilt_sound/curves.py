"""Range mapping, response curves, and smoothing."""
from __future__ import annotations


def remap(value: float, in_lo: float, in_hi: float, out_lo: float, out_hi: float) -> float:
    """Linearly map ``value`` from one range to another. Not clamped."""
    return out_lo + (value - in_lo) * (out_hi - out_lo) / (in_hi - in_lo)


def constrain(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))


def power_curve(t: float, exponent: float) -> float:
    """Shape a unit value; exponents above 1 stay quiet longer near 0."""
    return constrain(t, 0.0, 1.0) ** exponent


def ema(current: float, target: float, alpha: float) -> float:
    """One exponential-moving-average step. ``alpha`` is the retained share."""
    return current * alpha + target * (1 - alpha)
