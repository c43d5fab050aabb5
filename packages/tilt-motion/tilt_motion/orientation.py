"""Screen rotation lookup."""
from __future__ import annotations

import logging
import math
from typing import Callable

logger = logging.getLogger(__name__)

AngleSource = Callable[[], object]


def _as_angle(value: object) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return float(value)


def read_screen_angle(*sources: AngleSource) -> float:
    """Return the first usable angle reported by ``sources``, else 0 degrees.

    Sources are tried in order. A source that raises, returns None, or
    returns something other than a finite number is skipped.
    """
    for source in sources:
        try:
            value = source()
        except Exception as exc:
            logger.debug("orientation source %r failed: %s", source, exc)
            continue
        angle = _as_angle(value)
        if angle is not None:
            return angle
    return 0.0
