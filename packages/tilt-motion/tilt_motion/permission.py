"""Motion-sensor permission outcome and the one-shot start routine."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Granted:
    """Sensor access allowed; listening may start."""


@dataclass(frozen=True)
class Denied:
    """Sensor access refused or the request failed."""

    reason: str


PermissionResult = Union[Granted, Denied]


def request_motion_permission(
    requester: Callable[[], str] | None = None,
) -> PermissionResult:
    """Run the platform permission prompt, if there is one.

    ``requester`` stands for the user-gesture prompt and returns the
    platform response string. Platforms without a prompt pass None and are
    granted straight away.
    """
    if requester is None:
        return Granted()
    try:
        response = requester()
    except Exception as exc:
        logger.error("motion permission request failed: %s", exc)
        return Denied(reason=str(exc) or type(exc).__name__)
    if response == "granted":
        return Granted()
    return Denied(reason=f"permission response {response!r}")


def initialize_motion(result: PermissionResult, start: Callable[[], None]) -> bool:
    """Start listening on Granted; stay inert on Denied.

    Returns whether ``start`` was called.
    """
    if isinstance(result, Granted):
        start()
        return True
    logger.warning("motion input disabled: %s", result.reason)
    return False
