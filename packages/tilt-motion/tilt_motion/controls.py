"""Keyboard shortcuts for the inversion flags."""
from __future__ import annotations

from typing import Callable

from tilt import InversionFlags

KEY_BINDINGS: dict[str, Callable[[InversionFlags], None]] = {
    "x": InversionFlags.toggle_x,
    "y": InversionFlags.toggle_y,
    "b": InversionFlags.toggle_both,
}


def handle_key(flags: InversionFlags, key: str) -> bool:
    """Apply the binding for ``key``. Returns False for unbound keys."""
    action = KEY_BINDINGS.get(key)
    if action is None:
        return False
    action(flags)
    return True
