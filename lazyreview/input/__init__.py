"""Key tokens and dispatch tables shared by the selector and the dashboard."""

from __future__ import annotations

from .key_registry import KeyComboBinding, KeyComboRegistry, KeyHandler
from .keys import (
    KEY_BACKSPACE,
    KEY_CTRL_C,
    KEY_CTRL_J,
    KEY_CTRL_S,
    KEY_DOWN,
    KEY_END,
    KEY_ENTER,
    KEY_ESC,
    KEY_HOME,
    KEY_TAB,
    KEY_UP,
    is_printable_key,
)

__all__ = [
    "KEY_BACKSPACE",
    "KEY_CTRL_C",
    "KEY_CTRL_J",
    "KEY_CTRL_S",
    "KEY_DOWN",
    "KEY_END",
    "KEY_ENTER",
    "KEY_ESC",
    "KEY_HOME",
    "KEY_TAB",
    "KEY_UP",
    "KeyComboBinding",
    "KeyComboRegistry",
    "KeyHandler",
    "is_printable_key",
]
