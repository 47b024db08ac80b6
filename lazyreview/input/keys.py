"""Key token names produced by the terminal key reader.

Printable keys arrive as single characters; everything else arrives as an
upper-case token name.
"""

from __future__ import annotations

KEY_ESC = "ESC"
KEY_ENTER = "ENTER"
KEY_BACKSPACE = "BACKSPACE"
KEY_TAB = "TAB"
KEY_UP = "UP"
KEY_DOWN = "DOWN"
KEY_HOME = "HOME"
KEY_END = "END"
KEY_CTRL_J = "CTRL_J"
KEY_CTRL_S = "CTRL_S"
KEY_CTRL_C = "\x03"


def is_printable_key(key: str) -> bool:
    """Return whether ``key`` is a single character that belongs in a text buffer."""
    return len(key) == 1 and key.isprintable()
