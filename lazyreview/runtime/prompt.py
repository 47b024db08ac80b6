"""Single-buffer text prompts used by the dashboard overlays."""

from __future__ import annotations

from dataclasses import dataclass

from ..input import KEY_BACKSPACE, is_printable_key


@dataclass
class TextPrompt:
    """Visible/hidden toggle with its own captured text."""

    name: str
    visible: bool = False
    buffer: str = ""
    multiline: bool = False

    def open(self, initial: str = "") -> None:
        self.visible = True
        self.buffer = initial

    def close(self) -> str:
        """Hide the prompt and return what was typed."""
        text = self.buffer
        self.visible = False
        self.buffer = ""
        return text

    def edit(self, key: str) -> bool:
        """Apply an editing key; returns whether the buffer changed."""
        if key == KEY_BACKSPACE:
            if not self.buffer:
                return False
            self.buffer = self.buffer[:-1]
            return True
        if is_printable_key(key):
            self.buffer += key
            return True
        return False

    def newline(self) -> None:
        if self.multiline:
            self.buffer += "\n"
