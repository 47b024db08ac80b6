"""System clipboard access through the platform's copy command."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys

logger = logging.getLogger(__name__)


def clipboard_commands(platform: str = sys.platform, os_name: str = os.name) -> list[list[str]]:
    """Return candidate copy commands for the platform, most preferred first."""
    if platform == "darwin":
        return [["pbcopy"]]
    if os_name == "nt":
        return [["clip"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


def copy_text_to_clipboard(text: str) -> bool:
    """Best-effort clipboard copy; returns whether some command accepted the text."""
    if not text:
        return False
    for command in clipboard_commands():
        if shutil.which(command[0]) is None:
            continue
        try:
            proc = subprocess.run(command, input=text, text=True, check=False)
        except OSError as exc:
            logger.debug("clipboard command %s failed: %s", command[0], exc)
            continue
        if proc.returncode == 0:
            return True
        logger.debug("clipboard command %s exited with %d", command[0], proc.returncode)
    return False
