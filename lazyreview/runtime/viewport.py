"""Cursor and scroll invariants for the review tree pane."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

# Rows taken by the header, stats line, column titles, and footer.
TREE_CHROME_ROWS = 7
MIN_TREE_ROWS = 3


def ensure_visible(cursor: int, current_scroll: int, list_length: int, visible_height: int) -> int:
    """Return the scroll offset that keeps ``cursor`` inside the window.

    Scrolls up to the cursor when it is above the window, or down just far
    enough to put it on the last visible row. The result is clamped to
    ``[0, max(0, list_length - visible_height)]``.
    """
    visible_height = max(1, visible_height)
    scroll = current_scroll
    if cursor < scroll:
        scroll = cursor
    elif cursor >= scroll + visible_height:
        scroll = cursor - visible_height + 1
    return max(0, min(scroll, max(0, list_length - visible_height)))


def clamp_cursor(cursor: int, list_length: int) -> int:
    """Clamp ``cursor`` to a valid row index; ``0`` for an empty list."""
    if list_length <= 0:
        return 0
    return max(0, min(cursor, list_length - 1))


def tree_view_rows(height: int, search_visible: bool = False) -> int:
    """Rows available to tree entries for a terminal ``height``."""
    rows = height - TREE_CHROME_ROWS
    if search_visible:
        rows -= 1
    return max(MIN_TREE_ROWS, rows)


def visible_slice(rows: Sequence[T], scroll: int, height: int) -> list[T]:
    return list(rows[max(0, scroll) : max(0, scroll) + max(0, height)])
