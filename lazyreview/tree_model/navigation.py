"""Cursor jumps over flattened review rows."""

from __future__ import annotations

from collections.abc import Sequence

from .types import DisplayNode


def next_unreviewed_index(nodes: Sequence[DisplayNode], cursor: int, direction: int) -> int | None:
    """Return the index of the next unreviewed row in ``direction``.

    The search starts one row away from ``cursor`` and wraps around the list.
    The cursor row itself is considered last. Returns ``None`` when no row is
    unreviewed.
    """
    count = len(nodes)
    if count == 0:
        return None
    step = 1 if direction >= 0 else -1
    for offset in range(1, count + 1):
        idx = (cursor + step * offset) % count
        if nodes[idx].item.is_unreviewed:
            return idx
    return None


def index_of_item(nodes: Sequence[DisplayNode], item_id: str) -> int | None:
    """Return the row index showing ``item_id``, or ``None`` when hidden."""
    for idx, node in enumerate(nodes):
        if node.item.id == item_id:
            return idx
    return None
