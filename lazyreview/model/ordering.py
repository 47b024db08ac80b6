"""Deterministic orderings for hierarchical item identifiers.

Identifiers look like ``bv-xyz``, ``bv-xyz.1``, ``bv-xyz.1.10``. The base
segment sorts as a plain string, later segments numerically when possible.
"""

from __future__ import annotations

import functools

from .types import Item


def _sign(left: object, right: object) -> int:
    if left < right:  # type: ignore[operator]
        return -1
    if left > right:  # type: ignore[operator]
        return 1
    return 0


def _parse_segment(segment: str) -> int | None:
    try:
        return int(segment)
    except ValueError:
        return None


def compare_hierarchical_ids(left: str, right: str) -> int:
    """Compare two identifiers, returning ``-1``, ``0`` or ``1``.

    Parents sort before their children (``x.1`` < ``x.1.1``) and numeric
    segments compare by value (``x.9`` < ``x.10``).
    """
    if left == right:
        return 0
    left_parts = left.split(".")
    right_parts = right.split(".")

    if left_parts[0] != right_parts[0]:
        return _sign(left_parts[0], right_parts[0])

    for idx in range(1, max(len(left_parts), len(right_parts))):
        if idx >= len(left_parts):
            return -1
        if idx >= len(right_parts):
            return 1
        left_num = _parse_segment(left_parts[idx])
        right_num = _parse_segment(right_parts[idx])
        if left_num is not None and right_num is not None:
            if left_num != right_num:
                return _sign(left_num, right_num)
        elif left_parts[idx] != right_parts[idx]:
            return _sign(left_parts[idx], right_parts[idx])
    # Segments like "01" and "1" are numerically equal; fall back to text so
    # the order stays consistent with string equality.
    return _sign(left, right)


hierarchical_id_key = functools.cmp_to_key(compare_hierarchical_ids)


def sort_items_by_priority(items: list[Item]) -> list[Item]:
    """Return items by priority ascending (P0 first), then hierarchical ID."""
    return sorted(items, key=lambda item: (item.priority, hierarchical_id_key(item.id)))
