"""Label co-occurrence filtering for the selector's scope mode.

A scope is an ordered list of labels. The items bearing every scope label
form the intersection; each other label on those items becomes a candidate
annotated with how many intersection items carry it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace

from ..model import Item
from .items import SelectorItem


def compute_scope_candidates(
    items: Iterable[Item],
    candidates: Sequence[SelectorItem],
    scope_labels: Sequence[str],
) -> list[SelectorItem]:
    """Return label candidates co-occurring with all of ``scope_labels``.

    With an empty scope the unfiltered ``candidates`` are returned as-is.
    Results carry ``overlap_count`` and are ordered by it, most first, keeping
    the input order among ties.
    """
    if not scope_labels:
        return list(candidates)
    scope_set = set(scope_labels)

    overlap: dict[str, int] = {}
    for item in items:
        own = set(item.labels)
        if not scope_set.issubset(own):
            continue
        for label in own - scope_set:
            overlap[label] = overlap.get(label, 0) + 1

    filtered = [
        replace(candidate, overlap_count=overlap[candidate.value])
        for candidate in candidates
        if candidate.is_label
        and candidate.value not in scope_set
        and overlap.get(candidate.value, 0) > 0
    ]
    filtered.sort(key=lambda candidate: -candidate.overlap_count)
    return filtered


class ScopeFilter:
    """Incremental scope state over a fixed item set."""

    def __init__(self, items: Iterable[Item], all_candidates: Sequence[SelectorItem]) -> None:
        self._items = list(items)
        self._all_candidates = list(all_candidates)
        self._scope: list[str] = []
        self._candidates = list(self._all_candidates)

    @property
    def scope_labels(self) -> list[str]:
        return list(self._scope)

    @property
    def active(self) -> bool:
        return bool(self._scope)

    @property
    def candidates(self) -> list[SelectorItem]:
        return list(self._candidates)

    def _recompute(self) -> list[SelectorItem]:
        self._candidates = compute_scope_candidates(self._items, self._all_candidates, self._scope)
        return list(self._candidates)

    def add_to_scope(self, label: str) -> list[SelectorItem]:
        """Narrow by ``label``; re-adding a present label only recomputes."""
        if label not in self._scope:
            self._scope.append(label)
        return self._recompute()

    def remove_last_scope(self) -> list[SelectorItem]:
        """Drop the most recently added label; no-op on an empty scope."""
        if self._scope:
            self._scope.pop()
        return self._recompute()

    def clear_scope(self) -> list[SelectorItem]:
        self._scope.clear()
        return self._recompute()
