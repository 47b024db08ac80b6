"""Gather the review subtree rooted at one item, plus its external blockers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..model import Item, ItemNotFoundError
from .build import build_children_map


@dataclass
class ReviewTree:
    """Root item, its descendants, and items outside the tree that block it."""

    root: Item
    descendants: list[Item] = field(default_factory=list)
    blockers: list[Item] = field(default_factory=list)
    items_by_id: dict[str, Item] = field(default_factory=dict)

    def all_items(self) -> list[Item]:
        """Return root followed by descendants."""
        return [self.root, *self.descendants]

    def total_count(self) -> int:
        return 1 + len(self.descendants)


def load_review_tree(root_id: str, items: Iterable[Item]) -> ReviewTree:
    """Build a :class:`ReviewTree` for ``root_id`` from a flat item collection.

    Raises :class:`ItemNotFoundError` when ``root_id`` is unknown.
    """
    items_list = list(items)
    by_id = {item.id: item for item in items_list}
    root = by_id.get(root_id)
    if root is None:
        raise ItemNotFoundError(root_id)

    children_map = build_children_map(items_list)
    descendants: list[Item] = []
    in_tree: set[str] = {root.id}
    queue: deque[str] = deque([root.id])
    while queue:
        current = queue.popleft()
        for child in children_map.get(current, []):
            if child.id in in_tree:
                continue
            in_tree.add(child.id)
            descendants.append(child)
            queue.append(child.id)

    blockers: list[Item] = []
    seen_blockers: set[str] = set()
    for member in [root, *descendants]:
        for blocker_id in member.blocked_by_ids():
            if blocker_id in in_tree or blocker_id in seen_blockers:
                continue
            blocker = by_id.get(blocker_id)
            if blocker is None:
                continue
            seen_blockers.add(blocker_id)
            blockers.append(blocker)

    items_by_id = {item.id: item for item in (root, *descendants, *blockers)}
    return ReviewTree(root=root, descendants=descendants, blockers=blockers, items_by_id=items_by_id)
