"""Parent/child adjacency construction and review-tree flattening."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable

from ..model import Item, sort_items_by_priority
from .types import TREE_BLANK, TREE_BRANCH, TREE_CORNER, TREE_PIPE, DisplayNode


def build_children_map(items: Iterable[Item]) -> dict[str, list[Item]]:
    """Map parent id to child items using ``parent-child`` edges, in input order."""
    children: dict[str, list[Item]] = {}
    for item in items:
        for parent_id in item.parent_ids():
            children.setdefault(parent_id, []).append(item)
    return children


def flatten_review_tree(
    root: Item,
    items: Iterable[Item],
    predicate: Callable[[Item], bool] | None = None,
) -> list[DisplayNode]:
    """Flatten the tree under ``root`` into display rows.

    The root is always the first row. Rows that fail ``predicate`` are left
    out, but their subtrees are still walked so matching descendants keep
    their place in the tree. Siblings are ordered by priority, then
    hierarchical id.
    """
    children_map = build_children_map(items)
    nodes: list[DisplayNode] = [DisplayNode(root, 0, "", True)]
    visited: set[str] = {root.id}

    def walk(parent_id: str, depth: int, ancestor_prefix: str) -> None:
        """Depth-first pre-order walk emitting rows for visible children."""
        children = [
            child
            for child in sort_items_by_priority(children_map.get(parent_id, []))
            if child.id not in visited
        ]
        visited.update(child.id for child in children)
        for idx, child in enumerate(children):
            is_last = idx == len(children) - 1
            if predicate is None or predicate(child):
                nodes.append(
                    DisplayNode(
                        child,
                        depth,
                        ancestor_prefix + (TREE_CORNER if is_last else TREE_BRANCH),
                        is_last,
                    )
                )
            walk(child.id, depth + 1, ancestor_prefix + (TREE_BLANK if is_last else TREE_PIPE))

    walk(root.id, 1, "")
    return nodes


def count_epic_descendants(
    epic_id: str,
    children_map: dict[str, list[Item]],
) -> tuple[int, int]:
    """Return ``(total, closed)`` descendant counts below ``epic_id``.

    Breadth-first over the parent/child map; each node is counted once even
    when the edges contain cycles. The epic itself is not counted.
    """
    total = 0
    closed = 0
    visited: set[str] = {epic_id}
    queue: deque[str] = deque([epic_id])
    while queue:
        current = queue.popleft()
        for child in children_map.get(current, []):
            if child.id in visited:
                continue
            visited.add(child.id)
            total += 1
            if child.is_closed:
                closed += 1
            queue.append(child.id)
    return total, closed
