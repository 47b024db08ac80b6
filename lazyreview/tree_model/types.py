"""Display-node datatype used by the review tree pane."""

from __future__ import annotations

from dataclasses import dataclass

from ..model import Item

TREE_BRANCH = "├─ "
TREE_CORNER = "└─ "
TREE_PIPE = "│  "
TREE_BLANK = "   "


@dataclass(frozen=True)
class DisplayNode:
    """One rendered row in the review tree (an item plus its indentation)."""

    item: Item
    depth: int
    tree_prefix: str = ""
    is_last: bool = True

    @property
    def item_id(self) -> str:
        return self.item.id
