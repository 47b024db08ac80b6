"""Public package surface for lazyreview.

Navigation and review-state core for reviewing hierarchical issue trees in
the terminal. Most implementation lives in submodules under ``lazyreview``.
"""

from __future__ import annotations

from .model import Item, ItemNotFoundError, compare_hierarchical_ids, item_from_dict
from .review import ReviewSession
from .runtime import ReviewDashboard, ensure_visible
from .selector import LabelSelector, ScopeFilter
from .tree_model import ReviewFilter, flatten_review_tree, load_review_tree

__all__ = [
    "Item",
    "ItemNotFoundError",
    "LabelSelector",
    "ReviewDashboard",
    "ReviewFilter",
    "ReviewSession",
    "ScopeFilter",
    "compare_hierarchical_ids",
    "ensure_visible",
    "flatten_review_tree",
    "item_from_dict",
    "load_review_tree",
]
