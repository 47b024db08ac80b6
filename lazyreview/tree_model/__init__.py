"""Review tree model: flattening, row filters, navigation, and loading."""

from __future__ import annotations

from .build import build_children_map, count_epic_descendants, flatten_review_tree
from .filtering import (
    STATUS_FILTER_ALL,
    STATUS_FILTER_NEEDS_REVISION,
    STATUS_FILTER_UNREVIEWED,
    STATUS_FILTERS,
    ReviewFilter,
    cycle_status_filter,
)
from .loader import ReviewTree, load_review_tree
from .navigation import index_of_item, next_unreviewed_index
from .types import TREE_BLANK, TREE_BRANCH, TREE_CORNER, TREE_PIPE, DisplayNode

__all__ = [
    "DisplayNode",
    "ReviewFilter",
    "ReviewTree",
    "STATUS_FILTER_ALL",
    "STATUS_FILTER_NEEDS_REVISION",
    "STATUS_FILTER_UNREVIEWED",
    "STATUS_FILTERS",
    "TREE_BLANK",
    "TREE_BRANCH",
    "TREE_CORNER",
    "TREE_PIPE",
    "build_children_map",
    "count_epic_descendants",
    "cycle_status_filter",
    "flatten_review_tree",
    "index_of_item",
    "load_review_tree",
    "next_unreviewed_index",
]
