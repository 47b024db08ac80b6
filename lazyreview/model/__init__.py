"""Work-item model: items, dependency edges, review constants, and ID ordering."""

from __future__ import annotations

from .ordering import (
    compare_hierarchical_ids,
    hierarchical_id_key,
    sort_items_by_priority,
)
from .types import (
    DECIDED_OUTCOMES,
    DEP_BLOCKS,
    DEP_DISCOVERED_FROM,
    DEP_PARENT_CHILD,
    DEP_RELATED,
    ISSUE_TYPES,
    ITEM_STATUSES,
    OUTCOME_NOTE,
    REVIEW_APPROVED,
    REVIEW_DEFERRED,
    REVIEW_NEEDS_REVISION,
    REVIEW_OUTCOMES,
    REVIEW_STATUSES,
    REVIEW_TYPE_IMPLEMENTATION,
    REVIEW_TYPE_PLAN,
    REVIEW_TYPE_SECURITY,
    REVIEW_TYPES,
    REVIEW_UNREVIEWED,
    STATUS_BLOCKED,
    STATUS_CLOSED,
    STATUS_IN_PROGRESS,
    STATUS_OPEN,
    TYPE_BUG,
    TYPE_CHORE,
    TYPE_EPIC,
    TYPE_FEATURE,
    TYPE_TASK,
    Comment,
    Dependency,
    Item,
    ItemNotFoundError,
    item_from_dict,
)

__all__ = [
    "Comment",
    "Dependency",
    "Item",
    "ItemNotFoundError",
    "item_from_dict",
    "compare_hierarchical_ids",
    "hierarchical_id_key",
    "sort_items_by_priority",
    "DECIDED_OUTCOMES",
    "DEP_BLOCKS",
    "DEP_DISCOVERED_FROM",
    "DEP_PARENT_CHILD",
    "DEP_RELATED",
    "ISSUE_TYPES",
    "ITEM_STATUSES",
    "OUTCOME_NOTE",
    "REVIEW_APPROVED",
    "REVIEW_DEFERRED",
    "REVIEW_NEEDS_REVISION",
    "REVIEW_OUTCOMES",
    "REVIEW_STATUSES",
    "REVIEW_TYPE_IMPLEMENTATION",
    "REVIEW_TYPE_PLAN",
    "REVIEW_TYPE_SECURITY",
    "REVIEW_TYPES",
    "REVIEW_UNREVIEWED",
    "STATUS_BLOCKED",
    "STATUS_CLOSED",
    "STATUS_IN_PROGRESS",
    "STATUS_OPEN",
    "TYPE_BUG",
    "TYPE_CHORE",
    "TYPE_EPIC",
    "TYPE_FEATURE",
    "TYPE_TASK",
]
