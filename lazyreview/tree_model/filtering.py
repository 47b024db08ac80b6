"""Row predicates for the review tree: status filter, search, and labels."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..model import REVIEW_NEEDS_REVISION, Item

STATUS_FILTER_ALL = "all"
STATUS_FILTER_UNREVIEWED = "unreviewed"
STATUS_FILTER_NEEDS_REVISION = "needs_revision"
STATUS_FILTERS = (STATUS_FILTER_ALL, STATUS_FILTER_UNREVIEWED, STATUS_FILTER_NEEDS_REVISION)


def cycle_status_filter(current: str) -> str:
    """Return the status filter following ``current``, wrapping to ``all``."""
    try:
        idx = STATUS_FILTERS.index(current)
    except ValueError:
        return STATUS_FILTER_ALL
    return STATUS_FILTERS[(idx + 1) % len(STATUS_FILTERS)]


def _matches_status(item: Item, status_filter: str) -> bool:
    if status_filter == STATUS_FILTER_UNREVIEWED:
        return item.is_unreviewed
    if status_filter == STATUS_FILTER_NEEDS_REVISION:
        return item.review_status == REVIEW_NEEDS_REVISION
    return True


def _matches_search(item: Item, query: str) -> bool:
    if not query:
        return True
    folded = query.lower()
    return folded in item.title.lower() or folded in item.id.lower()


def _matches_labels(item: Item, labels: list[str]) -> bool:
    return all(item.has_label(label, case_sensitive=False) for label in labels)


@dataclass
class ReviewFilter:
    """Composite row filter; an item is shown only when every part matches."""

    status_filter: str = STATUS_FILTER_ALL
    search_query: str = ""
    active_labels: list[str] = field(default_factory=list)

    def matches(self, item: Item) -> bool:
        return (
            _matches_status(item, self.status_filter)
            and _matches_search(item, self.search_query)
            and _matches_labels(item, self.active_labels)
        )
