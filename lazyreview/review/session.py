"""In-memory review session: applies decisions to items and logs them."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from ..model import (
    DECIDED_OUTCOMES,
    REVIEW_APPROVED,
    REVIEW_DEFERRED,
    REVIEW_NEEDS_REVISION,
    REVIEW_OUTCOMES,
    REVIEW_TYPE_PLAN,
    Item,
    ItemNotFoundError,
)
from .actions import ReviewAction

NOTE_SEPARATOR = "\n\n---\n\n"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SessionStats:
    """Counters shown in the session summary."""

    started_at: datetime
    items_reviewed: int = 0
    approved: int = 0
    needs_revision: int = 0
    deferred: int = 0

    def bump(self, status: str) -> None:
        if status == REVIEW_APPROVED:
            self.approved += 1
        elif status == REVIEW_NEEDS_REVISION:
            self.needs_revision += 1
        elif status == REVIEW_DEFERRED:
            self.deferred += 1


def append_note(existing: str, note: str) -> str:
    """Append ``note`` below ``existing`` notes with a visible separator."""
    if not note:
        return existing
    if not existing:
        return note
    return existing + NOTE_SEPARATOR + note


class ReviewSession:
    """Tracks review decisions for one dashboard run.

    Items are mutated in place. The action log grows on every call to
    :meth:`record_action`, including repeat reviews of the same item; it is
    the only thing handed to persistence when the session ends.
    """

    def __init__(
        self,
        items_by_id: Mapping[str, Item],
        reviewer: str = "",
        review_type: str = REVIEW_TYPE_PLAN,
        clock: Clock = utc_now,
    ) -> None:
        self._items = items_by_id
        self.reviewer = reviewer
        self.review_type = review_type
        self._clock = clock
        self._stats = SessionStats(started_at=clock())
        self._actions: list[ReviewAction] = []

    @property
    def started_at(self) -> datetime:
        return self._stats.started_at

    @property
    def stats(self) -> SessionStats:
        return replace(self._stats)

    def actions(self) -> list[ReviewAction]:
        return list(self._actions)

    def pending_count(self) -> int:
        return len(self._actions)

    def record_action(self, item_id: str, status: str, note: str = "") -> ReviewAction:
        """Apply one decision to ``item_id`` and append it to the log.

        Raises :class:`ItemNotFoundError` for unknown items and ``ValueError``
        for an unknown outcome.
        """
        if status not in REVIEW_OUTCOMES:
            raise ValueError(f"unknown review outcome: {status}")
        item = self._items.get(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)

        now = self._clock()
        item.notes = append_note(item.notes, note)

        if status in DECIDED_OUTCOMES:
            if item.is_unreviewed:
                self._stats.items_reviewed += 1
            if item.review_status != status:
                self._stats.bump(status)
            item.review_status = status
            item.reviewed_by = self.reviewer
            item.reviewed_at = now

        action = ReviewAction(
            item_id=item_id,
            status=status,
            notes=note,
            reviewer=self.reviewer,
            review_type=self.review_type,
            timestamp=now,
        )
        self._actions.append(action)
        return action
