"""Review action records and the hand-off to a persistence collaborator."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReviewAction:
    """One decision (or note) recorded during a session."""

    item_id: str
    status: str
    notes: str = ""
    reviewer: str = ""
    review_type: str = ""
    timestamp: datetime | None = None


@dataclass(frozen=True)
class ReviewSaveResult:
    saved: int
    failed: int
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.failed == 0


class ReviewSaver(Protocol):
    """Durable store for review actions.

    ``save`` returns how many actions were written and one message per
    failure. It may also raise; :func:`save_review_actions` treats that as
    every action failing.
    """

    def save(self, actions: Sequence[ReviewAction]) -> tuple[int, list[str]]: ...


def save_review_actions(saver: ReviewSaver, actions: Sequence[ReviewAction]) -> ReviewSaveResult:
    """Hand ``actions`` to ``saver`` and summarise the outcome.

    Failures never propagate and never touch the in-memory session, so a
    caller can retry with the same action log.
    """
    if not actions:
        return ReviewSaveResult(saved=0, failed=0)
    try:
        saved, errors = saver.save(list(actions))
    except Exception as exc:
        logger.warning("review save failed: %s", exc)
        return ReviewSaveResult(saved=0, failed=len(actions), errors=[str(exc)])

    saved = max(0, min(saved, len(actions)))
    failed = len(actions) - saved
    error_messages = [str(error) for error in errors]
    if failed:
        logger.warning("saved %d of %d review actions", saved, len(actions))
        for message in error_messages:
            logger.warning("review save error: %s", message)
    return ReviewSaveResult(saved=saved, failed=failed, errors=error_messages)
