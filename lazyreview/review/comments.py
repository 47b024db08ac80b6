"""Structured review comments.

A saved review is a comment shaped like::

    [REVIEW]
    status: approved
    reviewer: alice
    date: 2024-05-01T10:00:00Z
    type: plan
    notes: looks good
    [/REVIEW]

Older comments used a ``---REVIEW---`` marker and title-cased field names;
both forms parse.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from ..model import Item
from .actions import ReviewAction

REVIEW_MARKER = "[REVIEW]"
REVIEW_END_MARKER = "[/REVIEW]"
LEGACY_REVIEW_MARKER = "---REVIEW---"


@dataclass(frozen=True)
class ParsedReview:
    status: str
    reviewer: str = ""
    reviewed_at: datetime | None = None
    notes: str = ""
    review_type: str = ""


def format_rfc3339(value: datetime) -> str:
    text = value.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        return text[: -len("+00:00")] + "Z"
    return text


def parse_rfc3339(value: str) -> datetime | None:
    """Parse an RFC 3339 timestamp; values without an offset are rejected."""
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed if parsed.tzinfo is not None else None


def format_review_comment(action: ReviewAction) -> str:
    lines = [
        REVIEW_MARKER,
        f"status: {action.status}",
        f"reviewer: {action.reviewer}",
        f"date: {format_rfc3339(action.timestamp) if action.timestamp else ''}",
    ]
    if action.review_type:
        lines.append(f"type: {action.review_type}")
    if action.notes:
        lines.append(f"notes: {action.notes}")
    lines.append(REVIEW_END_MARKER)
    return "\n".join(lines)


def parse_review_comment(text: str) -> ParsedReview | None:
    """Extract the review fields from ``text``.

    Returns ``None`` when the text carries no review marker or no status.
    """
    if REVIEW_MARKER not in text and LEGACY_REVIEW_MARKER not in text:
        return None
    fields: dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        name, sep, value = line.partition(":")
        if not sep:
            continue
        key = name.strip().lower()
        if key in ("status", "reviewer", "date", "notes", "type"):
            fields[key] = value.strip()

    status = fields.get("status", "")
    if not status:
        return None
    return ParsedReview(
        status=status,
        reviewer=fields.get("reviewer", ""),
        reviewed_at=parse_rfc3339(fields.get("date", "")),
        notes=fields.get("notes", ""),
        review_type=fields.get("type", ""),
    )


def latest_review_from_comments(texts: Iterable[str]) -> ParsedReview | None:
    """Return the most recent review among ``texts``.

    Later-dated reviews win. A review without a date only wins when nothing
    dated has been seen before it.
    """
    latest: ParsedReview | None = None
    for text in texts:
        parsed = parse_review_comment(text)
        if parsed is None:
            continue
        if latest is None or latest.reviewed_at is None:
            latest = parsed
        elif parsed.reviewed_at is not None and parsed.reviewed_at > latest.reviewed_at:
            latest = parsed
    return latest


def apply_review_state_from_comments(items: Iterable[Item]) -> int:
    """Seed review state on unreviewed items from their saved review comments.

    Returns the number of items updated.
    """
    updated = 0
    for item in items:
        if not item.is_unreviewed:
            continue
        latest = latest_review_from_comments(comment.text for comment in item.comments)
        if latest is None:
            continue
        item.review_status = latest.status
        item.reviewed_by = latest.reviewer
        item.reviewed_at = latest.reviewed_at
        updated += 1
    return updated
