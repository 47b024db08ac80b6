"""Review session tracking, saved-review comments, and session summaries."""

from __future__ import annotations

from .actions import ReviewAction, ReviewSaver, ReviewSaveResult, save_review_actions
from .comments import (
    LEGACY_REVIEW_MARKER,
    REVIEW_MARKER,
    ParsedReview,
    apply_review_state_from_comments,
    format_review_comment,
    latest_review_from_comments,
    parse_review_comment,
)
from .prompts import EMPTY_SESSION_TEXT, full_session_prompt, simple_session_prompt
from .session import NOTE_SEPARATOR, ReviewSession, SessionStats, append_note

__all__ = [
    "EMPTY_SESSION_TEXT",
    "LEGACY_REVIEW_MARKER",
    "NOTE_SEPARATOR",
    "REVIEW_MARKER",
    "ParsedReview",
    "ReviewAction",
    "ReviewSaveResult",
    "ReviewSaver",
    "ReviewSession",
    "SessionStats",
    "append_note",
    "apply_review_state_from_comments",
    "format_review_comment",
    "full_session_prompt",
    "latest_review_from_comments",
    "parse_review_comment",
    "save_review_actions",
    "simple_session_prompt",
]
