"""Plain-text session summaries meant to be pasted into an agent prompt."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..model import REVIEW_APPROVED, REVIEW_DEFERRED, REVIEW_NEEDS_REVISION
from .actions import ReviewAction

EMPTY_SESSION_TEXT = "No reviews recorded in this session."

STATUS_MARKS = {
    REVIEW_APPROVED: "✓",
    REVIEW_NEEDS_REVISION: "!",
    REVIEW_DEFERRED: "?",
}


def simple_session_prompt(actions: Sequence[ReviewAction]) -> str:
    """One line per action: mark, item id, and outcome."""
    if not actions:
        return EMPTY_SESSION_TEXT
    lines = ["# Review Session Summary", "", f"Reviewed {len(actions)} issues:", ""]
    for action in actions:
        mark = STATUS_MARKS.get(action.status, "✓")
        lines.append(f"- {mark} {action.item_id} → {action.status}")
    return "\n".join(lines) + "\n"


def full_session_prompt(
    actions: Sequence[ReviewAction],
    title_for: Callable[[str], str | None],
) -> str:
    """Detailed summary grouped by outcome, with notes and follow-up steps.

    ``title_for`` maps an item id to its title, or ``None`` when unknown.
    """
    if not actions:
        return EMPTY_SESSION_TEXT

    def heading(action: ReviewAction) -> str:
        return f"`{action.item_id}`: {title_for(action.item_id) or action.item_id}"

    approved = [action for action in actions if action.status == REVIEW_APPROVED]
    revision = [action for action in actions if action.status == REVIEW_NEEDS_REVISION]
    deferred = [action for action in actions if action.status == REVIEW_DEFERRED]

    parts = [
        "# Review Session Summary\n\n",
        "You are reviewing an issue tracking session. "
        "Go over the review feedback and suggest changes.\n\n",
        "## Session Stats\n",
        f"- Approved: {len(approved)} issues\n",
        f"- Needs Revision: {len(revision)} issues\n",
        f"- Deferred: {len(deferred)} issues\n\n",
    ]

    if approved:
        parts.append("## Approved Issues\n")
        parts.extend(f"- {heading(action)}\n" for action in approved)
        parts.append("\n")

    if revision:
        parts.append("## Issues Needing Revision\n")
        for action in revision:
            parts.append(f"### {heading(action)}\n")
            if action.notes:
                parts.append(f"**Review Notes:** {action.notes}\n")
            parts.append("**Action Required:** Review feedback and suggest implementation changes.\n\n")

    if deferred:
        parts.append("## Deferred Issues\n")
        for action in deferred:
            parts.append(f"### {heading(action)}\n")
            parts.append(f"**Reason:** {action.notes}\n\n" if action.notes else "\n")

    parts.extend(
        [
            "---\n\n",
            "For each issue with review feedback:\n",
            "1. Analyze the review notes\n",
            "2. Suggest concrete changes based on feedback\n",
            "3. Explain current issue state and dependencies\n",
        ]
    )
    return "".join(parts)
