"""Work-item datatypes shared by the tree, selector, and review modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

STATUS_OPEN = "open"
STATUS_IN_PROGRESS = "in_progress"
STATUS_BLOCKED = "blocked"
STATUS_CLOSED = "closed"
ITEM_STATUSES = (STATUS_OPEN, STATUS_IN_PROGRESS, STATUS_BLOCKED, STATUS_CLOSED)

TYPE_BUG = "bug"
TYPE_FEATURE = "feature"
TYPE_TASK = "task"
TYPE_EPIC = "epic"
TYPE_CHORE = "chore"
ISSUE_TYPES = (TYPE_BUG, TYPE_FEATURE, TYPE_TASK, TYPE_EPIC, TYPE_CHORE)

DEP_BLOCKS = "blocks"
DEP_RELATED = "related"
DEP_PARENT_CHILD = "parent-child"
DEP_DISCOVERED_FROM = "discovered-from"

REVIEW_UNREVIEWED = "unreviewed"
REVIEW_APPROVED = "approved"
REVIEW_NEEDS_REVISION = "needs_revision"
REVIEW_DEFERRED = "deferred"
REVIEW_STATUSES = ("", REVIEW_UNREVIEWED, REVIEW_APPROVED, REVIEW_NEEDS_REVISION, REVIEW_DEFERRED)

OUTCOME_NOTE = "note"
DECIDED_OUTCOMES = (REVIEW_APPROVED, REVIEW_NEEDS_REVISION, REVIEW_DEFERRED)
REVIEW_OUTCOMES = DECIDED_OUTCOMES + (OUTCOME_NOTE,)

REVIEW_TYPE_PLAN = "plan"
REVIEW_TYPE_IMPLEMENTATION = "implementation"
REVIEW_TYPE_SECURITY = "security"
REVIEW_TYPES = (REVIEW_TYPE_PLAN, REVIEW_TYPE_IMPLEMENTATION, REVIEW_TYPE_SECURITY)


class ItemNotFoundError(LookupError):
    """Raised when a requested item identifier is absent from the collection."""

    def __init__(self, item_id: str) -> None:
        super().__init__(f"issue not found: {item_id}")
        self.item_id = item_id


@dataclass(frozen=True)
class Dependency:
    """Typed edge; for ``parent-child`` edges ``depends_on_id`` is the parent."""

    issue_id: str
    depends_on_id: str
    type: str = DEP_BLOCKS

    @property
    def is_parent_child(self) -> bool:
        return self.type == DEP_PARENT_CHILD

    @property
    def is_blocking(self) -> bool:
        # Edges written before types existed are blocking edges.
        return self.type in ("", DEP_BLOCKS)


@dataclass(frozen=True)
class Comment:
    """Comment attached to an item, possibly a serialized review record."""

    text: str
    author: str = ""
    created_at: datetime | None = None


@dataclass
class Item:
    """One work item; review actions mutate it in place."""

    id: str
    title: str = ""
    status: str = STATUS_OPEN
    priority: int = 2
    issue_type: str = TYPE_TASK
    labels: list[str] = field(default_factory=list)
    assignee: str = ""
    description: str = ""
    design: str = ""
    acceptance_criteria: str = ""
    notes: str = ""
    dependencies: list[Dependency] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    review_status: str = ""
    reviewed_by: str = ""
    reviewed_at: datetime | None = None

    @property
    def is_unreviewed(self) -> bool:
        return self.review_status in ("", REVIEW_UNREVIEWED)

    @property
    def is_closed(self) -> bool:
        return self.status == STATUS_CLOSED

    def parent_ids(self) -> list[str]:
        """Return parent identifiers from ``parent-child`` edges."""
        return [dep.depends_on_id for dep in self.dependencies if dep.is_parent_child]

    def blocked_by_ids(self) -> list[str]:
        """Return identifiers of items blocking this one."""
        return [dep.depends_on_id for dep in self.dependencies if dep.is_blocking]

    def has_label(self, label: str, case_sensitive: bool = True) -> bool:
        if case_sensitive:
            return label in self.labels
        folded = label.casefold()
        return any(own.casefold() == folded for own in self.labels)


def _parse_timestamp(value: object) -> datetime | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def item_from_dict(data: dict[str, object]) -> Item:
    """Build an :class:`Item` from one decoded issue-store JSON record.

    Unknown keys are ignored. ``status`` must be one of the known item
    statuses; anything else raises ``ValueError`` so bad records surface
    instead of being silently coerced.
    """
    item_id = data.get("id")
    if not isinstance(item_id, str) or not item_id:
        raise ValueError("issue record is missing an id")
    status = str(data.get("status") or STATUS_OPEN)
    if status not in ITEM_STATUSES:
        raise ValueError(f"invalid status for {item_id}: {status}")

    dependencies: list[Dependency] = []
    for raw in data.get("dependencies") or []:
        if not isinstance(raw, dict):
            continue
        depends_on = raw.get("depends_on_id")
        if not isinstance(depends_on, str) or not depends_on:
            continue
        dependencies.append(
            Dependency(
                issue_id=str(raw.get("issue_id") or item_id),
                depends_on_id=depends_on,
                type=str(raw.get("type") or ""),
            )
        )

    comments: list[Comment] = []
    for raw in data.get("comments") or []:
        if not isinstance(raw, dict):
            continue
        comments.append(
            Comment(
                text=str(raw.get("text") or ""),
                author=str(raw.get("author") or ""),
                created_at=_parse_timestamp(raw.get("created_at")),
            )
        )

    raw_priority = data.get("priority", 2)
    priority = raw_priority if isinstance(raw_priority, int) and not isinstance(raw_priority, bool) else 2

    return Item(
        id=item_id,
        title=str(data.get("title") or ""),
        status=status,
        priority=priority,
        issue_type=str(data.get("issue_type") or TYPE_TASK),
        labels=[str(label) for label in data.get("labels") or []],
        assignee=str(data.get("assignee") or ""),
        description=str(data.get("description") or ""),
        design=str(data.get("design") or ""),
        acceptance_criteria=str(data.get("acceptance_criteria") or ""),
        notes=str(data.get("notes") or ""),
        dependencies=dependencies,
        comments=comments,
    )
