"""Entries offered by the label/epic/bead selector."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..model import TYPE_EPIC, Item
from ..tree_model import build_children_map, count_epic_descendants

KIND_LABEL = "label"
KIND_EPIC = "epic"
KIND_BEAD = "bead"


@dataclass(frozen=True)
class SelectorItem:
    """One selectable row: a label, an open epic, or a single item ("bead")."""

    kind: str
    value: str
    title: str
    issue_count: int = 0
    closed_count: int = 0
    progress: float = 0.0
    overlap_count: int = 0

    @property
    def is_label(self) -> bool:
        return self.kind == KIND_LABEL

    @property
    def search_text(self) -> str:
        """Text the fuzzy matcher sees for this row."""
        return f"{self.title} {self.value}"


def _ratio(closed: int, total: int) -> float:
    return closed / total if total > 0 else 0.0


def build_selector_items(items: Iterable[Item]) -> list[SelectorItem]:
    """Return open epics (least complete first) followed by all labels A-Z.

    Epic counts cover every descendant; label counts cover only items that
    carry the label directly.
    """
    items_list = list(items)
    children_map = build_children_map(items_list)

    epics: list[SelectorItem] = []
    label_counts: dict[str, list[int]] = {}
    for item in items_list:
        if item.issue_type == TYPE_EPIC and not item.is_closed:
            total, closed = count_epic_descendants(item.id, children_map)
            epics.append(
                SelectorItem(
                    kind=KIND_EPIC,
                    value=item.id,
                    title=item.title,
                    issue_count=total,
                    closed_count=closed,
                    progress=_ratio(closed, total),
                )
            )
        for label in item.labels:
            counts = label_counts.setdefault(label, [0, 0])
            counts[0] += 1
            if item.is_closed:
                counts[1] += 1

    epics.sort(key=lambda entry: (entry.progress, entry.title))
    labels = [
        SelectorItem(
            kind=KIND_LABEL,
            value=name,
            title=name,
            issue_count=total,
            closed_count=closed,
            progress=_ratio(closed, total),
        )
        for name, (total, closed) in sorted(label_counts.items())
    ]
    return epics + labels
