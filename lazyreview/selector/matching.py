"""Candidate recomputation for the selector's text-entry modes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from ..model import Item
from ..search import FuzzyMatch
from .items import KIND_BEAD, KIND_EPIC, SelectorItem

FuzzyFinder = Callable[[str, list[str]], Sequence[FuzzyMatch]]


def _as_bead(item: Item) -> SelectorItem:
    return SelectorItem(kind=KIND_BEAD, value=item.id, title=item.title, issue_count=1)


def match_review_lookup(query: str, items: Iterable[Item]) -> list[SelectorItem]:
    """Find items by ID prefix first, then by title substring.

    Matching is case-insensitive. ID hits are sorted by ID and title hits by
    title; an item appears at most once. An empty query matches nothing.
    """
    query = query.strip()
    if not query:
        return []
    folded = query.lower()
    id_matches: list[SelectorItem] = []
    title_matches: list[SelectorItem] = []
    for item in items:
        if item.id.lower().startswith(folded):
            id_matches.append(_as_bead(item))
        elif folded in item.title.lower():
            title_matches.append(_as_bead(item))
    id_matches.sort(key=lambda entry: entry.value)
    title_matches.sort(key=lambda entry: entry.title)
    return id_matches + title_matches


def match_fuzzy(
    query: str,
    base: Sequence[SelectorItem],
    fuzzy_find: FuzzyFinder,
) -> list[SelectorItem]:
    """Fuzzy-filter ``base`` by ``query``; epics stay ahead of labels.

    An empty query returns ``base`` unchanged.
    """
    query = query.strip()
    if not query:
        return list(base)
    matches = fuzzy_find(query, [entry.search_text for entry in base])
    ranked = [base[match.index] for match in matches]
    # sorted() is stable, so fuzzy rank is kept within each kind.
    return sorted(ranked, key=lambda entry: entry.kind != KIND_EPIC)
