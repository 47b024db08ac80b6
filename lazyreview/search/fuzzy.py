"""Fuzzy label matching for the selector modal.

A label matches when the query appears in it as a substring or as an in-order
subsequence. Substring hits rank first, earliest and shortest leading;
subsequence hits follow, ordered by :func:`fuzzy_score`.
"""

from __future__ import annotations

from typing import NamedTuple

SUBSTRING_BASE_SCORE = 10_000
WORD_BOUNDARY_CHARS = "/_- .:"


class FuzzyMatch(NamedTuple):
    """One ranked hit: original position, matched label, and score."""

    index: int
    label: str
    score: int


def fuzzy_score(query: str, candidate: str) -> int | None:
    """Score ``query`` as an in-order subsequence of ``candidate``.

    Returns ``None`` when some query character cannot be found.
    """
    if not query:
        return 0
    query_folded = query.casefold()
    candidate_folded = candidate.casefold()

    score = 0
    prev_idx = -1
    run = 0
    for needle in query_folded:
        idx = candidate_folded.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        if idx == prev_idx + 1:
            run += 1
            score += 20 + min(16, run * 4)
        else:
            gap = idx - prev_idx - 1
            run = 0
            score -= min(40, gap * 2)
        if idx == 0 or candidate_folded[idx - 1] in WORD_BOUNDARY_CHARS:
            score += 35
        prev_idx = idx

    score -= len(candidate_folded) // 5
    return score


def substring_index(query: str, candidate: str) -> int | None:
    if not query:
        return 0
    idx = candidate.casefold().find(query.casefold())
    if idx < 0:
        return None
    return idx


def fuzzy_match_labels(query: str, labels: list[str], limit: int = 200) -> list[FuzzyMatch]:
    """Rank ``labels`` against ``query``, best first, at most ``limit`` hits.

    Every label containing ``query`` as a substring comes first; labels that
    only match as a scattered subsequence follow.
    """
    max_results = max(1, limit)
    contiguous: list[FuzzyMatch] = []
    for idx, label in enumerate(labels):
        position = substring_index(query, label)
        if position is not None:
            contiguous.append(FuzzyMatch(idx, label, SUBSTRING_BASE_SCORE - position * 50 - len(label)))
    contiguous.sort(key=lambda match: (-match.score, match.label))

    taken = {match.index for match in contiguous}
    scattered: list[FuzzyMatch] = []
    for idx, label in enumerate(labels):
        if idx in taken:
            continue
        score = fuzzy_score(query, label)
        if score is not None:
            scattered.append(FuzzyMatch(idx, label, score))
    scattered.sort(key=lambda match: (-match.score, len(match.label), match.label))

    return (contiguous + scattered)[:max_results]
