"""Label/epic/bead selector overlay: candidates, scope filtering, and modes."""

from __future__ import annotations

from .items import KIND_BEAD, KIND_EPIC, KIND_LABEL, SelectorItem, build_selector_items
from .matching import FuzzyFinder, match_fuzzy, match_review_lookup
from .modes import InsertMode, InsertVariant, NormalMode, SelectorMode, SelectorOutcome
from .panel import LabelSelector
from .scope import ScopeFilter, compute_scope_candidates

__all__ = [
    "FuzzyFinder",
    "InsertMode",
    "InsertVariant",
    "KIND_BEAD",
    "KIND_EPIC",
    "KIND_LABEL",
    "LabelSelector",
    "NormalMode",
    "ScopeFilter",
    "SelectorItem",
    "SelectorMode",
    "SelectorOutcome",
    "build_selector_items",
    "compute_scope_candidates",
    "match_fuzzy",
    "match_review_lookup",
]
