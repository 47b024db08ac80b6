"""Search helpers shared by the selector and the dashboard."""

from __future__ import annotations

from .fuzzy import FuzzyMatch, fuzzy_match_labels, fuzzy_score, substring_index

__all__ = ["FuzzyMatch", "fuzzy_match_labels", "fuzzy_score", "substring_index"]
