from __future__ import annotations

import unittest

from lazyreview.search import FuzzyMatch, fuzzy_match_labels, fuzzy_score


class LabelFuzzyTests(unittest.TestCase):
    def test_substring_hits_rank_before_subsequence_hits(self) -> None:
        labels = ["b-a-c-k-e-n-d", "backend", "frontend"]
        matches = fuzzy_match_labels("back", labels)
        self.assertEqual([match.label for match in matches], ["backend", "b-a-c-k-e-n-d"])
        self.assertEqual([match.index for match in matches], [1, 0])

    def test_subsequence_hits_kept_alongside_substring_hits(self) -> None:
        matches = fuzzy_match_labels("api", ["api api", "a-p-i x"])
        self.assertEqual([match.label for match in matches], ["api api", "a-p-i x"])

    def test_limit_applies_across_both_tiers(self) -> None:
        matches = fuzzy_match_labels("api", ["a-p-i", "api", "a.p.i.x"], limit=2)
        self.assertEqual([match.label for match in matches], ["api", "a-p-i"])

    def test_subsequence_fallback_when_no_substring(self) -> None:
        labels = ["b-a-c-k", "frontend"]
        matches = fuzzy_match_labels("bck", labels)
        self.assertEqual(matches, [FuzzyMatch(0, "b-a-c-k", matches[0].score)])

    def test_earlier_then_shorter_substring_wins(self) -> None:
        labels = ["xxapi", "api-gateway", "api"]
        matches = fuzzy_match_labels("api", labels)
        self.assertEqual([match.index for match in matches], [2, 1, 0])

    def test_matching_ignores_case(self) -> None:
        matches = fuzzy_match_labels("UI", ["ui", "Ux"])
        self.assertEqual([match.label for match in matches], ["ui"])

    def test_limit_and_no_match(self) -> None:
        labels = [f"label-{idx}" for idx in range(10)]
        self.assertEqual(len(fuzzy_match_labels("label", labels, limit=3)), 3)
        self.assertEqual(fuzzy_match_labels("zzz", labels), [])

    def test_fuzzy_score_prefers_contiguous_runs(self) -> None:
        contiguous = fuzzy_score("api", "api-server")
        scattered = fuzzy_score("api", "axpxi-server")
        self.assertIsNotNone(contiguous)
        self.assertIsNotNone(scattered)
        self.assertGreater(contiguous, scattered)
        self.assertIsNone(fuzzy_score("q", "api"))
        self.assertEqual(fuzzy_score("", "api"), 0)


if __name__ == "__main__":
    unittest.main()
