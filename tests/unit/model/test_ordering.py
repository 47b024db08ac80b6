"""Hierarchical identifier ordering tests."""

from __future__ import annotations

import unittest

from lazyreview.model import (
    Item,
    compare_hierarchical_ids,
    hierarchical_id_key,
    sort_items_by_priority,
)


class CompareHierarchicalIdsTests(unittest.TestCase):
    def test_numeric_segments_compare_by_value(self) -> None:
        self.assertEqual(compare_hierarchical_ids("x.9", "x.10"), -1)
        self.assertEqual(compare_hierarchical_ids("x.10", "x.9"), 1)

    def test_parent_sorts_before_child(self) -> None:
        self.assertEqual(compare_hierarchical_ids("bv-1", "bv-1.1"), -1)
        self.assertEqual(compare_hierarchical_ids("bv-1.1.1", "bv-1.1"), 1)

    def test_base_segment_uses_plain_string_order(self) -> None:
        pairs = [("bv-2", "bv-10"), ("abc", "abd"), ("z.1", "a.9"), ("B", "a")]
        for left, right in pairs:
            expected = -1 if left.split(".")[0] < right.split(".")[0] else 1
            self.assertEqual(compare_hierarchical_ids(left, right), expected, (left, right))

    def test_non_numeric_segments_compare_as_text(self) -> None:
        self.assertEqual(compare_hierarchical_ids("x.a", "x.b"), -1)
        self.assertEqual(compare_hierarchical_ids("x.2", "x.a"), -1)

    def test_reflexive_and_antisymmetric(self) -> None:
        ids = ["bv-1", "bv-1.1", "bv-1.2", "bv-1.10", "bv-2", "x.01", "x.1", "x.a", "y"]
        for left in ids:
            self.assertEqual(compare_hierarchical_ids(left, left), 0)
            for right in ids:
                self.assertEqual(
                    compare_hierarchical_ids(left, right),
                    -compare_hierarchical_ids(right, left),
                    (left, right),
                )

    def test_numerically_equal_segments_stay_distinct(self) -> None:
        self.assertNotEqual(compare_hierarchical_ids("x.01", "x.1"), 0)

    def test_key_sorts_hierarchically(self) -> None:
        ids = ["bv-1.10", "bv-1.2", "bv-1", "bv-1.2.1", "bv-0"]
        self.assertEqual(
            sorted(ids, key=hierarchical_id_key),
            ["bv-0", "bv-1", "bv-1.2", "bv-1.2.1", "bv-1.10"],
        )


class SortHelperTests(unittest.TestCase):
    def test_sort_items_by_priority_breaks_ties_by_id(self) -> None:
        items = [
            Item(id="a.10", priority=1),
            Item(id="a.2", priority=1),
            Item(id="a.1", priority=3),
            Item(id="a.3", priority=0),
        ]
        self.assertEqual([item.id for item in sort_items_by_priority(items)], ["a.3", "a.2", "a.10", "a.1"])


if __name__ == "__main__":
    unittest.main()
