from __future__ import annotations

import unittest

from lazyreview.model import DEP_BLOCKS, DEP_PARENT_CHILD, Dependency, Item, ItemNotFoundError
from lazyreview.tree_model import load_review_tree


def edge(item_id: str, target: str, kind: str) -> Dependency:
    return Dependency(item_id, target, kind)


class LoadReviewTreeTests(unittest.TestCase):
    def setUp(self) -> None:
        self.items = [
            Item(id="root"),
            Item(id="a", dependencies=[edge("a", "root", DEP_PARENT_CHILD), edge("a", "ext", DEP_BLOCKS)]),
            Item(id="b", dependencies=[edge("b", "a", DEP_PARENT_CHILD), edge("b", "a", DEP_BLOCKS)]),
            Item(id="c", dependencies=[edge("c", "root", DEP_PARENT_CHILD), edge("c", "ext", "")]),
            Item(id="ext"),
            Item(id="unrelated", dependencies=[edge("unrelated", "other", DEP_PARENT_CHILD)]),
        ]

    def test_collects_descendants_breadth_first(self) -> None:
        tree = load_review_tree("root", self.items)
        self.assertEqual(tree.root.id, "root")
        self.assertEqual([item.id for item in tree.descendants], ["a", "c", "b"])
        self.assertEqual(tree.total_count(), 4)
        self.assertEqual([item.id for item in tree.all_items()], ["root", "a", "c", "b"])

    def test_blockers_are_external_and_deduplicated(self) -> None:
        tree = load_review_tree("root", self.items)
        self.assertEqual([item.id for item in tree.blockers], ["ext"])
        self.assertIn("ext", tree.items_by_id)
        self.assertNotIn("unrelated", tree.items_by_id)

    def test_missing_blocker_reference_is_skipped(self) -> None:
        self.items[1].dependencies.append(edge("a", "ghost", DEP_BLOCKS))
        tree = load_review_tree("root", self.items)
        self.assertEqual([item.id for item in tree.blockers], ["ext"])

    def test_unknown_root_raises_not_found(self) -> None:
        with self.assertRaises(ItemNotFoundError) as ctx:
            load_review_tree("nope", self.items)
        self.assertEqual(str(ctx.exception), "issue not found: nope")


if __name__ == "__main__":
    unittest.main()
