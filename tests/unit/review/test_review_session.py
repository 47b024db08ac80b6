"""Review session counting, logging, and note handling."""

from __future__ import annotations

import unittest
from datetime import datetime, timedelta, timezone

from lazyreview.model import Item, ItemNotFoundError
from lazyreview.review import NOTE_SEPARATOR, ReviewSession


class FakeClock:
    def __init__(self) -> None:
        self.now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(minutes=1)
        return self.now


class ReviewSessionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.items = {
            "a": Item(id="a", title="A"),
            "b": Item(id="b", title="B", review_status="approved", reviewed_by="old"),
        }
        self.clock = FakeClock()
        self.session = ReviewSession(self.items, reviewer="ann", review_type="plan", clock=self.clock)

    def test_first_approval_counts_once(self) -> None:
        self.session.record_action("a", "approved")
        stats = self.session.stats
        self.assertEqual((stats.items_reviewed, stats.approved), (1, 1))
        item = self.items["a"]
        self.assertEqual(item.review_status, "approved")
        self.assertEqual(item.reviewed_by, "ann")
        self.assertEqual(item.reviewed_at, self.clock.now)

    def test_re_review_with_new_status_counts_only_new_status(self) -> None:
        self.session.record_action("a", "approved")
        self.session.record_action("a", "needs_revision", "missing tests")
        stats = self.session.stats
        self.assertEqual(stats.items_reviewed, 1)
        self.assertEqual(stats.approved, 1)
        self.assertEqual(stats.needs_revision, 1)
        self.assertEqual(self.items["a"].review_status, "needs_revision")

    def test_repeating_same_status_does_not_double_count(self) -> None:
        self.session.record_action("a", "deferred")
        self.session.record_action("a", "deferred")
        stats = self.session.stats
        self.assertEqual((stats.items_reviewed, stats.deferred), (1, 1))
        self.assertEqual(self.session.pending_count(), 2)

    def test_already_reviewed_item_is_overwritten_without_reviewed_count(self) -> None:
        self.session.record_action("b", "needs_revision")
        item = self.items["b"]
        self.assertEqual(item.review_status, "needs_revision")
        self.assertEqual(item.reviewed_by, "ann")
        self.assertEqual(self.session.stats.items_reviewed, 0)
        self.assertEqual(self.session.stats.needs_revision, 1)

    def test_action_log_keeps_every_decision_in_order(self) -> None:
        self.session.record_action("a", "approved")
        self.session.record_action("b", "deferred", "later")
        self.session.record_action("a", "needs_revision")
        actions = self.session.actions()
        self.assertEqual([(a.item_id, a.status) for a in actions], [("a", "approved"), ("b", "deferred"), ("a", "needs_revision")])
        self.assertEqual(actions[1].notes, "later")
        self.assertEqual(actions[1].reviewer, "ann")
        self.assertEqual(actions[1].review_type, "plan")
        actions.clear()
        self.assertEqual(self.session.pending_count(), 3)

    def test_note_appends_with_separator_and_keeps_status(self) -> None:
        self.items["a"].notes = "existing"
        self.session.record_action("a", "note", "first")
        self.session.record_action("a", "needs_revision", "second")
        item = self.items["a"]
        self.assertEqual(item.notes, "existing" + NOTE_SEPARATOR + "first" + NOTE_SEPARATOR + "second")
        self.assertEqual(item.review_status, "needs_revision")
        stats = self.session.stats
        self.assertEqual((stats.items_reviewed, stats.needs_revision), (1, 1))

    def test_note_only_action_leaves_review_state(self) -> None:
        action = self.session.record_action("a", "note", "fyi")
        self.assertEqual(self.items["a"].review_status, "")
        self.assertIsNone(self.items["a"].reviewed_at)
        self.assertEqual(self.items["a"].notes, "fyi")
        self.assertEqual(self.session.stats.items_reviewed, 0)
        self.assertEqual(action.status, "note")
        self.assertEqual(self.session.pending_count(), 1)

    def test_unknown_item_and_status_raise(self) -> None:
        with self.assertRaises(ItemNotFoundError):
            self.session.record_action("missing", "approved")
        with self.assertRaises(ValueError):
            self.session.record_action("a", "rejected")
        self.assertEqual(self.session.pending_count(), 0)

    def test_stats_are_a_copy(self) -> None:
        stats = self.session.stats
        stats.approved = 99
        self.assertEqual(self.session.stats.approved, 0)
        self.assertEqual(self.session.started_at, datetime(2024, 5, 1, 12, 1, tzinfo=timezone.utc))


if __name__ == "__main__":
    unittest.main()
