from __future__ import annotations

import unittest

from lazyreview.review import EMPTY_SESSION_TEXT, ReviewAction, full_session_prompt, simple_session_prompt


class SessionPromptTests(unittest.TestCase):
    def setUp(self) -> None:
        self.actions = [
            ReviewAction("bv-1", "approved"),
            ReviewAction("bv-2", "needs_revision", notes="split this up"),
            ReviewAction("bv-3", "deferred", notes="after launch"),
        ]
        self.titles = {"bv-1": "Login", "bv-2": "Billing"}

    def test_empty_session(self) -> None:
        self.assertEqual(simple_session_prompt([]), EMPTY_SESSION_TEXT)
        self.assertEqual(full_session_prompt([], self.titles.get), EMPTY_SESSION_TEXT)

    def test_simple_prompt_lists_each_action(self) -> None:
        text = simple_session_prompt(self.actions)
        self.assertIn("Reviewed 3 issues:", text)
        self.assertIn("- ✓ bv-1 → approved", text)
        self.assertIn("- ! bv-2 → needs_revision", text)
        self.assertIn("- ? bv-3 → deferred", text)

    def test_full_prompt_groups_by_outcome(self) -> None:
        text = full_session_prompt(self.actions, self.titles.get)
        self.assertIn("- Approved: 1 issues", text)
        self.assertIn("- Needs Revision: 1 issues", text)
        self.assertIn("## Approved Issues\n- `bv-1`: Login\n", text)
        self.assertIn("### `bv-2`: Billing\n**Review Notes:** split this up\n", text)
        # Unknown titles fall back to the id.
        self.assertIn("### `bv-3`: bv-3\n**Reason:** after launch\n", text)
        self.assertTrue(text.index("## Approved Issues") < text.index("## Issues Needing Revision") < text.index("## Deferred Issues"))

    def test_full_prompt_skips_empty_sections(self) -> None:
        text = full_session_prompt(self.actions[:1], self.titles.get)
        self.assertNotIn("## Issues Needing Revision", text)
        self.assertNotIn("## Deferred Issues", text)
        self.assertIn("- Deferred: 0 issues", text)


if __name__ == "__main__":
    unittest.main()
