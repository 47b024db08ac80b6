from __future__ import annotations

import unittest

from lazyreview.runtime import clamp_cursor, ensure_visible, tree_view_rows, visible_slice


class EnsureVisibleTests(unittest.TestCase):
    def test_cursor_below_window_scrolls_to_last_row(self) -> None:
        scroll = ensure_visible(95, 5, 100, 10)
        self.assertEqual(scroll, 86)
        self.assertTrue(scroll <= 95 <= scroll + 9)

    def test_cursor_above_window_scrolls_up(self) -> None:
        self.assertEqual(ensure_visible(3, 20, 100, 10), 3)

    def test_cursor_inside_window_keeps_scroll(self) -> None:
        self.assertEqual(ensure_visible(24, 20, 100, 10), 20)

    def test_scroll_is_clamped_to_list(self) -> None:
        self.assertEqual(ensure_visible(99, 95, 100, 10), 90)
        self.assertEqual(ensure_visible(2, 7, 5, 10), 0)
        self.assertEqual(ensure_visible(0, 0, 0, 10), 0)

    def test_window_property_over_many_inputs(self) -> None:
        for length in (1, 7, 30):
            for height in (1, 4, 10):
                for cursor in range(length):
                    for current in (0, 3, 25):
                        scroll = ensure_visible(cursor, current, length, height)
                        self.assertGreaterEqual(scroll, 0)
                        self.assertLessEqual(scroll, max(0, length - height))
                        self.assertTrue(scroll <= cursor < scroll + height)


class CursorAndRowsTests(unittest.TestCase):
    def test_clamp_cursor(self) -> None:
        self.assertEqual(clamp_cursor(-3, 5), 0)
        self.assertEqual(clamp_cursor(9, 5), 4)
        self.assertEqual(clamp_cursor(2, 5), 2)
        self.assertEqual(clamp_cursor(4, 0), 0)

    def test_tree_view_rows(self) -> None:
        self.assertEqual(tree_view_rows(24), 17)
        self.assertEqual(tree_view_rows(24, search_visible=True), 16)
        self.assertEqual(tree_view_rows(5), 3)

    def test_visible_slice(self) -> None:
        rows = list(range(10))
        self.assertEqual(visible_slice(rows, 8, 5), [8, 9])
        self.assertEqual(visible_slice(rows, -1, 2), [0, 1])


if __name__ == "__main__":
    unittest.main()
