from __future__ import annotations

import unittest
from unittest import mock

from lazyreview.runtime import TextPrompt
from lazyreview.runtime import clipboard


class TextPromptTests(unittest.TestCase):
    def test_open_edit_close(self) -> None:
        prompt = TextPrompt("label")
        prompt.open("ba")
        self.assertTrue(prompt.visible)
        self.assertTrue(prompt.edit("d"))
        self.assertTrue(prompt.edit("BACKSPACE"))
        self.assertFalse(prompt.edit("UP"))
        self.assertEqual(prompt.close(), "ba")
        self.assertFalse(prompt.visible)
        self.assertEqual(prompt.buffer, "")

    def test_backspace_on_empty_buffer_reports_no_change(self) -> None:
        prompt = TextPrompt("search")
        prompt.open()
        self.assertFalse(prompt.edit("BACKSPACE"))

    def test_newline_only_in_multiline_prompts(self) -> None:
        single = TextPrompt("search")
        single.newline()
        self.assertEqual(single.buffer, "")
        notes = TextPrompt("note", multiline=True)
        notes.open("a")
        notes.newline()
        notes.edit("b")
        self.assertEqual(notes.buffer, "a\nb")


class ClipboardTests(unittest.TestCase):
    def test_clipboard_commands_per_platform(self) -> None:
        self.assertEqual(clipboard.clipboard_commands("darwin", "posix"), [["pbcopy"]])
        self.assertEqual(clipboard.clipboard_commands("win32", "nt"), [["clip"]])
        linux = clipboard.clipboard_commands("linux", "posix")
        self.assertEqual([command[0] for command in linux], ["wl-copy", "xclip", "xsel"])

    def test_copy_uses_first_available_command(self) -> None:
        completed = mock.Mock(returncode=0)
        with mock.patch.object(clipboard, "clipboard_commands", return_value=[["missing"], ["xclip", "-selection", "clipboard"]]), mock.patch(
            "lazyreview.runtime.clipboard.shutil.which", side_effect=lambda name: None if name == "missing" else "/usr/bin/" + name
        ), mock.patch("lazyreview.runtime.clipboard.subprocess.run", return_value=completed) as run:
            self.assertTrue(clipboard.copy_text_to_clipboard("hello"))
        run.assert_called_once_with(["xclip", "-selection", "clipboard"], input="hello", text=True, check=False)

    def test_copy_fails_without_commands_or_text(self) -> None:
        with mock.patch("lazyreview.runtime.clipboard.shutil.which", return_value=None):
            self.assertFalse(clipboard.copy_text_to_clipboard("hello"))
        self.assertFalse(clipboard.copy_text_to_clipboard(""))

    def test_copy_tries_next_command_after_failure(self) -> None:
        results = [mock.Mock(returncode=1), mock.Mock(returncode=0)]
        with mock.patch.object(clipboard, "clipboard_commands", return_value=[["a"], ["b"]]), mock.patch(
            "lazyreview.runtime.clipboard.shutil.which", return_value="/bin/x"
        ), mock.patch("lazyreview.runtime.clipboard.subprocess.run", side_effect=results) as run:
            self.assertTrue(clipboard.copy_text_to_clipboard("hello"))
        self.assertEqual(run.call_count, 2)


if __name__ == "__main__":
    unittest.main()
