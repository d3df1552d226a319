"""Tests for clipboard command selection and copy results."""

from __future__ import annotations

import subprocess
import unittest
from unittest import mock

from mdpeek.preview import Clipboard
from mdpeek.preview.clipboard import clipboard_command_candidates


class ClipboardAcquireTests(unittest.TestCase):
    def test_linux_prefers_first_installed_tool(self) -> None:
        installed = {"xclip"}
        with mock.patch("mdpeek.preview.clipboard.sys.platform", "linux"), mock.patch(
            "mdpeek.preview.clipboard.os.name", "posix"
        ), mock.patch(
            "mdpeek.preview.clipboard.shutil.which",
            side_effect=lambda name: f"/usr/bin/{name}" if name in installed else None,
        ):
            clipboard = Clipboard.acquire()

        assert clipboard is not None
        self.assertEqual(clipboard.command, ["xclip", "-selection", "clipboard"])

    def test_acquire_returns_none_without_tools(self) -> None:
        with mock.patch("mdpeek.preview.clipboard.shutil.which", return_value=None):
            self.assertIsNone(Clipboard.acquire())

    def test_macos_uses_pbcopy(self) -> None:
        with mock.patch("mdpeek.preview.clipboard.sys.platform", "darwin"):
            self.assertEqual(clipboard_command_candidates(), [["pbcopy"]])


class ClipboardSetTextTests(unittest.TestCase):
    def test_success_returns_none_and_passes_text_on_stdin(self) -> None:
        clipboard = Clipboard(["wl-copy"])
        completed = subprocess.CompletedProcess(["wl-copy"], 0)
        with mock.patch("mdpeek.preview.clipboard.subprocess.run", return_value=completed) as run_mock:
            self.assertIsNone(clipboard.set_text("<h1>Hi</h1>\n"))

        self.assertEqual(run_mock.call_args.args[0], ["wl-copy"])
        self.assertEqual(run_mock.call_args.kwargs["input"], "<h1>Hi</h1>\n")

    def test_nonzero_exit_returns_message(self) -> None:
        clipboard = Clipboard(["xsel", "--clipboard", "--input"])
        completed = subprocess.CompletedProcess(["xsel"], 1)
        with mock.patch("mdpeek.preview.clipboard.subprocess.run", return_value=completed):
            self.assertEqual(clipboard.set_text("x"), "xsel exited with status 1")

    def test_os_error_returns_message(self) -> None:
        clipboard = Clipboard(["pbcopy"])
        with mock.patch(
            "mdpeek.preview.clipboard.subprocess.run",
            side_effect=FileNotFoundError(2, "No such file or directory"),
        ):
            error = clipboard.set_text("x")

        assert error is not None
        self.assertIn("No such file or directory", error)


if __name__ == "__main__":
    unittest.main()
