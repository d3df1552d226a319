"""Tests for preview scrolling and clipboard copy.

Copy always sends the raw source; success is signalled by clearing the
transient status rather than by a message.
"""

from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock

from mdpeek.preview import ContentKind, PreviewDocument


def _document(text: str, kind: ContentKind = ContentKind.PLAIN_TEXT, clipboard=None, acquire=None) -> PreviewDocument:
    factory = acquire if acquire is not None else (lambda: clipboard)
    return PreviewDocument.open(Path("/tmp/doc.txt"), text, kind, acquire_clipboard=factory)


class ScrollTests(unittest.TestCase):
    def test_scroll_up_is_floored_at_zero(self) -> None:
        document = _document("a\nb\nc")

        document.scroll_up()

        self.assertEqual(document.scroll_offset, 0)

    def test_scroll_down_is_capped_at_last_line(self) -> None:
        document = _document("a\nb\nc")

        for _ in range(10):
            document.scroll_down()

        self.assertEqual(document.scroll_offset, 2)
        document.scroll_up()
        self.assertEqual(document.scroll_offset, 1)

    def test_scroll_down_on_empty_document_stays_at_zero(self) -> None:
        document = _document("")

        document.scroll_down()

        self.assertEqual(document.scroll_offset, 0)

    def test_scroll_limit_uses_rendered_height(self) -> None:
        document = _document("# A\n\ntext\n", ContentKind.MARKDOWN)

        for _ in range(10):
            document.scroll_down()

        self.assertEqual(document.scroll_offset, document.rendered.height - 1)


class CopyTests(unittest.TestCase):
    def test_copy_sends_raw_source_and_clears_status(self) -> None:
        clipboard = mock.Mock()
        clipboard.set_text.return_value = None
        document = _document("plain body", clipboard=clipboard)
        document.transient_status = "copy failed: earlier"

        document.copy_to_clipboard()

        clipboard.set_text.assert_called_once_with("plain body")
        self.assertIsNone(document.transient_status)

    def test_copy_of_markdown_sends_converted_html(self) -> None:
        clipboard = mock.Mock()
        clipboard.set_text.return_value = None
        document = _document("# Hi", ContentKind.MARKDOWN, clipboard=clipboard)

        document.copy_to_clipboard()

        clipboard.set_text.assert_called_once_with("<h1>Hi</h1>\n")

    def test_missing_clipboard_reports_unavailable(self) -> None:
        document = _document("x", clipboard=None)

        document.copy_to_clipboard()

        self.assertEqual(document.transient_status, "clipboard not available")

    def test_acquisition_is_retried_on_copy(self) -> None:
        clipboard = mock.Mock()
        clipboard.set_text.return_value = None
        acquire = mock.Mock(side_effect=[None, clipboard])
        document = _document("retry", acquire=acquire)
        self.assertIsNone(document.clipboard)

        document.copy_to_clipboard()

        self.assertEqual(acquire.call_count, 2)
        self.assertIs(document.clipboard, clipboard)
        clipboard.set_text.assert_called_once_with("retry")
        self.assertIsNone(document.transient_status)

    def test_held_clipboard_is_not_reacquired(self) -> None:
        clipboard = mock.Mock()
        clipboard.set_text.return_value = None
        acquire = mock.Mock(return_value=clipboard)
        document = _document("once", acquire=acquire)

        document.copy_to_clipboard()
        document.copy_to_clipboard()

        acquire.assert_called_once_with()

    def test_copy_failure_sets_status(self) -> None:
        clipboard = mock.Mock()
        clipboard.set_text.return_value = "xclip exited with status 1"
        document = _document("x", clipboard=clipboard)

        document.copy_to_clipboard()

        self.assertEqual(document.transient_status, "copy failed: xclip exited with status 1")


class DocumentMetadataTests(unittest.TestCase):
    def test_title_and_char_count(self) -> None:
        document = _document("hello")

        self.assertEqual(document.title, "/tmp/doc.txt")
        self.assertEqual(document.char_count, 5)
        self.assertEqual(document.scroll_offset, 0)
        self.assertIsNone(document.transient_status)


if __name__ == "__main__":
    unittest.main()
