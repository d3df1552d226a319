"""Preview document state and the operations available while previewing.

A ``PreviewDocument`` exists only while Preview mode is active; discarding it
releases the clipboard handle it owns.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .clipboard import Clipboard
from .markdown import markdown_to_html
from .pipeline import ContentKind, RenderedDocument, StyledLine, render_document

logger = logging.getLogger(__name__)

ClipboardFactory = Callable[[], Clipboard | None]


@dataclass
class PreviewDocument:
    title: str
    rendered: RenderedDocument
    scroll_offset: int = 0
    transient_status: str | None = None
    clipboard: Clipboard | None = None
    acquire_clipboard: ClipboardFactory = field(default=Clipboard.acquire, repr=False)

    @classmethod
    def open(
        cls,
        path: Path,
        source_text: str,
        kind: ContentKind,
        *,
        converter: Callable[[str], str] = markdown_to_html,
        acquire_clipboard: ClipboardFactory = Clipboard.acquire,
    ) -> PreviewDocument:
        """Render ``source_text`` and try to acquire a clipboard up front."""
        rendered = render_document(source_text, kind, converter)
        return cls(
            title=str(path),
            rendered=rendered,
            clipboard=acquire_clipboard(),
            acquire_clipboard=acquire_clipboard,
        )

    @property
    def raw_source(self) -> str:
        return self.rendered.raw_source

    @property
    def lines(self) -> tuple[StyledLine, ...]:
        return self.rendered.lines

    @property
    def char_count(self) -> int:
        return self.rendered.char_count

    @property
    def max_scroll(self) -> int:
        return max(0, self.rendered.height - 1)

    def scroll_up(self) -> None:
        self.scroll_offset = max(0, self.scroll_offset - 1)

    def scroll_down(self) -> None:
        self.scroll_offset = min(self.max_scroll, self.scroll_offset + 1)

    def copy_to_clipboard(self) -> None:
        """Copy the raw source; a cleared status means the copy succeeded."""
        if self.clipboard is None:
            self.clipboard = self.acquire_clipboard()
        if self.clipboard is None:
            self.transient_status = "clipboard not available"
            return
        error = self.clipboard.set_text(self.raw_source)
        if error is not None:
            self.transient_status = f"copy failed: {error}"
            return
        logger.debug("copied %d chars from %s", self.char_count, self.title)
        self.transient_status = None
