"""Explorer state: working directory, sorted entries, cursor, and command line.

Directory reload failures are not caught here and unwind to the top level,
while file read failures become status messages.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..opener import open_in_browser
from ..preview import Clipboard, ContentKind, PreviewDocument, markdown_to_html
from .commands import CommandOutcome, run_command
from .entries import Entry, list_entries
from .status import Severity, StatusMessage

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


@dataclass
class CommandBuffer:
    """Command-line text; empty whenever command entry is inactive."""

    active: bool = False
    text: str = ""

    def reset(self) -> None:
        self.active = False
        self.text = ""


class ExplorerController:
    def __init__(
        self,
        working_directory: Path,
        *,
        opener: Callable[[Path], str | None] = open_in_browser,
        converter: Callable[[str], str] = markdown_to_html,
        acquire_clipboard: Callable[[], Clipboard | None] = Clipboard.acquire,
    ) -> None:
        self.working_directory = working_directory
        self.entries: list[Entry] = []
        self.selected: int | None = None
        self.status: StatusMessage | None = None
        self.command = CommandBuffer()
        self.view_start = 0
        self.opener = opener
        self.converter = converter
        self.acquire_clipboard = acquire_clipboard
        self.reload(working_directory)

    @classmethod
    def from_cwd(cls, **kwargs) -> ExplorerController:
        return cls(Path.cwd(), **kwargs)

    # -- listing -----------------------------------------------------------

    def reload(self, path: Path) -> None:
        """Make ``path`` the working directory and relist it from scratch."""
        self.working_directory = path
        self.entries = list_entries(path)
        self.selected = 0 if self.entries else None
        self.view_start = 0
        logger.debug("listed %s (%d entries)", path, len(self.entries))

    @property
    def selected_entry(self) -> Entry | None:
        if self.selected is None:
            return None
        return self.entries[self.selected]

    def move_next(self) -> None:
        if not self.entries:
            return
        current = 0 if self.selected is None else self.selected
        self.selected = (current + 1) % len(self.entries)

    def move_previous(self) -> None:
        if not self.entries:
            return
        current = 0 if self.selected is None else self.selected
        self.selected = (current - 1) % len(self.entries)

    def navigate_parent(self) -> None:
        parent = self.working_directory.parent
        if parent == self.working_directory:
            return
        self.reload(parent)

    def enter_selected(self) -> PreviewDocument | None:
        """Descend into the selected directory or open the selected file.

        Returns the document to preview, or ``None`` when the explorer stays
        active. Directory errors propagate; file read errors set the status.
        """
        entry = self.selected_entry
        if entry is None:
            return None
        # Re-check at enter time; a directory that vanished falls through to a
        # recoverable file read error.
        if entry.path.is_dir():
            self.reload(entry.path.resolve(strict=True))
            return None
        kind = ContentKind.MARKDOWN if entry.path.suffix == MARKDOWN_SUFFIX else ContentKind.PLAIN_TEXT
        return self.open_preview(entry.path, kind)

    def ensure_selection_visible(self, rows: int) -> None:
        """Scroll the list viewport so the selected row is inside ``rows``."""
        rows = max(1, rows)
        if self.selected is None:
            self.view_start = 0
            return
        if self.selected < self.view_start:
            self.view_start = self.selected
        elif self.selected >= self.view_start + rows:
            self.view_start = self.selected - rows + 1
        self.view_start = max(0, min(self.view_start, max(0, len(self.entries) - rows)))

    # -- status ------------------------------------------------------------

    def set_status(self, text: str, severity: Severity = Severity.ERROR) -> None:
        self.status = StatusMessage(text, severity)

    def clear_status(self) -> None:
        self.status = None

    # -- files ---------------------------------------------------------------

    def open_preview(self, path: Path, kind: ContentKind) -> PreviewDocument | None:
        """Read ``path`` as UTF-8 and build a preview, or set an error status."""
        try:
            # Decode bytes directly so \r and \r\n survive untouched.
            text = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("cannot read %s: %s", path, exc)
            self.set_status(f"file read error: {exc}")
            return None
        return PreviewDocument.open(
            path,
            text,
            kind,
            converter=self.converter,
            acquire_clipboard=self.acquire_clipboard,
        )

    def resolve_name(self, filename: str) -> Path:
        return self.working_directory / filename

    # -- command entry -------------------------------------------------------

    def enter_command_mode(self) -> None:
        self.command.active = True
        self.command.text = ""

    def append_char(self, ch: str) -> None:
        self.command.text += ch

    def backspace(self) -> None:
        self.command.text = self.command.text[:-1]

    def cancel_command(self) -> None:
        self.command.reset()

    def execute_command(self) -> CommandOutcome:
        """Run the buffered command line; the buffer is reset before it runs."""
        command_text = self.command.text.strip()
        self.command.reset()
        self.clear_status()
        return run_command(self, command_text)
