"""Directory listing and entry ordering for the explorer."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path


class EntryKind(enum.Enum):
    DIR = "dir"
    FILE = "file"


@dataclass(frozen=True)
class Entry:
    """One child of the working directory."""

    path: Path
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIR

    @property
    def display_name(self) -> str:
        name = self.path.name or str(self.path)
        return f"{name}/" if self.is_dir else name


def entry_sort_key(entry: Entry) -> tuple[bool, Path]:
    """Directories first, then ascending path order within each group."""
    return (not entry.is_dir, entry.path)


def list_entries(directory: Path) -> list[Entry]:
    """List ``directory`` children in explorer order.

    Errors opening or scanning the directory propagate to the caller.
    Children whose type cannot be determined are listed as files.
    """
    entries: list[Entry] = []
    with os.scandir(directory) as children:
        for child in children:
            try:
                is_dir = child.is_dir()
            except OSError:
                is_dir = False
            entries.append(Entry(directory / child.name, EntryKind.DIR if is_dir else EntryKind.FILE))
    entries.sort(key=entry_sort_key)
    return entries
