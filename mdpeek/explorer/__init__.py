"""Explorer-side state: directory listing, cursor, and the command line."""

from .commands import COMMANDS, CommandOutcome, CommandSpec, run_command
from .controller import CommandBuffer, ExplorerController
from .entries import Entry, EntryKind, entry_sort_key, list_entries
from .status import Severity, StatusMessage

__all__ = [
    "COMMANDS",
    "CommandBuffer",
    "CommandOutcome",
    "CommandSpec",
    "Entry",
    "EntryKind",
    "ExplorerController",
    "Severity",
    "StatusMessage",
    "entry_sort_key",
    "list_entries",
    "run_command",
]
