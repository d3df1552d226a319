"""System clipboard handle backed by platform copy commands.

``Clipboard.acquire`` picks the first available copy tool for the platform;
``set_text`` returns an error message string instead of raising so callers can
surface it as a status line.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys

logger = logging.getLogger(__name__)


def clipboard_command_candidates() -> list[list[str]]:
    """Return copy commands to try, in preference order, for this platform."""
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if os.name == "nt":
        return [["clip"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


class Clipboard:
    """Acquired clipboard resource bound to one copy command."""

    def __init__(self, command: list[str]) -> None:
        self.command = list(command)

    @classmethod
    def acquire(cls) -> Clipboard | None:
        """Return a handle for the first installed copy tool, or ``None``."""
        for command in clipboard_command_candidates():
            if shutil.which(command[0]) is not None:
                return cls(command)
        logger.debug("no clipboard command available")
        return None

    def set_text(self, text: str) -> str | None:
        try:
            proc = subprocess.run(
                self.command,
                input=text,
                encoding="utf-8",
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError as exc:
            logger.warning("clipboard command %s failed: %s", self.command[0], exc)
            return str(exc)
        if proc.returncode != 0:
            logger.warning("clipboard command %s exited with %d", self.command[0], proc.returncode)
            return f"{self.command[0]} exited with status {proc.returncode}"
        return None
