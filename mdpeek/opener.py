"""Hand files to the desktop's default application.

Mirrors the editor launcher: returns an error message string instead of
raising so the explorer can show it on the status line.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def opener_command() -> list[str] | None:
    """Return the platform's open command, or ``None`` when none is installed."""
    if sys.platform == "darwin":
        candidates = ["open"]
    else:
        candidates = ["xdg-open", "gio", "wslview"]
    for name in candidates:
        if shutil.which(name) is not None:
            return [name, "open"] if name == "gio" else [name]
    return None


def open_in_browser(path: Path) -> str | None:
    """Open ``path`` with the system default handler without waiting for it."""
    target = str(path.resolve())
    if os.name == "nt":
        try:
            os.startfile(target)  # type: ignore[attr-defined]
        except OSError as exc:
            logger.warning("cannot open %s: %s", target, exc)
            return str(exc)
        return None

    command = opener_command()
    if command is None:
        return "no system opener found"
    try:
        subprocess.Popen(
            [*command, target],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        logger.warning("cannot open %s with %s: %s", target, command[0], exc)
        return str(exc)
    logger.info("opened %s with %s", target, command[0])
    return None
