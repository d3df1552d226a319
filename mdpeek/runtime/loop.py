"""Main interactive event loop for the terminal UI.

Each tick draws the current frame, then waits up to the poll interval for one
key. A timeout just loops back to redraw; a key runs one synchronous state
transition on the application.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from ..input import read_key
from ..render import write_frame
from ..terminal import TerminalController

if TYPE_CHECKING:
    from .app import Application


class _TerminalSize(Protocol):
    columns: int
    lines: int


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    poll_interval_ms: int = 50


def normalize_enter(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Collapse CR/LF pairs into a single ``ENTER`` token.

    Returns ``(key_or_None, skip_next_lf)``; ``None`` means drop this key.
    """
    if skip_next_lf and key == "ENTER_LF":
        return None, False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False


def run_main_loop(
    app: Application,
    terminal: TerminalController,
    stdin_fd: int,
    stdout_fd: int,
    timing: RuntimeLoopTiming,
    terminal_size: Callable[[], _TerminalSize],
    draw: Callable[[list[str], int], None] = write_frame,
) -> None:
    """Run until a key handler asks to quit.

    Exceptions raised by handlers propagate; ``raw_mode`` restores the
    terminal on the way out.
    """
    last_frame: list[str] | None = None
    skip_next_lf = False

    with terminal.raw_mode():
        while True:
            term = terminal_size()
            frame = app.build_frame(term.columns, term.lines)
            if frame != last_frame:
                draw(frame, stdout_fd)
                last_frame = frame

            try:
                raw_key = read_key(stdin_fd, timeout_ms=timing.poll_interval_ms)
            except KeyboardInterrupt:
                continue
            if raw_key == "":
                continue

            key, skip_next_lf = normalize_enter(raw_key, skip_next_lf)
            if key is None:
                continue
            if app.handle_key(key):
                break
