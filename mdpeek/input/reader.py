"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, arrow keys, and multi-byte UTF-8 characters.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []
_ARROWS = {b"A": "UP", b"B": "DOWN", b"C": "RIGHT", b"D": "LEFT"}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token; returns ``""`` when ``timeout_ms`` elapses first."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch == b"\t":
        return "TAB"
    if ch in {b"\x08", b"\x7f"}:
        return "BACKSPACE"
    if ch == b"\r":
        return "ENTER_CR"
    if ch == b"\n":
        return "ENTER_LF"

    if ch != b"\x1b":
        needed = _utf8_length(ch[0]) - 1
        raw = ch
        while needed > 0:
            more = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if more is None:
                break
            raw += more
            needed -= 1
        return raw.decode("utf-8", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    return _ARROWS.get(seq, "ESC")
