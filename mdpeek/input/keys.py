"""Key tables for each interaction mode.

Routing is a lookup on ``(KeyMode, key)``: every mode maps key tokens to an
action name, and the application binds action names to operations.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping

from .key_registry import KeyComboBinding, KeyComboRegistry


class KeyMode(enum.Enum):
    EXPLORER_NORMAL = "explorer_normal"
    EXPLORER_COMMAND = "explorer_command"
    PREVIEW = "preview"


KEY_TABLE: dict[KeyMode, dict[str, tuple[str, ...]]] = {
    KeyMode.EXPLORER_NORMAL: {
        "move_next": ("j", "DOWN"),
        "move_previous": ("k", "UP"),
        "navigate_parent": ("h", "LEFT", "BACKSPACE"),
        "enter_selected": ("l", "RIGHT", "ENTER"),
        "enter_command_mode": (":",),
    },
    KeyMode.EXPLORER_COMMAND: {
        "execute_command": ("ENTER",),
        "backspace": ("BACKSPACE",),
        "cancel_command": ("ESC",),
    },
    KeyMode.PREVIEW: {
        "scroll_down": ("j", "DOWN"),
        "scroll_up": ("k", "UP"),
        "copy_to_clipboard": ("y",),
        "close_preview": ("q",),
    },
}


def is_printable_key(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def build_registry(
    mode: KeyMode,
    actions: Mapping[str, Callable[[], bool | None]],
    append_char: Callable[[str], bool | None] | None = None,
) -> KeyComboRegistry:
    """Bind ``mode``'s key table to concrete ``actions``."""

    def fallback(key: str) -> bool | None:
        if append_char is not None and is_printable_key(key):
            return append_char(key)
        return None

    registry = KeyComboRegistry(fallback=fallback if mode is KeyMode.EXPLORER_COMMAND else None)
    return registry.register_bindings(
        *(KeyComboBinding(combos, actions[action]) for action, combos in KEY_TABLE[mode].items())
    )
