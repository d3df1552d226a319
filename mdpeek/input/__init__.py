"""Input-layer public API for key decoding and per-mode key tables."""

from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import KEY_TABLE, KeyMode, build_registry, is_printable_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KEY_TABLE",
    "KeyComboBinding",
    "KeyComboRegistry",
    "KeyMode",
    "_PENDING_BYTES",
    "build_registry",
    "is_printable_key",
    "read_key",
]
