"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyComboRegistry:
    """Small key-dispatch table with an optional handler for unbound keys."""

    def __init__(self, fallback: Callable[[str], bool | None] | None = None) -> None:
        self._fallback = fallback
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool | None:
        """Invoke bound handler for ``key`` and return its handled result."""
        handler = self._handlers.get(key)
        if handler is not None:
            return handler()
        if self._fallback is not None:
            return self._fallback(key)
        return None
