"""Tests for per-mode key tables and registry dispatch."""

from __future__ import annotations

import unittest

from mdpeek.input import KEY_TABLE, KeyComboBinding, KeyComboRegistry, KeyMode, build_registry


def _recording_registry(mode: KeyMode) -> tuple[KeyComboRegistry, list[str]]:
    calls: list[str] = []

    def action(name: str):
        return lambda: calls.append(name)

    actions = {name: action(name) for name in KEY_TABLE[mode]}
    registry = build_registry(mode, actions, append_char=lambda ch: calls.append(f"append:{ch}"))
    return registry, calls


class KeyRoutingTests(unittest.TestCase):
    def test_explorer_normal_bindings(self) -> None:
        registry, calls = _recording_registry(KeyMode.EXPLORER_NORMAL)

        for key in ("j", "UP", "BACKSPACE", "ENTER", ":", "x"):
            registry.dispatch(key)

        self.assertEqual(
            calls,
            ["move_next", "move_previous", "navigate_parent", "enter_selected", "enter_command_mode"],
        )

    def test_command_mode_routes_printable_keys_to_text(self) -> None:
        registry, calls = _recording_registry(KeyMode.EXPLORER_COMMAND)

        for key in ("j", " ", "é", "UP", "ENTER", "ESC"):
            registry.dispatch(key)

        self.assertEqual(calls, ["append:j", "append: ", "append:é", "execute_command", "cancel_command"])

    def test_preview_bindings(self) -> None:
        registry, calls = _recording_registry(KeyMode.PREVIEW)

        for key in ("y", "q", ":", "DOWN"):
            registry.dispatch(key)

        self.assertEqual(calls, ["copy_to_clipboard", "close_preview", "scroll_down"])

    def test_no_key_is_bound_twice_within_a_mode(self) -> None:
        for mode, table in KEY_TABLE.items():
            combos = [combo for keys in table.values() for combo in keys]
            self.assertEqual(len(combos), len(set(combos)), mode)


class RegistryTests(unittest.TestCase):
    def test_dispatch_calls_bound_handler_and_returns_result(self) -> None:
        calls: list[str] = []
        registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(("a", "b"), lambda: calls.append("ab") or True),
        )

        self.assertTrue(registry.dispatch("b"))
        self.assertIsNone(registry.dispatch("c"))
        self.assertEqual(calls, ["ab"])

    def test_later_binding_overrides_earlier_one(self) -> None:
        registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(("a",), lambda: False),
            KeyComboBinding(("a",), lambda: True),
        )

        self.assertTrue(registry.dispatch("a"))

    def test_fallback_receives_unbound_keys(self) -> None:
        seen: list[str] = []
        registry = KeyComboRegistry(fallback=seen.append)

        registry.dispatch("z")

        self.assertEqual(seen, ["z"])


if __name__ == "__main__":
    unittest.main()
