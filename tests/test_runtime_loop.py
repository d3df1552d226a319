"""Tests for the main loop's redraw and key handling."""

from __future__ import annotations

import contextlib
import os
import unittest
from unittest import mock

from mdpeek.runtime.loop import RuntimeLoopTiming, normalize_enter, run_main_loop


class _FakeTerminal:
    def __init__(self) -> None:
        self.entered = 0
        self.exited = 0

    @contextlib.contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1


class _FakeApp:
    def __init__(self, quit_on: str = "QUIT", raise_on: str | None = None) -> None:
        self.keys: list[str] = []
        self.frames_built = 0
        self.quit_on = quit_on
        self.raise_on = raise_on

    def build_frame(self, columns: int, rows: int) -> list[str]:
        self.frames_built += 1
        return [f"{columns}x{rows}", str(len(self.keys))]

    def handle_key(self, key: str) -> bool:
        if key == self.raise_on:
            raise PermissionError(13, "Permission denied")
        self.keys.append(key)
        return key == self.quit_on


def _size():
    return os.terminal_size((80, 24))


class NormalizeEnterTests(unittest.TestCase):
    def test_cr_then_lf_collapses_to_one_enter(self) -> None:
        key, skip = normalize_enter("ENTER_CR", False)
        self.assertEqual((key, skip), ("ENTER", True))
        self.assertEqual(normalize_enter("ENTER_LF", skip), (None, False))

    def test_lone_lf_is_enter(self) -> None:
        self.assertEqual(normalize_enter("ENTER_LF", False), ("ENTER", False))

    def test_other_keys_reset_skip(self) -> None:
        self.assertEqual(normalize_enter("j", True), ("j", False))


class RunMainLoopTests(unittest.TestCase):
    def _run(self, app: _FakeApp, keys: list[str]) -> tuple[_FakeTerminal, list[list[str]]]:
        terminal = _FakeTerminal()
        drawn: list[list[str]] = []
        with mock.patch("mdpeek.runtime.loop.read_key", side_effect=keys):
            run_main_loop(
                app,
                terminal,
                0,
                1,
                RuntimeLoopTiming(poll_interval_ms=5),
                terminal_size=_size,
                draw=lambda frame, fd: drawn.append(frame),
            )
        return terminal, drawn

    def test_loop_dispatches_until_quit(self) -> None:
        app = _FakeApp()

        terminal, drawn = self._run(app, ["j", "", "ENTER_CR", "ENTER_LF", "QUIT"])

        self.assertEqual(app.keys, ["j", "ENTER", "QUIT"])
        self.assertEqual((terminal.entered, terminal.exited), (1, 1))
        self.assertEqual(drawn, [["80x24", "0"], ["80x24", "1"], ["80x24", "2"]])
        self.assertEqual(app.frames_built, 5)

    def test_keyboard_interrupt_is_ignored(self) -> None:
        app = _FakeApp()

        self._run(app, [KeyboardInterrupt(), "QUIT"])

        self.assertEqual(app.keys, ["QUIT"])

    def test_handler_errors_propagate_after_terminal_restore(self) -> None:
        app = _FakeApp(raise_on="l")

        terminal = _FakeTerminal()
        with mock.patch("mdpeek.runtime.loop.read_key", side_effect=["l"]):
            with self.assertRaises(PermissionError):
                run_main_loop(
                    app,
                    terminal,
                    0,
                    1,
                    RuntimeLoopTiming(),
                    terminal_size=_size,
                    draw=lambda frame, fd: None,
                )

        self.assertEqual(terminal.exited, 1)


if __name__ == "__main__":
    unittest.main()
