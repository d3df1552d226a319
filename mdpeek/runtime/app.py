"""Runtime composition layer for mdpeek.

``Application`` owns the mode and routes keys to the active controller;
``run_app`` builds it for the current directory and starts the loop.
"""

from __future__ import annotations

import logging
import shutil
import sys

from ..config import AppConfig
from ..explorer import ExplorerController
from ..input import KeyMode, build_registry
from ..preview import PreviewDocument
from ..render import build_explorer_frame, build_preview_frame, explorer_list_rows
from ..terminal import TerminalController
from ..ui_theme import UITheme, resolve_theme
from .loop import RuntimeLoopTiming, run_main_loop
from .state import ExplorerMode, Mode, PreviewMode

logger = logging.getLogger(__name__)


class Application:
    """Mode state machine over one explorer and at most one preview."""

    def __init__(self, explorer: ExplorerController, theme: UITheme) -> None:
        self.explorer = explorer
        self.theme = theme
        self.mode: Mode = ExplorerMode()
        self._registries = {
            KeyMode.EXPLORER_NORMAL: build_registry(
                KeyMode.EXPLORER_NORMAL,
                {
                    "move_next": explorer.move_next,
                    "move_previous": explorer.move_previous,
                    "navigate_parent": explorer.navigate_parent,
                    "enter_selected": self._enter_selected,
                    "enter_command_mode": explorer.enter_command_mode,
                },
            ),
            KeyMode.EXPLORER_COMMAND: build_registry(
                KeyMode.EXPLORER_COMMAND,
                {
                    "execute_command": self._execute_command,
                    "backspace": explorer.backspace,
                    "cancel_command": explorer.cancel_command,
                },
                append_char=explorer.append_char,
            ),
            KeyMode.PREVIEW: build_registry(
                KeyMode.PREVIEW,
                {
                    "scroll_down": lambda: self._document().scroll_down(),
                    "scroll_up": lambda: self._document().scroll_up(),
                    "copy_to_clipboard": lambda: self._document().copy_to_clipboard(),
                    "close_preview": self.close_preview,
                },
            ),
        }

    @property
    def key_mode(self) -> KeyMode:
        if isinstance(self.mode, PreviewMode):
            return KeyMode.PREVIEW
        if self.explorer.command.active:
            return KeyMode.EXPLORER_COMMAND
        return KeyMode.EXPLORER_NORMAL

    def _document(self) -> PreviewDocument:
        assert isinstance(self.mode, PreviewMode)
        return self.mode.document

    def show_preview(self, document: PreviewDocument) -> None:
        logger.debug("previewing %s", document.title)
        self.mode = PreviewMode(document)

    def close_preview(self) -> None:
        """Drop the document and return to the explorer's normal state."""
        self.mode = ExplorerMode()

    def _enter_selected(self) -> None:
        document = self.explorer.enter_selected()
        if document is not None:
            self.show_preview(document)

    def _execute_command(self) -> bool:
        outcome = self.explorer.execute_command()
        if outcome.quit:
            return True
        if outcome.document is not None:
            self.show_preview(outcome.document)
        return False

    def handle_key(self, key: str) -> bool:
        """Handle one key and return ``True`` when the app should quit."""
        mode = self.key_mode
        if mode is KeyMode.EXPLORER_NORMAL:
            self.explorer.clear_status()
        return bool(self._registries[mode].dispatch(key))

    def build_frame(self, columns: int, rows: int) -> list[str]:
        if isinstance(self.mode, PreviewMode):
            return build_preview_frame(self.mode.document, self.theme, columns, rows)
        self.explorer.ensure_selection_visible(explorer_list_rows(rows))
        return build_explorer_frame(self.explorer, self.theme, columns, rows)


def run_app(config: AppConfig) -> None:
    """Run the interactive browser in the current working directory.

    Returns normally on ``:q``. Directory listing failures propagate as
    ``OSError`` after the terminal has been restored.
    """
    explorer = ExplorerController.from_cwd()
    theme = resolve_theme(config.theme, no_color=config.no_color, syntax_style=config.syntax_style)
    app = Application(explorer, theme)

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    logger.info("starting in %s with theme %s", explorer.working_directory, theme.name)
    run_main_loop(
        app,
        terminal,
        stdin_fd,
        stdout_fd,
        RuntimeLoopTiming(poll_interval_ms=config.poll_interval_ms),
        terminal_size=lambda: shutil.get_terminal_size((80, 24)),
    )
