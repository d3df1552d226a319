"""Closed command table for the explorer command line.

Each command is keyed by its first token and declares how many arguments it
takes; anything that does not match a name and arity exactly is rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..preview import ContentKind, PreviewDocument
from .status import Severity

if TYPE_CHECKING:
    from .controller import ExplorerController

logger = logging.getLogger(__name__)

HTML_SUFFIX = ".html"


@dataclass(frozen=True)
class CommandOutcome:
    """Result of running one command line."""

    document: PreviewDocument | None = None
    quit: bool = False


@dataclass(frozen=True)
class CommandSpec:
    name: str
    arity: int
    handler: Callable[[ExplorerController, list[str]], CommandOutcome]
    usage: str


def _quit(explorer: ExplorerController, args: list[str]) -> CommandOutcome:
    return CommandOutcome(quit=True)


def _cat(explorer: ExplorerController, args: list[str]) -> CommandOutcome:
    filename = args[0]
    path = explorer.resolve_name(filename)
    if not path.is_file():
        explorer.set_status(f"file not found: {filename}")
        return CommandOutcome()
    # cat always shows raw content, whatever the extension.
    return CommandOutcome(document=explorer.open_preview(path, ContentKind.PLAIN_TEXT))


def _open_in_browser(explorer: ExplorerController, args: list[str]) -> CommandOutcome:
    filename = args[0]
    path = explorer.resolve_name(filename)
    if not path.is_file():
        explorer.set_status(f"file not found: {filename}")
    elif path.suffix != HTML_SUFFIX:
        explorer.set_status("only HTML files can be opened")
    else:
        error = explorer.opener(path)
        if error is not None:
            explorer.set_status(f"failed to open in browser: {error}")
        else:
            explorer.set_status(f"opened in browser: {filename}", Severity.INFO)
    return CommandOutcome()


COMMANDS: dict[str, CommandSpec] = {
    spec.name: spec
    for spec in (
        CommandSpec("q", 0, _quit, ":q"),
        CommandSpec("cat", 1, _cat, ":cat <file>"),
        CommandSpec("ob", 1, _open_in_browser, ":ob <file.html>"),
    )
}


def run_command(explorer: ExplorerController, command_text: str) -> CommandOutcome:
    """Tokenize ``command_text`` on whitespace and dispatch it."""
    tokens = command_text.split()
    if not tokens:
        return CommandOutcome()
    spec = COMMANDS.get(tokens[0])
    args = tokens[1:]
    if spec is None or len(args) != spec.arity:
        logger.info("unknown command: %s", command_text)
        explorer.set_status(f"unknown command: {command_text}")
        return CommandOutcome()
    logger.debug("running command %s %s", spec.name, args)
    return spec.handler(explorer, args)
