"""Frame builders for the explorer and preview screens.

Builders are pure: they read controller state and return one ANSI string per
terminal row. ``write_frame`` is the only function that touches the terminal.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pygments import format as pygments_format
from pygments.formatters import TerminalTrueColorFormatter
from pygments.util import ClassNotFound

from ..ansi import char_display_width, clip_ansi_line, display_width, pad_ansi_line, sanitize_terminal_text
from ..explorer import COMMANDS, ExplorerController
from ..preview import PreviewDocument, Span, StyledLine
from ..ui_theme import UITheme

FALLBACK_SYNTAX_STYLE = "github-dark"
SELECTION_MARKER = ">> "
PREVIEW_HINT = "q: close | y: copy"


def explorer_hint() -> str:
    commands = " ".join(spec.usage for spec in COMMANDS.values())
    return f"j/k: move | l/Enter: open | h: parent | {commands}"


@lru_cache(maxsize=8)
def _formatter_for_style(style: str) -> TerminalTrueColorFormatter:
    try:
        return TerminalTrueColorFormatter(style=style)
    except ClassNotFound:
        return TerminalTrueColorFormatter(style=FALLBACK_SYNTAX_STYLE)


def _display_spans(line: StyledLine) -> list[Span]:
    # A trailing \r is a CRLF remnant; any other \r would move the cursor.
    return [
        Span(span.style, sanitize_terminal_text(span.text.rstrip("\r").replace("\r", "\\x0d")))
        for span in line
    ]


def format_styled_line(line: StyledLine, theme: UITheme) -> str:
    """Convert one styled line into terminal text for ``theme``."""
    spans = _display_spans(line)
    if theme.syntax_style is None:
        return "".join(span.text for span in spans)
    return pygments_format(spans, _formatter_for_style(theme.syntax_style))


def wrap_styled_line(line: StyledLine, width: int) -> list[StyledLine]:
    """Split one styled line into rows of at most ``width`` display columns.

    Span styles carry across row breaks; tabs expand against the row's own
    column. An empty line still occupies one row.
    """
    width = max(1, width)
    rows: list[list[Span]] = [[]]
    col = 0
    for span in _display_spans(line):
        run: list[str] = []
        for ch in span.text:
            w = char_display_width(ch, col)
            if col > 0 and col + w > width:
                if run:
                    rows[-1].append(Span(span.style, "".join(run)))
                    run = []
                rows.append([])
                col = 0
                w = char_display_width(ch, col)
            if ch == "\t":
                w = min(w, width)
                run.append(" " * w)
            else:
                run.append(ch)
            col += w
        if run:
            rows[-1].append(Span(span.style, "".join(run)))
    return [tuple(row) for row in rows]


def _styled(text: str, style: str, theme: UITheme) -> str:
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def _right_aligned(text: str, width: int) -> str:
    """Right-align ``text`` in ``width`` columns, dropping leading characters if too wide."""
    usable = max(1, width)
    start = 0
    while start < len(text) and display_width(text[start:]) > usable:
        start += 1
    tail = text[start:]
    return " " * (usable - display_width(tail)) + tail


def explorer_list_rows(rows: int) -> int:
    """Rows available for entries once the title and status rows are taken."""
    return max(1, rows - 2)


def build_explorer_frame(explorer: ExplorerController, theme: UITheme, columns: int, rows: int) -> list[str]:
    """Title row, entry list, and status row for the explorer."""
    width = max(1, columns)
    out = [_styled(clip_ansi_line(str(explorer.working_directory), width), theme.title, theme)]

    list_rows = explorer_list_rows(rows)
    visible = explorer.entries[explorer.view_start : explorer.view_start + list_rows]
    for offset, entry in enumerate(visible):
        idx = explorer.view_start + offset
        name = sanitize_terminal_text(entry.display_name)
        if idx == explorer.selected:
            row = pad_ansi_line(SELECTION_MARKER + name, width)
            out.append(_styled(row, theme.selection, theme))
            continue
        color = theme.directory if entry.is_dir else theme.file
        out.append(" " * len(SELECTION_MARKER) + _styled(clip_ansi_line(name, width - len(SELECTION_MARKER)), color, theme))
    out.extend("" for _ in range(list_rows - len(visible)))

    out.append(clip_ansi_line(build_explorer_status(explorer, theme), max(1, width - 1)))
    return out


def build_explorer_status(explorer: ExplorerController, theme: UITheme) -> str:
    if explorer.command.active:
        return _styled(f":{explorer.command.text}", theme.command, theme)
    if explorer.status is not None:
        color = theme.status_error if explorer.status.is_error else theme.status_info
        return _styled(sanitize_terminal_text(explorer.status.text), color, theme)
    return _styled(explorer_hint(), theme.status_hint, theme)


def build_preview_footer(document: PreviewDocument, width: int) -> str:
    message = document.transient_status or PREVIEW_HINT
    footer = f"{document.title} | {document.char_count} chars | {message}"
    return _right_aligned(sanitize_terminal_text(footer), width)


def build_preview_frame(document: PreviewDocument, theme: UITheme, columns: int, rows: int) -> list[str]:
    """Wrapped document lines from ``scroll_offset`` plus the footer row.

    ``scroll_offset`` counts logical lines, so one scroll step may move past
    several wrapped rows.
    """
    width = max(1, columns)
    content_rows = max(1, rows - 1)
    wrapped: list[StyledLine] = []
    for line in document.lines[document.scroll_offset :]:
        wrapped.extend(wrap_styled_line(line, width))
        if len(wrapped) >= content_rows:
            break
    out = [clip_ansi_line(format_styled_line(row, theme), width) for row in wrapped[:content_rows]]
    out.extend("" for _ in range(content_rows - len(out)))
    footer = build_preview_footer(document, width - 1)
    out.append(_styled(footer, theme.footer, theme))
    return out


def write_frame(lines: list[str], fd: int) -> None:
    """Home the cursor, clear, and draw ``lines`` in one write."""
    out: list[str] = ["\033[H\033[J"]
    for idx, line in enumerate(lines):
        if idx:
            out.append("\r\n")
        out.append(line)
        if "\033" in line:
            out.append("\033[0m")
    os.write(fd, "".join(out).encode("utf-8", errors="replace"))


__all__ = [
    "build_explorer_frame",
    "build_explorer_status",
    "build_preview_footer",
    "build_preview_frame",
    "explorer_hint",
    "explorer_list_rows",
    "format_styled_line",
    "wrap_styled_line",
    "write_frame",
]
