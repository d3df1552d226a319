"""Content pipeline from file text to styled, displayable lines.

Markdown is converted to HTML and the HTML source is shown as literal text with
its tags dimmed. Plain text passes through untouched. Either way the raw text
is kept verbatim next to the styled lines because that is what gets copied.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import NamedTuple

from pygments.token import Token, _TokenType

from .markdown import markdown_to_html

PLAIN = Token.Text
TAG = Token.Comment


class ContentKind(enum.Enum):
    MARKDOWN = "markdown"
    PLAIN_TEXT = "plain_text"


class Span(NamedTuple):
    """One styled run; field order matches a Pygments ``(ttype, value)`` pair."""

    style: _TokenType
    text: str


StyledLine = tuple[Span, ...]


@dataclass(frozen=True)
class RenderedDocument:
    """Raw source text plus its styled rendering, one entry per physical line."""

    raw_source: str
    lines: tuple[StyledLine, ...]
    kind: ContentKind

    @property
    def height(self) -> int:
        return len(self.lines)

    @property
    def char_count(self) -> int:
        """Unicode scalar count of the raw source."""
        return len(self.raw_source)


class _ScanState(enum.Enum):
    TEXT = "text"
    TAG = "tag"


def physical_lines(text: str) -> list[str]:
    """Split on ``\\n`` only; a trailing newline does not open an extra line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def highlight_html_line(line: str) -> StyledLine:
    """Scan one line of HTML source with a two-state Text/Tag automaton.

    ``<`` flushes the pending run and starts a tag run that includes it; ``>``
    closes the tag run and flushes it in tag style. A tag left open at line end
    is flushed in tag style.
    """
    spans: list[Span] = []
    state = _ScanState.TEXT
    buffer: list[str] = []

    def flush(style: _TokenType) -> None:
        if buffer:
            spans.append(Span(style, "".join(buffer)))
            buffer.clear()

    for ch in line:
        if ch == "<":
            flush(TAG if state is _ScanState.TAG else PLAIN)
            state = _ScanState.TAG
            buffer.append(ch)
        elif ch == ">":
            buffer.append(ch)
            flush(TAG)
            state = _ScanState.TEXT
        else:
            buffer.append(ch)

    flush(TAG if state is _ScanState.TAG else PLAIN)
    return tuple(spans)


def highlight_html(html_source: str) -> tuple[StyledLine, ...]:
    """Highlight every physical line of ``html_source`` independently."""
    return tuple(highlight_html_line(line) for line in physical_lines(html_source))


def plain_lines(text: str) -> tuple[StyledLine, ...]:
    return tuple((Span(PLAIN, line),) if line else () for line in physical_lines(text))


def render_document(
    source_text: str,
    kind: ContentKind,
    converter: Callable[[str], str] = markdown_to_html,
) -> RenderedDocument:
    """Turn file text into a ``RenderedDocument``.

    For Markdown the converted HTML becomes the raw source, so the copied text
    is the HTML rather than the Markdown that produced it.
    """
    if kind is ContentKind.MARKDOWN:
        html_source = converter(source_text)
        return RenderedDocument(html_source, highlight_html(html_source), kind)
    return RenderedDocument(source_text, plain_lines(source_text), kind)
