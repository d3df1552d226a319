"""Preview-side document model and content pipeline."""

from .clipboard import Clipboard
from .document import PreviewDocument
from .markdown import markdown_to_html
from .pipeline import (
    PLAIN,
    TAG,
    ContentKind,
    RenderedDocument,
    Span,
    StyledLine,
    highlight_html,
    highlight_html_line,
    render_document,
)

__all__ = [
    "Clipboard",
    "ContentKind",
    "PLAIN",
    "PreviewDocument",
    "RenderedDocument",
    "Span",
    "StyledLine",
    "TAG",
    "highlight_html",
    "highlight_html_line",
    "markdown_to_html",
    "render_document",
]
