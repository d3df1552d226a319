"""Markdown-to-HTML conversion.

Wraps ``markdown-it-py`` with the full extension set enabled: GFM tables and
strikethrough, typographic replacements, front matter, footnotes, task lists,
and definition lists.
"""

from __future__ import annotations

from functools import lru_cache

from markdown_it import MarkdownIt
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.front_matter import front_matter_plugin
from mdit_py_plugins.tasklists import tasklists_plugin


@lru_cache(maxsize=1)
def _parser() -> MarkdownIt:
    return (
        MarkdownIt("commonmark", {"typographer": True})
        .enable(["table", "strikethrough", "replacements", "smartquotes"])
        .use(front_matter_plugin)
        .use(footnote_plugin)
        .use(tasklists_plugin)
        .use(deflist_plugin)
    )


def markdown_to_html(markdown: str) -> str:
    """Convert Markdown source to an HTML fragment string."""
    return _parser().render(markdown)
