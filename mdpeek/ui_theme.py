"""UI theme definitions and selection helpers.

Themes are immutable ANSI palettes for the explorer list and the status and
footer rows. Document content is colored separately through the Pygments
style named by ``syntax_style``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    title: str
    directory: str
    file: str
    selection: str
    status_hint: str
    status_error: str
    status_info: str
    command: str
    footer: str
    syntax_style: str | None


GITHUB_DARK_THEME = UITheme(
    name="github-dark",
    reset="\033[0m",
    title="\033[1;38;2;201;209;217m",
    directory="\033[38;2;88;166;255m",
    file="\033[38;2;201;209;217m",
    selection="\033[1;38;2;201;209;217;48;2;3;34;82m",
    status_hint="\033[38;2;201;209;217m",
    status_error="\033[31m",
    status_info="\033[32m",
    command="\033[1;38;2;201;209;217m",
    footer="\033[38;2;139;148;158m",
    syntax_style="github-dark",
)

DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[1m",
    directory="\033[1;34m",
    file="\033[38;5;252m",
    selection="\033[7m",
    status_hint="\033[2;38;5;250m",
    status_error="\033[1;31m",
    status_info="\033[32m",
    command="\033[1;38;5;81m",
    footer="\033[2;38;5;250m",
    syntax_style="monokai",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    title="",
    directory="",
    file="",
    selection="",
    status_hint="",
    status_error="",
    status_info="",
    command="",
    footer="",
    syntax_style=None,
)

_THEMES: dict[str, UITheme] = {
    GITHUB_DARK_THEME.name: GITHUB_DARK_THEME,
    DEFAULT_THEME.name: DEFAULT_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to github-dark."""
    if not name:
        return GITHUB_DARK_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return GITHUB_DARK_THEME.name


def resolve_theme(
    name: str | None,
    *,
    no_color: bool = False,
    syntax_style: str | None = None,
) -> UITheme:
    """Return concrete theme for requested name and color mode.

    ``syntax_style`` overrides the theme's Pygments style when given.
    """
    if no_color:
        return PLAIN_THEME
    theme = _THEMES[normalize_theme_name(name)]
    if syntax_style:
        return replace(theme, syntax_style=syntax_style)
    return theme


__all__ = [
    "UITheme",
    "GITHUB_DARK_THEME",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
