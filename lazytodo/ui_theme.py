"""UI theme definitions and selection helpers.

Themes are ANSI palettes for list rows, the entry box, and screen chrome.
``plain`` is reserved for ``--no-color`` and is not user-selectable.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    title: str
    item: str
    item_done: str
    done_marker: str
    pending_marker: str
    empty_hint: str
    input_border: str
    input_title: str
    input_text: str
    help_key: str
    help_dim: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    title="\033[1;38;5;81m",
    item="\033[38;5;252m",
    item_done="\033[9;2;38;5;250m",
    done_marker="\033[38;5;42m",
    pending_marker="\033[38;5;250m",
    empty_hint="\033[2;38;5;250m",
    input_border="\033[38;5;45m",
    input_title="\033[1;38;5;45m",
    input_text="\033[38;5;229m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    title="\033[1;38;5;45m",
    item="\033[38;5;153m",
    item_done="\033[9;2;38;5;110m",
    done_marker="\033[38;5;84m",
    pending_marker="\033[38;5;73m",
    empty_hint="\033[2;38;5;110m",
    input_border="\033[38;5;39m",
    input_title="\033[1;38;5;39m",
    input_text="\033[38;5;117m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    title="",
    item="",
    item_done="",
    done_marker="",
    pending_marker="",
    empty_hint="",
    input_border="",
    input_title="",
    input_text="",
    help_key="",
    help_dim="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]
