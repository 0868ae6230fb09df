"""Key hint footer content for list and entry modes.

Rendering helpers here are presentation-only and side-effect free.
"""

from __future__ import annotations

from ..ui_theme import UITheme

BROWSING_HINTS: tuple[tuple[str, str], ...] = (
    ("Up/Down", "move"),
    ("Enter", "toggle"),
    ("A", "add"),
    ("D", "delete"),
    ("q/Esc", "quit"),
)

BROWSING_ALT_HINTS: tuple[tuple[str, str], ...] = (
    ("j/k", "move"),
    ("g/G", "first/last"),
)

ENTERING_HINTS: tuple[tuple[str, str], ...] = (
    ("Type", "edit"),
    ("Backspace", "erase"),
    ("Enter", "save"),
    ("Esc", "cancel"),
)


def _format_hints(hints: tuple[tuple[str, str], ...], theme: UITheme) -> str:
    parts = [f"{theme.help_key}{key}{theme.reset} {theme.help_dim}{label}{theme.reset}" for key, label in hints]
    return "  ".join(parts)


def help_lines(entering: bool, theme: UITheme, *, alternate_keys: bool = True) -> tuple[str, ...]:
    """Return footer hint lines for the active mode."""
    if entering:
        return (_format_hints(ENTERING_HINTS, theme),)
    if alternate_keys:
        return (_format_hints(BROWSING_HINTS + BROWSING_ALT_HINTS, theme),)
    return (_format_hints(BROWSING_HINTS, theme),)
