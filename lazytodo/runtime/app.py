"""Session bootstrap for the interactive to-do list.

Builds the initial ``AppState``, resolves presentation options, and hands
control to the main loop with the real terminal attached.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable

from ..state import AppState
from ..ui_theme import resolve_theme
from .config import load_alternate_keys, load_theme_name
from .loop import RuntimeLoopOptions, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


class NotATerminalError(RuntimeError):
    """Raised when the session is started without an interactive stdin."""


def build_initial_state(initial_items: Iterable[str] = ()) -> AppState:
    """Create a fresh state, adding each seed through the regular add flow."""
    state = AppState()
    for description in initial_items:
        state.add_item(description)
    return state


def resolve_loop_options(theme_name: str | None, no_color: bool) -> RuntimeLoopOptions:
    """Merge CLI choices with persisted preferences."""
    requested = theme_name if theme_name is not None else load_theme_name()
    return RuntimeLoopOptions(
        theme=resolve_theme(requested, no_color=no_color),
        alternate_keys=load_alternate_keys(),
    )


def run_app(
    initial_items: Iterable[str] = (),
    theme_name: str | None = None,
    no_color: bool = False,
) -> AppState:
    """Run one interactive session and return its final state."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd):
        raise NotATerminalError("stdin is not a terminal")

    state = build_initial_state(initial_items)
    options = resolve_loop_options(theme_name, no_color)
    logger.info(
        "starting session (items=%d, theme=%s, alternate_keys=%s)",
        len(state.items),
        options.theme.name,
        options.alternate_keys,
    )
    terminal = TerminalController(stdin_fd, stdout_fd)
    run_main_loop(state, terminal, stdin_fd, options)
    return state
