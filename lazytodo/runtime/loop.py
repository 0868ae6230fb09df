"""Main interactive event loop for the terminal UI.

Alternates render and a blocking key read until a quit action occurs.
Feature logic lives in the state and key handlers; this module only wires
them to the terminal.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import handle_key, read_key
from ..render import RenderContext, render_frame
from ..state import AppState
from ..ui_theme import DEFAULT_THEME, UITheme
from ..views import build_view
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopOptions:
    """Presentation settings that stay fixed for one session."""

    theme: UITheme = DEFAULT_THEME
    alternate_keys: bool = True


@dataclass(frozen=True)
class RuntimeLoopIO:
    """Injected terminal collaborators used by ``run_main_loop``.

    Defaults talk to the real terminal; tests swap in fakes.
    """

    read_key: Callable[[int], str] = read_key
    render: Callable[[RenderContext], None] = render_frame
    terminal_size: Callable[[], tuple[int, int]] = lambda: tuple(shutil.get_terminal_size((80, 24)))


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    stdin_fd: int,
    options: RuntimeLoopOptions | None = None,
    terminal_io: RuntimeLoopIO | None = None,
) -> None:
    """Run the interactive loop until the user quits.

    The terminal is held in raw mode for the whole loop and restored on
    every exit path, including exceptions raised by input or rendering.
    """
    options = options if options is not None else RuntimeLoopOptions()
    terminal_io = terminal_io if terminal_io is not None else RuntimeLoopIO()
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while True:
            columns, lines = terminal_io.terminal_size()
            if (columns, lines) != last_size:
                last_size = (columns, lines)
                state.dirty = True

            if state.dirty:
                terminal_io.render(
                    RenderContext(
                        view=build_view(state),
                        width=columns,
                        height=lines,
                        theme=options.theme,
                        alternate_keys=options.alternate_keys,
                    )
                )
                state.dirty = False

            key = terminal_io.read_key(stdin_fd)
            if not key:
                continue
            if handle_key(key, state, alternate_keys=options.alternate_keys):
                logger.info("session ended with %d items", len(state.items))
                break
