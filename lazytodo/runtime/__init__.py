"""Runtime package: terminal lifecycle, config, and the main loop."""

from .app import NotATerminalError, build_initial_state, run_app
from .loop import RuntimeLoopIO, RuntimeLoopOptions, run_main_loop
from .terminal import TerminalController

__all__ = [
    "NotATerminalError",
    "RuntimeLoopIO",
    "RuntimeLoopOptions",
    "TerminalController",
    "build_initial_state",
    "run_app",
    "run_main_loop",
]
