from __future__ import annotations

from contextlib import contextmanager
import unittest

from lazytodo.input import InputClosedError
from lazytodo.render import RenderContext
from lazytodo.runtime import RuntimeLoopIO, RuntimeLoopOptions, run_main_loop
from lazytodo.state import AppState, Browsing
from lazytodo.ui_theme import PLAIN_THEME
from lazytodo.views import InputView, ListView


class _FakeTerminal:
    def __init__(self) -> None:
        self.events: list[str] = []

    @contextmanager
    def raw_mode(self):
        self.events.append("enter")
        try:
            yield self
        finally:
            self.events.append("exit")


class _Script:
    """Scripted key source that records what was on screen at each read."""

    def __init__(self, keys: list[str], renders: list[RenderContext]) -> None:
        self._keys = list(keys)
        self._renders = renders
        self.render_counts_at_read: list[int] = []

    def read_key(self, _fd: int) -> str:
        self.render_counts_at_read.append(len(self._renders))
        if not self._keys:
            raise InputClosedError("script exhausted")
        return self._keys.pop(0)


def _run(state: AppState, keys: list[str], size: tuple[int, int] = (40, 10)):
    renders: list[RenderContext] = []
    script = _Script(keys, renders)
    terminal = _FakeTerminal()
    terminal_io = RuntimeLoopIO(
        read_key=script.read_key,
        render=renders.append,
        terminal_size=lambda: size,
    )
    run_main_loop(state, terminal, 0, RuntimeLoopOptions(theme=PLAIN_THEME), terminal_io)
    return renders, terminal, script


class RuntimeLoopTests(unittest.TestCase):
    def test_quit_key_ends_loop_and_restores_terminal(self) -> None:
        state = AppState()

        renders, terminal, _ = _run(state, ["q"])

        self.assertEqual(terminal.events, ["enter", "exit"])
        self.assertEqual(len(renders), 1)
        self.assertIsInstance(renders[0].view, ListView)
        self.assertEqual((renders[0].width, renders[0].height), (40, 10))

    def test_full_add_session_renders_input_then_list(self) -> None:
        state = AppState()

        renders, _, _ = _run(state, ["A", "h", "i", "ENTER", "ESC"])

        self.assertEqual([i.label for i in state.items], ["1. hi"])
        self.assertEqual(state.mode, Browsing())
        input_views = [r.view for r in renders if isinstance(r.view, InputView)]
        self.assertEqual([v.text for v in input_views], ["", "h", "hi"])
        self.assertIsInstance(renders[-1].view, ListView)
        self.assertEqual(renders[-1].view.selected, 0)

    def test_each_mutation_is_rendered_before_next_read(self) -> None:
        state = AppState()
        state.add_item("a")
        state.add_item("b")

        renders, _, script = _run(state, ["UP", "UP", "DOWN", "q"])

        # The second UP is a clamped no-op, so it does not trigger a redraw.
        self.assertEqual(script.render_counts_at_read, [1, 2, 2, 3])
        self.assertEqual([r.view.selected for r in renders], [1, 0, 1])

    def test_input_failure_propagates_after_terminal_restore(self) -> None:
        state = AppState()

        with self.assertRaises(InputClosedError):
            _run(state, ["A", "x"])

    def test_terminal_restored_when_render_fails(self) -> None:
        state = AppState()
        terminal = _FakeTerminal()

        def failing_render(_context: RenderContext) -> None:
            raise BrokenPipeError("stdout closed")

        terminal_io = RuntimeLoopIO(
            read_key=lambda _fd: "q",
            render=failing_render,
            terminal_size=lambda: (80, 24),
        )
        with self.assertRaises(BrokenPipeError):
            run_main_loop(state, terminal, 0, terminal_io=terminal_io)

        self.assertEqual(terminal.events, ["enter", "exit"])

    def test_empty_tokens_are_skipped(self) -> None:
        state = AppState()

        renders, _, script = _run(state, ["", "", "q"])

        self.assertEqual(len(renders), 1)
        self.assertEqual(len(script.render_counts_at_read), 3)


if __name__ == "__main__":
    unittest.main()
