"""Frame composition tests for the list and entry screens.

Uses the plain theme where exact text matters so assertions do not depend
on color codes.
"""

from __future__ import annotations

import os
import unittest

from lazytodo.ansi import ANSI_ESCAPE_RE, clip_ansi_line, display_width, tail_clip
from lazytodo.render import (
    EMPTY_LIST_HINT,
    RenderContext,
    build_status_line,
    compose_frame,
    format_list_row,
    list_window_start,
    render_frame,
)
from lazytodo.state import AppState
from lazytodo.ui_theme import DEFAULT_THEME, PLAIN_THEME
from lazytodo.views import INPUT_TITLE, InputView, ListRow, ListView, build_view


def _frame_rows(frame: str) -> list[str]:
    body = frame.removeprefix("\033[H\033[J")
    return [ANSI_ESCAPE_RE.sub("", row) for row in body.split("\r\n")]


class ViewSelectionTests(unittest.TestCase):
    def test_browsing_state_builds_list_view(self) -> None:
        state = AppState()
        state.add_item("buy milk")
        state.toggle_selected()

        view = build_view(state)

        self.assertEqual(
            view,
            ListView(title="Todo", rows=(ListRow(label="1. buy milk", is_done=True),), selected=0),
        )

    def test_entering_state_builds_input_view_with_draft(self) -> None:
        state = AppState()
        state.start_entry("abc")

        self.assertEqual(build_view(state), InputView(title=INPUT_TITLE, text="abc"))

    def test_build_view_does_not_mutate_state(self) -> None:
        state = AppState()
        state.add_item("a")
        state.dirty = False

        build_view(state)

        self.assertFalse(state.dirty)
        self.assertEqual(state.selection, 0)


class ComposeFrameTests(unittest.TestCase):
    def test_list_frame_has_heading_rows_and_status(self) -> None:
        view = ListView(
            title="Todo",
            rows=(ListRow("1. a", False), ListRow("2. b", True)),
            selected=1,
        )
        rows = _frame_rows(compose_frame(RenderContext(view=view, width=30, height=6, theme=PLAIN_THEME)))

        self.assertEqual(len(rows), 6)
        self.assertEqual(rows[0], "Todo  1/2 done")
        self.assertEqual(rows[1], "  [ ] 1. a")
        self.assertEqual(rows[2], "> [x] 2. b".ljust(30))
        self.assertEqual(rows[3], "")
        self.assertIn("Enter", rows[4])
        self.assertTrue(rows[5].startswith("2 items"))
        self.assertTrue(rows[5].endswith("│ q quit"))

    def test_empty_list_shows_hint(self) -> None:
        view = ListView(title="Todo", rows=(), selected=None)
        rows = _frame_rows(compose_frame(RenderContext(view=view, width=60, height=5, theme=PLAIN_THEME)))

        self.assertEqual(rows[1], f"  {EMPTY_LIST_HINT}")

    def test_input_frame_draws_box_with_draft(self) -> None:
        view = InputView(title=INPUT_TITLE, text="call mom")
        rows = _frame_rows(compose_frame(RenderContext(view=view, width=20, height=8, theme=PLAIN_THEME)))

        self.assertTrue(rows[1].startswith("┌─ New item "))
        self.assertTrue(rows[1].endswith("┐"))
        self.assertEqual(rows[2], "│ call mom▏        │")
        self.assertEqual(rows[3], "└" + "─" * 18 + "┘")
        self.assertIn("Esc", rows[-2])
        self.assertTrue(rows[-1].endswith("│ Esc cancel"))
        for row in rows[1:4]:
            self.assertEqual(display_width(row), 20)

    def test_long_draft_keeps_tail_visible(self) -> None:
        view = InputView(title=INPUT_TITLE, text="x" * 50 + "END")
        rows = _frame_rows(compose_frame(RenderContext(view=view, width=20, height=8, theme=PLAIN_THEME)))

        self.assertIn("END▏", rows[2])

    def test_status_message_replaces_item_count(self) -> None:
        view = ListView(title="Todo", rows=(ListRow("1. a", False),), selected=0, status="Added #1")
        rows = _frame_rows(compose_frame(RenderContext(view=view, width=40, height=5, theme=PLAIN_THEME)))

        self.assertTrue(rows[-1].startswith("Added #1"))

    def test_done_rows_are_struck_through_in_color_themes(self) -> None:
        row = format_list_row(ListRow("1. a", True), selected=False, width=40, theme=DEFAULT_THEME)

        self.assertIn("\033[9;", row)

    def test_selected_row_stays_reversed_across_resets(self) -> None:
        row = format_list_row(ListRow("1. a", False), selected=True, width=20, theme=DEFAULT_THEME)

        self.assertTrue(row.startswith("\033[7m"))
        self.assertNotIn("\033[0m\033", row[:-4])
        self.assertIn("\033[0;7m", row)

    def test_window_scrolls_to_keep_selection_visible(self) -> None:
        self.assertEqual(list_window_start(None, 10, 3), 0)
        self.assertEqual(list_window_start(1, 10, 3), 0)
        self.assertEqual(list_window_start(5, 10, 3), 3)
        self.assertEqual(list_window_start(9, 10, 3), 7)

        rows = tuple(ListRow(f"{n}. item", False) for n in range(1, 11))
        view = ListView(title="Todo", rows=rows, selected=9)
        frame_rows = _frame_rows(compose_frame(RenderContext(view=view, width=30, height=6, theme=PLAIN_THEME)))
        self.assertTrue(frame_rows[3].startswith("> [ ] 10. item"))

    def test_render_frame_writes_to_fd(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            view = ListView(title="Todo", rows=(), selected=None)
            render_frame(RenderContext(view=view, width=30, height=4, theme=PLAIN_THEME), fd=write_fd)
            data = os.read(read_fd, 65536)
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertTrue(data.startswith(b"\x1b[H\x1b[J"))


class AnsiHelperTests(unittest.TestCase):
    def test_clip_preserves_escapes_and_counts_wide_chars(self) -> None:
        self.assertEqual(clip_ansi_line("\033[1mabcdef\033[0m", 3), "\033[1mabc")
        self.assertEqual(clip_ansi_line("日本語", 5), "日本")

    def test_tail_clip_keeps_rightmost_columns(self) -> None:
        self.assertEqual(tail_clip("abcdef", 3), "def")
        self.assertEqual(tail_clip("abc", 0), "")

    def test_build_status_line_pads_between_sides(self) -> None:
        line = build_status_line("left", 20, "right")

        self.assertEqual(len(line), 19)
        self.assertTrue(line.startswith("left"))
        self.assertTrue(line.endswith("right"))


if __name__ == "__main__":
    unittest.main()
