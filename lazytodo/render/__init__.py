"""Rendering engine for the list and entry screens.

Composes fully formed ANSI frames from a view description and writes them
to the terminal. Nothing here reads or mutates ``AppState``.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from ..ansi import clip_ansi_line, display_width, pad_ansi_line, tail_clip
from ..ui_theme import DEFAULT_THEME, UITheme
from ..views import InputView, ListRow, ListView, View
from .help import help_lines

DONE_MARKER = "[x]"
PENDING_MARKER = "[ ]"
EMPTY_LIST_HINT = "No items yet. Press A to add one."
INPUT_CURSOR = "▏"


@dataclass(frozen=True)
class RenderContext:
    view: View
    width: int
    height: int
    theme: UITheme = DEFAULT_THEME
    alternate_keys: bool = True


def build_status_line(left_text: str, width: int, right_text: str = "│ q quit") -> str:
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def list_window_start(selected: int | None, total: int, visible_rows: int) -> int:
    """Return the first row index that keeps ``selected`` on screen."""
    if selected is None or visible_rows <= 0:
        return 0
    start = max(0, selected - visible_rows + 1)
    return min(start, max(0, total - visible_rows))


def format_list_row(row: ListRow, selected: bool, width: int, theme: UITheme) -> str:
    """Format one item row; done items are struck through."""
    if row.is_done:
        marker = f"{theme.done_marker}{DONE_MARKER}{theme.reset}"
        label = f"{theme.item_done}{row.label}{theme.reset}"
    else:
        marker = f"{theme.pending_marker}{PENDING_MARKER}{theme.reset}"
        label = f"{theme.item}{row.label}{theme.reset}"
    pointer = "> " if selected else "  "
    text = f"{pointer}{marker} {label}"
    if not selected:
        return clip_ansi_line(text, width)
    # Keep reverse video active across internal resets.
    padded = pad_ansi_line(text, width)
    if not theme.reverse:
        return padded
    return theme.reverse + padded.replace("\033[0m", "\033[0;7m") + theme.reset


def _list_body(view: ListView, width: int, rows: int, theme: UITheme) -> list[str]:
    if not view.rows:
        return [clip_ansi_line(f"  {theme.empty_hint}{EMPTY_LIST_HINT}{theme.reset}", width)]
    start = list_window_start(view.selected, len(view.rows), rows)
    out: list[str] = []
    for idx in range(start, min(len(view.rows), start + rows)):
        out.append(format_list_row(view.rows[idx], idx == view.selected, width, theme))
    return out


def _input_body(view: InputView, width: int, theme: UITheme) -> list[str]:
    box_width = max(4, width)
    inner = box_width - 4
    title = f" {view.title} "
    top_fill = max(0, box_width - 3 - display_width(title))
    top = (
        f"{theme.input_border}┌─{theme.reset}{theme.input_title}{title}{theme.reset}"
        f"{theme.input_border}{'─' * top_fill}┐{theme.reset}"
    )
    shown = tail_clip(view.text, max(0, inner - 1)) + INPUT_CURSOR
    middle = (
        f"{theme.input_border}│{theme.reset} "
        f"{theme.input_text}{pad_ansi_line(shown, inner)}{theme.reset}"
        f" {theme.input_border}│{theme.reset}"
    )
    bottom = f"{theme.input_border}└{'─' * (box_width - 2)}┘{theme.reset}"
    return [clip_ansi_line(line, width) for line in (top, middle, bottom)]


def compose_frame(context: RenderContext) -> str:
    """Build the full frame text for ``context`` without writing it."""
    view = context.view
    width = max(1, context.width)
    height = max(3, context.height)
    theme = context.theme
    entering = isinstance(view, InputView)
    footer = help_lines(entering, theme, alternate_keys=context.alternate_keys)
    content_rows = max(1, height - 2 - len(footer))

    if isinstance(view, ListView):
        done = sum(1 for row in view.rows if row.is_done)
        heading = f"{theme.title}{view.title}{theme.reset}  {done}/{len(view.rows)} done"
        body = _list_body(view, width, content_rows, theme)
        left_status = view.status or f"{len(view.rows)} items"
    else:
        heading = f"{theme.title}{view.title}{theme.reset}"
        body = _input_body(view, width, theme)
        left_status = view.status or f"{len(view.text)} chars"

    lines = [clip_ansi_line(heading, width)]
    lines.extend(body[:content_rows])
    lines.extend([""] * (content_rows - min(len(body), content_rows)))
    lines.extend(clip_ansi_line(line, width) for line in footer)

    out: list[str] = ["\033[H\033[J"]
    for line in lines:
        out.append(line)
        if "\033" in line:
            out.append("\033[0m")
        out.append("\r\n")
    right_status = "│ Esc cancel" if entering else "│ q quit"
    out.append(theme.reverse)
    out.append(build_status_line(left_status, width, right_status))
    out.append(theme.reset)
    return "".join(out)


def render_frame(context: RenderContext, fd: int | None = None) -> None:
    """Write one composed frame to ``fd`` (stdout by default)."""
    target = sys.stdout.fileno() if fd is None else fd
    os.write(target, compose_frame(context).encode("utf-8", errors="replace"))
