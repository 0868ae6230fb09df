"""Mode-to-view selection.

``build_view`` is a pure read of ``AppState``: it decides which screen the
renderer draws and hands it exactly the data that screen needs.
"""

from __future__ import annotations

from dataclasses import dataclass

from .state import AppState

INPUT_TITLE = "New item"
LIST_TITLE = "Todo"


@dataclass(frozen=True)
class ListRow:
    label: str
    is_done: bool


@dataclass(frozen=True)
class ListView:
    """List of rows with an optional highlighted index."""

    title: str
    rows: tuple[ListRow, ...]
    selected: int | None
    status: str = ""


@dataclass(frozen=True)
class InputView:
    """Single-line text box seeded with the current draft."""

    title: str
    text: str
    status: str = ""


View = ListView | InputView


def build_view(state: AppState) -> View:
    draft = state.draft
    if draft is not None:
        return InputView(title=INPUT_TITLE, text=draft, status=state.status_message)
    rows = tuple(ListRow(label=item.label, is_done=item.is_done) for item in state.items)
    return ListView(
        title=LIST_TITLE,
        rows=rows,
        selected=state.selection,
        status=state.status_message,
    )
