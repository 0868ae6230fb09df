"""Application state and mode transitions for the to-do list.

``AppState`` is a plain value threaded through the runtime loop. Every
mutation below completes its own bookkeeping (selection re-clamp, mode
switch) before returning, so the next render always sees a valid state.
Operations that do not apply to the current mode or list are no-ops.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class TodoItem:
    description: str
    ordinal: int
    is_done: bool = False

    @property
    def label(self) -> str:
        """Row text shown to the user, numbered by creation order."""
        return f"{self.ordinal}. {self.description}"


@dataclass(frozen=True)
class Browsing:
    """List mode: navigation and item mutation keys are active."""


@dataclass(frozen=True)
class Entering:
    """Entry-form mode carrying the uncommitted draft text."""

    draft: str = ""


Mode = Browsing | Entering


@dataclass
class AppState:
    items: list[TodoItem] = field(default_factory=list)
    selection: int | None = None
    mode: Mode = field(default_factory=Browsing)
    next_ordinal: int = 1
    dirty: bool = True
    status_message: str = ""

    @property
    def draft(self) -> str | None:
        """Draft text while entering, ``None`` in list mode."""
        if isinstance(self.mode, Entering):
            return self.mode.draft
        return None

    def selected_item(self) -> TodoItem | None:
        if self.selection is None:
            return None
        return self.items[self.selection]

    def _clamp_selection(self) -> None:
        if not self.items:
            self.selection = None
        elif self.selection is None:
            self.selection = 0
        else:
            self.selection = max(0, min(self.selection, len(self.items) - 1))

    # List mode.

    def move_selection(self, delta: int) -> bool:
        """Move the cursor by ``delta`` rows, clamped at both ends.

        Returns ``True`` when the selection changed.
        """
        if not isinstance(self.mode, Browsing) or self.selection is None:
            return False
        target = max(0, min(self.selection + delta, len(self.items) - 1))
        if target == self.selection:
            return False
        self.selection = target
        self.dirty = True
        return True

    def select_first(self) -> bool:
        if self.selection is None:
            return False
        return self.move_selection(-self.selection)

    def select_last(self) -> bool:
        if self.selection is None:
            return False
        return self.move_selection(len(self.items) - 1 - self.selection)

    def toggle_selected(self) -> bool:
        """Flip completion on the selected item."""
        if not isinstance(self.mode, Browsing):
            return False
        item = self.selected_item()
        if item is None:
            return False
        item.is_done = not item.is_done
        self.dirty = True
        logger.debug("toggled #%d done=%s", item.ordinal, item.is_done)
        return True

    def delete_selected(self) -> TodoItem | None:
        """Remove the selected item and re-clamp the cursor.

        The cursor stays on the same index (now the following item) unless the
        last row was removed, in which case it moves to the new last row, or
        to ``None`` when the list becomes empty.
        """
        if not isinstance(self.mode, Browsing) or self.selection is None:
            return None
        removed = self.items.pop(self.selection)
        self._clamp_selection()
        self.dirty = True
        logger.debug("deleted #%d, %d items left", removed.ordinal, len(self.items))
        return removed

    def start_entry(self, seed: str = "") -> bool:
        if not isinstance(self.mode, Browsing):
            return False
        self.mode = Entering(draft=seed)
        self.dirty = True
        return True

    # Entry mode.

    def insert_char(self, ch: str) -> bool:
        if not isinstance(self.mode, Entering) or not ch:
            return False
        self.mode = Entering(draft=self.mode.draft + ch)
        self.dirty = True
        return True

    def backspace(self) -> bool:
        if not isinstance(self.mode, Entering) or not self.mode.draft:
            return False
        self.mode = Entering(draft=self.mode.draft[:-1])
        self.dirty = True
        return True

    def submit_entry(self) -> TodoItem | None:
        """Commit the draft as a new item, select it, and return to list mode."""
        if not isinstance(self.mode, Entering):
            return None
        item = TodoItem(description=self.mode.draft, ordinal=self.next_ordinal)
        self.next_ordinal += 1
        self.items.append(item)
        self.selection = len(self.items) - 1
        self.mode = Browsing()
        self.dirty = True
        logger.debug("added #%d %r", item.ordinal, item.description)
        return item

    def cancel_entry(self) -> bool:
        if not isinstance(self.mode, Entering):
            return False
        self.mode = Browsing()
        self.dirty = True
        return True

    def add_item(self, description: str) -> TodoItem | None:
        """Run the whole add flow for ``description`` from list mode."""
        if not self.start_entry():
            return None
        for ch in description:
            self.insert_char(ch)
        return self.submit_entry()
