"""Keyboard dispatch for list and entry modes.

Each handler takes one key token plus the ``AppState`` it acts on and
returns ``True`` only when the application should quit.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..state import AppState, Browsing, Entering
from .key_registry import KeyBinding, KeyRegistry

logger = logging.getLogger(__name__)

QUIT_KEYS = ("q", "ESC")
START_ADD_KEYS = ("A",)
DELETE_KEYS = ("D",)
TOGGLE_KEYS = ("ENTER",)
MOVE_UP_KEYS = ("UP",)
MOVE_DOWN_KEYS = ("DOWN",)
FIRST_KEYS = ("HOME",)
LAST_KEYS = ("END",)
ALT_MOVE_UP_KEYS = ("k",)
ALT_MOVE_DOWN_KEYS = ("j",)
ALT_FIRST_KEYS = ("g",)
ALT_LAST_KEYS = ("G",)

SUBMIT_KEYS = ("ENTER",)
CANCEL_KEYS = ("ESC",)
ERASE_KEYS = ("BACKSPACE", "DELETE")


def browsing_registry(state: AppState, *, alternate_keys: bool = True) -> KeyRegistry:
    """Build list-mode bindings acting on ``state``."""

    def quit_action() -> bool:
        logger.debug("quit requested")
        return True

    def start_add() -> bool:
        state.start_entry()
        return False

    def delete() -> bool:
        removed = state.delete_selected()
        if removed is not None:
            state.status_message = f"Deleted #{removed.ordinal}"
        return False

    def toggle() -> bool:
        state.toggle_selected()
        return False

    def move(delta: int) -> Callable[[], bool]:
        def action() -> bool:
            state.move_selection(delta)
            return False

        return action

    def first() -> bool:
        state.select_first()
        return False

    def last() -> bool:
        state.select_last()
        return False

    up_keys = MOVE_UP_KEYS + (ALT_MOVE_UP_KEYS if alternate_keys else ())
    down_keys = MOVE_DOWN_KEYS + (ALT_MOVE_DOWN_KEYS if alternate_keys else ())
    first_keys = FIRST_KEYS + (ALT_FIRST_KEYS if alternate_keys else ())
    last_keys = LAST_KEYS + (ALT_LAST_KEYS if alternate_keys else ())

    return KeyRegistry().register_all(
        KeyBinding(QUIT_KEYS, quit_action),
        KeyBinding(START_ADD_KEYS, start_add),
        KeyBinding(DELETE_KEYS, delete),
        KeyBinding(TOGGLE_KEYS, toggle),
        KeyBinding(up_keys, move(-1)),
        KeyBinding(down_keys, move(1)),
        KeyBinding(first_keys, first),
        KeyBinding(last_keys, last),
    )


def handle_browsing_key(key: str, state: AppState, *, alternate_keys: bool = True) -> bool:
    """Handle one list-mode key and return ``True`` when the app should quit."""
    registry = browsing_registry(state, alternate_keys=alternate_keys)
    if key not in registry:
        logger.debug("ignored key %r in list mode", key)
        return False
    return bool(registry.dispatch(key))


def handle_entering_key(key: str, state: AppState) -> bool:
    """Handle one entry-form key. Entry mode never quits the app."""
    if key in SUBMIT_KEYS:
        item = state.submit_entry()
        if item is not None:
            state.status_message = f"Added #{item.ordinal}"
        return False
    if key in CANCEL_KEYS:
        state.cancel_entry()
        return False
    if key in ERASE_KEYS:
        state.backspace()
        return False
    if len(key) == 1 and key.isprintable():
        state.insert_char(key)
    return False


def handle_key(key: str, state: AppState, *, alternate_keys: bool = True) -> bool:
    """Route ``key`` to the handler for the current mode."""
    if state.status_message:
        state.status_message = ""
        state.dirty = True
    if isinstance(state.mode, Entering):
        return handle_entering_key(key, state)
    if isinstance(state.mode, Browsing):
        return handle_browsing_key(key, state, alternate_keys=alternate_keys)
    return False
