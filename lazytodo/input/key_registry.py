"""Key-to-action tables used by the mode handlers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyBinding:
    """One action reachable from one or more key tokens."""

    keys: tuple[str, ...]
    action: Callable[[], bool | None]


class KeyRegistry:
    """Exact-match dispatch table from key token to action."""

    def __init__(self) -> None:
        self._actions: dict[str, Callable[[], bool | None]] = {}

    def register(self, binding: KeyBinding) -> KeyRegistry:
        """Add ``binding``; later bindings win for shared keys."""
        for key in binding.keys:
            self._actions[key] = binding.action
        return self

    def register_all(self, *bindings: KeyBinding) -> KeyRegistry:
        for binding in bindings:
            self.register(binding)
        return self

    def __contains__(self, key: str) -> bool:
        return key in self._actions

    def dispatch(self, key: str) -> bool | None:
        """Run the action bound to ``key``.

        Returns ``None`` for unbound keys, otherwise the action's result.
        """
        action = self._actions.get(key)
        if action is None:
            return None
        return action()
