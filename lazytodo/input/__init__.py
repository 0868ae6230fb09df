"""Input-layer public API for key decoding and mode handlers.

Exports are split between low-level terminal decoding (`read_key`) and the
mode handlers the runtime loop dispatches to.
"""

from .reader import (
    ESC_SEQUENCE_TIMEOUT_MS,
    _PENDING_BYTES,
    UNKNOWN_KEY,
    InputClosedError,
    read_key,
    reset_pending_input,
)
from .key_registry import KeyBinding, KeyRegistry
from .keys import (
    browsing_registry,
    handle_browsing_key,
    handle_entering_key,
    handle_key,
)

__all__ = [
    "read_key",
    "reset_pending_input",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "InputClosedError",
    "UNKNOWN_KEY",
    "KeyBinding",
    "KeyRegistry",
    "browsing_registry",
    "handle_browsing_key",
    "handle_entering_key",
    "handle_key",
]
