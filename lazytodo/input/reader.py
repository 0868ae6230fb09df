"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, CR/LF collapsing, and UTF-8 printable input.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []
_SKIP_NEXT_LF = False

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
}

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

_CSI_TILDE_KEYS: dict[str, str] = {
    "1": "HOME",
    "2": "INSERT",
    "3": "DELETE",
    "4": "END",
    "5": "PAGE_UP",
    "6": "PAGE_DOWN",
    "7": "HOME",
    "8": "END",
}

# Token for complete escape sequences with no key mapping; never bound.
UNKNOWN_KEY = "UNKNOWN"
CSI_MAX_PARAM_BYTES = 16


class InputClosedError(EOFError):
    """Raised when the input stream reaches end-of-file."""


def reset_pending_input() -> None:
    """Drop buffered bytes and pending CR/LF state."""
    global _SKIP_NEXT_LF
    _PENDING_BYTES.clear()
    _SKIP_NEXT_LF = False


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_byte(fd: int) -> bytes:
    if _PENDING_BYTES:
        return _PENDING_BYTES.pop(0)
    ch = os.read(fd, 1)
    if not ch:
        raise InputClosedError("input stream closed")
    return ch


def _decode_utf8(fd: int, lead: bytes) -> str:
    """Read continuation bytes for a multi-byte UTF-8 character."""
    first = lead[0]
    if first >= 0xF0:
        extra = 3
    elif first >= 0xE0:
        extra = 2
    elif first >= 0xC0:
        extra = 1
    else:
        extra = 0
    raw = lead
    for _ in range(extra):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        if not 0x80 <= nxt[0] <= 0xBF:
            _PENDING_BYTES.append(nxt)
            break
        raw += nxt
    return raw.decode("utf-8", errors="replace")


def _read_csi(fd: int) -> str:
    """Consume one CSI sequence up to its final byte and map it to a key."""
    params = bytearray()
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return UNKNOWN_KEY
        if 0x40 <= part[0] <= 0x7E:
            final = part
            break
        if not 0x20 <= part[0] <= 0x3F or len(params) >= CSI_MAX_PARAM_BYTES:
            return UNKNOWN_KEY
        params += part

    # Modified arrows (ESC[1;5A) map to the plain key.
    if final in _CSI_FINAL_KEYS:
        return _CSI_FINAL_KEYS[final]
    if final == b"~":
        first_param = params.decode("ascii", errors="replace").split(";", 1)[0]
        return _CSI_TILDE_KEYS.get(first_param, UNKNOWN_KEY)
    return UNKNOWN_KEY


def _read_escape(fd: int) -> str:
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"O":
        # SS3 sequences sent by some terminals in application cursor mode.
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return UNKNOWN_KEY
        return _CSI_FINAL_KEYS.get(final, UNKNOWN_KEY)
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return "ESC"
    return _read_csi(fd)


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Block for one key press on ``fd`` and return its token.

    With ``timeout_ms`` set, returns ``""`` when nothing arrives in time.
    Raises ``InputClosedError`` when the stream hits end-of-file.
    """
    global _SKIP_NEXT_LF

    while True:
        if not _PENDING_BYTES and timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""
        ch = _read_byte(fd)

        if ch == b"\n" and _SKIP_NEXT_LF:
            _SKIP_NEXT_LF = False
            continue
        _SKIP_NEXT_LF = ch == b"\r"
        break

    if ch in {b"\r", b"\n"}:
        return "ENTER"
    if ch in _CONTROL_KEYS:
        return _CONTROL_KEYS[ch]
    if ch == b"\x1b":
        return _read_escape(fd)
    if ch[0] >= 0x80:
        return _decode_utf8(fd, ch)
    return ch.decode("utf-8", errors="replace")
