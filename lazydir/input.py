"""Low-level terminal input decoding.

Reads raw bytes from stdin and returns the next character-producing key.
Escape sequences (arrows, function keys, mouse reports) and control bytes are
consumed and dropped.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _skip_escape_sequence(fd: int) -> None:
    """Drain the remainder of an escape sequence already started by ``ESC``."""
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq not in {b"[", b"O"}:
        return
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return
        # CSI/SS3 sequences end with a byte in the 0x40-0x7e range.
        if 0x40 <= part[0] <= 0x7E:
            return


def _read_utf8_tail(fd: int, lead: bytes) -> bytes:
    first = lead[0]
    if first >= 0xF0:
        extra = 3
    elif first >= 0xE0:
        extra = 2
    elif first >= 0xC0:
        extra = 1
    else:
        return lead
    data = lead
    for _ in range(extra):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        data += part
    return data


def read_key(fd: int) -> str:
    """Block until one character key is read from ``fd``.

    Returns an empty string at end of input.
    """
    while True:
        ch = os.read(fd, 1)
        if not ch:
            return ""
        if ch == b"\x1b":
            _skip_escape_sequence(fd)
            continue
        if ch[0] < 0x20 or ch == b"\x7f":
            continue
        return _read_utf8_tail(fd, ch).decode("utf-8", errors="replace")
