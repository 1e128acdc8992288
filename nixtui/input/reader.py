"""Low-level terminal input decoding.

Reads one raw chunk from stdin and classifies it into a ``KeyPress``.
A bare ESC byte is the escape key; any longer chunk starting with ESC is a
sequence and never reads as escape.
"""

from __future__ import annotations

import os
import select
from dataclasses import dataclass

UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
ENTER = "ENTER"
ESCAPE = "ESC"
BACKSPACE = "BACKSPACE"
TAB = "TAB"
CTRL_C = "CTRL_C"
PAGE_UP = "PAGE_UP"
PAGE_DOWN = "PAGE_DOWN"
HOME = "HOME"
END = "END"
TEXT = "TEXT"
UNKNOWN = "UNKNOWN"

READ_CHUNK_SIZE = 1024

_ESCAPE_SEQUENCES: dict[bytes, str] = {
    b"\x1b[A": UP,
    b"\x1b[B": DOWN,
    b"\x1b[C": RIGHT,
    b"\x1b[D": LEFT,
    b"\x1bOA": UP,
    b"\x1bOB": DOWN,
    b"\x1bOC": RIGHT,
    b"\x1bOD": LEFT,
    b"\x1b[5~": PAGE_UP,
    b"\x1b[6~": PAGE_DOWN,
    b"\x1b[H": HOME,
    b"\x1b[1~": HOME,
    b"\x1b[7~": HOME,
    b"\x1b[F": END,
    b"\x1b[4~": END,
    b"\x1b[8~": END,
}

_CONTROL_BYTES: dict[bytes, str] = {
    b"\x03": CTRL_C,
    b"\x1b": ESCAPE,
    b"\r": ENTER,
    b"\n": ENTER,
    b"\r\n": ENTER,
    b"\x7f": BACKSPACE,
    b"\x08": BACKSPACE,
    b"\t": TAB,
}

# vi-style aliases; the literal character is still carried for text entry.
_VI_DIRECTIONS = {"h": LEFT, "j": DOWN, "k": UP, "l": RIGHT}


@dataclass(frozen=True)
class KeyPress:
    """One classified input chunk.

    ``key`` is a logical name such as ``UP`` or a literal printable character.
    ``char`` holds the typed text for printable input and is empty otherwise.
    """

    key: str
    char: str = ""

    @property
    def printable(self) -> bool:
        return bool(self.char)


def classify_chunk(raw: bytes) -> KeyPress:
    if not raw:
        return KeyPress(UNKNOWN)
    control = _CONTROL_BYTES.get(raw)
    if control is not None:
        return KeyPress(control)
    if raw.startswith(b"\x1b"):
        return KeyPress(_ESCAPE_SEQUENCES.get(raw, UNKNOWN))

    text = raw.decode("utf-8", errors="replace")
    if "\ufffd" in text or not text.isprintable():
        return KeyPress(UNKNOWN)
    if len(text) == 1:
        return KeyPress(_VI_DIRECTIONS.get(text, text), text)
    return KeyPress(TEXT, text)


def read_chunk(fd: int, timeout: float | None = None) -> bytes:
    """Read one chunk from ``fd``; return ``b""`` when ``timeout`` elapses first."""
    if timeout is not None:
        ready, _, _ = select.select([fd], [], [], max(0.0, timeout))
        if not ready:
            return b""
    return os.read(fd, READ_CHUNK_SIZE)


__all__ = [
    "BACKSPACE",
    "CTRL_C",
    "DOWN",
    "END",
    "ENTER",
    "ESCAPE",
    "HOME",
    "KeyPress",
    "LEFT",
    "PAGE_DOWN",
    "PAGE_UP",
    "RIGHT",
    "TAB",
    "TEXT",
    "UNKNOWN",
    "UP",
    "classify_chunk",
    "read_chunk",
]
