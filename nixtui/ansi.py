"""ANSI control sequences and visible-width text shaping.

Builds cursor, color, and screen-mode sequences used by every renderer.
Width math ignores escape sequences and counts any non-ASCII glyph as two
columns, so padding and clipping stay aligned when icons and emoji appear.
"""

from __future__ import annotations

import re

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")

ESC = "\x1b"
CSI = f"{ESC}["

ALT_SCREEN_ON = f"{CSI}?1049h"
ALT_SCREEN_OFF = f"{CSI}?1049l"
HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"
RESET = f"{CSI}0m"
BOLD = f"{CSI}1m"
DIM = f"{CSI}2m"
REVERSE = f"{CSI}7m"
CLEAR = f"{CSI}2J{CSI}H"

ELLIPSIS = "…"

RGB = tuple[int, int, int]


def pos(row: int, col: int) -> str:
    """Return an absolute cursor move to 1-based ``row``/``col``."""
    return f"{CSI}{row};{col}H"


def fg(color: RGB) -> str:
    r, g, b = color
    return f"{CSI}38;2;{r};{g};{b}m"


def bg(color: RGB) -> str:
    r, g, b = color
    return f"{CSI}48;2;{r};{g};{b}m"


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def char_width(ch: str) -> int:
    """Return display columns for one character.

    Every non-ASCII character is treated as double width. This over-counts
    narrow accented letters and is kept as a deliberate approximation.
    """
    return 1 if ord(ch) < 0x80 else 2


def visible_width(text: str) -> int:
    """Return the column width of ``text`` ignoring control sequences."""
    return sum(char_width(ch) for ch in strip_ansi(text))


def pad(text: str, width: int, align: str = "left") -> str:
    """Pad ``text`` with spaces to ``width`` visible columns.

    Text already wider than ``width`` is returned unchanged.
    """
    space = max(0, width - visible_width(text))
    if align == "right":
        return " " * space + text
    if align == "center":
        left = space // 2
        return " " * left + text + " " * (space - left)
    return text + " " * space


def _truncate_columns(text: str, max_cols: int) -> str:
    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] == ESC:
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        w = char_width(text[i])
        if col + w > max_cols:
            break
        out.append(text[i])
        col += w
        i += 1
    return "".join(out)


def clip(text: str, width: int) -> str:
    """Fit ``text`` into ``width`` visible columns, marking truncation.

    Escape sequences are kept intact and never counted. When truncation
    happens the ellipsis is appended and its own width is budgeted, so the
    result never measures wider than ``width``.
    """
    if width <= 0:
        return ""
    if visible_width(text) <= width:
        return text
    marker_width = visible_width(ELLIPSIS)
    if width < marker_width:
        return _truncate_columns(text, width)
    return _truncate_columns(text, width - marker_width) + ELLIPSIS


__all__ = [
    "ANSI_ESCAPE_RE",
    "ALT_SCREEN_OFF",
    "ALT_SCREEN_ON",
    "BOLD",
    "CLEAR",
    "CSI",
    "DIM",
    "ELLIPSIS",
    "ESC",
    "HIDE_CURSOR",
    "RESET",
    "REVERSE",
    "RGB",
    "SHOW_CURSOR",
    "bg",
    "char_width",
    "clip",
    "fg",
    "pad",
    "pos",
    "strip_ansi",
    "visible_width",
]
