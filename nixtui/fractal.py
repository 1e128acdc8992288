"""Sierpinski triangle rendering for the home screen.

The triangle is Pascal's triangle mod 2: cell ``(row, k)`` is filled exactly
when ``C(row, k)`` is odd, which holds iff ``row & k == k``. Depth follows
the logical processor count and shrinks until the shape fits the terminal.
Two logical rows share one terminal row through half-block glyphs.
"""

from __future__ import annotations

import logging
import math
import os

from .ansi import RESET, RGB, bg, fg, pos
from .ui_theme import UITheme

logger = logging.getLogger(__name__)

MIN_DEPTH = 2
MAX_DEPTH = 6

GRADIENT_COOL: RGB = (82, 182, 255)
GRADIENT_MID: RGB = (100, 240, 180)
GRADIENT_WARM: RGB = (255, 180, 60)

UPPER_HALF = "▀"
LOWER_HALF = "▄"
FULL_BLOCK = "█"


def logical_thread_count() -> int:
    """Return the logical processor count, or 1 when it cannot be read."""
    try:
        count = os.cpu_count()
    except (NotImplementedError, OSError):
        count = None
    if not count or count < 1:
        logger.debug("processor count unavailable; assuming 1")
        return 1
    return count


def shape_rows(depth: int) -> int:
    """Terminal rows needed for a triangle of ``depth`` (two logical rows each)."""
    return ((1 << depth) + 1) // 2


def shape_cols(depth: int) -> int:
    return 2 * (1 << depth) - 1


def fractal_depth(threads: int, avail_rows: int, avail_cols: int) -> int:
    """Pick the triangle depth for ``threads`` that fits the available area.

    ``ceil(log2(threads))`` is clamped to ``[2, 6]`` and then reduced one step
    at a time while the shape overflows. The result is never below 1.
    """
    depth = min(MAX_DEPTH, max(MIN_DEPTH, math.ceil(math.log2(max(threads, 2)))))
    while depth > 1:
        if shape_rows(depth) <= avail_rows and shape_cols(depth) <= avail_cols:
            break
        depth -= 1
    return max(1, depth)


def is_filled(row: int, col: int, size: int) -> bool:
    """Return whether absolute column ``col`` of logical ``row`` is filled.

    ``row`` 0 is the apex; ``col`` spans ``0..2*size-2`` centred on ``size-1``.
    """
    offset = col - (size - 1 - row)
    if offset < 0 or offset > 2 * row or offset % 2:
        return False
    k = offset >> 1
    return (row & k) == k


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _lerp(a: RGB, b: RGB, s: float) -> RGB:
    return (
        _round_half_up(a[0] + s * (b[0] - a[0])),
        _round_half_up(a[1] + s * (b[1] - a[1])),
        _round_half_up(a[2] + s * (b[2] - a[2])),
    )


def gradient_color(t: float) -> RGB:
    """Interpolate apex-to-base color for normalized position ``t``."""
    if t < 0.5:
        return _lerp(GRADIENT_COOL, GRADIENT_MID, t * 2)
    return _lerp(GRADIENT_MID, GRADIENT_WARM, (t - 0.5) * 2)


def render_fractal(top_row: int, center_col: int, depth: int, theme: UITheme) -> str:
    """Return positioned output for the triangle at ``top_row``.

    ``center_col`` is the 1-based column of the apex.
    """
    size = 1 << depth
    width = 2 * size - 1
    col_start = center_col - (size - 1)
    backdrop = bg(theme.bg)
    denom = max(1, size - 1)

    out: list[str] = []
    for term_row in range(shape_rows(depth)):
        top = term_row * 2
        bottom = top + 1
        out.append(pos(top_row + term_row, col_start) + backdrop)
        for col in range(width):
            top_filled = top < size and is_filled(top, col, size)
            bottom_filled = bottom < size and is_filled(bottom, col, size)
            if not top_filled and not bottom_filled:
                out.append(" ")
                continue
            top_color = gradient_color(top / denom)
            bottom_color = gradient_color(min(1.0, bottom / denom))
            if top_filled and bottom_filled:
                if top_color == bottom_color:
                    out.append(fg(top_color) + backdrop + FULL_BLOCK + RESET + backdrop)
                else:
                    out.append(fg(top_color) + bg(bottom_color) + UPPER_HALF + RESET + backdrop)
            elif top_filled:
                out.append(fg(top_color) + backdrop + UPPER_HALF + RESET + backdrop)
            else:
                out.append(fg(bottom_color) + backdrop + LOWER_HALF + RESET + backdrop)
    out.append(RESET)
    return "".join(out)


def fractal_caption(depth: int, threads: int) -> str:
    thread_word = "thread" if threads == 1 else "threads"
    return f"depth {depth}  ·  {threads} logical {thread_word}"


__all__ = [
    "fractal_caption",
    "fractal_depth",
    "gradient_color",
    "is_filled",
    "logical_thread_count",
    "render_fractal",
    "shape_cols",
    "shape_rows",
]
