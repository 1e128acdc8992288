"""Bordered panel drawing with visually centered titles."""

from __future__ import annotations

from ..ansi import BOLD, RESET, bg, clip, fg, pos, visible_width
from ..ui_theme import UITheme

STYLE_SINGLE = "single"
STYLE_DOUBLE = "double"
STYLE_ACCENT = "accent"

# (top-left, top-right, bottom-left, bottom-right, horizontal, vertical)
_GLYPHS = {
    STYLE_SINGLE: ("╭", "╮", "╰", "╯", "─", "│"),
    STYLE_ACCENT: ("╭", "╮", "╰", "╯", "─", "│"),
    STYLE_DOUBLE: ("╔", "╗", "╚", "╝", "═", "║"),
}


def draw_panel(
    row: int,
    col: int,
    width: int,
    height: int,
    theme: UITheme,
    title: str = "",
    style: str = STYLE_SINGLE,
    focused: bool = False,
) -> str:
    """Return positioned output for a filled, bordered rectangle.

    The title is centered in the top border by visible width, so titles
    containing icons stay centered.
    """
    if width < 2 or height < 2:
        raise ValueError(f"panel too small: {width}x{height}")
    top_left, top_right, bottom_left, bottom_right, horizontal, vertical = _GLYPHS.get(style, _GLYPHS[STYLE_SINGLE])
    if focused:
        border = fg(theme.accent)
    elif style == STYLE_ACCENT:
        border = fg(theme.alt)
    else:
        border = fg(theme.border)
    panel_bg = bg(theme.panel)
    inner = width - 2
    title = clip(title, inner - 2)

    out = [panel_bg + border + pos(row, col) + top_left]
    if title:
        space = max(0, inner - visible_width(title) - 2)
        left = space // 2
        title_color = fg(theme.accent) if focused else fg(theme.bright)
        out.append(
            horizontal * left
            + " "
            + RESET
            + BOLD
            + title_color
            + panel_bg
            + title
            + RESET
            + panel_bg
            + border
            + " "
            + horizontal * (space - left)
        )
    else:
        out.append(horizontal * inner)
    out.append(top_right)
    for offset in range(1, height - 1):
        out.append(pos(row + offset, col) + border + vertical + panel_bg + " " * inner + border + vertical)
    out.append(pos(row + height - 1, col) + bottom_left + horizontal * inner + bottom_right + RESET)
    return "".join(out)


__all__ = ["STYLE_ACCENT", "STYLE_DOUBLE", "STYLE_SINGLE", "draw_panel"]
