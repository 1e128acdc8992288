"""Landing screen with navigation cards above the fractal."""

from __future__ import annotations

from ..ansi import BOLD, DIM, RESET, bg, fg, pos, visible_width
from ..catalog import SECTIONS, TUTORIALS
from ..fractal import fractal_caption, fractal_depth, render_fractal, shape_cols, shape_rows
from ..state import modified_count
from .context import RenderContext
from .panel import draw_panel

BANNER: tuple[str, ...] = (
    "  ███╗   ██╗██╗██╗  ██╗ ██████╗ ███████╗",
    "  ████╗  ██║██║╚██╗██╔╝██╔═══██╗██╔════╝",
    "  ██╔██╗ ██║██║ ╚███╔╝ ██║   ██║███████╗",
    "  ██║╚██╗██║██║ ██╔██╗ ██║   ██║╚════██║",
    "  ██║ ╚████║██║██╔╝ ██╗╚██████╔╝███████║",
    "  ╚═╝  ╚═══╝╚═╝╚═╝  ╚═╝ ╚═════╝ ╚══════╝",
)
BANNER_WIDTH = 44
SUBTITLE = "── Settings & Tutorial System ──"
CARD_HEIGHT = 6


def _home_cards(ctx: RenderContext):
    """Return ``(key, icon, label, description, color)`` for each card."""
    theme = ctx.theme
    return (
        ("s", "⚙", "Settings", "Configure NixOS", theme.accent),
        ("t", "❄", "Tutorials", "Learn step by step", theme.alt),
        ("e", "⎗", "Export", "Preview & save config", theme.warn),
    )


def render_home(ctx: RenderContext) -> str:
    state = ctx.state
    theme = ctx.theme
    width = state.term_width
    height = state.term_height
    out: list[str] = []

    banner_col = max(1, (width - BANNER_WIDTH) // 2)
    start_row = max(2, (height - 22) // 2)
    for index, line in enumerate(BANNER):
        t = index / len(BANNER)
        shade = (round(82 + t * 38), round(182 - t * 60), round(255 - t * 75))
        out.append(pos(start_row + index, banner_col) + BOLD + fg(shade) + line + RESET)

    subtitle_col = max(1, (width - visible_width(SUBTITLE)) // 2)
    out.append(pos(start_row + len(BANNER) + 1, subtitle_col) + DIM + fg(theme.muted) + SUBTITLE + RESET)

    cards = _home_cards(ctx)
    card_width = min(28, (width - 8) // 3)
    total_width = len(cards) * (card_width + 2) - 2
    cards_col = max(2, (width - total_width) // 2)
    cards_row = start_row + len(BANNER) + 3
    panel_bg = bg(theme.panel)
    for index, (key, icon, label, description, color) in enumerate(cards):
        col = cards_col + index * (card_width + 2)
        if col + card_width > width:
            break
        out.append(draw_panel(cards_row, col, card_width, CARD_HEIGHT, theme))
        out.append(pos(cards_row + 1, col + 2) + panel_bg + fg(color) + BOLD + f"{icon}  {label}" + RESET)
        out.append(pos(cards_row + 2, col + 2) + panel_bg + DIM + fg(theme.muted) + description + RESET)
        out.append(
            pos(cards_row + 4, col + 2)
            + panel_bg
            + fg(theme.muted)
            + "Press "
            + fg(color)
            + BOLD
            + key.upper()
            + RESET
            + panel_bg
            + fg(theme.muted)
            + " to open"
            + RESET
        )

    stats_row = cards_row + CARD_HEIGHT + 1
    mods = modified_count(state)
    mod_part = ""
    if mods > 0:
        mod_part = fg(theme.mod) + BOLD + f"{mods} modified" + RESET + bg(theme.bg) + fg(theme.muted) + "  ·  "
    stats = f"  {mod_part}{len(TUTORIALS)} tutorials  ·  {len(SECTIONS)} sections"
    out.append(
        pos(stats_row, max(1, (width - visible_width(stats)) // 2)) + bg(theme.bg) + fg(theme.muted) + stats + RESET
    )

    out.append(_render_home_fractal(ctx, stats_row + 2))
    return "".join(out)


def _render_home_fractal(ctx: RenderContext, top_row: int) -> str:
    """Draw the fractal below the stats row when any depth fits."""
    state = ctx.state
    theme = ctx.theme
    # Two rows stay free below the shape: caption and status bar.
    avail_rows = state.term_height - top_row - 2
    avail_cols = state.term_width - 4
    if avail_rows < 1 or avail_cols < 3:
        return ""
    depth = fractal_depth(ctx.threads, avail_rows, avail_cols)
    rows = shape_rows(depth)
    if rows > avail_rows or shape_cols(depth) > avail_cols:
        return ""

    out = [render_fractal(top_row, state.term_width // 2, depth, theme)]
    caption_row = top_row + rows + 1
    if caption_row < state.term_height - 1:
        caption = fractal_caption(depth, ctx.threads)
        caption_col = max(1, (state.term_width - visible_width(caption)) // 2)
        out.append(pos(caption_row, caption_col) + bg(theme.bg) + DIM + fg(theme.muted) + caption + RESET)
    return "".join(out)


__all__ = ["render_home"]
