"""Scrollable, line-numbered preview of the generated configuration."""

from __future__ import annotations

from ..ansi import BOLD, DIM, RESET, bg, clip, fg, pos, visible_width
from ..highlight import highlight_lines
from ..layout import CONTENT_COL, content_width, export_max_scroll, export_visible_lines
from ..state import config_lines, modified_count
from .context import RenderContext
from .panel import STYLE_ACCENT, draw_panel


def scroll_percent(scroll: int, max_scroll: int) -> int:
    if max_scroll <= 0:
        return 100
    return int(min(scroll, max_scroll) / max_scroll * 100 + 0.5)


def render_export(ctx: RenderContext) -> str:
    """Draw the export panel.

    ``state.export_scroll`` is used as given. Clamping happens in the key
    handlers, never here.
    """
    state = ctx.state
    theme = ctx.theme
    height = state.term_height
    cw = content_width(state.term_width)
    panel_bg = bg(theme.panel)

    mods = modified_count(state)
    title = "⎗  configuration.nix"
    if mods > 0:
        title += "  " + fg(theme.mod) + BOLD + f"{mods} changes" + RESET
    out = [draw_panel(1, CONTENT_COL, cw, height - 2, theme, title, STYLE_ACCENT)]

    lines = config_lines(state)
    visible = export_visible_lines(height)
    scroll = max(0, state.export_scroll)
    window = lines[scroll : scroll + visible]
    for offset, line in enumerate(highlight_lines(window, theme)):
        number = f"{scroll + offset + 1:>3}"
        out.append(
            pos(3 + offset, CONTENT_COL + 2)
            + panel_bg
            + DIM
            + fg(theme.muted)
            + number
            + " "
            + RESET
            + panel_bg
            + clip(line, cw - 8)
            + RESET
        )

    out.append(pos(height - 3, CONTENT_COL + 2) + panel_bg + fg(theme.muted))
    total = len(lines)
    if total > visible:
        last = min(scroll + visible, total)
        pct = scroll_percent(scroll, export_max_scroll(total, height))
        position = f"lines {scroll + 1}–{last}/{total} ({pct}%)"
        footer = f"↑↓/PgUp/PgDn  g/G top/btm  {position}  W=save"
        if visible_width(footer) > cw - 4:
            footer = f"{position}  W=save"
    else:
        footer = f"{total} lines  ·  W = save to {ctx.output_path}  ·  Tab → Settings"
    out.append(clip(footer, cw - 4) + RESET)
    return "".join(out)


__all__ = ["render_export", "scroll_percent"]
