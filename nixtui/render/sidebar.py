"""Left navigation column shown on every screen except home."""

from __future__ import annotations

from ..ansi import BOLD, DIM, RESET, bg, clip, fg, pad, pos
from ..catalog import SECTIONS, TUTORIALS
from ..catalog.tutorials import BEGINNER, INTERMEDIATE
from ..layout import SIDEBAR_WIDTH
from ..state import (
    PANE_NAV,
    SCREEN_EXPORT,
    SCREEN_HOME,
    SCREEN_SETTINGS,
    SCREEN_TUTORIAL_DETAIL,
    SCREEN_TUTORIALS,
    section_modified_count,
)
from ..ui_theme import UITheme
from .context import RenderContext
from .panel import STYLE_DOUBLE, draw_panel

NAV_ITEMS: tuple[tuple[str, str, str], ...] = (
    ("Home", SCREEN_HOME, "⌂"),
    ("Settings", SCREEN_SETTINGS, "⚙"),
    ("Tutorials", SCREEN_TUTORIALS, "❄"),
    ("Export", SCREEN_EXPORT, "⎗"),
)
LIST_TOP_ROW = 9
# Columns between the borders.
INNER_WIDTH = SIDEBAR_WIDTH - 2


def difficulty_color(difficulty: str, theme: UITheme):
    if difficulty == BEGINNER:
        return theme.alt
    if difficulty == INTERMEDIATE:
        return theme.accent
    return theme.warn


def render_sidebar(ctx: RenderContext) -> str:
    state = ctx.state
    theme = ctx.theme
    panel_bg = bg(theme.panel)
    out = [draw_panel(1, 1, SIDEBAR_WIDTH, state.term_height - 2, theme, "NIXOS TUI", STYLE_DOUBLE)]

    out.append(pos(2, 2) + panel_bg + DIM + fg(theme.muted) + " Navigation" + RESET)
    for index, (label, screen, icon) in enumerate(NAV_ITEMS):
        active = state.screen == screen or (state.screen == SCREEN_TUTORIAL_DETAIL and screen == SCREEN_TUTORIALS)
        text = clip(f" {icon} {pad(label, INNER_WIDTH - 4)}", INNER_WIDTH)
        if active:
            out.append(pos(3 + index, 2) + bg(theme.sel) + fg(theme.sel_text) + BOLD + text + RESET)
        else:
            out.append(pos(3 + index, 2) + panel_bg + fg(theme.muted) + text + RESET)

    max_items = max(0, state.term_height - 13)
    if state.screen == SCREEN_SETTINGS:
        out.append(pos(LIST_TOP_ROW - 1, 2) + panel_bg + DIM + fg(theme.muted) + " Sections" + RESET)
        for index, section in enumerate(SECTIONS[:max_items]):
            out.append(pos(LIST_TOP_ROW + index, 2) + _section_row(ctx, index, section))
    elif state.screen in {SCREEN_TUTORIALS, SCREEN_TUTORIAL_DETAIL}:
        out.append(pos(LIST_TOP_ROW - 1, 2) + panel_bg + DIM + fg(theme.muted) + " Guides" + RESET)
        for index, tutorial in enumerate(TUTORIALS[:max_items]):
            text = clip(f" {tutorial.icon} {pad(tutorial.label, INNER_WIDTH - 4)}", INNER_WIDTH)
            if index == state.tutorial_index:
                row = bg(theme.sel) + fg(theme.sel_text) + BOLD + text + RESET
            else:
                row = panel_bg + fg(difficulty_color(tutorial.difficulty, theme)) + text + RESET
            out.append(pos(LIST_TOP_ROW + index, 2) + row)
    return "".join(out)


def _section_row(ctx: RenderContext, index: int, section) -> str:
    state = ctx.state
    theme = ctx.theme
    panel_bg = bg(theme.panel)
    active = index == state.section_index
    selected = active and state.focus_pane == PANE_NAV
    mods = section_modified_count(state, section)
    badge = ""
    if mods > 0:
        badge = ("" if selected else RESET + panel_bg) + fg(theme.mod) + BOLD + f" {mods}" + RESET
    # Three columns stay free for the modified-count badge.
    text = f" {section.icon} {pad(section.label, INNER_WIDTH - 7)}"
    if selected:
        row = bg(theme.sel) + fg(theme.sel_text) + BOLD + text + badge
    elif active:
        row = panel_bg + fg(theme.accent) + BOLD + text + badge
    else:
        row = panel_bg + fg(theme.muted) + text + badge
    return clip(row, INNER_WIDTH) + RESET


__all__ = ["difficulty_color", "render_sidebar"]
