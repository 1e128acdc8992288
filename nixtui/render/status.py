"""Bottom status bar and the keyboard help overlay."""

from __future__ import annotations

from ..ansi import BOLD, RESET, bg, clip, fg, pad, pos, visible_width
from ..state import (
    SCREEN_EXPORT,
    SCREEN_HOME,
    SCREEN_SETTINGS,
    SCREEN_TUTORIAL_DETAIL,
    SCREEN_TUTORIALS,
    SEVERITY_ERR,
    SEVERITY_OK,
    SEVERITY_WARN,
)
from .context import RenderContext
from .panel import STYLE_DOUBLE, draw_panel

SCREEN_HINTS = {
    SCREEN_HOME: "s Settings  t Tutorials  e Export  q Quit  ? Help",
    SCREEN_SETTINGS: "↑↓ Item  ←→ Toggle/Cycle  Tab Pane  Enter Select  R Reset  ? Help",
    SCREEN_TUTORIALS: "↑↓ Select  Enter Open  q Back",
    SCREEN_TUTORIAL_DETAIL: "← → Steps  Esc Back  q Quit",
    SCREEN_EXPORT: "↑↓/PgUp/PgDn Scroll  g/G Top/Bot  W Save  Tab→Settings  q Back",
}

HELP_WIDTH = 58
HELP_HEIGHT = 30
# Left margin, key column and gap before each description.
HELP_KEY_COLUMNS = 26


def severity_color(severity: str, theme):
    if severity == SEVERITY_OK:
        return theme.alt
    if severity == SEVERITY_WARN:
        return theme.warn
    if severity == SEVERITY_ERR:
        return theme.err
    return theme.muted


def render_status_bar(ctx: RenderContext) -> str:
    state = ctx.state
    theme = ctx.theme
    width = state.term_width
    right = f"  {state.status_message}  " if state.status_message else "  "
    # The message wins over the hints when the row is short.
    right = clip(right, width - 1)
    hints_width = max(0, width - visible_width(right) - 1)
    hints = pad(clip(SCREEN_HINTS.get(state.screen, ""), hints_width), hints_width)
    return (
        pos(state.term_height - 1, 1)
        + bg(theme.border)
        + fg(theme.bg)
        + BOLD
        + " "
        + hints
        + RESET
        + bg(theme.border)
        + fg(severity_color(state.status_severity, theme))
        + right
        + RESET
    )


def help_entries(output_path) -> tuple[tuple[str, str], ...]:
    """Rows of the help overlay; a row with no description is a group heading."""
    return (
        ("Navigation", ""),
        ("↑ / k", "Move up"),
        ("↓ / j", "Move down"),
        ("← / h", "Prev section · back · cycle enum backward"),
        ("→ / l", "Next section · forward · cycle enum forward"),
        ("Tab", "Switch focus  nav ↔ content"),
        ("Enter / Space", "Select · toggle · confirm edit"),
        ("Esc", "Go back · cancel edit"),
        ("Ctrl+C", "Quit from anywhere"),
        ("", ""),
        ("Global", ""),
        ("s", "Go to Settings"),
        ("t", "Go to Tutorials"),
        ("e", "Go to Export"),
        ("q", "Back / quit"),
        ("?", "Toggle this help"),
        ("", ""),
        ("Settings", ""),
        ("← →", "Toggle bool  |  Cycle enum  |  ±1 number"),
        ("Enter", "Edit string / number field  |  toggle bool"),
        ("Tab", "Switch nav pane ↔ content pane"),
        ("R", "Reset current section to defaults"),
        ("", ""),
        ("Export", ""),
        ("↑ ↓ / PgUp PgDn", "Scroll config preview"),
        ("g / G", "Jump to top / bottom"),
        ("W", f"Write config to {output_path}"),
        ("Tab", "Jump to Settings"),
    )


def help_width(entries, term_width: int) -> int:
    """Overlay width: at least ``HELP_WIDTH``, wide enough for the longest row, within the terminal."""
    needed = HELP_KEY_COLUMNS + 2 + max(visible_width(description) for _, description in entries)
    return max(1, min(term_width - 2, max(HELP_WIDTH, needed)))


def render_help(ctx: RenderContext) -> str:
    state = ctx.state
    theme = ctx.theme
    panel_bg = bg(theme.panel)
    entries = help_entries(ctx.output_path)
    width = help_width(entries, state.term_width)
    row = max(1, (state.term_height - HELP_HEIGHT) // 2)
    col = max(1, (state.term_width - width) // 2)
    height = min(HELP_HEIGHT, state.term_height - row)
    out = [draw_panel(row, col, width, height, theme, " Keyboard Shortcuts ", STYLE_DOUBLE)]

    for index, (key, description) in enumerate(entries[: max(0, height - 3)]):
        out.append(pos(row + 1 + index, col + 2) + panel_bg)
        if not description:
            out.append(BOLD + fg(theme.accent) + "  " + key + RESET)
        else:
            out.append(
                fg(theme.sel_text)
                + BOLD
                + "  "
                + pad(key, 22)
                + RESET
                + panel_bg
                + fg(theme.muted)
                + clip(description, width - HELP_KEY_COLUMNS - 2)
                + RESET
            )

    out.append(pos(row + height - 2, col + 2) + panel_bg + fg(theme.muted) + "  Press ? or Esc to close" + RESET)
    return "".join(out)


__all__ = ["SCREEN_HINTS", "help_entries", "help_width", "render_help", "render_status_bar", "severity_color"]
