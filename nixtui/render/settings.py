"""Settings content pane: the option table and its context bar."""

from __future__ import annotations

from ..ansi import BOLD, DIM, RESET, REVERSE, bg, clip, fg, pad, pos, visible_width
from ..catalog import KIND_BOOL, KIND_ENUM, KIND_NUMBER, OptionField, OptionValue
from ..catalog.options import field_id
from ..confgen import nix_literal
from ..layout import CONTENT_COL, content_width, settings_scroll
from ..state import PANE_CONTENT, current_field, current_section, is_modified, value_of
from .context import RenderContext
from .panel import draw_panel

MODIFIED_MARK = "◈"
UNMODIFIED_MARK = "◇"
EDIT_BOX_WIDTH = 18
LABEL_WIDTH = 24
FIRST_ROW = 4


def _edit_window(cells: str, cursor: int, budget: int) -> tuple[int, str]:
    """Return ``(start, shown)``: the slice of ``cells`` that fits ``budget`` columns.

    The window slides right only as far as needed to keep the tail visible,
    and never past the cursor.
    """
    start = 0
    while start < cursor and visible_width(cells[start:]) > budget:
        start += 1
    shown = ""
    for ch in cells[start:]:
        if visible_width(shown + ch) > budget:
            break
        shown += ch
    return start, shown


def render_edit_box(buffer: str, cursor: int, ctx: RenderContext) -> str:
    """Render the inline text input with a reverse-video cursor cell.

    The box is always ``EDIT_BOX_WIDTH`` columns wide; long buffers scroll so
    the tail stays visible.
    """
    theme = ctx.theme
    cursor = min(max(0, cursor), len(buffer))
    # A cursor past the last character sits on a blank cell.
    cells = buffer + " " if cursor == len(buffer) else buffer
    start, shown = _edit_window(cells, cursor, EDIT_BOX_WIDTH - 2)
    at = cursor - start
    base = bg(theme.input_bg) + fg(theme.bright)
    filler = " " * max(0, EDIT_BOX_WIDTH - 1 - visible_width(shown))
    return (
        base
        + " "
        + shown[:at]
        + REVERSE
        + shown[at : at + 1]
        + RESET
        + base
        + shown[at + 1 :]
        + filler
        + RESET
    )


def format_value(option: OptionField, value: OptionValue, ctx: RenderContext) -> str:
    theme = ctx.theme
    if option.kind == KIND_BOOL:
        if value:
            return fg(theme.alt) + BOLD + "✓ on " + RESET
        return fg(theme.err) + DIM + "✗ off" + RESET
    if option.kind == KIND_NUMBER:
        return fg(theme.warn) + BOLD + nix_literal(value) + RESET
    return fg(theme.accent) + f'"{value}"' + RESET


def render_settings(ctx: RenderContext) -> str:
    state = ctx.state
    theme = ctx.theme
    height = state.term_height
    cw = content_width(state.term_width)
    section = current_section(state)
    panel_bg = bg(theme.panel)

    out = [
        draw_panel(
            1, CONTENT_COL, cw, height - 4, theme, f"{section.icon}  {section.label}",
            focused=state.focus_pane == PANE_CONTENT,
        )
    ]
    header = "  " + pad("Setting", LABEL_WIDTH) + "  " + pad("Value", 20) + "  Nix Option"
    out.append(pos(2, CONTENT_COL + 1) + panel_bg + DIM + fg(theme.muted) + clip(header, cw - 2) + RESET)
    out.append(pos(3, CONTENT_COL + 1) + panel_bg + fg(theme.border) + " " + "─" * max(0, cw - 3) + RESET)

    scroll = settings_scroll(state.field_index, height)
    for index, option in enumerate(section.fields):
        row = FIRST_ROW + index - scroll
        if row < FIRST_ROW or row > height - 5:
            continue
        out.append(pos(row, CONTENT_COL + 1) + clip(_field_row(ctx, section, option, index, cw), cw - 2) + RESET)

    out.append(_context_bar(ctx, cw))
    return "".join(out)


def _field_row(ctx: RenderContext, section, option: OptionField, index: int, cw: int) -> str:
    state = ctx.state
    theme = ctx.theme
    active = index == state.field_index
    modified = is_modified(state, section, option)
    mark = (MODIFIED_MARK if modified else UNMODIFIED_MARK) + " "
    if active and state.editing and option.editable:
        value_text = render_edit_box(state.edit_buffer, state.edit_cursor, ctx)
    else:
        value_text = format_value(option, value_of(state, section, option), ctx)
    description = clip(option.description, cw - 53)

    if active and state.focus_pane == PANE_CONTENT:
        sel_bg = bg(theme.sel)
        return (
            sel_bg
            + fg(theme.mod if modified else theme.muted)
            + mark
            + fg(theme.sel_text)
            + BOLD
            + pad(f" › {option.label}", LABEL_WIDTH + 1)
            + "  "
            + RESET
            + sel_bg
            + value_text
            + sel_bg
            + fg(theme.sel_text)
            + DIM
            + "  "
            + description
            + RESET
        )
    panel_bg = bg(theme.panel)
    return (
        panel_bg
        + fg(theme.mod if modified else theme.border)
        + mark
        + fg(theme.text)
        + pad(f"  {option.label}", LABEL_WIDTH)
        + "  "
        + RESET
        + panel_bg
        + value_text
        + panel_bg
        + fg(theme.muted)
        + DIM
        + "  "
        + description
        + RESET
    )


def _context_bar(ctx: RenderContext, cw: int) -> str:
    """Describe the selected field and how to change it."""
    state = ctx.state
    theme = ctx.theme
    section = current_section(state)
    option = current_field(state)
    value = value_of(state, section, option)
    row = state.term_height - 3
    panel_bg = bg(theme.panel)

    prefix = draw_panel(row, CONTENT_COL, cw, 3, theme) + pos(row + 1, CONTENT_COL + 2) + panel_bg
    if state.editing:
        body = (
            fg(theme.warn) + BOLD + "✎ Editing - " + RESET + panel_bg
            + fg(theme.accent) + field_id(section, option) + RESET + panel_bg
            + fg(theme.muted) + "  Enter=confirm  Esc=cancel" + RESET
        )
        return prefix + clip(body, cw - 4) + RESET

    summary = (
        fg(theme.accent) + option.key + RESET + panel_bg
        + fg(theme.muted) + " = " + fg(theme.bright) + nix_literal(value) + RESET + panel_bg
    )
    if option.kind == KIND_ENUM and option.choices:
        choices = (fg(theme.muted) + " | ").join(
            fg(theme.accent) + BOLD + choice + RESET + panel_bg + fg(theme.muted) if choice == value else choice
            for choice in option.choices
        )
        hint = fg(theme.muted) + "   [ " + choices + fg(theme.muted) + " ]"
    elif option.kind == KIND_BOOL:
        hint = fg(theme.muted) + "   ← → or Space to toggle"
    elif option.kind == KIND_NUMBER:
        low = nix_literal(option.minimum) if option.minimum is not None else "-inf"
        high = nix_literal(option.maximum) if option.maximum is not None else "inf"
        hint = fg(theme.muted) + f"   range: {low}…{high}  ← -1  → +1  Enter edit"
    else:
        placeholder = f"({option.placeholder})" if option.placeholder else ""
        hint = fg(theme.muted) + "   Enter to edit  " + placeholder
    return prefix + clip(summary + hint, cw - 4) + RESET


__all__ = ["format_value", "render_edit_box", "render_settings"]
