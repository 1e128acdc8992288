"""Tutorial list cards and the step-by-step detail view."""

from __future__ import annotations

from ..ansi import BOLD, DIM, RESET, bg, clip, fg, pad, pos
from ..catalog import TUTORIALS
from ..highlight import highlight_lines
from ..layout import CONTENT_COL, TUTORIAL_CARD_HEIGHT, content_width
from ..state import current_tutorial
from .context import RenderContext
from .panel import draw_panel
from .sidebar import difficulty_color

BAR_FULL = "█"
BAR_EMPTY = "░"
BULLET = "◆"
DONE_MARK = "✓"
LABEL_COLUMNS = 30
DIFFICULTY_COLUMNS = 12


def render_tutorial_list(ctx: RenderContext) -> str:
    state = ctx.state
    theme = ctx.theme
    height = state.term_height
    cw = content_width(state.term_width)
    panel_bg = bg(theme.panel)
    out = [draw_panel(1, CONTENT_COL, cw, height - 2, theme, "❄  Tutorials")]

    max_cards = max(0, (height - 5) // TUTORIAL_CARD_HEIGHT)
    for index, tutorial in enumerate(TUTORIALS[:max_cards]):
        row = 3 + index * TUTORIAL_CARD_HEIGHT
        done = tutorial.id in state.tutorials_completed
        done_tag = fg(theme.alt) + BOLD + f" {DONE_MARK}" + RESET if done else ""
        steps = f"  {len(tutorial.steps)} steps"
        # icon cell, gaps and the done tag take 10 columns besides the padded fields.
        label_width = max(8, min(LABEL_COLUMNS, cw - 4 - 10 - DIFFICULTY_COLUMNS - len(steps)))
        label_text = pad(clip(tutorial.label, label_width), label_width)

        if index == state.tutorial_index:
            label = f" {tutorial.icon}  {label_text}  {pad(tutorial.difficulty, DIFFICULTY_COLUMNS)}{steps}"
            header = bg(theme.sel) + fg(theme.sel_text) + BOLD + label + RESET + bg(theme.sel) + done_tag
        else:
            header = (
                panel_bg
                + fg(theme.muted if done else theme.text)
                + BOLD
                + f" {tutorial.icon}  "
                + label_text
                + "  "
                + fg(difficulty_color(tutorial.difficulty, theme))
                + pad(tutorial.difficulty, DIFFICULTY_COLUMNS)
                + fg(theme.muted)
                + DIM
                + steps
                + RESET
                + panel_bg
                + done_tag
                + RESET
            )
        out.append(pos(row, CONTENT_COL + 2) + clip(header, cw - 4) + RESET)
        out.append(
            pos(row + 1, CONTENT_COL + 5)
            + panel_bg
            + DIM
            + fg(theme.muted)
            + clip(tutorial.steps[0].title, cw - 7)
            + RESET
        )
        out.append(pos(row + 2, CONTENT_COL + 2) + panel_bg + DIM + fg(theme.border) + "─" * max(0, cw - 5) + RESET)

    out.append(pos(height - 3, CONTENT_COL + 2) + panel_bg + fg(theme.muted) + "Enter / → to open  ·  ↑↓ navigate" + RESET)
    return "".join(out)


def progress_fill(step: int, total: int, bar_width: int) -> int:
    """Number of filled cells after completing ``step`` (zero based) of ``total``."""
    if total <= 0 or bar_width <= 0:
        return 0
    return min(bar_width, int((step + 1) / total * bar_width + 0.5))


def render_tutorial_detail(ctx: RenderContext) -> str:
    state = ctx.state
    theme = ctx.theme
    height = state.term_height
    cw = content_width(state.term_width)
    tutorial = current_tutorial(state)
    step = tutorial.steps[state.tutorial_step]
    total = len(tutorial.steps)
    panel_bg = bg(theme.panel)

    title = f"{tutorial.icon}  {tutorial.label}  -  {state.tutorial_step + 1}/{total}"
    out = [draw_panel(1, CONTENT_COL, cw, height - 2, theme, title, focused=True)]

    bar_width = max(0, cw - 6)
    filled = progress_fill(state.tutorial_step, total, bar_width)
    out.append(
        pos(3, CONTENT_COL + 3)
        + panel_bg
        + fg(theme.accent)
        + BAR_FULL * filled
        + fg(theme.border)
        + BAR_EMPTY * (bar_width - filled)
        + RESET
    )
    out.append(
        pos(5, CONTENT_COL + 3) + panel_bg + BOLD + fg(theme.bright) + clip(f"  {BULLET}  {step.title}", cw - 6) + RESET
    )

    row = 7
    for line in step.body:
        if row > height - 12:
            break
        out.append(pos(row, CONTENT_COL + 3) + panel_bg + fg(theme.text) + "  " + clip(line, cw - 8) + RESET)
        row += 1

    if step.code and row < height - 10:
        row += 1
        code_lines = step.code.split("\n")
        box_height = len(code_lines) + 2
        if row + box_height <= height - 6:
            out.append(draw_panel(row, CONTENT_COL + 3, cw - 5, box_height, theme, "nix"))
            for offset, line in enumerate(highlight_lines(code_lines, theme)):
                out.append(pos(row + 1 + offset, CONTENT_COL + 5) + panel_bg + clip(line, cw - 9) + RESET)
            row += box_height + 1

    if step.tip and row < height - 5:
        row += 1
        out.append(
            pos(row, CONTENT_COL + 3)
            + panel_bg
            + fg(theme.warn)
            + BOLD
            + "  💡 "
            + RESET
            + panel_bg
            + fg(theme.text)
            + clip(step.tip, cw - 12)
            + RESET
        )

    if state.tutorial_step < total - 1:
        next_hint = fg(theme.accent) + "→ Continue"
    else:
        next_hint = fg(theme.alt) + BOLD + f"{DONE_MARK} Complete!"
    footer = "← prev  → next  Esc back" + "  ·  " + next_hint
    out.append(pos(height - 3, CONTENT_COL + 3) + panel_bg + fg(theme.muted) + clip(footer, cw - 6) + RESET)
    return "".join(out)


__all__ = ["progress_fill", "render_tutorial_detail", "render_tutorial_list"]
