"""Frame composition for the settings/tutorial TUI.

Every event triggers one full redraw: a composed frame string is built from
the active screen renderer, the status bar, and the optional help overlay,
then written to stdout in a single call. Renderers only read state.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from ..ansi import BOLD, CLEAR, HIDE_CURSOR, RESET, bg, fg, pos
from ..layout import MIN_HEIGHT, MIN_WIDTH, is_too_small
from ..state import (
    SCREEN_EXPORT,
    SCREEN_HOME,
    SCREEN_SETTINGS,
    SCREEN_TUTORIAL_DETAIL,
    SCREEN_TUTORIALS,
    AppState,
)
from ..ui_theme import DEFAULT_THEME, UITheme
from .context import DEFAULT_OUTPUT_PATH, RenderContext
from .export import render_export
from .home import render_home
from .settings import render_settings
from .sidebar import render_sidebar
from .status import render_help, render_status_bar
from .tutorials import render_tutorial_detail, render_tutorial_list

TOO_SMALL_TITLE = "Terminal too small!"

CONTENT_RENDERERS = {
    SCREEN_SETTINGS: render_settings,
    SCREEN_TUTORIALS: render_tutorial_list,
    SCREEN_TUTORIAL_DETAIL: render_tutorial_detail,
    SCREEN_EXPORT: render_export,
}


def render_too_small(ctx: RenderContext) -> str:
    state = ctx.state
    theme = ctx.theme
    return (
        CLEAR
        + pos(1, 1)
        + fg(theme.err)
        + BOLD
        + TOO_SMALL_TITLE
        + RESET
        + pos(2, 1)
        + f"Need at least {MIN_WIDTH}×{MIN_HEIGHT}"
        + pos(3, 1)
        + f"Current: {state.term_width}×{state.term_height}"
    )


def render_frame(ctx: RenderContext) -> str:
    """Compose one complete frame for ``ctx.state``."""
    state = ctx.state
    if is_too_small(state.term_width, state.term_height):
        return render_too_small(ctx)

    out = [HIDE_CURSOR, bg(ctx.theme.bg), CLEAR]
    if state.screen == SCREEN_HOME:
        out.append(render_home(ctx))
    else:
        out.append(render_sidebar(ctx))
        content = CONTENT_RENDERERS.get(state.screen)
        if content is not None:
            out.append(content(ctx))
    out.append(render_status_bar(ctx))
    if state.help_visible:
        out.append(render_help(ctx))
    out.append(pos(state.term_height, 1))
    return "".join(out)


def compose_frame(
    state: AppState,
    threads: int = 1,
    theme: UITheme = DEFAULT_THEME,
    output_path: Path = DEFAULT_OUTPUT_PATH,
) -> str:
    return render_frame(RenderContext(state=state, theme=theme, threads=threads, output_path=output_path))


def draw(ctx: RenderContext, stdout_fd: int | None = None) -> None:
    """Write one composed frame to the terminal."""
    fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
    os.write(fd, render_frame(ctx).encode("utf-8", errors="replace"))


__all__ = [
    "RenderContext",
    "TOO_SMALL_TITLE",
    "compose_frame",
    "draw",
    "render_frame",
    "render_too_small",
]
