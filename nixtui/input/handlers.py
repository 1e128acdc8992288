"""Screen-specific key handling.

``handle_key`` applies one ``KeyPress`` to ``AppState`` and returns ``True``
when the application should quit. Handlers are the only code that clamps
scroll offsets and the only code that changes option values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..catalog import KIND_BOOL, KIND_ENUM, KIND_NUMBER, SECTIONS, TUTORIALS, OptionField, OptionSection
from ..catalog.options import field_id
from ..confgen import nix_literal
from ..layout import export_max_scroll, export_page_size
from ..render.context import DEFAULT_OUTPUT_PATH
from ..state import (
    PANE_CONTENT,
    PANE_NAV,
    SCREEN_EXPORT,
    SCREEN_HOME,
    SCREEN_SETTINGS,
    SCREEN_TUTORIAL_DETAIL,
    SCREEN_TUTORIALS,
    SEVERITY_ERR,
    SEVERITY_INFO,
    SEVERITY_OK,
    SEVERITY_WARN,
    AppState,
    config_lines,
    current_field,
    current_section,
    current_tutorial,
    set_value,
    value_of,
)
from ..status import set_status
from ..validation import ValidationError, validate_edit
from .key_registry import KeyBinding, KeyMap
from .reader import (
    BACKSPACE,
    CTRL_C,
    DOWN,
    END,
    ENTER,
    ESCAPE,
    HOME,
    LEFT,
    PAGE_DOWN,
    PAGE_UP,
    RIGHT,
    TAB,
    UP,
    KeyPress,
)

logger = logging.getLogger(__name__)

SPACE = " "


@dataclass(frozen=True)
class KeyContext:
    """Environment the handlers need beyond ``AppState``."""

    output_path: Path = DEFAULT_OUTPUT_PATH


def handle_key(state: AppState, key: KeyPress, ctx: KeyContext | None = None) -> bool:
    """Apply ``key`` to ``state``; return ``True`` when the app should quit."""
    if ctx is None:
        ctx = KeyContext()
    if key.key == CTRL_C:
        return True

    if key.key == "?" and not state.editing:
        state.help_visible = not state.help_visible
        return False
    if state.help_visible:
        if key.key in {ESCAPE, "q"}:
            state.help_visible = False
        return False

    if state.editing:
        _handle_edit_key(state, key)
        return False

    if state.screen == SCREEN_HOME:
        return _handle_home_key(state, key)

    # q / Esc go one level back; tutorial detail handles its own.
    if state.screen != SCREEN_TUTORIAL_DETAIL and key.key in {ESCAPE, "q"}:
        state.screen = SCREEN_HOME
        return False

    if state.screen == SCREEN_SETTINGS:
        _handle_settings_key(state, key)
    elif state.screen == SCREEN_TUTORIALS:
        _handle_tutorials_key(state, key)
    elif state.screen == SCREEN_TUTORIAL_DETAIL:
        _handle_tutorial_detail_key(state, key)
    elif state.screen == SCREEN_EXPORT:
        _handle_export_key(state, key, ctx)
    return False


def handle_resize(state: AppState, width: int, height: int) -> None:
    """Store new terminal dimensions and re-clamp the export scroll."""
    state.term_width = width
    state.term_height = height
    total = len(config_lines(state))
    state.export_scroll = min(max(0, state.export_scroll), export_max_scroll(total, height))
    logger.debug("terminal resized to %dx%d", width, height)


# Editing


def begin_edit(state: AppState, section: OptionSection, option: OptionField) -> None:
    if not option.editable:
        return
    state.editing = True
    value = value_of(state, section, option)
    state.edit_buffer = nix_literal(value) if option.kind == KIND_NUMBER else str(value)
    state.edit_cursor = len(state.edit_buffer)


def commit_edit(state: AppState) -> bool:
    """Validate and store the edit buffer; return whether it was accepted.

    A rejected value keeps edit mode active and leaves the stored value alone.
    """
    section = current_section(state)
    option = current_field(state)
    key = field_id(section, option)
    try:
        value = validate_edit(key, option, state.edit_buffer)
    except ValidationError as exc:
        logger.info("rejected %s=%r: %s", key, state.edit_buffer, exc)
        set_status(state, str(exc), SEVERITY_WARN)
        return False
    set_value(state, section, option, value)
    state.editing = False
    if option.kind == KIND_NUMBER:
        set_status(state, f"{option.label} = {nix_literal(value)}", SEVERITY_OK)
    else:
        set_status(state, f'{option.label} = "{value}"', SEVERITY_OK)
    return True


def cancel_edit(state: AppState) -> None:
    state.editing = False
    set_status(state, "Edit cancelled")


def _insert_text(state: AppState, text: str) -> None:
    cursor = state.edit_cursor
    state.edit_buffer = state.edit_buffer[:cursor] + text + state.edit_buffer[cursor:]
    state.edit_cursor = cursor + len(text)


def _handle_edit_key(state: AppState, key: KeyPress) -> None:
    if key.key == ESCAPE:
        cancel_edit(state)
    elif key.key == ENTER:
        commit_edit(state)
    elif key.key == BACKSPACE:
        if state.edit_cursor > 0:
            cursor = state.edit_cursor
            state.edit_buffer = state.edit_buffer[: cursor - 1] + state.edit_buffer[cursor:]
            state.edit_cursor = cursor - 1
    elif key.printable:
        # Letters bound to vi directions still insert here.
        _insert_text(state, key.char)
    elif key.key == LEFT:
        state.edit_cursor = max(0, state.edit_cursor - 1)
    elif key.key == RIGHT:
        state.edit_cursor = min(len(state.edit_buffer), state.edit_cursor + 1)
    elif key.key == HOME:
        state.edit_cursor = 0
    elif key.key == END:
        state.edit_cursor = len(state.edit_buffer)


# Home


def _handle_home_key(state: AppState, key: KeyPress) -> bool:
    def open_settings() -> bool:
        state.screen = SCREEN_SETTINGS
        state.focus_pane = PANE_NAV
        return False

    def open_screen(screen: str):
        def action() -> bool:
            state.screen = screen
            return False

        return action

    bindings = KeyMap(
        KeyBinding(("s",), open_settings),
        KeyBinding(("t",), open_screen(SCREEN_TUTORIALS)),
        KeyBinding(("e",), open_screen(SCREEN_EXPORT)),
        KeyBinding(("q", ESCAPE), lambda: True),
    )
    return bool(bindings.dispatch(key))


# Settings


def toggle_bool(state: AppState, section: OptionSection, option: OptionField) -> None:
    if option.kind != KIND_BOOL:
        return
    enabled = not value_of(state, section, option)
    set_value(state, section, option, enabled)
    set_status(
        state,
        f"{option.label} → {'enabled' if enabled else 'disabled'}",
        SEVERITY_OK if enabled else SEVERITY_WARN,
    )


def adjust_setting(state: AppState, section: OptionSection, option: OptionField, direction: int) -> None:
    """Cycle an enum or step a number by ``direction`` within its range."""
    current = value_of(state, section, option)
    if option.kind == KIND_ENUM and option.choices:
        try:
            index = option.choices.index(current)
        except ValueError:
            index = -1 if direction > 0 else 0
        choice = option.choices[(index + direction) % len(option.choices)]
        set_value(state, section, option, choice)
        set_status(state, f'{option.label} = "{choice}"', SEVERITY_OK)
    elif option.kind == KIND_NUMBER:
        number = current + direction
        if option.minimum is not None:
            number = max(option.minimum, number)
        if option.maximum is not None:
            number = min(option.maximum, number)
        set_value(state, section, option, number)
        set_status(state, f"{option.label} = {nix_literal(number)}", SEVERITY_OK)


def reset_section(state: AppState, section: OptionSection) -> None:
    """Restore every field of ``section`` to its catalog default."""
    for option in section.fields:
        set_value(state, section, option, state.defaults[field_id(section, option)])
    set_status(state, f"{section.label} reset to defaults", SEVERITY_INFO)


def _move(index: int, delta: int, length: int) -> int:
    return (index + delta) % length


def _handle_settings_key(state: AppState, key: KeyPress) -> None:
    if key.key == TAB:
        state.focus_pane = PANE_CONTENT if state.focus_pane == PANE_NAV else PANE_NAV
        return
    if state.focus_pane == PANE_NAV:
        _handle_section_nav_key(state, key)
    else:
        _handle_field_key(state, key)


def _handle_section_nav_key(state: AppState, key: KeyPress) -> None:
    def enter_content() -> bool:
        state.focus_pane = PANE_CONTENT
        state.field_index = 0
        return False

    def move_section(delta: int):
        def action() -> bool:
            state.section_index = _move(state.section_index, delta, len(SECTIONS))
            state.field_index = 0
            return False

        return action

    KeyMap(
        KeyBinding((UP,), move_section(-1)),
        KeyBinding((DOWN,), move_section(1)),
        KeyBinding((ENTER, RIGHT), enter_content),
    ).dispatch(key)


def _handle_field_key(state: AppState, key: KeyPress) -> None:
    section = current_section(state)
    option = current_field(state)

    def move_field(delta: int):
        def action() -> bool:
            state.field_index = _move(state.field_index, delta, len(section.fields))
            return False

        return action

    def left() -> bool:
        if option.kind == KIND_BOOL:
            toggle_bool(state, section, option)
        elif option.kind in {KIND_ENUM, KIND_NUMBER}:
            adjust_setting(state, section, option, -1)
        else:
            state.focus_pane = PANE_NAV
        return False

    def right() -> bool:
        if option.kind == KIND_BOOL:
            toggle_bool(state, section, option)
        elif option.kind in {KIND_ENUM, KIND_NUMBER}:
            adjust_setting(state, section, option, 1)
        return False

    def space() -> bool:
        if option.kind == KIND_BOOL:
            toggle_bool(state, section, option)
        elif option.kind == KIND_ENUM:
            adjust_setting(state, section, option, 1)
        return False

    def enter() -> bool:
        if option.editable:
            begin_edit(state, section, option)
        elif option.kind == KIND_ENUM:
            adjust_setting(state, section, option, 1)
        else:
            toggle_bool(state, section, option)
        return False

    def reset() -> bool:
        reset_section(state, section)
        return False

    KeyMap(
        KeyBinding((UP,), move_field(-1)),
        KeyBinding((DOWN,), move_field(1)),
        KeyBinding((LEFT,), left),
        KeyBinding((RIGHT,), right),
        KeyBinding((SPACE,), space),
        KeyBinding((ENTER,), enter),
        KeyBinding(("r",), reset, ignore_case=True),
    ).dispatch(key)


# Tutorials


def _handle_tutorials_key(state: AppState, key: KeyPress) -> None:
    def move(delta: int):
        def action() -> bool:
            state.tutorial_index = _move(state.tutorial_index, delta, len(TUTORIALS))
            return False

        return action

    def open_detail() -> bool:
        state.screen = SCREEN_TUTORIAL_DETAIL
        state.tutorial_step = 0
        return False

    KeyMap(
        KeyBinding((UP,), move(-1)),
        KeyBinding((DOWN,), move(1)),
        KeyBinding((ENTER, RIGHT, SPACE), open_detail),
    ).dispatch(key)


def advance_tutorial(state: AppState) -> None:
    """Step forward; past the last step, mark the tutorial complete."""
    tutorial = current_tutorial(state)
    if state.tutorial_step < len(tutorial.steps) - 1:
        state.tutorial_step += 1
        return
    state.tutorials_completed.add(tutorial.id)
    set_status(state, f'✓ "{tutorial.label}" complete!', SEVERITY_OK)


def _handle_tutorial_detail_key(state: AppState, key: KeyPress) -> None:
    def forward() -> bool:
        advance_tutorial(state)
        return False

    def back() -> bool:
        if state.tutorial_step > 0:
            state.tutorial_step -= 1
        return False

    def close() -> bool:
        state.screen = SCREEN_TUTORIALS
        return False

    KeyMap(
        KeyBinding((RIGHT, ENTER, SPACE), forward),
        KeyBinding((LEFT,), back),
        KeyBinding((ESCAPE, "q"), close),
    ).dispatch(key)


# Export


def scroll_export(state: AppState, delta: int) -> None:
    total = len(config_lines(state))
    max_scroll = export_max_scroll(total, state.term_height)
    state.export_scroll = min(max_scroll, max(0, state.export_scroll + delta))


def save_config(state: AppState, path: Path) -> bool:
    """Write the generated config to ``path`` and report the outcome in the status bar."""
    lines = config_lines(state)
    try:
        Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("saving %s failed: %s", path, exc)
        set_status(state, f"✗ Save failed: {exc.strerror or exc}", SEVERITY_ERR)
        return False
    logger.info("saved %d lines to %s", len(lines), path)
    set_status(state, f"✓ Saved {len(lines)} lines → {path}", SEVERITY_OK)
    return True


def _handle_export_key(state: AppState, key: KeyPress, ctx: KeyContext) -> None:
    page = export_page_size(state.term_height)

    def scroll(delta: int):
        def action() -> bool:
            scroll_export(state, delta)
            return False

        return action

    def top() -> bool:
        state.export_scroll = 0
        return False

    def bottom() -> bool:
        state.export_scroll = export_max_scroll(len(config_lines(state)), state.term_height)
        return False

    def save() -> bool:
        save_config(state, ctx.output_path)
        return False

    def to_settings() -> bool:
        state.screen = SCREEN_SETTINGS
        state.focus_pane = PANE_NAV
        return False

    KeyMap(
        KeyBinding((UP,), scroll(-1)),
        KeyBinding((DOWN,), scroll(1)),
        KeyBinding((PAGE_UP,), scroll(-page)),
        KeyBinding((PAGE_DOWN,), scroll(page)),
        KeyBinding(("g", HOME), top),
        KeyBinding(("G", END), bottom),
        KeyBinding((TAB,), to_settings),
        KeyBinding(("w",), save, ignore_case=True),
    ).dispatch(key)


__all__ = [
    "KeyContext",
    "adjust_setting",
    "advance_tutorial",
    "begin_edit",
    "cancel_edit",
    "commit_edit",
    "handle_key",
    "handle_resize",
    "reset_section",
    "save_config",
    "scroll_export",
    "toggle_bool",
]
