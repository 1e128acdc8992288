"""Dispatcher behavior across screens, the help overlay, and inline editing.

Each test drives ``handle_key`` with raw chunks the way the event loop does.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from nixtui.catalog import SECTIONS, TUTORIALS
from nixtui.input import KeyContext, classify_chunk, handle_key, handle_resize
from nixtui.layout import export_visible_lines
from nixtui.state import (
    PANE_CONTENT,
    PANE_NAV,
    SCREEN_EXPORT,
    SCREEN_HOME,
    SCREEN_SETTINGS,
    SCREEN_TUTORIAL_DETAIL,
    SCREEN_TUTORIALS,
    SEVERITY_ERR,
    SEVERITY_OK,
    SEVERITY_WARN,
    config_lines,
    current_field,
    is_modified,
    new_state,
    section_modified_count,
)

UP = b"\x1b[A"
DOWN = b"\x1b[B"
RIGHT = b"\x1b[C"
LEFT = b"\x1b[D"
ENTER = b"\r"
ESC = b"\x1b"
BACKSPACE = b"\x7f"
TAB = b"\t"
CTRL_C = b"\x03"
PAGE_DOWN = b"\x1b[6~"


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def press(state, *chunks: bytes, ctx: KeyContext | None = None) -> list[bool]:
    return [handle_key(state, classify_chunk(chunk), ctx) for chunk in chunks]


def type_text(state, text: str) -> None:
    press(state, *(ch.encode() for ch in text))


def _state(width: int = 120, height: int = 40):
    return new_state(width, height, clock=FakeClock())


def _open_field(state, section_index: int, field_index: int) -> None:
    """Navigate from home to a field in the settings content pane."""
    press(state, b"s")
    press(state, *([DOWN] * section_index))
    press(state, ENTER)
    press(state, *([DOWN] * field_index))


def _section(section_id: str):
    return next(section for section in SECTIONS if section.id == section_id)


def _index_of(section_id: str, key: str) -> tuple[int, int]:
    section_index = next(i for i, section in enumerate(SECTIONS) if section.id == section_id)
    field_index = next(i for i, option in enumerate(SECTIONS[section_index].fields) if option.key == key)
    return section_index, field_index


class HostnameScenarioTests(unittest.TestCase):
    def setUp(self) -> None:
        self.state = _state()
        _open_field(self.state, *_index_of("system", "hostname"))
        press(self.state, ENTER)

    def test_enter_snapshots_value_into_buffer(self) -> None:
        self.assertTrue(self.state.editing)
        self.assertEqual(self.state.edit_buffer, "nixos")
        self.assertEqual(self.state.edit_cursor, 5)

    def test_invalid_hostname_is_rejected_and_edit_stays_open(self) -> None:
        press(self.state, *([BACKSPACE] * 5))
        type_text(self.state, "-bad")
        press(self.state, ENTER)

        self.assertTrue(self.state.editing)
        self.assertEqual(self.state.values["system.hostname"], "nixos")
        self.assertEqual(self.state.status_severity, SEVERITY_WARN)
        self.assertEqual(self.state.status_message, "Invalid hostname (a-z 0-9 hyphens only)")

    def test_valid_hostname_commits_and_reaches_generated_config(self) -> None:
        config_lines(self.state)
        press(self.state, *([BACKSPACE] * 5))
        type_text(self.state, "web01")
        press(self.state, ENTER)

        self.assertFalse(self.state.editing)
        self.assertEqual(self.state.values["system.hostname"], "web01")
        self.assertEqual(self.state.status_severity, SEVERITY_OK)
        self.assertTrue(any('networking.hostName = "web01";' in line for line in config_lines(self.state)))

    def test_vi_letters_are_typed_while_editing(self) -> None:
        press(self.state, *([BACKSPACE] * 5))
        type_text(self.state, "hjkl1")
        self.assertEqual(self.state.edit_buffer, "hjkl1")
        press(self.state, ENTER)
        self.assertEqual(self.state.values["system.hostname"], "hjkl1")

    def test_cursor_movement_and_insert(self) -> None:
        press(self.state, LEFT, LEFT)
        self.assertEqual(self.state.edit_cursor, 3)
        type_text(self.state, "X")
        self.assertEqual(self.state.edit_buffer, "nixXos")
        self.assertEqual(self.state.edit_cursor, 4)
        press(self.state, RIGHT, RIGHT, RIGHT, RIGHT)
        self.assertEqual(self.state.edit_cursor, 6)
        press(self.state, b"\x1b[H")
        self.assertEqual(self.state.edit_cursor, 0)
        press(self.state, BACKSPACE)
        self.assertEqual(self.state.edit_buffer, "nixXos")

    def test_pasted_text_is_inserted_whole(self) -> None:
        press(self.state, *([BACKSPACE] * 5), b"web02")
        self.assertEqual(self.state.edit_buffer, "web02")
        self.assertEqual(self.state.edit_cursor, 5)

    def test_escape_cancels_without_changing_value(self) -> None:
        type_text(self.state, "zzz")
        press(self.state, ESC)
        self.assertFalse(self.state.editing)
        self.assertEqual(self.state.values["system.hostname"], "nixos")
        self.assertEqual(self.state.status_message, "Edit cancelled")
        self.assertEqual(self.state.screen, SCREEN_SETTINGS)

    def test_help_key_is_typed_while_editing(self) -> None:
        type_text(self.state, "?")
        self.assertFalse(self.state.help_visible)
        self.assertEqual(self.state.edit_buffer, "nixos?")

    def test_ctrl_c_quits_mid_edit(self) -> None:
        self.assertEqual(press(self.state, CTRL_C), [True])


class SettingsTests(unittest.TestCase):
    def test_bool_toggle_then_section_reset_restores_default(self) -> None:
        state = _state()
        _open_field(state, *_index_of("system", "flakes"))
        system = _section("system")
        option = current_field(state)
        self.assertEqual(option.key, "flakes")
        config_lines(state)

        press(state, RIGHT)
        self.assertFalse(state.values["system.flakes"])
        self.assertTrue(is_modified(state, system, option))
        self.assertIsNone(state.config_cache)

        press(state, b"R")
        self.assertTrue(state.values["system.flakes"])
        self.assertFalse(is_modified(state, system, option))
        self.assertEqual(section_modified_count(state, system), 0)
        self.assertEqual(state.status_message, "System reset to defaults")

    def test_space_and_enter_toggle_bools(self) -> None:
        state = _state()
        _open_field(state, *_index_of("system", "flakes"))
        press(state, b" ")
        self.assertFalse(state.values["system.flakes"])
        press(state, ENTER)
        self.assertTrue(state.values["system.flakes"])
        self.assertFalse(state.editing)

    def test_enum_cycles_in_both_directions_with_wraparound(self) -> None:
        state = _state()
        _open_field(state, *_index_of("user", "shell"))
        press(state, RIGHT)
        self.assertEqual(state.values["user.shell"], "zsh")
        press(state, LEFT, LEFT)
        self.assertEqual(state.values["user.shell"], "elvish")
        press(state, b" ")
        self.assertEqual(state.values["user.shell"], "bash")
        press(state, ENTER)
        self.assertEqual(state.values["user.shell"], "zsh")

    def test_number_steps_stay_in_range(self) -> None:
        state = _state()
        _open_field(state, *_index_of("system", "gcDays"))
        press(state, RIGHT)
        self.assertEqual(state.values["system.gcDays"], 31)
        state.values["system.gcDays"] = 365
        press(state, RIGHT)
        self.assertEqual(state.values["system.gcDays"], 365)

    def test_number_edit_clamps_and_rejects_garbage(self) -> None:
        state = _state()
        _open_field(state, *_index_of("system", "gcDays"))
        press(state, ENTER)
        self.assertEqual(state.edit_buffer, "30")
        press(state, BACKSPACE, BACKSPACE)
        type_text(state, "abc")
        press(state, ENTER)
        self.assertTrue(state.editing)
        self.assertEqual(state.status_message, "Invalid number")
        self.assertEqual(state.values["system.gcDays"], 30)

        press(state, BACKSPACE, BACKSPACE, BACKSPACE)
        type_text(state, "500")
        press(state, ENTER)
        self.assertFalse(state.editing)
        self.assertEqual(state.values["system.gcDays"], 365)

    def test_left_on_string_field_returns_to_nav(self) -> None:
        state = _state()
        _open_field(state, *_index_of("user", "username"))
        press(state, LEFT)
        self.assertEqual(state.focus_pane, PANE_NAV)

    def test_tab_toggles_focus_and_entering_content_resets_field(self) -> None:
        state = _state()
        press(state, b"s")
        self.assertEqual(state.focus_pane, PANE_NAV)
        press(state, TAB)
        self.assertEqual(state.focus_pane, PANE_CONTENT)
        press(state, DOWN, DOWN)
        self.assertEqual(state.field_index, 2)
        press(state, TAB, RIGHT)
        self.assertEqual(state.focus_pane, PANE_CONTENT)
        self.assertEqual(state.field_index, 0)

    def test_cursors_wrap(self) -> None:
        state = _state()
        press(state, b"s", UP)
        self.assertEqual(state.section_index, len(SECTIONS) - 1)
        press(state, DOWN)
        self.assertEqual(state.section_index, 0)
        press(state, ENTER, UP)
        self.assertEqual(state.field_index, len(SECTIONS[0].fields) - 1)

    def test_arrow_sequences_never_act_as_escape(self) -> None:
        state = _state()
        press(state, b"s", UP, DOWN, LEFT, RIGHT, b"\x1b[Z")
        self.assertEqual(state.screen, SCREEN_SETTINGS)

    def test_q_and_escape_go_back_home(self) -> None:
        state = _state()
        self.assertEqual(press(state, b"s", b"q"), [False, False])
        self.assertEqual(state.screen, SCREEN_HOME)
        press(state, b"e", ESC)
        self.assertEqual(state.screen, SCREEN_HOME)


class HomeAndHelpTests(unittest.TestCase):
    def test_accelerators(self) -> None:
        state = _state()
        press(state, b"t")
        self.assertEqual(state.screen, SCREEN_TUTORIALS)
        state.screen = SCREEN_HOME
        press(state, b"e")
        self.assertEqual(state.screen, SCREEN_EXPORT)

    def test_quit_from_home(self) -> None:
        self.assertEqual(press(_state(), b"q"), [True])
        self.assertEqual(press(_state(), ESC), [True])
        self.assertEqual(press(_state(), CTRL_C), [True])

    def test_help_overlay_swallows_other_keys(self) -> None:
        state = _state()
        press(state, b"?")
        self.assertTrue(state.help_visible)
        self.assertEqual(press(state, b"s", DOWN, ENTER), [False, False, False])
        self.assertEqual(state.screen, SCREEN_HOME)
        self.assertEqual(press(state, b"q"), [False])
        self.assertFalse(state.help_visible)

    def test_help_closes_with_escape_or_question_mark(self) -> None:
        state = _state()
        press(state, b"?", ESC)
        self.assertFalse(state.help_visible)
        press(state, b"?", b"?")
        self.assertFalse(state.help_visible)

    def test_ctrl_c_quits_with_help_open(self) -> None:
        state = _state()
        press(state, b"?")
        self.assertEqual(press(state, CTRL_C), [True])


class TutorialTests(unittest.TestCase):
    def test_open_step_through_and_complete(self) -> None:
        state = _state()
        press(state, b"t", b"j")
        self.assertEqual(state.tutorial_index, 1)
        press(state, ENTER)
        self.assertEqual(state.screen, SCREEN_TUTORIAL_DETAIL)
        self.assertEqual(state.tutorial_step, 0)

        press(state, LEFT)
        self.assertEqual(state.tutorial_step, 0)

        tutorial = TUTORIALS[1]
        press(state, *([RIGHT] * (len(tutorial.steps) - 1)))
        self.assertEqual(state.tutorial_step, len(tutorial.steps) - 1)
        self.assertNotIn(tutorial.id, state.tutorials_completed)

        press(state, RIGHT)
        self.assertEqual(state.tutorials_completed, {tutorial.id})
        self.assertEqual(state.status_severity, SEVERITY_OK)
        self.assertIn(tutorial.label, state.status_message)

        press(state, ENTER)
        self.assertEqual(state.tutorial_step, len(tutorial.steps) - 1)
        self.assertEqual(state.tutorials_completed, {tutorial.id})

    def test_back_from_detail_returns_to_list(self) -> None:
        state = _state()
        press(state, b"t", ENTER, ESC)
        self.assertEqual(state.screen, SCREEN_TUTORIALS)
        press(state, ENTER, b"q")
        self.assertEqual(state.screen, SCREEN_TUTORIALS)
        press(state, b"q")
        self.assertEqual(state.screen, SCREEN_HOME)

    def test_list_wraps(self) -> None:
        state = _state()
        press(state, b"t", UP)
        self.assertEqual(state.tutorial_index, len(TUTORIALS) - 1)


class ExportTests(unittest.TestCase):
    def setUp(self) -> None:
        self.state = _state(120, 24)
        press(self.state, b"e")
        self.total = len(config_lines(self.state))
        self.max_scroll = self.total - export_visible_lines(24)
        self.assertGreater(self.max_scroll, 0)

    def test_scrolling_is_clamped(self) -> None:
        press(self.state, UP)
        self.assertEqual(self.state.export_scroll, 0)
        press(self.state, b"G")
        self.assertEqual(self.state.export_scroll, self.max_scroll)
        press(self.state, DOWN, b"j")
        self.assertEqual(self.state.export_scroll, self.max_scroll)
        press(self.state, b"g")
        self.assertEqual(self.state.export_scroll, 0)
        press(self.state, PAGE_DOWN)
        self.assertEqual(self.state.export_scroll, min(16, self.max_scroll))

    def test_resize_reclamps_scroll(self) -> None:
        press(self.state, b"G")
        handle_resize(self.state, 150, 500)
        self.assertEqual((self.state.term_width, self.state.term_height), (150, 500))
        self.assertEqual(self.state.export_scroll, 0)

    def test_tab_jumps_to_settings(self) -> None:
        press(self.state, TAB)
        self.assertEqual(self.state.screen, SCREEN_SETTINGS)
        self.assertEqual(self.state.focus_pane, PANE_NAV)

    def test_save_writes_generated_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "configuration.nix"
            press(self.state, b"W", ctx=KeyContext(output_path=target))
            text = target.read_text(encoding="utf-8")
        self.assertEqual(text, "\n".join(config_lines(self.state)) + "\n")
        self.assertEqual(self.state.status_severity, SEVERITY_OK)
        self.assertIn(str(target), self.state.status_message)

    def test_save_failure_is_reported_not_raised(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "missing" / "configuration.nix"
            self.assertEqual(press(self.state, b"w", ctx=KeyContext(output_path=target)), [False])
            self.assertFalse(target.exists())
        self.assertEqual(self.state.status_severity, SEVERITY_ERR)
        self.assertTrue(self.state.status_message.startswith("✗ Save failed"))
        self.assertEqual(self.state.screen, SCREEN_EXPORT)


if __name__ == "__main__":
    unittest.main()
