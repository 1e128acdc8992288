"""Tests for the application state record and its config cache."""

from __future__ import annotations

import unittest
from types import MappingProxyType

from nixtui.catalog import KIND_BOOL, SECTIONS, OptionField, OptionSection
from nixtui.confgen import generate_config
from nixtui.state import (
    PANE_NAV,
    READY_MESSAGE,
    SCREEN_HOME,
    config_lines,
    current_field,
    current_section,
    is_modified,
    modified_count,
    new_state,
    section_modified_count,
    set_value,
)


def _system():
    return next(section for section in SECTIONS if section.id == "system")


def _field(section, key):
    return next(option for option in section.fields if option.key == key)


class CountingGenerator:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, values):
        self.calls += 1
        return generate_config(values)


class NewStateTests(unittest.TestCase):
    def test_initial_state(self) -> None:
        state = new_state(100, 30)
        self.assertEqual(state.screen, SCREEN_HOME)
        self.assertEqual(state.focus_pane, PANE_NAV)
        self.assertEqual(
            (state.section_index, state.field_index, state.tutorial_index, state.tutorial_step), (0, 0, 0, 0)
        )
        self.assertFalse(state.editing)
        self.assertFalse(state.help_visible)
        self.assertEqual((state.term_width, state.term_height), (100, 30))
        self.assertEqual(state.status_message, READY_MESSAGE)
        self.assertIsNone(state.config_cache)

    def test_values_are_a_mutable_clone_of_read_only_defaults(self) -> None:
        state = new_state()
        self.assertIsInstance(state.defaults, MappingProxyType)
        self.assertEqual(state.values, dict(state.defaults))
        self.assertIsNot(state.values, state.defaults)
        with self.assertRaises(TypeError):
            state.defaults["system.hostname"] = "x"  # type: ignore[index]

    def test_current_section_and_field_follow_cursors(self) -> None:
        state = new_state()
        state.section_index = 1
        state.field_index = 0
        self.assertEqual(current_section(state).id, "system")
        self.assertEqual(current_field(state).key, "hostname")


class ConfigCacheTests(unittest.TestCase):
    def test_repeated_reads_generate_once(self) -> None:
        generator = CountingGenerator()
        state = new_state(config_generator=generator)
        first = config_lines(state)
        second = config_lines(state)
        self.assertEqual(first, second)
        self.assertIs(first, second)
        self.assertEqual(generator.calls, 1)

    def test_mutation_invalidates_and_next_read_reflects_it(self) -> None:
        generator = CountingGenerator()
        state = new_state(config_generator=generator)
        config_lines(state)
        system = _system()
        set_value(state, system, _field(system, "hostname"), "web01")
        self.assertIsNone(state.config_cache)
        lines = config_lines(state)
        self.assertEqual(generator.calls, 2)
        self.assertTrue(any('networking.hostName = "web01";' in line for line in lines))

    def test_generator_receives_read_only_values(self) -> None:
        seen = []

        def generator(values):
            seen.append(values)
            return []

        state = new_state(config_generator=generator)
        config_lines(state)
        self.assertIsInstance(seen[0], MappingProxyType)


class ValueTests(unittest.TestCase):
    def test_set_value_rejects_unknown_fields_and_keeps_key_sets_equal(self) -> None:
        state = new_state()
        bogus_section = OptionSection(id="bogus", icon="", label="Bogus", fields=())
        bogus_field = OptionField("x", "X", KIND_BOOL, False, "")
        with self.assertRaises(KeyError):
            set_value(state, bogus_section, bogus_field, True)
        self.assertEqual(set(state.values), set(state.defaults))

    def test_modified_counts(self) -> None:
        state = new_state()
        system = _system()
        self.assertEqual(modified_count(state), 0)
        set_value(state, system, _field(system, "flakes"), False)
        set_value(state, system, _field(system, "gcDays"), 10)
        self.assertTrue(is_modified(state, system, _field(system, "flakes")))
        self.assertEqual(section_modified_count(state, system), 2)
        self.assertEqual(modified_count(state), 2)
        set_value(state, system, _field(system, "gcDays"), 30)
        self.assertEqual(modified_count(state), 1)


if __name__ == "__main__":
    unittest.main()
