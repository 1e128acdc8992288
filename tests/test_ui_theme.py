"""Tests for theme lookup by name."""

from __future__ import annotations

import unittest

from nixtui.ui_theme import DEFAULT_THEME, SLATE_THEME, available_theme_names, normalize_theme_name, resolve_theme


class ThemeLookupTests(unittest.TestCase):
    def test_known_names_are_case_insensitive(self) -> None:
        self.assertEqual(normalize_theme_name("  Slate "), "slate")
        self.assertIs(resolve_theme("SLATE"), SLATE_THEME)

    def test_unknown_or_empty_names_fall_back_to_default(self) -> None:
        for name in (None, "", "neon"):
            with self.subTest(name=name):
                self.assertIs(resolve_theme(name), DEFAULT_THEME)

    def test_available_names_are_sorted(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "slate"))


if __name__ == "__main__":
    unittest.main()
