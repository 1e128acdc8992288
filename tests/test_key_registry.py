"""Tests for per-screen key maps."""

from __future__ import annotations

import unittest

from nixtui.input import KeyBinding, KeyMap, classify_chunk


class KeyMapTests(unittest.TestCase):
    def test_unbound_key_returns_none(self) -> None:
        keymap = KeyMap(KeyBinding(("s",), lambda: False))
        self.assertIsNone(keymap.dispatch(classify_chunk(b"x")))
        self.assertIs(keymap.dispatch(classify_chunk(b"s")), False)

    def test_action_result_is_coerced_to_bool(self) -> None:
        keymap = KeyMap(KeyBinding(("q",), lambda: None), KeyBinding(("Q",), lambda: 1))
        self.assertIs(keymap.dispatch(classify_chunk(b"q")), False)
        self.assertIs(keymap.dispatch(classify_chunk(b"Q")), True)

    def test_case_folding_is_per_binding(self) -> None:
        calls: list[str] = []
        keymap = KeyMap(
            KeyBinding(("w",), lambda: calls.append("save"), ignore_case=True),
            KeyBinding(("g",), lambda: calls.append("top")),
        )
        keymap.dispatch(classify_chunk(b"W"))
        keymap.dispatch(classify_chunk(b"w"))
        self.assertIsNone(keymap.dispatch(classify_chunk(b"G")))
        self.assertEqual(calls, ["save", "save"])

    def test_logical_keys_match_vi_aliases(self) -> None:
        calls: list[str] = []
        keymap = KeyMap(KeyBinding(("DOWN",), lambda: calls.append("down")))
        keymap.dispatch(classify_chunk(b"j"))
        keymap.dispatch(classify_chunk(b"\x1b[B"))
        self.assertEqual(calls, ["down", "down"])

    def test_later_binding_replaces_earlier(self) -> None:
        keymap = KeyMap(KeyBinding(("x",), lambda: False)).bind(KeyBinding(("x",), lambda: True))
        self.assertTrue(keymap.dispatch(classify_chunk(b"x")))


if __name__ == "__main__":
    unittest.main()
