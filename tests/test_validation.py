"""Tests for committed-edit validation rules."""

from __future__ import annotations

import unittest

from nixtui.catalog import KIND_NUMBER, KIND_STRING, SECTIONS, OptionField
from nixtui.validation import ValidationError, parse_number, validate_edit


def _field(section_id: str, key: str) -> OptionField:
    section = next(section for section in SECTIONS if section.id == section_id)
    return next(option for option in section.fields if option.key == key)


class HostnameTests(unittest.TestCase):
    def setUp(self) -> None:
        self.option = _field("system", "hostname")

    def test_accepts_rfc1123_labels(self) -> None:
        for name in ("web01", "a", "my-host", "A1", "a" * 63):
            self.assertEqual(validate_edit("system.hostname", self.option, name), name)

    def test_rejects_bad_labels(self) -> None:
        for name in ("-bad", "bad-", "under_score", "dot.ted", "a" * 64):
            with self.assertRaises(ValidationError) as ctx:
                validate_edit("system.hostname", self.option, name)
            self.assertEqual(str(ctx.exception), "Invalid hostname (a-z 0-9 hyphens only)")


class UsernameTests(unittest.TestCase):
    def setUp(self) -> None:
        self.option = _field("user", "username")

    def test_accepts_posix_names(self) -> None:
        for name in ("alice", "_svc", "bob-2", "a_b"):
            self.assertEqual(validate_edit("user.username", self.option, name), name)

    def test_rejects_other_names(self) -> None:
        for name in ("Alice", "1bob", "-x", "a" * 32):
            with self.assertRaises(ValidationError):
                validate_edit("user.username", self.option, name)


class GenericStringTests(unittest.TestCase):
    def test_empty_is_rejected_and_whitespace_trimmed(self) -> None:
        option = _field("user", "fullName")
        with self.assertRaises(ValidationError) as ctx:
            validate_edit("user.fullName", option, "   ")
        self.assertEqual(str(ctx.exception), "Value cannot be empty")
        self.assertEqual(validate_edit("user.fullName", option, "  Bob Smith "), "Bob Smith")

    def test_pattern_rules_apply_only_to_their_field(self) -> None:
        option = OptionField("note", "Note", KIND_STRING, "", "")
        self.assertEqual(validate_edit("misc.note", option, "-Anything_Goes-"), "-Anything_Goes-")


class NumberTests(unittest.TestCase):
    def setUp(self) -> None:
        self.option = _field("system", "gcDays")

    def test_integral_values_become_int(self) -> None:
        value = parse_number("42", self.option)
        self.assertEqual(value, 42)
        self.assertIsInstance(value, int)
        self.assertIsInstance(parse_number("42.0", self.option), int)

    def test_values_are_clamped_to_range(self) -> None:
        self.assertEqual(parse_number("500", self.option), 365)
        self.assertEqual(parse_number("0", self.option), 1)
        self.assertEqual(parse_number("-7", self.option), 1)

    def test_fractional_values_stay_float(self) -> None:
        self.assertEqual(parse_number("2.5", self.option), 2.5)

    def test_unbounded_numbers(self) -> None:
        option = OptionField("n", "N", KIND_NUMBER, 0, "")
        self.assertEqual(parse_number("-1000", option), -1000)

    def test_garbage_is_rejected(self) -> None:
        for text in ("abc", "", " ", "nan", "inf", "1e"):
            with self.assertRaises(ValidationError) as ctx:
                parse_number(text, self.option)
            self.assertEqual(str(ctx.exception), "Invalid number")

    def test_validate_edit_routes_numbers(self) -> None:
        self.assertEqual(validate_edit("system.gcDays", self.option, " 14 "), 14)


if __name__ == "__main__":
    unittest.main()
