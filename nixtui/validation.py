"""Validation of committed inline edits.

``validate_edit`` returns the parsed value or raises ``ValidationError``
with a message suitable for the status bar.
"""

from __future__ import annotations

import math
import re

from .catalog import KIND_NUMBER, OptionField, OptionValue

# RFC 1123 label: alphanumeric, inner hyphens, at most 63 characters.
HOSTNAME_RE = re.compile(r"^[A-Za-z0-9]([A-Za-z0-9-]{0,61}[A-Za-z0-9])?$")
# POSIX-style login name.
USERNAME_RE = re.compile(r"^[a-z_][a-z0-9_-]{0,30}$")

HOSTNAME_FIELD = "system.hostname"
USERNAME_FIELD = "user.username"


class ValidationError(ValueError):
    """Raised when an edited value is rejected."""


def parse_number(text: str, option: OptionField) -> int | float:
    """Parse ``text`` as a number clamped to the field's range."""
    try:
        number = float(text.strip())
    except ValueError:
        raise ValidationError("Invalid number") from None
    if not math.isfinite(number):
        raise ValidationError("Invalid number")
    if option.minimum is not None:
        number = max(option.minimum, number)
    if option.maximum is not None:
        number = min(option.maximum, number)
    if number.is_integer():
        return int(number)
    return number


def validate_edit(key: str, option: OptionField, text: str) -> OptionValue:
    if option.kind == KIND_NUMBER:
        return parse_number(text, option)
    value = text.strip()
    if not value:
        raise ValidationError("Value cannot be empty")
    if key == HOSTNAME_FIELD and not HOSTNAME_RE.match(value):
        raise ValidationError("Invalid hostname (a-z 0-9 hyphens only)")
    if key == USERNAME_FIELD and not USERNAME_RE.match(value):
        raise ValidationError("Invalid username (lowercase, digits, _ - only)")
    return value


__all__ = ["ValidationError", "parse_number", "validate_edit"]
