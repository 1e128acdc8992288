"""Read-only catalogs of options and tutorials consumed by the UI."""

from .options import (
    KIND_BOOL,
    KIND_ENUM,
    KIND_NUMBER,
    KIND_STRING,
    SECTIONS,
    OptionField,
    OptionSection,
    OptionValue,
    default_values,
    field_id,
)
from .tutorials import TUTORIALS, Tutorial, TutorialStep

__all__ = [
    "KIND_BOOL",
    "KIND_ENUM",
    "KIND_NUMBER",
    "KIND_STRING",
    "SECTIONS",
    "TUTORIALS",
    "OptionField",
    "OptionSection",
    "OptionValue",
    "Tutorial",
    "TutorialStep",
    "default_values",
    "field_id",
]
