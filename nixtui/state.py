"""Mutable application state shared by renderers and key handlers.

A single ``AppState`` is created at startup and passed by reference into
every handler and renderer. Only the input dispatcher (and the status timer,
for the status fields) writes to it.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .catalog import SECTIONS, TUTORIALS, OptionField, OptionSection, OptionValue, Tutorial, default_values, field_id
from .confgen import generate_config

SCREEN_HOME = "home"
SCREEN_SETTINGS = "settings"
SCREEN_TUTORIALS = "tutorials"
SCREEN_TUTORIAL_DETAIL = "tutorial-detail"
SCREEN_EXPORT = "export"
SCREENS = (SCREEN_HOME, SCREEN_SETTINGS, SCREEN_TUTORIALS, SCREEN_TUTORIAL_DETAIL, SCREEN_EXPORT)

PANE_NAV = "nav"
PANE_CONTENT = "content"

SEVERITY_INFO = "info"
SEVERITY_OK = "ok"
SEVERITY_WARN = "warn"
SEVERITY_ERR = "err"

READY_MESSAGE = "Ready  -  Press ? for help"
DEFAULT_STATUS_SECONDS = 3.5


@dataclass
class StatusTimer:
    """Cancellable single-shot deadline for clearing the status message."""

    deadline: float
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True

    def due(self, now: float) -> bool:
        return not self.cancelled and now >= self.deadline


@dataclass
class AppState:
    defaults: Mapping[str, OptionValue]
    values: dict[str, OptionValue]
    term_width: int = 120
    term_height: int = 40
    screen: str = SCREEN_HOME
    focus_pane: str = PANE_NAV
    section_index: int = 0
    field_index: int = 0
    editing: bool = False
    edit_buffer: str = ""
    edit_cursor: int = 0
    tutorial_index: int = 0
    tutorial_step: int = 0
    tutorials_completed: set[str] = field(default_factory=set)
    export_scroll: int = 0
    config_cache: list[str] | None = None
    config_generator: Callable[[Mapping[str, OptionValue]], list[str]] = generate_config
    help_visible: bool = False
    status_message: str = READY_MESSAGE
    status_severity: str = SEVERITY_INFO
    status_timer: StatusTimer | None = None
    status_seconds: float = DEFAULT_STATUS_SECONDS
    clock: Callable[[], float] = time.monotonic


def new_state(
    term_width: int = 120,
    term_height: int = 40,
    *,
    status_seconds: float = DEFAULT_STATUS_SECONDS,
    config_generator: Callable[[Mapping[str, OptionValue]], list[str]] = generate_config,
    clock: Callable[[], float] = time.monotonic,
) -> AppState:
    """Build the startup state with values cloned from catalog defaults."""
    defaults = default_values()
    return AppState(
        defaults=defaults,
        values=dict(defaults),
        term_width=term_width,
        term_height=term_height,
        status_seconds=status_seconds,
        config_generator=config_generator,
        clock=clock,
    )


def current_section(state: AppState) -> OptionSection:
    return SECTIONS[state.section_index]


def current_field(state: AppState) -> OptionField:
    return SECTIONS[state.section_index].fields[state.field_index]


def current_tutorial(state: AppState) -> Tutorial:
    return TUTORIALS[state.tutorial_index]


def value_of(state: AppState, section: OptionSection, option: OptionField) -> OptionValue:
    return state.values.get(field_id(section, option), option.default)


def is_modified(state: AppState, section: OptionSection, option: OptionField) -> bool:
    key = field_id(section, option)
    return state.values.get(key) != state.defaults.get(key)


def section_modified_count(state: AppState, section: OptionSection) -> int:
    return sum(1 for option in section.fields if is_modified(state, section, option))


def modified_count(state: AppState) -> int:
    return sum(section_modified_count(state, section) for section in SECTIONS)


def invalidate_config(state: AppState) -> None:
    state.config_cache = None


def set_value(state: AppState, section: OptionSection, option: OptionField, value: OptionValue) -> None:
    """Store ``value`` for ``option`` and drop the cached config text."""
    key = field_id(section, option)
    if key not in state.defaults:
        raise KeyError(key)
    state.values[key] = value
    invalidate_config(state)


def config_lines(state: AppState) -> list[str]:
    """Return generated config lines, regenerating only after invalidation."""
    if state.config_cache is None:
        state.config_cache = state.config_generator(MappingProxyType(state.values))
    return state.config_cache


__all__ = [
    "AppState",
    "DEFAULT_STATUS_SECONDS",
    "PANE_CONTENT",
    "PANE_NAV",
    "READY_MESSAGE",
    "SCREENS",
    "SCREEN_EXPORT",
    "SCREEN_HOME",
    "SCREEN_SETTINGS",
    "SCREEN_TUTORIALS",
    "SCREEN_TUTORIAL_DETAIL",
    "SEVERITY_ERR",
    "SEVERITY_INFO",
    "SEVERITY_OK",
    "SEVERITY_WARN",
    "StatusTimer",
    "config_lines",
    "current_field",
    "current_section",
    "current_tutorial",
    "invalidate_config",
    "is_modified",
    "modified_count",
    "new_state",
    "section_modified_count",
    "set_value",
    "value_of",
]
