"""Color palettes for the TUI and lookup by name.

Themes are 24-bit RGB palettes keyed by semantic role. Renderers never use
raw color literals; they look up roles on the active theme.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ansi import RGB


@dataclass(frozen=True)
class UITheme:
    """Semantic RGB palette used by renderers."""

    name: str
    bg: RGB
    panel: RGB
    border: RGB
    accent: RGB
    alt: RGB
    warn: RGB
    err: RGB
    muted: RGB
    text: RGB
    bright: RGB
    sel: RGB
    sel_text: RGB
    mod: RGB
    input_bg: RGB


DEFAULT_THEME = UITheme(
    name="default",
    bg=(13, 17, 23),
    panel=(20, 27, 38),
    border=(40, 80, 120),
    accent=(82, 182, 255),
    alt=(100, 240, 180),
    warn=(255, 180, 60),
    err=(255, 80, 80),
    muted=(70, 95, 130),
    text=(200, 215, 235),
    bright=(240, 248, 255),
    sel=(28, 58, 100),
    sel_text=(160, 225, 255),
    mod=(255, 210, 90),
    input_bg=(18, 30, 50),
)

SLATE_THEME = UITheme(
    name="slate",
    bg=(24, 24, 28),
    panel=(34, 35, 41),
    border=(78, 82, 96),
    accent=(140, 170, 238),
    alt=(166, 218, 149),
    warn=(238, 212, 159),
    err=(237, 135, 150),
    muted=(110, 115, 141),
    text=(202, 211, 245),
    bright=(244, 246, 255),
    sel=(54, 58, 79),
    sel_text=(183, 189, 248),
    mod=(245, 169, 127),
    input_bg=(30, 32, 48),
)

_THEMES: dict[str, UITheme] = {theme.name: theme for theme in (DEFAULT_THEME, SLATE_THEME)}


def available_theme_names() -> tuple[str, ...]:
    return tuple(sorted(_THEMES))


def normalize_theme_name(name: str | None) -> str:
    """Map a user-supplied name onto a known theme, case-insensitively.

    Unknown or empty names select the default palette.
    """
    key = (name or "").strip().lower()
    return key if key in _THEMES else DEFAULT_THEME.name


def resolve_theme(name: str | None) -> UITheme:
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "DEFAULT_THEME",
    "SLATE_THEME",
    "UITheme",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
