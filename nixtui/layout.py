"""Screen geometry shared by renderers and key handlers.

Keeping these in one place lets the dispatcher clamp scroll offsets with the
same numbers the renderers use to draw.
"""

from __future__ import annotations

MIN_WIDTH = 80
MIN_HEIGHT = 24
SIDEBAR_WIDTH = 24
CONTENT_COL = SIDEBAR_WIDTH + 2
TUTORIAL_CARD_HEIGHT = 4


def is_too_small(width: int, height: int) -> bool:
    return width < MIN_WIDTH or height < MIN_HEIGHT


def content_width(term_width: int) -> int:
    return term_width - SIDEBAR_WIDTH - 3


def export_visible_lines(term_height: int) -> int:
    """Rows of config text shown in the export panel."""
    return max(1, term_height - 6)


def export_page_size(term_height: int) -> int:
    return max(1, term_height - 8)


def export_max_scroll(total_lines: int, term_height: int) -> int:
    return max(0, total_lines - export_visible_lines(term_height))


def settings_visible_rows(term_height: int) -> int:
    return max(1, term_height - 8)


def settings_scroll(field_index: int, term_height: int) -> int:
    """First field row shown so the selected field stays near the middle."""
    return max(0, field_index - settings_visible_rows(term_height) // 2)


__all__ = [
    "CONTENT_COL",
    "MIN_HEIGHT",
    "MIN_WIDTH",
    "SIDEBAR_WIDTH",
    "TUTORIAL_CARD_HEIGHT",
    "content_width",
    "export_max_scroll",
    "export_page_size",
    "export_visible_lines",
    "is_too_small",
    "settings_scroll",
    "settings_visible_rows",
]
