"""Inputs shared by every screen renderer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..state import AppState
from ..ui_theme import DEFAULT_THEME, UITheme

DEFAULT_OUTPUT_PATH = Path("/tmp/configuration.nix")


@dataclass(frozen=True)
class RenderContext:
    """Read-only view handed to renderers.

    ``state`` is shared with the dispatcher; renderers only read it.
    """

    state: AppState
    theme: UITheme = DEFAULT_THEME
    threads: int = 1
    output_path: Path = DEFAULT_OUTPUT_PATH
