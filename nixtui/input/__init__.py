"""Keyboard input: chunk classification and per-screen dispatch."""

from __future__ import annotations

from .handlers import KeyContext, handle_key, handle_resize, save_config
from .key_registry import KeyBinding, KeyMap
from .reader import KeyPress, classify_chunk, read_chunk

__all__ = [
    "KeyBinding",
    "KeyMap",
    "KeyContext",
    "KeyPress",
    "classify_chunk",
    "handle_key",
    "handle_resize",
    "read_chunk",
    "save_config",
]
