"""Interactive runtime: session bootstrap and the event loop."""

from __future__ import annotations

from .app import QuitRequested, SessionOptions, run_session
from .loop import ResizeFlag, RuntimeLoopCallbacks, run_main_loop

__all__ = [
    "QuitRequested",
    "ResizeFlag",
    "RuntimeLoopCallbacks",
    "SessionOptions",
    "run_main_loop",
    "run_session",
]
