"""Main interactive event loop for the terminal UI.

Single-threaded: each iteration applies a pending resize, expires the status
message when its timer is due, redraws when anything changed, then waits for
one input chunk. The wait never outlasts the pending status deadline.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..input import KeyContext, classify_chunk, handle_key, handle_resize, read_chunk
from ..state import AppState
from ..status import expire_status, seconds_until_status_clear

logger = logging.getLogger(__name__)

POLL_SECONDS = 0.120


@dataclass
class ResizeFlag:
    """Set from the ``SIGWINCH`` handler, consumed by the loop."""

    pending: bool = False

    def set(self, *_args) -> None:
        self.pending = True

    def consume(self) -> bool:
        pending = self.pending
        self.pending = False
        return pending


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``.

    Keeping terminal I/O behind callbacks lets tests drive the loop with
    scripted input and a fake clock.
    """

    draw: Callable[[], None]
    read_size: Callable[[], tuple[int, int]]
    read_chunk: Callable[[int, float | None], bytes] = read_chunk


def next_timeout(state: AppState, now: float | None = None) -> float:
    """Seconds to wait for input before the loop must run again."""
    remaining = seconds_until_status_clear(state, now)
    if remaining is None:
        return POLL_SECONDS
    return min(POLL_SECONDS, remaining)


def run_main_loop(
    state: AppState,
    stdin_fd: int,
    key_context: KeyContext,
    resize_flag: ResizeFlag,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run until a key handler requests quit."""
    dirty = True
    while True:
        if resize_flag.consume():
            width, height = callbacks.read_size()
            handle_resize(state, width, height)
            dirty = True
        if expire_status(state):
            dirty = True
        if dirty:
            callbacks.draw()
            dirty = False

        chunk = callbacks.read_chunk(stdin_fd, next_timeout(state))
        if not chunk:
            continue
        if handle_key(state, classify_chunk(chunk), key_context):
            logger.info("quit requested from screen %s", state.screen)
            return
        dirty = True


__all__ = ["POLL_SECONDS", "ResizeFlag", "RuntimeLoopCallbacks", "next_timeout", "run_main_loop"]
