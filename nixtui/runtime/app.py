"""Interactive session bootstrap.

Builds the initial state from terminal size and preferences, installs signal
handlers, and runs the event loop inside raw mode. The terminal is restored
exactly once whichever way the session ends.
"""

from __future__ import annotations

import logging
import signal
import sys
from dataclasses import dataclass
from pathlib import Path

from ..input import KeyContext
from ..render import RenderContext, draw
from ..state import new_state
from ..terminal import TerminalController
from ..ui_theme import UITheme
from .loop import ResizeFlag, RuntimeLoopCallbacks, run_main_loop

logger = logging.getLogger(__name__)

QUIT_SIGNALS = (signal.SIGINT, signal.SIGTERM, signal.SIGHUP)


class QuitRequested(Exception):
    """Raised from a termination signal handler to unwind the loop."""

    def __init__(self, signum: int) -> None:
        super().__init__(signum)
        self.signum = signum


def _raise_quit(signum, _frame) -> None:
    raise QuitRequested(signum)


@dataclass(frozen=True)
class SessionOptions:
    theme: UITheme
    output_path: Path
    threads: int
    status_seconds: float


def install_signal_handlers(resize_flag: ResizeFlag) -> dict[int, object]:
    """Install handlers and return the previous ones for restoration."""
    previous: dict[int, object] = {signal.SIGWINCH: signal.signal(signal.SIGWINCH, resize_flag.set)}
    for signum in QUIT_SIGNALS:
        previous[signum] = signal.signal(signum, _raise_quit)
    return previous


def restore_signal_handlers(previous: dict[int, object]) -> None:
    for signum, handler in previous.items():
        signal.signal(signum, handler)


def run_session(options: SessionOptions) -> int:
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    width, height = terminal.size()
    state = new_state(width, height, status_seconds=options.status_seconds)
    ctx = RenderContext(state=state, theme=options.theme, threads=options.threads, output_path=options.output_path)
    logger.info(
        "starting session: %dx%d, %d threads, theme %s", width, height, options.threads, options.theme.name
    )

    resize_flag = ResizeFlag()
    callbacks = RuntimeLoopCallbacks(
        draw=lambda: draw(ctx, stdout_fd),
        read_size=terminal.size,
    )
    previous = install_signal_handlers(resize_flag)
    try:
        with terminal.raw_mode():
            run_main_loop(state, stdin_fd, KeyContext(output_path=options.output_path), resize_flag, callbacks)
    except QuitRequested as exc:
        logger.info("quit on signal %d", exc.signum)
    finally:
        restore_signal_handlers(previous)
    return 0


__all__ = ["QuitRequested", "SessionOptions", "install_signal_handlers", "restore_signal_handlers", "run_session"]
