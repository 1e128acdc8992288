"""Raw-mode and alternate-screen control for the interactive session.

The cursor stays hidden while the alternate screen is active.
Restoring the terminal happens at most once per enable.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty

from .ansi import ALT_SCREEN_OFF, ALT_SCREEN_ON, HIDE_CURSOR, RESET, SHOW_CURSOR


def terminal_size(fd: int | None = None) -> tuple[int, int]:
    """Return ``(columns, rows)`` for ``fd``, falling back to the environment."""
    if fd is not None:
        try:
            size = os.get_terminal_size(fd)
            return size.columns, size.lines
        except OSError:
            pass
    size = shutil.get_terminal_size()
    return size.columns, size.lines


class TerminalController:
    """Manage terminal mode transitions for one interactive session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, (ALT_SCREEN_ON + HIDE_CURSOR).encode("ascii"))
        self._active = True

    def disable_tui_mode(self) -> None:
        """Restore the saved tty state; later calls are no-ops."""
        if not self._active:
            return
        self._active = False
        os.write(self.stdout_fd, (RESET + SHOW_CURSOR + ALT_SCREEN_OFF).encode("ascii"))
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def size(self) -> tuple[int, int]:
        return terminal_size(self.stdout_fd)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield self
        finally:
            self.disable_tui_mode()


__all__ = ["TerminalController", "terminal_size"]
