"""nixtui: a terminal UI for NixOS settings and tutorials.

The package logger gets a ``NullHandler``; ``--log-file`` is the only way
records reach an output, so nothing is ever printed over the TUI.
"""

from __future__ import annotations

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(argv: list[str] | None = None) -> int:
    """Run the command-line interface (imported on first call)."""
    from .cli import main as cli_main

    return cli_main(argv)


__all__ = ["main"]
