"""Command-line front door for nixtui.

Parses CLI options, merges them over the preferences file, and either prints
one rendered frame (``--render``) or starts the interactive session.
"""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
from pathlib import Path

from .config import load_preferences
from .fractal import logical_thread_count
from .render import compose_frame
from .runtime import SessionOptions, run_session
from .state import SCREEN_HOME, SCREENS, new_state
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _terminal_size(value: str) -> tuple[int, int]:
    """argparse type for ``COLSxROWS``."""
    cols, sep, rows = value.lower().partition("x")
    try:
        parsed = (int(cols), int(rows))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid size {value!r}, expected COLSxROWS") from exc
    if not sep or parsed[0] <= 0 or parsed[1] <= 0:
        raise argparse.ArgumentTypeError(f"invalid size {value!r}, expected COLSxROWS")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nixtui",
        description="Browse NixOS options, preview configuration.nix, and follow tutorials.",
    )
    parser.add_argument("--theme", default=None, help=f"UI theme name ({', '.join(available_theme_names())}).")
    parser.add_argument("--output", type=Path, default=None, help="Where W saves the generated configuration.")
    parser.add_argument("--config", type=Path, default=None, help="Preferences file (JSON).")
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug log records to this file.")
    parser.add_argument(
        "--threads",
        type=_positive_int,
        default=None,
        help="Logical thread count driving the fractal (default: detected).",
    )
    parser.add_argument("--render", choices=SCREENS, metavar="SCREEN", help="Print one frame of SCREEN and exit.")
    parser.add_argument(
        "--size",
        type=_terminal_size,
        default=None,
        help="Frame size for --render as COLSxROWS (default: terminal size).",
    )
    return parser


def configure_logging(log_file: Path | None) -> None:
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("nixtui")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def render_screen(screen: str, size: tuple[int, int], threads: int, theme_name: str | None) -> str:
    """Compose one frame of ``screen`` from a fresh default state."""
    state = new_state(size[0], size[1])
    state.screen = screen
    return compose_frame(state, threads=threads, theme=resolve_theme(theme_name))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file)

    prefs = load_preferences(args.config)
    theme_name = args.theme if args.theme is not None else prefs.theme
    threads = args.threads if args.threads is not None else logical_thread_count()

    if args.render is not None:
        if args.size is not None:
            size = args.size
        else:
            term = shutil.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
        sys.stdout.write(render_screen(args.render, size, threads, theme_name) + "\n")
        sys.stdout.flush()
        return 0
    if args.size is not None:
        parser.error("--size only applies together with --render")

    if not (os.isatty(sys.stdin.fileno()) and os.isatty(sys.stdout.fileno())):
        parser.exit(2, "nixtui: interactive mode needs a terminal on stdin and stdout\n")

    options = SessionOptions(
        theme=resolve_theme(theme_name),
        output_path=args.output if args.output is not None else prefs.output_path,
        threads=threads,
        status_seconds=prefs.status_seconds,
    )
    return run_session(options)


if __name__ == "__main__":
    sys.exit(main())
