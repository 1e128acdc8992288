"""Nix syntax coloring for the export preview and tutorial code panels.

Tokenizes with Pygments' ``NixLexer`` and maps token kinds onto theme roles.
Output never contains a bare reset: every reset re-applies the panel
background so highlighted text sits inside bordered panels cleanly.
"""

from __future__ import annotations

from functools import lru_cache

from pygments.lexers.nix import NixLexer
from pygments.token import Comment, Keyword, Name, Number, Operator, Punctuation, String

from .ansi import BOLD, DIM, RESET, bg, fg
from .ui_theme import UITheme

CONSTANT_WORDS = frozenset({"true", "false", "null"})


@lru_cache(maxsize=1)
def _lexer() -> NixLexer:
    return NixLexer(stripnl=False, ensurenl=False)


def _style_for(token_type, value: str, theme: UITheme) -> str:
    if token_type in Comment:
        return fg(theme.muted) + DIM
    if value in CONSTANT_WORDS and (token_type in Name or token_type in Keyword):
        return fg(theme.warn) + BOLD
    # NixLexer tags attribute names as String.Symbol.
    if token_type in String.Symbol:
        return fg(theme.alt)
    if token_type in String or token_type in Number:
        return fg(theme.warn)
    if token_type in Punctuation or token_type in Operator:
        return fg(theme.border)
    return fg(theme.alt)


def highlight_lines(lines: list[str], theme: UITheme, background=None) -> list[str]:
    """Return ``lines`` colored as Nix, one output string per input line."""
    if not lines:
        return []
    base = bg(background if background is not None else theme.panel)
    out: list[list[str]] = [[]]
    for token_type, value in _lexer().get_tokens("\n".join(lines)):
        style = _style_for(token_type, value, theme)
        parts = value.split("\n")
        for index, part in enumerate(parts):
            if index:
                out.append([])
            if part:
                out[-1].append(style + part + RESET + base)
    rendered = ["".join(chunks) for chunks in out]
    # The lexer may add or keep a trailing newline; keep line counts aligned.
    if len(rendered) > len(lines):
        rendered = rendered[: len(lines)]
    while len(rendered) < len(lines):
        rendered.append("")
    return rendered


__all__ = ["highlight_lines"]
