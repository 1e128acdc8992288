"""Per-screen key maps.

A ``KeyMap`` binds logical key names to zero-argument actions. An action
returns ``True`` to request quit; ``dispatch`` returns ``None`` when no
binding matched so callers can tell "unbound" from "handled".
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .reader import KeyPress

Action = Callable[[], bool | None]


@dataclass(frozen=True)
class KeyBinding:
    """One action reachable from one or more keys.

    With ``ignore_case`` set, printable keys match regardless of case
    (``w`` and ``W`` both save).
    """

    keys: tuple[str, ...]
    action: Action
    ignore_case: bool = False


class KeyMap:
    def __init__(self, *bindings: KeyBinding) -> None:
        self._exact: dict[str, Action] = {}
        self._folded: dict[str, Action] = {}
        self.bind(*bindings)

    def bind(self, *bindings: KeyBinding) -> KeyMap:
        """Add bindings; a later binding for the same key replaces the earlier one."""
        for binding in bindings:
            for key in binding.keys:
                if binding.ignore_case:
                    self._folded[key.lower()] = binding.action
                else:
                    self._exact[key] = binding.action
        return self

    def lookup(self, key: KeyPress) -> Action | None:
        action = self._exact.get(key.key)
        if action is None and key.printable:
            action = self._folded.get(key.char.lower())
        return action

    def dispatch(self, key: KeyPress) -> bool | None:
        action = self.lookup(key)
        if action is None:
            return None
        return bool(action())


__all__ = ["Action", "KeyBinding", "KeyMap"]
