"""Per-mode key tables: one decoded input token maps to one action."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Optional

if TYPE_CHECKING:
    from rawedit.modes.base_mode import ModeContext, ModeResult


@dataclass(frozen=True, slots=True)
class Action:
    """Named editor verb a token can be bound to."""

    id: str
    handler: Callable[["ModeContext"], "ModeResult"]
    description: str = ""

    def __call__(self, context: "ModeContext") -> "ModeResult":
        return self.handler(context)


class KeymapConflictError(ValueError):
    """Raised when binding a token that already points at another action."""

    def __init__(self, mode: str, token: str, bound_to: str) -> None:
        super().__init__(f"{token!r} in mode {mode!r} is already bound to {bound_to}")
        self.mode = mode
        self.token = token
        self.bound_to = bound_to


class Keymap:
    """Action catalogue plus a ``token -> action id`` table for each mode.

    Tokens are what ``decode_unit`` produces for a single input unit
    (``ctrl+q``, ``ENTER``, ``A``). There are no multi-key sequences: a
    lookup either finds an action or it does not.
    """

    def __init__(self) -> None:
        self._actions: Dict[str, Action] = {}
        self._tables: Dict[str, Dict[str, str]] = {}

    @property
    def modes(self) -> tuple[str, ...]:
        return tuple(sorted(self._tables))

    def add_action(self, action: Action) -> None:
        if action.id in self._actions:
            raise ValueError(f"Action {action.id!r} already registered")
        self._actions[action.id] = action

    def action(self, action_id: str) -> Action:
        try:
            return self._actions[action_id]
        except KeyError:
            raise KeyError(f"Unknown action {action_id!r}") from None

    def bind(
        self, mode: str, token: str, action_id: str, *, replace: bool = False
    ) -> None:
        self.action(action_id)
        table = self._tables.setdefault(mode, {})
        current = table.get(token)
        if current not in (None, action_id) and not replace:
            raise KeymapConflictError(mode, token, current)
        table[token] = action_id

    def unbind(self, mode: str, token: str) -> Optional[str]:
        table = self._tables.get(mode, {})
        removed = table.pop(token, None)
        if not table:
            self._tables.pop(mode, None)
        return removed

    def lookup(self, mode: str, token: str) -> Optional[Action]:
        action_id = self._tables.get(mode, {}).get(token)
        if action_id is None:
            return None
        return self._actions[action_id]

    def bindings(self, mode: str) -> Dict[str, str]:
        return dict(self._tables.get(mode, {}))


__all__ = ["Action", "Keymap", "KeymapConflictError"]
