"""Key dispatch tables for the selector and the dashboard.

Each table maps a key token to a zero-argument action. An action may return
a truthy/falsy "handled" flag; a key with no action dispatches to ``None``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

KeyHandler = Callable[[], "bool | None"]


@dataclass(frozen=True)
class KeyComboBinding:
    combos: tuple[str, ...]
    handler: KeyHandler


class KeyComboRegistry:
    """Token-to-action table; rebinding a token replaces its action."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        self._normalize = normalize or str
        self._actions: dict[str, KeyHandler] = {}

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._normalize(key) in self._actions

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        self._actions.update((self._normalize(combo), binding.handler) for combo in binding.combos)
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def bind(self, *combos: str) -> Callable[[KeyHandler], KeyHandler]:
        """Register the decorated function for ``combos`` and return it unchanged."""

        def decorator(handler: KeyHandler) -> KeyHandler:
            self.register_binding(KeyComboBinding(combos, handler))
            return handler

        return decorator

    def dispatch(self, key: str) -> bool | None:
        action = self._actions.get(self._normalize(key))
        return None if action is None else action()
