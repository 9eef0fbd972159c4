"""Key-token dispatch table for normal-mode bindings."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyBinding:
    """One or more key tokens bound to a single action."""

    keys: tuple[str, ...]
    handler: Callable[[], None]


class KeyRegistry:
    """Map key tokens to handlers; later bindings override earlier ones."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], None]] = {}

    def register_binding(self, binding: KeyBinding) -> KeyRegistry:
        for key in binding.keys:
            self._handlers[key] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyBinding) -> KeyRegistry:
        """Register several bindings and return ``self`` for chaining."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool:
        """Run the handler bound to ``key``; return whether one existed."""
        handler = self._handlers.get(key)
        if handler is None:
            return False
        handler()
        return True


__all__ = ["KeyBinding", "KeyRegistry"]
