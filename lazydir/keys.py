"""Key bindings for the browser.

Maps single-character keys to navigator commands through a small dispatch
table. Quit is not a binding: the loop checks ``QUIT_KEY`` before dispatch.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .navigator import Navigator

QUIT_KEY = "q"


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more keys to a single command callback."""

    keys: tuple[str, ...]
    handler: Callable[[], object]


class KeyRegistry:
    """Exact-match key dispatch table."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], object]] = {}

    def register_binding(self, binding: KeyBinding) -> KeyRegistry:
        """Register one binding, overwriting existing handlers for same keys."""
        for key in binding.keys:
            self._handlers[key] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyBinding) -> KeyRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool:
        """Invoke the handler bound to ``key``; return whether one existed."""
        handler = self._handlers.get(key)
        if handler is None:
            return False
        handler()
        return True


def navigator_bindings(navigator: Navigator) -> KeyRegistry:
    """Build the default registry for ``navigator``."""
    return KeyRegistry().register_bindings(
        KeyBinding(("j",), navigator.move_down),
        KeyBinding(("k",), navigator.move_up),
        KeyBinding(("h",), navigator.move_out),
        KeyBinding(("l",), navigator.move_into),
        KeyBinding(("g",), navigator.move_top),
        KeyBinding(("G",), navigator.move_bottom),
        KeyBinding((".",), navigator.toggle_hidden),
    )
