"""Named commands and key combos bound to a specific panel instance."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .navigation import NavigationController

# Mouse4 steps to older entries and Mouse3 to newer ones, reversing the
# editor tool's Back (Mouse4, toward the newest) and Forward bindings.
COMMAND_PALETTE_ITEMS: tuple[tuple[str, str], ...] = (
    ("history_back", "Selection back to older item (Mouse4 / Alt+Left)"),
    ("history_forward", "Selection forward to newer item (Mouse3 / Alt+Right)"),
)


@dataclass(frozen=True)
class CommandBinding:
    """Mapping from a command name and its key combos to one handler."""

    name: str
    combos: tuple[str, ...]
    handler: Callable[[], object]


def _normalize_combo(combo: str) -> str:
    return combo.strip().lower().replace(" ", "")


class CommandRegistry:
    """Dispatch table for commands by name or by key combo."""

    def __init__(self) -> None:
        self._by_name: dict[str, Callable[[], object]] = {}
        self._by_combo: dict[str, Callable[[], object]] = {}

    def register_binding(self, binding: CommandBinding) -> CommandRegistry:
        """Register one binding, overwriting existing handlers for same keys."""
        self._by_name[binding.name] = binding.handler
        for combo in binding.combos:
            self._by_combo[_normalize_combo(combo)] = binding.handler
        return self

    def register_bindings(self, *bindings: CommandBinding) -> CommandRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def names(self) -> tuple[str, ...]:
        return tuple(self._by_name)

    def run(self, name: str) -> object:
        """Invoke the command called ``name``; unknown names raise ``KeyError``."""
        return self._by_name[name]()

    def dispatch(self, combo: str) -> tuple[bool, object]:
        """Invoke the handler bound to ``combo``.

        Returns ``(handled, result)``; unbound combos give ``(False, None)``.
        """
        handler = self._by_combo.get(_normalize_combo(combo))
        if handler is None:
            return False, None
        return True, handler()


def build_navigation_commands(navigation: NavigationController) -> CommandRegistry:
    """Bind the history commands to ``navigation``."""
    return CommandRegistry().register_bindings(
        CommandBinding("history_back", ("mouse4", "alt+left"), navigation.back),
        CommandBinding("history_forward", ("mouse3", "alt+right"), navigation.forward),
    )


__all__ = [
    "COMMAND_PALETTE_ITEMS",
    "CommandBinding",
    "CommandRegistry",
    "build_navigation_commands",
]
