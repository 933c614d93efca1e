"""Reference validity checks for items owned by the host.

Validity is always asked of the host, never cached: an item may be deleted
between two events.
"""

from __future__ import annotations

from collections.abc import Callable


def _always(_item: object) -> bool:
    return True


def _never(_item: object) -> bool:
    return False


class ReferenceValidator:
    """Answer whether a held item reference is still usable or persistent."""

    def __init__(
        self,
        is_alive: Callable[[object], bool] = _always,
        is_persistent: Callable[[object], bool] = _never,
    ) -> None:
        """Build a validator from host predicates.

        Args:
            is_alive: True while the host still owns the item.
            is_persistent: True when the item outlives the current transient
                context and can be addressed by a stable path.
        """
        self._is_alive = is_alive
        self._is_persistent = is_persistent

    def is_valid(self, item: object) -> bool:
        """Return whether ``item`` is non-null and alive."""
        if item is None:
            return False
        return bool(self._is_alive(item))

    def is_persistent(self, item: object) -> bool:
        """Return whether ``item`` is valid and survives context unloads."""
        return self.is_valid(item) and bool(self._is_persistent(item))


__all__ = ["ReferenceValidator"]
