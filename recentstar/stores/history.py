"""Bounded most-recent-first selection history with a navigation cursor.

Index 0 is the most recent selection. The cursor marks the entry the user
navigated to; entries in front of it (lower indices) form the forward branch,
which a fresh selection abandons the same way browser history does.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..model.types import Direction
from ..model.validation import ReferenceValidator
from .ordered import IdentityOrderedMap

logger = logging.getLogger(__name__)

DEFAULT_MAX_HISTORY = 10


class HistoryStore:
    """Ordered, deduplicated, bounded selection history."""

    def __init__(
        self,
        validator: ReferenceValidator | None = None,
        max_size: int = DEFAULT_MAX_HISTORY,
    ) -> None:
        if max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self._validator = validator if validator is not None else ReferenceValidator()
        self._entries = IdentityOrderedMap()
        self._cursor = 0
        self._max_size = max_size

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: object) -> bool:
        return item in self._entries

    def __iter__(self) -> Iterator[object]:
        return iter(self._entries)

    @property
    def entries(self) -> list[object]:
        """Snapshot of history items, most recent first."""
        return self._entries.items()

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def max_size(self) -> int:
        return self._max_size

    def current(self) -> object | None:
        """Return the item under the cursor, or ``None`` when empty."""
        if not self._entries:
            return None
        return self._entries.at(self._cursor)

    def record_selection(self, item: object) -> None:
        """Record ``item`` as the newest selection.

        Navigated-away forward entries are discarded first, then any older
        occurrence of ``item`` is removed before it is placed at the front.
        """
        if not self._validator.is_valid(item):
            return
        if self._cursor > 0:
            for _ in range(self._cursor):
                self._entries.pop_front()
            logger.debug("dropped %d forward history entries", self._cursor)
            self._cursor = 0
        self._entries.push_front(item)
        self._trim()

    def push_front(self, item: object) -> None:
        """Move ``item`` to the front without truncating the forward branch."""
        if not self._validator.is_valid(item):
            return
        self._entries.push_front(item)
        self._trim()

    def set_max_size(self, max_size: int) -> None:
        """Change the bound and trim immediately; non-positive sizes are ignored."""
        if max_size <= 0 or max_size == self._max_size:
            return
        self._max_size = max_size
        self._trim()

    def prune_invalid(self) -> list[int]:
        """Drop entries that are no longer persistent and fix up the cursor.

        Each removed entry at or in front of the cursor shifts the cursor one
        step toward the front, so it keeps addressing the same neighbourhood.
        Returns the original indices of removed entries.
        """
        removed = self._entries.remove_where(lambda item: not self._validator.is_persistent(item))
        for index in reversed(removed):
            if index <= self._cursor and self._cursor > 0:
                self._cursor -= 1
        self._clamp_cursor()
        if removed:
            logger.debug("pruned %d history entries, cursor=%d", len(removed), self._cursor)
        return removed

    def sweep(self) -> int:
        """Drop dead references; the cursor is only clamped back into range."""
        removed = self._entries.remove_where(lambda item: not self._validator.is_valid(item))
        self._clamp_cursor()
        return len(removed)

    def can_move(self, direction: Direction) -> bool:
        """Return whether ``move_cursor(direction)`` would change the cursor."""
        if direction is Direction.BACK:
            return self._cursor < len(self._entries) - 1
        return self._cursor > 0

    def move_cursor(self, direction: Direction) -> object | None:
        """Step the cursor and return the item under it (``None`` when empty)."""
        if self.can_move(direction):
            self._cursor += 1 if direction is Direction.BACK else -1
        return self.current()

    def clear(self) -> None:
        self._entries.clear()
        self._cursor = 0

    def _trim(self) -> None:
        evicted = self._entries.truncate(self._max_size)
        if evicted:
            logger.debug("evicted %d history entries over max_size=%d", len(evicted), self._max_size)
        self._clamp_cursor()

    def _clamp_cursor(self) -> None:
        self._cursor = max(0, min(self._cursor, len(self._entries) - 1))


__all__ = ["DEFAULT_MAX_HISTORY", "HistoryStore"]
