"""User-ordered starred items."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..model.types import InvalidIndexError
from ..model.validation import ReferenceValidator
from .ordered import IdentityOrderedMap

logger = logging.getLogger(__name__)


class BookmarkStore:
    """Ordered, duplicate-free bookmark list that the user can reorder."""

    def __init__(
        self,
        validator: ReferenceValidator | None = None,
        items: Iterable[object] = (),
    ) -> None:
        self._validator = validator if validator is not None else ReferenceValidator()
        self._entries = IdentityOrderedMap()
        for item in items:
            self.add(item)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: object) -> bool:
        return item in self._entries

    def __iter__(self) -> Iterator[object]:
        return iter(self._entries)

    @property
    def entries(self) -> list[object]:
        return self._entries.items()

    def index(self, item: object) -> int:
        return self._entries.index(item)

    def add(self, item: object) -> bool:
        """Append ``item`` unless it is null or already starred."""
        if item is None:
            return False
        return self._entries.append(item)

    def remove(self, item: object) -> bool:
        return self._entries.discard(item)

    def remove_many(self, items: Iterable[object]) -> int:
        """Remove every given item; return how many were starred."""
        return sum(1 for item in list(items) if self._entries.discard(item))

    def clear(self) -> None:
        self._entries.clear()

    def reorder(self, from_index: int, to_index: int) -> None:
        """Move the entry at ``from_index`` so it ends up at ``to_index``.

        Raises:
            InvalidIndexError: either index is outside ``[0, len)``.
        """
        size = len(self._entries)
        for index in (from_index, to_index):
            if not 0 <= index < size:
                raise InvalidIndexError(index, size)
        if from_index == to_index:
            return
        items = self._entries.items()
        items.insert(to_index, items.pop(from_index))
        self._entries.replace(items)

    def prune_invalid(self) -> int:
        """Drop entries that are gone or no longer persistent."""
        removed = self._entries.remove_where(lambda item: not self._validator.is_persistent(item))
        if removed:
            logger.debug("pruned %d bookmarks", len(removed))
        return len(removed)

    def sweep(self) -> int:
        """Drop dead references."""
        return len(self._entries.remove_where(lambda item: not self._validator.is_valid(item)))


__all__ = ["BookmarkStore"]
