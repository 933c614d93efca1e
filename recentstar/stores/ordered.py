"""Insertion-ordered container keyed by item identity.

Membership, removal, and moves to either end are O(1). Positional access
walks the order and is O(n); histories and bookmark lists are small, so only
the hot ``contains``/``remove`` paths avoid linear scans.
"""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable, Iterable, Iterator

from ..model.types import identity_token


class IdentityOrderedMap:
    """Ordered unique items, compared by reference identity."""

    def __init__(self, items: Iterable[object] = ()) -> None:
        self._items: OrderedDict[int, object] = OrderedDict()
        for item in items:
            self.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return identity_token(item) in self._items

    def __iter__(self) -> Iterator[object]:
        return iter(list(self._items.values()))

    def items(self) -> list[object]:
        """Return a snapshot of items in order."""
        return list(self._items.values())

    def at(self, index: int) -> object:
        """Return the item at ``index`` (raises ``IndexError`` when absent)."""
        return self.items()[index]

    def index(self, item: object) -> int:
        """Return the position of ``item`` (raises ``ValueError`` when absent)."""
        token = identity_token(item)
        for position, key in enumerate(self._items):
            if key == token:
                return position
        raise ValueError("item is not in the container")

    def append(self, item: object) -> bool:
        """Add ``item`` at the end; return False when already present."""
        token = identity_token(item)
        if token in self._items:
            return False
        self._items[token] = item
        return True

    def push_front(self, item: object) -> None:
        """Insert ``item`` at the front, moving it there if already present."""
        token = identity_token(item)
        self._items[token] = item
        self._items.move_to_end(token, last=False)

    def discard(self, item: object) -> bool:
        """Remove ``item``; return whether it was present."""
        return self._items.pop(identity_token(item), None) is not None

    def pop_front(self) -> object:
        return self._items.popitem(last=False)[1]

    def pop_back(self) -> object:
        return self._items.popitem(last=True)[1]

    def truncate(self, max_len: int) -> list[object]:
        """Drop tail items beyond ``max_len`` and return them oldest-last."""
        dropped: list[object] = []
        while len(self._items) > max_len:
            dropped.append(self.pop_back())
        return dropped

    def remove_where(self, predicate: Callable[[object], bool]) -> list[int]:
        """Remove items matching ``predicate``; return their original indices."""
        removed: list[int] = []
        for position, (token, item) in enumerate(list(self._items.items())):
            if predicate(item):
                del self._items[token]
                removed.append(position)
        return removed

    def replace(self, items: Iterable[object]) -> None:
        """Replace the contents with ``items`` (later duplicates are ignored)."""
        self._items.clear()
        for item in items:
            self.append(item)

    def clear(self) -> None:
        self._items.clear()


__all__ = ["IdentityOrderedMap"]
