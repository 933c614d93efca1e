"""Shared value types for history and bookmark stores."""

from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """History navigation direction.

    ``BACK`` walks toward older selections (higher cursor index) and
    ``FORWARD`` walks back toward the most recent one (index 0), as in a
    browser. The editor tool this panel replaces bound Mouse4 ("Back") to
    the opposite step, toward index 0; here Mouse4 steps to older entries.
    """

    BACK = "back"
    FORWARD = "forward"


class InvalidIndexError(IndexError):
    """Raised when a bookmark reorder names an index outside the list."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"index {index} out of range for {size} bookmark(s)")
        self.index = index
        self.size = size


def identity_token(item: object) -> int:
    """Return the identity key used by stores for ``item``.

    Stores hold a strong reference to every keyed item, so the token stays
    unique for as long as the entry exists.
    """
    return id(item)


__all__ = ["Direction", "InvalidIndexError", "identity_token"]
