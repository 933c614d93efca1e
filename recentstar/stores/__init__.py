"""In-memory selection history and bookmark stores."""

from __future__ import annotations

from .bookmarks import BookmarkStore
from .history import DEFAULT_MAX_HISTORY, HistoryStore
from .ordered import IdentityOrderedMap

__all__ = ["BookmarkStore", "DEFAULT_MAX_HISTORY", "HistoryStore", "IdentityOrderedMap"]
