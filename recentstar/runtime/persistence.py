"""Save and restore the starred list and history bound across sessions.

Only persistent items are written, as stable path strings; live references
cannot survive a restart. Loading is lossy in the same direction: paths that
no longer resolve are skipped.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Protocol

from ..model.validation import ReferenceValidator
from .config import HistoryConfig, KeyValueStore

logger = logging.getLogger(__name__)

MAX_HISTORY_KEY = "recent_with_star.max_history"
STARRED_ITEMS_KEY = "recent_with_star.starred_items"


class ItemResolver(Protocol):
    """Maps live items to stable paths and back."""

    def path_for(self, item: object) -> str | None: ...

    def resolve(self, path: str) -> object | None: ...


def encode_paths(paths: list[str]) -> str:
    return json.dumps({"paths": paths})


def decode_paths(blob: object) -> list[str]:
    """Decode a starred-items blob.

    Raises ``ValueError`` when malformed, or ``RecursionError`` when nested
    too deeply to decode.
    """
    if not isinstance(blob, str):
        raise ValueError("starred items blob is not a string")
    data = json.loads(blob)
    if not isinstance(data, dict):
        raise ValueError("starred items blob is not an object")
    paths = data.get("paths", [])
    if not isinstance(paths, list):
        raise ValueError("starred items 'paths' is not a list")
    return [path for path in paths if isinstance(path, str) and path]


class PersistenceAdapter:
    """Serialize bookmarks and config into a key-value store."""

    def __init__(
        self,
        store: KeyValueStore,
        resolver: ItemResolver,
        validator: ReferenceValidator,
    ) -> None:
        self._store = store
        self._resolver = resolver
        self._validator = validator

    def save(self, bookmarks: Iterable[object], config: HistoryConfig) -> list[str]:
        """Write persistent bookmarks and ``config``; return the saved paths."""
        self._store.set(MAX_HISTORY_KEY, config.max_history)
        paths: list[str] = []
        for item in bookmarks:
            if not self._validator.is_persistent(item):
                continue
            path = self._resolver.path_for(item)
            if path:
                paths.append(path)
        self._store.set(STARRED_ITEMS_KEY, encode_paths(paths))
        logger.debug("saved %d starred path(s)", len(paths))
        return paths

    def load(self) -> tuple[list[object], HistoryConfig]:
        """Return restored bookmarks and config, falling back to defaults."""
        config = self._load_config()
        if not self._store.contains(STARRED_ITEMS_KEY):
            return [], config
        try:
            paths = decode_paths(self._store.get(STARRED_ITEMS_KEY))
        except (ValueError, RecursionError):
            logger.warning("ignoring malformed starred items blob")
            return [], config

        items: list[object] = []
        for path in paths:
            item = self._resolver.resolve(path)
            if item is None:
                logger.debug("skipping unresolvable starred path %s", path)
                continue
            items.append(item)
        return items, config

    def _load_config(self) -> HistoryConfig:
        value = self._store.get(MAX_HISTORY_KEY)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            return HistoryConfig()
        return HistoryConfig(max_history=value)


__all__ = [
    "ItemResolver",
    "MAX_HISTORY_KEY",
    "PersistenceAdapter",
    "STARRED_ITEMS_KEY",
    "decode_paths",
    "encode_paths",
]
