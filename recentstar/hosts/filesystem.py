"""A host backed by files on disk.

Files are persistent items addressed by their resolved path. Scratch items
stand in for context-local objects: they have no path, never persist, and
die when the context unloads. Items are interned so that resolving the same
path twice yields the same object.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..runtime.events import Signal

logger = logging.getLogger(__name__)


class FileItem:
    """Reference to a file, or to a scratch object when ``path`` is None."""

    __slots__ = ("path", "name", "discarded")

    def __init__(self, path: Path | None, name: str | None = None) -> None:
        self.path = path
        self.name = name if name is not None else (path.name if path is not None else "<scratch>")
        self.discarded = False

    @property
    def is_scratch(self) -> bool:
        return self.path is None

    def __repr__(self) -> str:
        target = str(self.path) if self.path is not None else self.name
        return f"FileItem({target!r})"


class FileSystemHost:
    """Resolver, validity oracle, and selection surface for file items."""

    def __init__(self) -> None:
        self.selection_changed = Signal()
        self.context_unloaded = Signal()
        self.pinged: list[FileItem] = []
        self._active: FileItem | None = None
        self._files: dict[str, FileItem] = {}
        self._scratch: list[FileItem] = []

    @property
    def active_selection(self) -> FileItem | None:
        return self._active

    @active_selection.setter
    def active_selection(self, item: FileItem | None) -> None:
        self._active = item
        self.selection_changed.emit(item)

    def select(self, item: FileItem | None) -> None:
        """Simulate the user selecting ``item``."""
        self.active_selection = item

    def ping(self, item: object) -> None:
        if isinstance(item, FileItem):
            logger.debug("ping %r", item)
            self.pinged.append(item)

    def item_for(self, path: str | Path) -> FileItem:
        """Return the interned item for ``path`` whether or not it exists."""
        resolved = Path(path).expanduser().resolve()
        key = str(resolved)
        item = self._files.get(key)
        if item is None or item.discarded:
            item = FileItem(resolved)
            self._files[key] = item
        return item

    def scratch(self, name: str) -> FileItem:
        """Create a context-local item that cannot be persisted."""
        item = FileItem(None, name=name)
        self._scratch.append(item)
        return item

    def discard(self, item: FileItem) -> None:
        """Mark ``item`` dead, as if the host destroyed it."""
        item.discarded = True

    def unload_context(self) -> None:
        """Destroy every scratch item and notify listeners."""
        for item in self._scratch:
            item.discarded = True
        self._scratch.clear()
        self.context_unloaded.emit()

    def is_alive(self, item: object) -> bool:
        return isinstance(item, FileItem) and not item.discarded

    def is_persistent(self, item: object) -> bool:
        return (
            isinstance(item, FileItem)
            and not item.discarded
            and item.path is not None
            and item.path.exists()
        )

    def path_for(self, item: object) -> str | None:
        if not isinstance(item, FileItem) or item.path is None:
            return None
        return str(item.path)

    def resolve(self, path: str) -> FileItem | None:
        """Return the live item for ``path``, or None when the file is gone."""
        if not path:
            return None
        candidate = Path(path)
        if not candidate.exists():
            return None
        return self.item_for(candidate)


__all__ = ["FileItem", "FileSystemHost"]
