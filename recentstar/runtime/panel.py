"""Recent-with-star panel session: wiring, lifetime, and view rows.

A panel owns one history, one bookmark list, and the controllers that feed
them. ``open`` restores bookmarks and attaches to host signals; ``close``
persists bookmarks and releases the subscriptions. Use the panel as a
context manager to guarantee the release.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol

from ..model.validation import ReferenceValidator
from ..stores.bookmarks import BookmarkStore
from ..stores.history import HistoryStore
from .commands import CommandRegistry, build_navigation_commands
from .config import HistoryConfig, KeyValueStore
from .events import Signal, Subscription
from .ingestion import IngestionController, _noop
from .navigation import NavigationController
from .persistence import PersistenceAdapter
from .reentry import ReentryGuard

logger = logging.getLogger(__name__)


class PanelHost(Protocol):
    """Everything the panel needs from the hosting application."""

    selection_changed: Signal
    context_unloaded: Signal
    active_selection: object | None

    def ping(self, item: object) -> None: ...

    def is_alive(self, item: object) -> bool: ...

    def is_persistent(self, item: object) -> bool: ...

    def path_for(self, item: object) -> str | None: ...

    def resolve(self, path: str) -> object | None: ...


@dataclass(frozen=True)
class PanelRow:
    """One visible list row."""

    index: int
    item: object
    is_current: bool = False
    is_starred: bool = False


@dataclass(frozen=True)
class PanelView:
    """Rows for the starred list and the history list, top to bottom."""

    starred: tuple[PanelRow, ...]
    history: tuple[PanelRow, ...]
    max_history: int


class RecentStarPanel:
    """Selection history plus starred items for one tool window."""

    def __init__(
        self,
        *,
        host: PanelHost,
        store: KeyValueStore,
        request_redraw: Callable[[], None] = _noop,
        grace_ticks: int = 1,
    ) -> None:
        self._host = host
        self.validator = ReferenceValidator(host.is_alive, host.is_persistent)
        self.config = HistoryConfig()
        self.history = HistoryStore(self.validator, self.config.max_history)
        self.bookmarks = BookmarkStore(self.validator)
        self.guard = ReentryGuard(grace_ticks)
        self.ingestion = IngestionController(
            history=self.history,
            bookmarks=self.bookmarks,
            validator=self.validator,
            guard=self.guard,
            request_redraw=request_redraw,
        )
        self.navigation = NavigationController(
            history=self.history,
            selection=host,
            validator=self.validator,
            guard=self.guard,
        )
        self.commands: CommandRegistry = build_navigation_commands(self.navigation)
        self._persistence = PersistenceAdapter(store, host, self.validator)
        self._subscription: Subscription | None = None

    @property
    def is_open(self) -> bool:
        return self._subscription is not None

    def open(self) -> RecentStarPanel:
        """Restore persisted state and start listening to host events."""
        if self.is_open:
            return self
        items, config = self._persistence.load()
        self.config = config
        self.history.set_max_size(config.max_history)
        self.bookmarks.clear()
        for item in items:
            self.bookmarks.add(item)
        self._subscription = self.ingestion.attach(
            selection_changed=self._host.selection_changed,
            context_unloaded=self._host.context_unloaded,
        )
        logger.debug("panel opened with %d bookmark(s)", len(self.bookmarks))
        return self

    def close(self, save: bool = True) -> None:
        """Persist bookmarks and config, then detach from host events."""
        if not self.is_open:
            return
        try:
            if save:
                self.save()
        finally:
            assert self._subscription is not None
            self._subscription.dispose()
            self._subscription = None

    def save(self) -> list[str]:
        return self._persistence.save(self.bookmarks.entries, self.config)

    def __enter__(self) -> RecentStarPanel:
        return self.open()

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def tick(self) -> PanelView:
        """Run the per-frame sweep and return the rows to display."""
        self.ingestion.on_render_tick()
        return self.view()

    def view(self) -> PanelView:
        cursor = self.history.cursor
        starred = tuple(PanelRow(index, item, is_starred=True) for index, item in enumerate(self.bookmarks))
        history = tuple(
            PanelRow(index, item, is_current=index == cursor, is_starred=item in self.bookmarks)
            for index, item in enumerate(self.history)
        )
        return PanelView(starred=starred, history=history, max_history=self.config.max_history)

    def star(self, item: object) -> bool:
        return self.bookmarks.add(item)

    def unstar(self, *items: object) -> int:
        return self.bookmarks.remove_many(items)

    def drop(self, items: Iterable[object]) -> list[object]:
        return self.ingestion.on_drag_drop_commit(items)

    def reorder_bookmark(self, from_index: int, to_index: int) -> None:
        self.bookmarks.reorder(from_index, to_index)

    def clear_history(self) -> None:
        self.history.clear()

    def clear_bookmarks(self) -> None:
        self.bookmarks.clear()

    def set_max_history(self, max_history: int) -> bool:
        """Apply a new history bound; non-positive values are ignored."""
        if isinstance(max_history, bool) or max_history <= 0 or max_history == self.config.max_history:
            return False
        self.config = HistoryConfig(max_history=max_history)
        self.history.set_max_size(max_history)
        return True


__all__ = ["PanelHost", "PanelRow", "PanelView", "RecentStarPanel"]
