"""Translate host events into history and bookmark mutations."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..model.validation import ReferenceValidator
from ..stores.bookmarks import BookmarkStore
from ..stores.history import HistoryStore
from .events import CompositeSubscription, Signal, Subscription
from .reentry import ReentryGuard

logger = logging.getLogger(__name__)


def _noop() -> None:
    return None


class IngestionController:
    """Route selection, drop, unload, and tick events into the stores.

    Args:
        history: Selection history to record into.
        bookmarks: Starred list that drag-drop also feeds.
        validator: Host validity/persistence predicates.
        guard: Shared with ``NavigationController`` to recognise echoes of
            programmatic selection changes.
        request_redraw: Called after any visible state change.
    """

    def __init__(
        self,
        *,
        history: HistoryStore,
        bookmarks: BookmarkStore,
        validator: ReferenceValidator,
        guard: ReentryGuard,
        request_redraw: Callable[[], None] = _noop,
    ) -> None:
        self._history = history
        self._bookmarks = bookmarks
        self._validator = validator
        self._guard = guard
        self._request_redraw = request_redraw

    def attach(self, *, selection_changed: Signal, context_unloaded: Signal) -> Subscription:
        """Connect host signals; dispose the returned handle to disconnect."""
        return CompositeSubscription(
            [
                selection_changed.connect(self.on_external_selection_changed),
                context_unloaded.connect(self.on_context_unloaded),
            ]
        )

    def on_external_selection_changed(self, item: object | None) -> None:
        if self._guard.consume():
            logger.debug("ignoring self-triggered selection change")
            return
        if item is None:
            return
        self._history.record_selection(item)
        self._request_redraw()

    def on_drag_drop_commit(self, items: Iterable[object]) -> list[object]:
        """Push persistent dropped items to the front of history and star them.

        Ephemeral items are rejected. Returns the accepted items.
        """
        accepted: list[object] = []
        for item in items:
            if not self._validator.is_persistent(item):
                continue
            self._history.push_front(item)
            self._bookmarks.add(item)
            accepted.append(item)
        if accepted:
            logger.debug("accepted %d dropped item(s)", len(accepted))
            self._request_redraw()
        return accepted

    def on_context_unloaded(self, *_args: object) -> None:
        self._history.prune_invalid()
        self._bookmarks.prune_invalid()
        self._request_redraw()

    def on_render_tick(self) -> None:
        self._history.sweep()
        self._bookmarks.sweep()
        self._guard.tick()


__all__ = ["IngestionController"]
