"""Back/forward commands over the selection history cursor."""

from __future__ import annotations

import logging
from typing import Protocol

from ..model.types import Direction
from ..model.validation import ReferenceValidator
from ..stores.history import HistoryStore
from .reentry import ReentryGuard

logger = logging.getLogger(__name__)


class SelectionTarget(Protocol):
    """Host selection surface that navigation writes to."""

    active_selection: object | None

    def ping(self, item: object) -> None: ...


class NavigationController:
    """Move through history and mirror the cursor into the host selection."""

    def __init__(
        self,
        *,
        history: HistoryStore,
        selection: SelectionTarget,
        validator: ReferenceValidator,
        guard: ReentryGuard,
    ) -> None:
        self._history = history
        self._selection = selection
        self._validator = validator
        self._guard = guard

    def back(self) -> object | None:
        """Select the next older history entry."""
        return self.navigate(Direction.BACK)

    def forward(self) -> object | None:
        """Select the next newer history entry."""
        return self.navigate(Direction.FORWARD)

    def navigate(self, direction: Direction) -> object | None:
        """Step the cursor and select the resulting item.

        Returns the selected item, or ``None`` when nothing happened (empty
        history, boundary reached, or the target item no longer exists).
        """
        if not self._history.can_move(direction):
            return None
        self._guard.arm()
        item = self._history.move_cursor(direction)
        if not self._validator.is_valid(item):
            self._guard.disarm()
            return None
        logger.debug("navigating %s to cursor=%d", direction.value, self._history.cursor)
        self._selection.active_selection = item
        self._selection.ping(item)
        return item


__all__ = ["NavigationController", "SelectionTarget"]
