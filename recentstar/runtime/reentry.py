"""One-shot guard for notifications caused by our own writes.

Arm it right before changing host state programmatically; the next inbound
notification consumes it. If the host coalesces or drops that notification,
``tick`` expires the guard so it cannot swallow an unrelated event later.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class ReentryGuard:
    """Suppress exactly one echoed notification."""

    def __init__(self, grace_ticks: int = 1) -> None:
        if grace_ticks < 1:
            raise ValueError(f"grace_ticks must be >= 1, got {grace_ticks}")
        self._grace_ticks = grace_ticks
        self._ticks_left = 0
        self._armed = False

    @property
    def armed(self) -> bool:
        return self._armed

    def arm(self) -> None:
        self._armed = True
        self._ticks_left = self._grace_ticks

    def disarm(self) -> None:
        self._armed = False
        self._ticks_left = 0

    def consume(self) -> bool:
        """Return True (and disarm) when the current notification is an echo."""
        if not self._armed:
            return False
        self.disarm()
        return True

    def tick(self) -> None:
        """Count one scheduling tick and expire an unconsumed guard."""
        if not self._armed:
            return
        self._ticks_left -= 1
        if self._ticks_left <= 0:
            logger.debug("selection echo never arrived; clearing guard")
            self.disarm()


__all__ = ["ReentryGuard"]
