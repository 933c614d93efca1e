"""Minimal host event signals with explicit disposal handles.

Hosts publish notifications through ``Signal.emit``; listeners keep the
``Subscription`` returned by ``connect`` and dispose it when they go away.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable


class Subscription:
    """Handle that disconnects one listener; disposing twice is harmless."""

    def __init__(self, release: Callable[[], None]) -> None:
        self._release: Callable[[], None] | None = release

    @property
    def active(self) -> bool:
        return self._release is not None

    def dispose(self) -> None:
        release, self._release = self._release, None
        if release is not None:
            release()

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.dispose()


class CompositeSubscription(Subscription):
    """Disposes a group of subscriptions in reverse connection order."""

    def __init__(self, subscriptions: Iterable[Subscription]) -> None:
        self._children = list(subscriptions)
        super().__init__(self._release_children)

    def _release_children(self) -> None:
        for child in reversed(self._children):
            child.dispose()
        self._children.clear()


class Signal:
    """Synchronous multicast notification."""

    def __init__(self) -> None:
        self._listeners: list[Callable[..., None]] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def connect(self, listener: Callable[..., None]) -> Subscription:
        """Register ``listener`` and return its disposal handle."""
        self._listeners.append(listener)

        def release() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return Subscription(release)

    def emit(self, *args: object) -> None:
        """Call every listener in connection order."""
        for listener in list(self._listeners):
            listener(*args)


__all__ = ["CompositeSubscription", "Signal", "Subscription"]
