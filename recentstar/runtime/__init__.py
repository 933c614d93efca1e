"""Panel runtime: event ingestion, navigation, commands, and persistence.

This package wires the in-memory stores to a host application. The panel
session in ``panel`` is the usual entry point.
"""

from __future__ import annotations

from .commands import COMMAND_PALETTE_ITEMS, CommandBinding, CommandRegistry, build_navigation_commands
from .config import HistoryConfig, JsonConfigStore, MemoryConfigStore
from .events import CompositeSubscription, Signal, Subscription
from .ingestion import IngestionController
from .navigation import NavigationController
from .panel import PanelRow, PanelView, RecentStarPanel
from .persistence import PersistenceAdapter
from .reentry import ReentryGuard

__all__ = [
    "COMMAND_PALETTE_ITEMS",
    "CommandBinding",
    "CommandRegistry",
    "CompositeSubscription",
    "HistoryConfig",
    "IngestionController",
    "JsonConfigStore",
    "MemoryConfigStore",
    "NavigationController",
    "PanelRow",
    "PanelView",
    "PersistenceAdapter",
    "RecentStarPanel",
    "ReentryGuard",
    "Signal",
    "Subscription",
    "build_navigation_commands",
]
