"""Public package surface for recentstar.

Exports ``main`` for programmatic CLI invocation and ``RecentStarPanel``.
Both are imported lazily to keep package imports lightweight.
Most implementation lives in submodules under ``recentstar``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


def __getattr__(name: str):
    if name == "RecentStarPanel":
        from .runtime.panel import RecentStarPanel

        return RecentStarPanel
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["RecentStarPanel", "main"]
