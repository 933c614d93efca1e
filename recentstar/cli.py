"""Command-line front door for recentstar.

Inspects and edits the persisted starred list and history bound using the
filesystem host, so starred entries are file paths.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .hosts.filesystem import FileSystemHost
from .model.types import InvalidIndexError
from .runtime import config as config_module
from .runtime.config import JsonConfigStore
from .runtime.panel import RecentStarPanel

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recentstar",
        description="Manage starred items and the selection-history bound.",
    )
    parser.add_argument("--config", metavar="PATH", default=None, help="Config file (default: user config dir).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="Print starred items in order.")
    star = commands.add_parser("star", help="Star one or more files.")
    star.add_argument("paths", nargs="+")
    unstar = commands.add_parser("unstar", help="Remove files from the starred list.")
    unstar.add_argument("paths", nargs="+")
    move = commands.add_parser("move", help="Move a starred entry to another position.")
    move.add_argument("from_index", type=_non_negative_int)
    move.add_argument("to_index", type=_non_negative_int)
    commands.add_parser("clear", help="Remove every starred item.")
    max_history = commands.add_parser("max", help="Show or set the history size.")
    max_history.add_argument("value", nargs="?", type=_positive_int, default=None)
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_starred(panel: RecentStarPanel, host: FileSystemHost) -> None:
    for row in panel.view().starred:
        sys.stdout.write(f"{row.index}\t{host.path_for(row.item)}\n")


def _run(args: argparse.Namespace, panel: RecentStarPanel, host: FileSystemHost) -> bool:
    """Execute one command; return whether state must be saved."""
    if args.command == "list":
        _print_starred(panel, host)
        return False

    if args.command == "star":
        for raw in args.paths:
            item = host.item_for(raw)
            if not host.is_persistent(item):
                sys.stderr.write(f"skipping missing path: {raw}\n")
                continue
            panel.star(item)
        _print_starred(panel, host)
        return True

    if args.command == "unstar":
        items = [host.item_for(raw) for raw in args.paths]
        removed = panel.unstar(*items)
        logger.debug("unstarred %d item(s)", removed)
        _print_starred(panel, host)
        return True

    if args.command == "move":
        try:
            panel.reorder_bookmark(args.from_index, args.to_index)
        except InvalidIndexError as exc:
            raise SystemExit(f"Cannot move: {exc}") from exc
        _print_starred(panel, host)
        return True

    if args.command == "clear":
        panel.clear_bookmarks()
        return True

    if args.value is None:
        sys.stdout.write(f"{panel.config.max_history}\n")
        return False
    panel.set_max_history(args.value)
    sys.stdout.write(f"{panel.config.max_history}\n")
    return True


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and apply one command to the persisted state."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    config_path = Path(args.config) if args.config else config_module.CONFIG_PATH
    host = FileSystemHost()
    panel = RecentStarPanel(host=host, store=JsonConfigStore(config_path))
    panel.open()
    changed = False
    try:
        changed = _run(args, panel, host)
    finally:
        panel.close(save=changed)


if __name__ == "__main__":
    main()
