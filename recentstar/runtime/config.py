"""Persistent JSON config helpers and key-value store views over them.

Stores the history bound and the starred-items blob in a per-user config file.
Malformed or missing config falls back to empty values.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from platformdirs import user_config_dir

from ..stores.history import DEFAULT_MAX_HISTORY

logger = logging.getLogger(__name__)

APP_NAME = "recentstar"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


@dataclass(frozen=True)
class HistoryConfig:
    """User-tunable panel settings."""

    max_history: int = DEFAULT_MAX_HISTORY

    def __post_init__(self) -> None:
        if isinstance(self.max_history, bool) or not isinstance(self.max_history, int) or self.max_history <= 0:
            raise ValueError(f"max_history must be a positive integer, got {self.max_history!r}")


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = path if path is not None else CONFIG_PATH
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception:
        logger.warning("ignoring unreadable config at %s", config_path)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object], path: Path | None = None) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is logged and ignored to keep runtime
    behavior non-fatal when config cannot be written.
    """
    config_path = path if path is not None else CONFIG_PATH
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        logger.warning("could not write config to %s", config_path, exc_info=True)


class KeyValueStore(Protocol):
    """User-scoped preference store."""

    def contains(self, key: str) -> bool: ...

    def get(self, key: str, default: object = None) -> object: ...

    def set(self, key: str, value: object) -> None: ...


class JsonConfigStore:
    """Key-value view over the JSON config file.

    Every write rewrites the file so other keys written by earlier sessions
    are preserved.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path if self._path is not None else CONFIG_PATH

    def contains(self, key: str) -> bool:
        return key in load_config(self.path)

    def get(self, key: str, default: object = None) -> object:
        return load_config(self.path).get(key, default)

    def set(self, key: str, value: object) -> None:
        config = load_config(self.path)
        config[key] = value
        save_config(config, self.path)


class MemoryConfigStore:
    """Dict-backed store for tests and embedding hosts."""

    def __init__(self, initial: dict[str, object] | None = None) -> None:
        self.data: dict[str, object] = dict(initial or {})

    def contains(self, key: str) -> bool:
        return key in self.data

    def get(self, key: str, default: object = None) -> object:
        return self.data.get(key, default)

    def set(self, key: str, value: object) -> None:
        self.data[key] = value


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "HistoryConfig",
    "JsonConfigStore",
    "KeyValueStore",
    "MemoryConfigStore",
    "load_config",
    "save_config",
]
