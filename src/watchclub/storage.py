"""Durable string key-value storage.

The client persists a handful of small string values (serialized JSON) the
way a browser uses local storage. ``KeyValueStore`` is the protocol the
cache depends on; two implementations ship:

- ``MemoryStorage``: process-lifetime only, used by tests and one-shot runs.
- ``FileStorage``: a single JSON object on disk, rewritten atomically on
  every change.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger("watchclub.storage")


@runtime_checkable
class KeyValueStore(Protocol):
    """A durable mapping of string keys to string values."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """In-memory ``KeyValueStore``."""

    __slots__ = ("_items",)

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __repr__(self) -> str:
        return f"MemoryStorage({sorted(self._items)!r})"


class FileStorage:
    """``KeyValueStore`` backed by one JSON file.

    The file is read lazily on first access. A missing, unreadable, or
    malformed file is treated as empty; the next write replaces it.
    Writes go to a temporary file in the same directory followed by
    ``os.replace`` so a crash never leaves a half-written file behind.
    """

    __slots__ = ("_items", "path")

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()
        self._items: dict[str, str] | None = None

    def _load(self) -> dict[str, str]:
        if self._items is not None:
            return self._items
        items: dict[str, str] = {}
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raw = ""
        except OSError as exc:
            logger.warning("Cannot read storage file %s: %s", self.path, exc)
            raw = ""
        if raw:
            try:
                data = json.loads(raw)
            except ValueError:
                logger.warning("Ignoring malformed storage file %s", self.path)
                data = {}
            if isinstance(data, dict):
                items = {str(k): v for k, v in data.items() if isinstance(v, str)}
        self._items = items
        return items

    def _flush(self) -> None:
        items = self._load()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=".watchclub-", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(items, handle, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        self._load()[key] = value
        self._flush()

    def remove_item(self, key: str) -> None:
        items = self._load()
        if key in items:
            del items[key]
            self._flush()

    def __repr__(self) -> str:
        return f"FileStorage({str(self.path)!r})"
