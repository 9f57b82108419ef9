"""Synchronous key-value stores for persisted Explore data.

Values are strings, like browser local storage. `get_object` and
`set_object` layer JSON on top for structured values such as history
lists. Backends only implement the four primitive operations.
"""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from explore_session.errors import StoreError

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Abstract string store with JSON helpers."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored text, or None if the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store `value` under `key`, replacing any previous value."""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Whether `key` holds a value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete `key`. Absent keys are ignored."""

    def get_object(self, key: str, default: Any = None) -> Any:
        """Decode the JSON stored under `key`.

        Unreadable text is logged and treated as missing.
        """
        if not self.exists(key):
            return default
        text = self.get(key)
        try:
            return json.loads(text)
        except (TypeError, json.JSONDecodeError) as e:
            logger.error(
                f"Error parsing store object: {key}. "
                f"Returning default: {default}. [{e}]"
            )
            return default

    def set_object(self, key: str, value: Any) -> None:
        """Encode `value` as JSON and store it.

        Raises:
            StoreError: If `value` is not JSON-serializable.
        """
        try:
            text = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StoreError(f"Could not stringify object: {key}. [{e}]") from e
        self.set(key, text)


class MemoryStore(KeyValueStore):
    """Process-local store. Contents are lost on exit."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(data or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def exists(self, key: str) -> bool:
        return key in self._data

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()


class JsonFileStore(KeyValueStore):
    """Store backed by a single JSON file mapping keys to strings.

    The file is read on every access and rewritten in full on every
    mutation, so several instances (or processes) pointing at the same
    file see each other's writes. Concurrent writers race; the last one
    wins.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            text = f.read()
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Store file {self.path} is corrupt, starting empty: {e}")
            return {}
        if not isinstance(data, dict):
            logger.error(f"Store file {self.path} does not hold an object, ignoring")
            return {}
        return data

    def _write(self, data: dict[str, str]) -> None:
        # A failed write leaves the previous file in place.
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def exists(self, key: str) -> bool:
        return key in self._read()

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)


# Process-wide default, replaced by hosts that want persistence.
_default_store: KeyValueStore = MemoryStore()


def get_default_store() -> KeyValueStore:
    return _default_store


def set_default_store(store: KeyValueStore) -> None:
    global _default_store
    logger.info(f"Default store set to {type(store).__name__}")
    _default_store = store


def create_store(path: Path | str | None = None) -> KeyValueStore:
    """File-backed store when a path is given, the process default otherwise."""
    if path is None:
        return get_default_store()
    return JsonFileStore(path)
