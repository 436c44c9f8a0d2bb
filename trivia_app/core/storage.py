"""Key-value persistence for identity, question bank, analytics and preferences.

Every component reads and writes through a ``KeyValueStore`` handed to it by
the application root, so tests can swap in ``MemoryStore``.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
import re
import tempfile
from typing import Any, Protocol

logger = logging.getLogger(__name__)

JsonValue = Any

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class StorageError(Exception):
    """Raised when a value cannot be written to the store."""


class KeyValueStore(Protocol):
    """Minimal JSON key-value store."""

    def get(self, key: str) -> JsonValue | None:
        """Return the decoded value for ``key`` or ``None`` when absent or unreadable."""

    def set(self, key: str, value: JsonValue) -> None:
        """Store ``value`` under ``key``."""

    def remove(self, key: str) -> None:
        """Delete ``key``; removing a missing key is not an error."""


class MemoryStore:
    """In-memory store. Values are deep-copied on the way in and out."""

    def __init__(self, initial: dict[str, JsonValue] | None = None) -> None:
        self._values: dict[str, JsonValue] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str) -> JsonValue | None:
        if key not in self._values:
            return None
        return copy.deepcopy(self._values[key])

    def set(self, key: str, value: JsonValue) -> None:
        # Round-trip through JSON so non-serializable values fail here as they would on disk.
        try:
            self._values[key] = json.loads(json.dumps(value))
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Value for '{key}' is not JSON serializable.") from exc

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._values)


class JsonFileStore:
    """Stores each key as ``<directory>/<key>.json``."""

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    def get(self, key: str) -> JsonValue | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable stored value for '%s': %s", key, exc)
            return None

    def set(self, key: str, value: JsonValue) -> None:
        path = self._path_for(key)
        try:
            document = json.dumps(value, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Value for '{key}' is not JSON serializable.") from exc

        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, temp_name = tempfile.mkstemp(dir=self._directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(document)
                os.replace(temp_name, path)
            except BaseException:
                Path(temp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Could not write '{key}' to {path}: {exc}") from exc

    def remove(self, key: str) -> None:
        try:
            self._path_for(key).unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Could not remove '{key}': {exc}") from exc

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"
