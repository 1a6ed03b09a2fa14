from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from json_store import atomic_write_json, read_json

from .interfaces import KeyValueDocumentStore


class DiskJsonDocumentStore(KeyValueDocumentStore):
    """
    Stores a single JSON document on disk at a fixed path.

    - Returns None when the file is missing or empty.
    - Raises ValueError when the file holds something other than a JSON object.
    - Writes atomically.
    """

    kind = "file"

    def __init__(self, path: Path):
        self._path = path
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any] | None:
        with self._lock:
            raw = read_json(self._path)
        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise ValueError(f"{self._path} does not hold a JSON object")
        return raw

    def save(self, doc: dict[str, Any]) -> None:
        with self._lock:
            atomic_write_json(self._path, doc)
