from __future__ import annotations

import json
from typing import Any

import redis

from .interfaces import KeyValueDocumentStore


class RedisDocumentStore(KeyValueDocumentStore):
    """Stores the document as a JSON string under one Redis key."""

    kind = "redis"

    def __init__(self, url: str, *, key: str, client: redis.Redis | None = None) -> None:
        self._key = key
        self.client = client if client is not None else redis.Redis.from_url(url)

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> dict[str, Any] | None:
        raw = self.client.get(self._key)
        if raw is None:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        doc = json.loads(raw)
        if not isinstance(doc, dict):
            raise ValueError(f"value at {self._key!r} is not a JSON object")
        return doc

    def save(self, doc: dict[str, Any]) -> None:
        self.client.set(self._key, json.dumps(doc, ensure_ascii=False))

    def close(self) -> None:
        self.client.close()
