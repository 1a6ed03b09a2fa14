from __future__ import annotations

import json
from typing import Any

import httpx

from .interfaces import KeyValueDocumentStore


class KeyValueServiceError(RuntimeError):
    """The HTTP key-value service answered with an error payload."""


class RestKeyValueDocumentStore(KeyValueDocumentStore):
    """
    Stores the document as a JSON string under one key of an HTTP key-value
    service speaking the Upstash / Vercel KV REST protocol:

      POST {url}  Authorization: Bearer <token>
      body: ["GET", key]  or  ["SET", key, value]
      reply: {"result": ...}  or  {"error": "..."}
    """

    kind = "rest"

    def __init__(
        self,
        url: str,
        token: str,
        *,
        key: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._key = key
        self._client = httpx.Client(
            base_url=url,
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout,
            transport=transport,
        )

    @property
    def key(self) -> str:
        return self._key

    def _command(self, *args: str) -> Any:
        resp = self._client.post("/", json=list(args))
        resp.raise_for_status()
        body = resp.json()
        if not isinstance(body, dict):
            raise KeyValueServiceError(f"unexpected reply: {body!r}")
        if body.get("error"):
            raise KeyValueServiceError(str(body["error"]))
        return body.get("result")

    def load(self) -> dict[str, Any] | None:
        raw = self._command("GET", self._key)
        if raw is None:
            return None
        # Some clients store the object directly rather than a string.
        doc = json.loads(raw) if isinstance(raw, str) else raw
        if not isinstance(doc, dict):
            raise ValueError(f"value at {self._key!r} is not a JSON object")
        return doc

    def save(self, doc: dict[str, Any]) -> None:
        self._command("SET", self._key, json.dumps(doc, ensure_ascii=False))

    def close(self) -> None:
        self._client.close()
