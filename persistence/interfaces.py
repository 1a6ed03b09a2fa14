from __future__ import annotations

from typing import Any, Protocol


class KeyValueDocumentStore(Protocol):
    """
    Minimal backend interface: a single JSON-like document persisted under a key.

    Backends raise on transport or decoding errors; DocumentStore decides how
    to degrade.
    """

    kind: str

    def load(self) -> dict[str, Any] | None:
        """Load and return the full document, or None when nothing is stored."""
        ...

    def save(self, doc: dict[str, Any]) -> None:
        """Persist the full document, replacing whatever was stored."""
        ...
