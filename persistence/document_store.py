from __future__ import annotations

import asyncio
import logging

from pydantic import ValidationError

from .document import PortfolioDocument
from .interfaces import KeyValueDocumentStore

logger = logging.getLogger(__name__)


class DocumentStore:
    """
    Reads and writes the whole portfolio document through one backend.

    Reads never fail: a missing, unreadable or invalid document degrades to the
    default document, which is flagged so it is never written over the stored
    value. Writes report success as a bool instead of raising.
    There is no locking across read and write; the last writer wins.
    """

    def __init__(self, backend: KeyValueDocumentStore, *, default_admin_password: str) -> None:
        self._backend = backend
        self._default_admin_password = default_admin_password

    @property
    def backend(self) -> KeyValueDocumentStore:
        return self._backend

    def default_document(self) -> PortfolioDocument:
        return PortfolioDocument.default(self._default_admin_password)

    def read(self) -> PortfolioDocument:
        try:
            raw = self._backend.load()
        except Exception as e:
            logger.warning("DATA READ: %s backend failed: %r", self._backend.kind, e)
            return PortfolioDocument.fallback(self._default_admin_password)

        if raw is None:
            return self.default_document()

        try:
            return PortfolioDocument.from_disk_doc(raw, admin_password=self._default_admin_password)
        except ValidationError as e:
            logger.warning("DATA READ: stored document is invalid, using defaults: %s", e)
            return PortfolioDocument.fallback(self._default_admin_password)

    def write(self, doc: PortfolioDocument) -> bool:
        if doc.is_fallback:
            # The stored value may still hold real data we failed to load.
            logger.warning("DATA WRITE: refusing to overwrite %s backend with a fallback document", self._backend.kind)
            return False
        try:
            self._backend.save(doc.to_disk_doc())
        except Exception as e:
            logger.warning("DATA WRITE: %s backend failed: %r", self._backend.kind, e)
            return False
        return True


class AsyncDocumentStore:
    """
    Async wrapper around DocumentStore.
    Uses asyncio.to_thread to avoid blocking the event loop on file/network I/O.
    """

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    @property
    def sync(self) -> DocumentStore:
        return self._store

    async def read(self) -> PortfolioDocument:
        return await asyncio.to_thread(self._store.read)

    async def write(self, doc: PortfolioDocument) -> bool:
        return await asyncio.to_thread(self._store.write, doc)
