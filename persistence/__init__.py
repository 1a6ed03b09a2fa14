from __future__ import annotations

from .disk_store import DiskJsonDocumentStore
from .document import RESOURCES, AdminRecord, Item, PortfolioDocument, new_item_id
from .document_store import AsyncDocumentStore, DocumentStore
from .factory import select_backend
from .interfaces import KeyValueDocumentStore
from .redis_store import RedisDocumentStore
from .rest_store import KeyValueServiceError, RestKeyValueDocumentStore

__all__ = [
    "RESOURCES",
    "AdminRecord",
    "Item",
    "PortfolioDocument",
    "new_item_id",
    "KeyValueDocumentStore",
    "DiskJsonDocumentStore",
    "RestKeyValueDocumentStore",
    "KeyValueServiceError",
    "RedisDocumentStore",
    "DocumentStore",
    "AsyncDocumentStore",
    "select_backend",
]
