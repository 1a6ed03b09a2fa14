from __future__ import annotations

import logging

from settings import Settings

from .disk_store import DiskJsonDocumentStore
from .interfaces import KeyValueDocumentStore
from .redis_store import RedisDocumentStore
from .rest_store import RestKeyValueDocumentStore

logger = logging.getLogger(__name__)


def select_backend(settings: Settings) -> KeyValueDocumentStore:
    """
    Pick the storage backend once, by what the environment provides:

    1. HTTP key-value service (KV_REST_API_URL + KV_REST_API_TOKEN)
    2. Redis (REDIS_URL)
    3. local JSON file (DATA_FILE)

    Credentials are not checked here; a bad URL or token shows up as a failed
    read or write later.
    """
    if settings.kv_rest_api_url and settings.kv_rest_api_token:
        logger.info("STORAGE: using HTTP key-value service at %s", settings.kv_rest_api_url)
        return RestKeyValueDocumentStore(
            settings.kv_rest_api_url,
            settings.kv_rest_api_token,
            key=settings.storage_key,
            timeout=settings.remote_timeout_seconds,
        )

    if settings.redis_url:
        logger.info("STORAGE: using Redis")
        return RedisDocumentStore(settings.redis_url, key=settings.storage_key)

    logger.info("STORAGE: using local file %s", settings.data_file)
    return DiskJsonDocumentStore(settings.data_file)
