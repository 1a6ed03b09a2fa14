from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from persistence import RESOURCES, AsyncDocumentStore, Item, new_item_id

from .dependencies import get_store

logger = logging.getLogger(__name__)


def _save_failed() -> JSONResponse:
    return JSONResponse({"error": "Failed to save data"}, status_code=500)


def build_crud_router(resource: str) -> APIRouter:
    """
    Create/update/delete routes for one resource list of the document.

    Every call reads the whole document, changes one list and writes the
    whole document back.
    """
    if resource not in RESOURCES:
        raise ValueError(f"unknown resource: {resource!r}")

    router = APIRouter(prefix=f"/api/{resource}", tags=[resource])

    @router.post("")
    async def create_item(body: dict[str, Any], store: AsyncDocumentStore = Depends(get_store)):
        doc = await store.read()
        item = Item.from_fields(new_item_id(), body)
        doc.items(resource).append(item)
        if not await store.write(doc):
            return _save_failed()
        logger.info("CREATE %s id=%s", resource, item.id)
        return item.model_dump(mode="json")

    @router.put("/{item_id}")
    async def update_item(item_id: str, body: dict[str, Any], store: AsyncDocumentStore = Depends(get_store)):
        doc = await store.read()
        items = doc.items(resource)
        for index, existing in enumerate(items):
            if existing.id == item_id:
                break
        else:
            return JSONResponse({"error": "Item not found"}, status_code=404)

        item = Item.from_fields(item_id, body)
        items[index] = item
        if not await store.write(doc):
            return _save_failed()
        logger.info("UPDATE %s id=%s", resource, item_id)
        return item.model_dump(mode="json")

    @router.delete("/{item_id}")
    async def delete_item(item_id: str, store: AsyncDocumentStore = Depends(get_store)):
        doc = await store.read()
        items = doc.items(resource)
        kept = [i for i in items if i.id != item_id]
        doc.set_items(resource, kept)
        if not await store.write(doc):
            return _save_failed()
        logger.info("DELETE %s id=%s removed=%d", resource, item_id, len(items) - len(kept))
        return {"success": True}

    return router


def build_crud_routers() -> list[APIRouter]:
    return [build_crud_router(resource) for resource in RESOURCES]
