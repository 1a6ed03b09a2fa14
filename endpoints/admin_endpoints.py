from __future__ import annotations

import logging
from typing import Any

import jwt
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from persistence import AsyncDocumentStore, Item, new_item_id
from settings import Settings

from .dependencies import get_app_settings, get_store

router = APIRouter(prefix="/api/admin", tags=["admin"])
logger = logging.getLogger(__name__)

TOKEN_ALG = "HS256"

EXAMPLE_PROJECT: dict[str, Any] = {
    "title": "Portfolio Website",
    "description": "Personal portfolio with projects, certificates and partners.",
    "technologies": ["Python", "FastAPI", "JavaScript"],
    "image": "",
    "link": "",
}


def admin_token(secret: str) -> str:
    """
    Placeholder admin token. The payload carries no timestamp, so every
    successful login gets the same token; nothing verifies it server side.
    """
    return jwt.encode({"sub": "admin", "scope": "portfolio.admin"}, secret, algorithm=TOKEN_ALG)


@router.post("/login")
async def login(
    body: dict[str, Any],
    store: AsyncDocumentStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    doc = await store.read()
    password = body.get("password")
    if not isinstance(password, str) or password != doc.admin.password:
        logger.info("ADMIN LOGIN: rejected")
        return JSONResponse({"success": False, "message": "Invalid password"}, status_code=401)

    logger.info("ADMIN LOGIN: ok")
    return {"success": True, "token": admin_token(settings.token_secret)}


@router.post("/seed")
async def seed(store: AsyncDocumentStore = Depends(get_store)):
    doc = await store.read()
    if doc.projects:
        return {"success": True, "message": "Data already exists"}

    doc.projects.append(Item.from_fields(new_item_id(), EXAMPLE_PROJECT))
    if not await store.write(doc):
        return JSONResponse({"error": "Failed to save data"}, status_code=500)
    logger.info("SEED: inserted example project")
    return {"success": True, "message": "Example data seeded"}
