"""
Dependency wiring for the FastAPI app.

The document store and settings are built once in ``create_app`` and kept on
``app.state``; handlers receive them through these dependencies.
"""

from __future__ import annotations

from fastapi import Request

from persistence import AsyncDocumentStore
from settings import Settings


def get_store(request: Request) -> AsyncDocumentStore:
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
