from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from particles import ParticleConfig
from persistence import AsyncDocumentStore

from .dependencies import get_store

router = APIRouter(prefix="/api", tags=["data"])


@router.get("/data")
async def get_data(store: AsyncDocumentStore = Depends(get_store)):
    doc = await store.read()
    return doc.to_public_doc()


@router.get("/hello")
async def hello():
    return {"message": "Hello from the portfolio!"}


@router.get("/particles/config")
async def particles_config(narrow: bool = False):
    """Animation tuning for public/js/particles.js; ``narrow`` halves the particle count."""
    return asdict(ParticleConfig.for_viewport(narrow=narrow))
