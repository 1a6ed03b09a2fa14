from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

PUBLIC_DIR = Path(__file__).resolve().parents[1] / "public"

PAGES: dict[str, str] = {
    "/": "index.html",
    "/projects": "projects.html",
    "/certificates": "certificates.html",
    "/partners": "partners.html",
    "/contact": "contact.html",
    "/admin": "admin.html",
}

router = APIRouter(tags=["pages"])


def _page_handler(filename: str):
    async def page() -> FileResponse:
        path = PUBLIC_DIR / filename
        if not path.is_file():
            raise HTTPException(status_code=404, detail="Page not found")
        return FileResponse(path, media_type="text/html")

    return page


for _route, _filename in PAGES.items():
    router.add_api_route(_route, _page_handler(_filename), methods=["GET"], name=_filename.removesuffix(".html"))
