from __future__ import annotations

import contextlib
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    close = getattr(app.state.store.sync.backend, "close", None)
    if close is not None:
        close()


def create_app(settings=None, backend=None) -> FastAPI:
    load_dotenv("local.env")

    from endpoints import admin_endpoints, data_endpoints, page_endpoints
    from endpoints.crud_endpoints import build_crud_routers
    from persistence import AsyncDocumentStore, DocumentStore, select_backend
    from settings import get_settings

    settings = settings or get_settings()
    backend = backend or select_backend(settings)

    app = FastAPI(title="Portfolio", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = AsyncDocumentStore(
        DocumentStore(backend, default_admin_password=settings.admin_password)
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.debug_log_requests:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            response = await call_next(request)
            if request.url.path.startswith("/api/"):
                logger.info("API %s %s -> %s", request.method, request.url.path, response.status_code)
            return response

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def bad_request(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors and errors[0].get("loc", ("",))[0] == "body":
            return JSONResponse({"error": "Request body must be a JSON object"}, status_code=400)
        return JSONResponse({"error": "Invalid request parameters"}, status_code=400)

    @app.exception_handler(Exception)
    async def server_error(request: Request, exc: Exception):
        logger.exception("UNHANDLED %s %s", request.method, request.url.path)
        return JSONResponse({"error": "Internal server error"}, status_code=500)

    app.include_router(data_endpoints.router)
    app.include_router(admin_endpoints.router)
    for router in build_crud_routers():
        app.include_router(router)
    app.include_router(page_endpoints.router)

    # css/js and any other file under public/
    app.mount("/", StaticFiles(directory=page_endpoints.PUBLIC_DIR), name="public")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port)
