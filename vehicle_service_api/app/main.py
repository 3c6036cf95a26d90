"""
Main entrypoint for the Vehicle Service Booking API.

This module assembles the FastAPI application: logging, CORS, error
rendering, routes and the in‑memory store.  ``create_app`` builds a
new app (with a new, empty or seeded store) every time it is called;
``app`` is the instance created at import time for ASGI servers::

    uvicorn vehicle_service_api.app.main:app --port 3000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.store import InMemoryStore
from .schemas.base import describe_errors


logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"error": ...}``.

    Unknown paths and unsupported methods both get the generic 404.
    """
    if exc.status_code in (404, 405) and exc.detail in ("Not Found", "Method Not Allowed"):
        return JSONResponse(status_code=404, content={"error": "Not found"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


async def strip_trailing_slash(request: Request, call_next):
    """Route ``/api/vehicles/`` like ``/api/vehicles`` instead of redirecting."""
    path = request.scope["path"]
    if len(path) > 1 and path.endswith("/"):
        request.scope["path"] = path.rstrip("/") or "/"
    return await call_next(request)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed request bodies as a 400 with the first problem found."""
    return JSONResponse(status_code=400, content={"error": describe_errors(exc.errors())})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Overrides the module‑level settings, mostly for tests.

    Returns
    -------
    FastAPI
        A configured application whose ``state.store`` holds a fresh
        ``InMemoryStore``.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Server running on http://localhost:%s", settings.port)
        yield

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = InMemoryStore.create(seed_demo_data=settings.seed_demo_data)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(strip_trailing_slash)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.get("/", tags=["root"])
    async def read_root() -> dict:
        return {"message": "Vehicle Service Booking API is running"}

    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
