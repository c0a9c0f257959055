"""
main.py
-------
Application factory. The store is opened and its table verified when the
app starts, and closed when it stops. A failing schema check aborts startup.
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from webloom import __version__
from webloom.api import router as api_router
from webloom.config import Settings, get_settings
from webloom.database.connection import SubmissionStore
from webloom.errors import PersistenceError, ValidationError

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, store: SubmissionStore | None = None) -> FastAPI:
    """
    Builds the app. Without ``store`` one is created from ``settings`` at
    startup and disposed at shutdown; a store passed in stays open and
    belongs to the caller.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_store = store is None
        app_store = store if store is not None else SubmissionStore.from_settings(settings)
        logger.info("Database configuration: %s", settings.describe_database())
        try:
            app_store.ensure_schema()
        except Exception:
            if owns_store:
                app_store.close()
            raise
        app.state.store = app_store
        try:
            yield
        finally:
            if owns_store:
                app_store.close()
                logger.info("Database connections closed")

    app = FastAPI(
        title="Webloom lead form",
        description="Stores contact form submissions and lists them back.",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Accept"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        # Method, path and status only; headers and bodies may contain personal data
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.exception("%s %s -> unhandled error (%.1f ms)", request.method, request.url.path, elapsed_ms)
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        content = {"error": exc.message}
        if exc.details is not None:
            content["details"] = exc.details
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)

    # --- API routes ---
    app.include_router(api_router)

    return app
