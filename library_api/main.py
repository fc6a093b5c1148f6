"""
Library API -- Application entry point.

Run with:
    uvicorn library_api.main:app --port 3000

or simply ``library-api`` once the package is installed.

This file:
  1. Configures logging for the whole process
  2. Builds the FastAPI application around one BookStore
  3. Loads the OpenAPI document from the schema registry before serving
     (startup fails if the registry is unreachable or returns garbage)
  4. Mounts the route modules and the JSON error handlers
  5. Logs every request
"""

import asyncio
import logging
import time
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, Request

from library_api.config import SERVICE_VERSION, Settings
from library_api.errors import install_error_handlers
from library_api.registry import RegistryError, load_schema
from library_api.routes import books, docs, health
from library_api.store import BookStore

# ---------------------------------------------------------------------------
# Logging
#
# Configured once for the whole process. Every module logs through its own
# logging.getLogger(__name__).
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    store: BookStore | None = None,
    transport: httpx.BaseTransport | None = None,
) -> FastAPI:
    """Build the application.

    ``transport`` is only used for the registry fetch; tests pass an
    ``httpx.MockTransport`` to stand in for the registry.
    """
    settings = settings or Settings.from_env()

    # -----------------------------------------------------------------------
    # Startup
    #
    # The schema document is fetched once, before the first request. If the
    # registry fails, the exception escapes the lifespan and uvicorn exits.
    # -----------------------------------------------------------------------

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Blocking fetch, kept off the event loop.
        try:
            app.state.schema_document = await asyncio.to_thread(
                load_schema, settings.content_url, transport
            )
        except RegistryError as e:
            logger.error("Failed to fetch OpenAPI spec: %s", e)
            raise

        logger.info("Successfully loaded OpenAPI spec from registry (version: %s)", settings.version)
        logger.info("Server running on http://localhost:%d", settings.port)
        logger.info("API documentation available at http://localhost:%d/api-docs", settings.port)
        yield

    # FastAPI's generated docs are switched off: /api-docs serves the
    # registry's document instead.
    app = FastAPI(
        title="Library API",
        version=SERVICE_VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else BookStore()

    # -----------------------------------------------------------------------
    # Error handlers and routes
    #
    # Every error leaves as {"error": "..."}; see errors.py.
    # -----------------------------------------------------------------------

    install_error_handlers(app)

    app.include_router(docs.router)
    app.include_router(books.router)
    app.include_router(health.router)

    # -----------------------------------------------------------------------
    # Request log
    #
    # One line per request, including those that end in the 500 handler.
    # -----------------------------------------------------------------------

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.monotonic()
        try:
            response = await call_next(request)
        except Exception:
            _log_request(request, 500, start)
            raise
        _log_request(request, response.status_code, start)
        return response

    return app


def _log_request(request: Request, status_code: int, start: float) -> None:
    elapsed_ms = (time.monotonic() - start) * 1000
    logger.info(
        "%s %s -> %d (%.1fms)",
        request.method, request.url.path, status_code, elapsed_ms,
    )


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

app = create_app()


def run() -> None:
    settings: Settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
