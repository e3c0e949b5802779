"""
FastAPI Application Entry Point

This module builds the FastAPI application and configures:
- API routes
- Middleware (request logging)
- Exception handlers mapping service errors to plain-text responses
- Loading the slug store once at startup

Design Decisions:
- create_app() takes its Settings explicitly, so tests and the command
  line entry point can build independent applications
- The store lives on app.state and reaches endpoints via dependencies
- No docs/OpenAPI routes: every GET path is a potential slug
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortlink import __version__
from shortlink.api import endpoints
from shortlink.core.exceptions import SlugNotFoundError, SlugSpaceExhaustedError, UnauthorizedError
from shortlink.core.setting import Settings, settings as default_settings
from shortlink.middleware.logging import add_logging_middleware
from shortlink.services.slug_store import SlugStore
from shortlink.storage import get_storage_backend

logger = logging.getLogger(__name__)


def load_store(config: Settings) -> SlugStore:
    """Read the storage file named in the settings into a new store."""
    backend = get_storage_backend(config.STORAGE_FILE)
    return SlugStore.load(
        backend,
        slug_length=config.SLUG_LENGTH,
        max_attempts=config.SLUG_MAX_ATTEMPTS,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the slug store on startup."""
    store = load_store(app.state.settings)
    app.state.store = store
    logger.info(f"starting... we have {len(store)} URLs shortened so far")
    yield


async def unauthorized_handler(request: Request, exc: UnauthorizedError) -> PlainTextResponse:
    return PlainTextResponse("Not authorized", status_code=status.HTTP_401_UNAUTHORIZED)


async def not_found_handler(request: Request, exc: SlugNotFoundError) -> PlainTextResponse:
    return PlainTextResponse("404 page not found", status_code=status.HTTP_404_NOT_FOUND)


async def routing_error_handler(request: Request, exc: StarletteHTTPException):
    # Unknown methods on a slug path are reported as not found, not 405
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return await not_found_handler(request, exc)
    return await http_exception_handler(request, exc)


async def slug_space_exhausted_handler(request: Request, exc: SlugSpaceExhaustedError) -> PlainTextResponse:
    logger.error(f"{exc}; increase SLUG_LENGTH")
    return PlainTextResponse(
        "Could not allocate a new slug",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration to use (defaults to the environment settings)

    Returns:
        Configured FastAPI instance; the store is loaded when it starts
    """
    app = FastAPI(
        title="Shortlink",
        description="Minimal URL shortening service",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings or default_settings

    app.add_exception_handler(UnauthorizedError, unauthorized_handler)
    app.add_exception_handler(SlugNotFoundError, not_found_handler)
    app.add_exception_handler(StarletteHTTPException, routing_error_handler)
    app.add_exception_handler(SlugSpaceExhaustedError, slug_space_exhausted_handler)

    add_logging_middleware(app)

    app.include_router(endpoints.router)

    return app


app = create_app()
