"""
FastAPI Endpoints for the Shortlink Service

Endpoints only handle:
- Reading form fields and path parameters
- Delegating to the service layer
- Building the HTTP response

Errors raised by the services are turned into responses by the exception
handlers registered in shortlink.main.

Routes:
- POST /submit          create (or fetch) a short URL, secret required
- GET|HEAD /<slug>      301 redirect to the stored URL
- anything else         404 (see routing_error_handler in shortlink.main)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import PlainTextResponse, RedirectResponse

from shortlink.api.dependencies import get_settings, get_store
from shortlink.core.setting import Settings
from shortlink.services.redirect_service import RedirectService
from shortlink.services.slug_store import SlugStore
from shortlink.services.url_service import URLShorteningService

router = APIRouter()


@router.post(
    "/submit",
    response_class=PlainTextResponse,
    summary="Create a short URL",
)
async def submit_url(
    secret: str = Form(default=""),
    url: str = Form(default=""),
    slug: Optional[str] = Form(default=None),
    store: SlugStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> PlainTextResponse:
    """
    Shorten a URL.

    Returns:
        The short URL as plain text

    Raises:
        UnauthorizedError: Wrong secret or empty URL (401)
        SlugSpaceExhaustedError: No free slug could be generated (500)
    """
    url_service = URLShorteningService(store, settings)
    short_url = await url_service.submit(secret, url, slug or None)
    return PlainTextResponse(short_url)


@router.api_route(
    "/{slug:path}",
    methods=["GET", "HEAD"],
    summary="Redirect to original URL",
)
async def redirect_to_url(
    slug: str,
    store: SlugStore = Depends(get_store),
) -> RedirectResponse:
    """
    Redirect to the original URL for a given slug.

    The whole path without its leading slash is the slug.

    Raises:
        SlugNotFoundError: Unknown slug (404)
    """
    redirect_service = RedirectService(store)
    original_url = await redirect_service.resolve(slug)
    return RedirectResponse(
        url=original_url,
        status_code=status.HTTP_301_MOVED_PERMANENTLY,
    )

