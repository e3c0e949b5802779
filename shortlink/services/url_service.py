"""
URL Shortening Service

This service handles the submission side of the shortener:
- Checking the shared secret
- Returning the existing slug for an already shortened URL
- Otherwise allocating a slug and persisting the new entry

No validation is applied to the URL beyond rejecting an empty one; the
service is meant to sit behind a reverse proxy and be used by trusted
callers holding the secret.
"""

import hmac
import logging
from typing import Optional

from shortlink.core.exceptions import UnauthorizedError
from shortlink.core.setting import Settings
from shortlink.services.slug_store import SlugStore

logger = logging.getLogger(__name__)


def build_short_url(server_name: str, slug: str) -> str:
    """
    Join the public server name and a slug.

    Example:
        build_short_url("http://localhost", "aB3xY") -> "http://localhost/aB3xY"
    """
    return f"{server_name}/{slug}"


class URLShorteningService:
    """
    Core business logic for creating short URLs.

    Separated from API layer for testability.
    """

    def __init__(self, store: SlugStore, settings: Settings):
        """
        Initialize the URL shortening service.

        Args:
            store: Slug store holding all mappings
            settings: Provides the shared secret and public server name
        """
        self.store = store
        self.settings = settings

    def is_authorized(self, secret: Optional[str]) -> bool:
        """Compare the submitted secret with the configured one in constant time."""
        if secret is None:
            return False
        return hmac.compare_digest(secret.encode("utf-8"), self.settings.SECRET.encode("utf-8"))

    async def submit(self, secret: Optional[str], url: Optional[str], slug: Optional[str] = None) -> str:
        """
        Create a short URL, or return the existing one for this URL.

        Args:
            secret: Shared secret supplied by the caller
            url: The long URL to shorten
            slug: Optional explicitly requested slug

        Returns:
            Fully qualified short URL

        Raises:
            UnauthorizedError: If the secret is wrong or the URL is empty
            SlugSpaceExhaustedError: If no unused slug could be generated
        """
        if not self.is_authorized(secret) or not url:
            raise UnauthorizedError()

        new_slug, created = await self.store.shorten(url, desired=slug)
        if created:
            logger.info(f"added new shortening: {new_slug} for {url}")

        return build_short_url(self.settings.SERVER_NAME, new_slug)
