"""
Redirect Service

This service handles URL redirection logic.
Separated from URL service so lookups never touch the write path.
"""

from typing import Optional

from shortlink.core.exceptions import SlugNotFoundError
from shortlink.services.slug_store import SlugStore


class RedirectService:
    """
    Service for handling URL redirections.
    """

    def __init__(self, store: SlugStore):
        """
        Initialize the redirect service with the slug store.

        Args:
            store: Slug store holding all mappings
        """
        self.store = store

    async def get_redirect_url(self, slug: str) -> Optional[str]:
        """
        Get the original URL for redirection.
        """
        return await self.store.lookup(slug)

    async def resolve(self, slug: str) -> str:
        """
        Get the original URL, failing for unknown slugs.

        Raises:
            SlugNotFoundError: If the slug is not in the store
        """
        url = await self.get_redirect_url(slug)
        if url is None:
            raise SlugNotFoundError(slug)
        return url
