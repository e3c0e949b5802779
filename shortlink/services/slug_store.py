"""
Slug Store

Keeps the slug -> URL mapping in memory, together with the reverse
URL -> slug mapping used to deduplicate submissions, and persists the
forward mapping through a StorageBackend after every new entry.

Concurrency:
- Both mappings are guarded by one reader/writer lock
- Lookups take the read lock and may run concurrently
- A submission holds the write lock for the whole check / insert / persist
  sequence, so two submissions can neither create two slugs for one URL
  nor claim the same random slug

Entries are never updated or deleted once created.
"""

import logging
import secrets
from typing import Optional

from aiorwlock import RWLock

from shortlink.core.exceptions import SlugSpaceExhaustedError
from shortlink.core.validators import SLUG_ALPHABET, is_valid_slug
from shortlink.storage.interface import StorageBackend

logger = logging.getLogger(__name__)

DEFAULT_SLUG_LENGTH = 5
DEFAULT_MAX_ATTEMPTS = 100_000


class SlugStore:
    """
    Bidirectional in-memory slug mapping with file persistence.

    Entries added through shorten() keep forward and reverse one-to-one;
    only put() mutates the mappings.
    """

    def __init__(
        self,
        backend: StorageBackend,
        slug_length: int = DEFAULT_SLUG_LENGTH,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        """
        Initialize an empty store.

        Args:
            backend: Where entries are persisted
            slug_length: Length of generated slugs
            max_attempts: Random candidates tried before giving up
        """
        if slug_length < 1:
            raise ValueError("slug_length must be at least 1")

        self.backend = backend
        self.slug_length = slug_length
        self.max_attempts = max_attempts

        self._forward: dict[str, str] = {}
        self._reverse: dict[str, str] = {}
        self._lock = RWLock()

    @classmethod
    def load(
        cls,
        backend: StorageBackend,
        slug_length: int = DEFAULT_SLUG_LENGTH,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> "SlugStore":
        """
        Build a store from the entries persisted in the backend.

        Stored slug lengths are not checked against slug_length.
        """
        store = cls(backend, slug_length=slug_length, max_attempts=max_attempts)
        for slug, url in backend.load().items():
            store._forward[slug] = url
            store._reverse[url] = slug

        # A hand-edited file may list one URL under several slugs; all of them
        # keep resolving, and resubmitting the URL returns the last one read.
        duplicates = len(store._forward) - len(store._reverse)
        if duplicates:
            logger.warning(
                f"{duplicates} entries in {backend.describe()} point to an already listed URL"
            )
        return store

    def __len__(self) -> int:
        return len(self._forward)

    def snapshot(self) -> dict[str, str]:
        """Copy of the forward mapping."""
        return dict(self._forward)

    async def lookup(self, slug: str) -> Optional[str]:
        """
        Get the URL stored for a slug.

        Args:
            slug: The slug to resolve

        Returns:
            The target URL, or None if the slug is unknown
        """
        async with self._lock.reader_lock:
            return self._forward.get(slug)

    async def reverse_lookup(self, url: str) -> Optional[str]:
        """
        Get the slug already assigned to a URL.

        Args:
            url: The target URL

        Returns:
            The existing slug, or None if the URL was never shortened
        """
        async with self._lock.reader_lock:
            return self._reverse.get(url)

    def put(self, slug: str, url: str) -> None:
        """
        Insert a new entry into both mappings.

        The caller must hold the write lock and must have checked that
        neither the slug nor the URL is already present.
        """
        self._forward[slug] = url
        self._reverse[url] = slug

    def persist(self) -> bool:
        """
        Write the whole forward mapping to the backend.

        Returns:
            True if the backend accepted the write
        """
        return self.backend.persist(self._forward)

    def generate_slug(self) -> str:
        """Draw one random candidate slug of the configured length."""
        return "".join(secrets.choice(SLUG_ALPHABET) for _ in range(self.slug_length))

    def generate_unique_slug(self) -> str:
        """
        Draw candidates until one is not in the forward mapping.

        Raises:
            SlugSpaceExhaustedError: If max_attempts candidates were all taken
        """
        for _ in range(self.max_attempts):
            slug = self.generate_slug()
            if slug not in self._forward:
                return slug
        raise SlugSpaceExhaustedError(self.max_attempts, self.slug_length)

    def choose_slug(self, desired: Optional[str] = None) -> str:
        """
        Pick the slug for a new entry.

        An explicit slug is used as-is when it is non-empty, made only of
        alphabet characters and not yet taken; it may have any length.

        Note: an invalid or taken explicit slug silently falls back to a
        random one. Callers can only tell by comparing the returned slug.
        """
        if is_valid_slug(desired) and desired not in self._forward:
            return desired
        return self.generate_unique_slug()

    async def shorten(self, url: str, desired: Optional[str] = None) -> tuple[str, bool]:
        """
        Get or create the slug for a URL.

        Runs the reverse lookup, slug choice, insert and persist under the
        write lock.

        Args:
            url: The target URL
            desired: Optional explicitly requested slug

        Returns:
            Tuple of (slug, created); created is False when the URL already
            had a slug and nothing was written

        Raises:
            SlugSpaceExhaustedError: If no unused slug could be generated
        """
        async with self._lock.writer_lock:
            existing = self._reverse.get(url)
            if existing is not None:
                return existing, False

            slug = self.choose_slug(desired)
            self.put(slug, url)
            if not self.persist():
                logger.error(
                    f"Slug '{slug}' is only held in memory until the next successful write"
                )
            return slug, True
