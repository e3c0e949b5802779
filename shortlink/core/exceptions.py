"""
Custom Exceptions

Services raise these; the FastAPI exception handlers registered in
shortlink.main translate them into plain-text HTTP responses.
"""


class ShortlinkException(Exception):
    """Base exception for the shortlink service."""
    pass


class UnauthorizedError(ShortlinkException):
    """Raised when a submission has the wrong secret or an empty URL."""

    def __init__(self, reason: str = "Not authorized"):
        self.reason = reason
        super().__init__(reason)


class SlugNotFoundError(ShortlinkException):
    """Raised when a slug is not present in the store."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Slug '{slug}' not found")


class SlugSpaceExhaustedError(ShortlinkException):
    """
    Raised when no unused slug could be generated within the attempt budget.

    This means the configured slug length is too small for the number of
    stored entries.
    """

    def __init__(self, attempts: int, slug_length: int):
        self.attempts = attempts
        self.slug_length = slug_length
        super().__init__(
            f"Tried generating {attempts} slugs of length {slug_length} "
            f"and could not find an unused one"
        )
