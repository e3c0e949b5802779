"""
Input Validators

Slugs are restricted to the 62 alphanumeric characters so they are safe
in a URL path and never contain the space used as the storage separator.
"""

import string

SLUG_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
_SLUG_CHARS = frozenset(SLUG_ALPHABET)


def is_valid_slug(slug) -> bool:
    """
    Check that an explicitly requested slug may be used as-is.

    Length is deliberately not checked: the configured length only applies
    to generated slugs.

    Args:
        slug: The candidate slug

    Returns:
        True if the slug is a non-empty string of alphabet characters
    """
    if not slug or not isinstance(slug, str):
        return False
    return all(char in _SLUG_CHARS for char in slug)


def strip_newlines(url: str) -> str:
    """Remove line breaks, which would corrupt the line-based storage format."""
    return url.replace("\n", "")
