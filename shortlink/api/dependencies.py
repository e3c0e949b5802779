"""
FastAPI Dependencies

The slug store and settings are created once per application and kept on
app.state; endpoints receive them through these dependencies so tests can
swap them with app.dependency_overrides.
"""

from fastapi import Request

from shortlink.core.setting import Settings
from shortlink.services.slug_store import SlugStore


def get_store(request: Request) -> SlugStore:
    """
    Get the application's slug store.

    Usage in FastAPI:
        @router.get("/endpoint")
        async def endpoint(store: SlugStore = Depends(get_store)):
            ...
    """
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings
