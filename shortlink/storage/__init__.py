"""
Storage module with abstraction layer.

This module provides:
- StorageBackend interface: Abstract base class for storage implementations
- FlatFileStorage: Line-based text file implementation (default)
"""

from shortlink.storage.interface import StorageBackend
from shortlink.storage.flat_file import FlatFileStorage


def get_storage_backend(path: str) -> StorageBackend:
    """
    Factory function to get the storage backend.

    Args:
        path: Storage file location

    Returns:
        StorageBackend instance
    """
    return FlatFileStorage(path)


__all__ = [
    "StorageBackend",
    "FlatFileStorage",
    "get_storage_backend",
]
