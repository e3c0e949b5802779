"""
Storage Abstraction Interface

The slug store keeps every mapping in memory and only needs a backend that
can hand back all entries at startup and take a full snapshot after each
write. Backends implement this interface so the store never deals with
files or formats directly.
"""

from abc import ABC, abstractmethod
from typing import Mapping


class StorageBackend(ABC):
    """
    Abstract base class for slug storage backends.

    To add a new backend:
    1. Create a new class inheriting from StorageBackend
    2. Implement all abstract methods
    3. Update get_storage_backend() to return the new backend
    """

    @abstractmethod
    def load(self) -> dict[str, str]:
        """
        Read every persisted slug -> URL entry.

        Must not raise for a missing or partly unreadable source; an empty
        or partial mapping is returned instead.

        Returns:
            Dictionary of slug -> URL
        """
        pass

    @abstractmethod
    def persist(self, mapping: Mapping[str, str]) -> bool:
        """
        Replace the persisted entries with the given mapping.

        Args:
            mapping: Complete slug -> URL mapping

        Returns:
            True if the write succeeded, False if it was abandoned
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """
        Get a human readable location for log messages.

        Returns:
            Description of where entries are stored
        """
        pass
