"""Abstract byte cache interface."""

from abc import ABC, abstractmethod
from typing import Optional

from typed_cache.core.models import CacheEntryOptions


class ByteCache(ABC):
    """Abstract base class for byte-oriented distributed caches.

    Storage, transport and expiration are owned by the implementation.
    Implementations return ``None`` for keys that are missing or expired and
    should let their own errors propagate.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """Retrieve raw bytes from cache.

        Args:
            key: Cache key

        Returns:
            Cached bytes or None if not found/expired
        """
        pass

    @abstractmethod
    async def get_async(self, key: str) -> Optional[bytes]:
        """Asynchronously retrieve raw bytes from cache.

        Args:
            key: Cache key

        Returns:
            Cached bytes or None if not found/expired
        """
        pass

    @abstractmethod
    def set(self, key: str, value: bytes, options: CacheEntryOptions) -> None:
        """Store raw bytes in cache.

        Args:
            key: Cache key
            value: Payload to store
            options: Expiration options for the entry
        """
        pass

    @abstractmethod
    async def set_async(self, key: str, value: bytes, options: CacheEntryOptions) -> None:
        """Asynchronously store raw bytes in cache.

        Args:
            key: Cache key
            value: Payload to store
            options: Expiration options for the entry
        """
        pass
