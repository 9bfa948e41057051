"""Core abstractions and models."""

from typed_cache.core.cache import ByteCache
from typed_cache.core.exceptions import (
    ArgumentError,
    DeserializationError,
    SerializationError,
    TypedCacheError,
)
from typed_cache.core.models import (
    CacheEntryOptions,
    Expiration,
    TypedCacheConfig,
    expiration_options,
)

__all__ = [
    # Cache
    "ByteCache",
    # Exceptions
    "TypedCacheError",
    "ArgumentError",
    "SerializationError",
    "DeserializationError",
    # Models
    "CacheEntryOptions",
    "Expiration",
    "TypedCacheConfig",
    "expiration_options",
]
