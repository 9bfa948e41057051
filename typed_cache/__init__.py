"""Typed Cache - typed values over byte-oriented distributed caches."""

from typed_cache.adapter import TypedCacheAdapter
from typed_cache.core import (
    ArgumentError,
    ByteCache,
    CacheEntryOptions,
    DeserializationError,
    Expiration,
    SerializationError,
    TypedCacheConfig,
    TypedCacheError,
    expiration_options,
)
from typed_cache.serialization import JsonSerializer

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Adapter
    "TypedCacheAdapter",
    "JsonSerializer",
    # Core
    "ByteCache",
    "CacheEntryOptions",
    "Expiration",
    "TypedCacheConfig",
    "expiration_options",
    # Exceptions
    "TypedCacheError",
    "ArgumentError",
    "SerializationError",
    "DeserializationError",
]
