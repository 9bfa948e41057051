"""Typed get/set operations over a byte cache."""

import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from typed_cache.core.cache import ByteCache
from typed_cache.core.exceptions import ArgumentError, DeserializationError
from typed_cache.core.models import (
    CacheEntryOptions,
    Expiration,
    TypedCacheConfig,
    expiration_options,
)
from typed_cache.serialization import JsonSerializer

logger = logging.getLogger(__name__)

T = TypeVar("T")

Producer = Callable[[CacheEntryOptions], Union[Optional[T], Awaitable[Optional[T]]]]


class TypedCacheAdapter:
    """Stores and loads typed values in a ByteCache as UTF-8 JSON.

    The adapter keeps no state besides its collaborators. Errors raised by the
    underlying cache, including cancellation, propagate unchanged.

    Example:
        >>> adapter = TypedCacheAdapter(redis_byte_cache)
        >>> adapter.set("user:1", User(Id=42, Name="Ada"), timedelta(minutes=5))
        >>> adapter.get("user:1", User)
        User(Id=42, Name='Ada')
    """

    def __init__(self, cache: ByteCache, config: Optional[TypedCacheConfig] = None) -> None:
        """Initialize adapter.

        Args:
            cache: Byte cache to read from and write to
            config: Adapter configuration (defaults apply when omitted)
        """
        self.cache = cache
        self.config = config or TypedCacheConfig()
        self.serializer = JsonSerializer(self.config)

    def get(self, key: str, type_: type[T]) -> Optional[T]:
        """Get the value stored under a key.

        Args:
            key: Cache key
            type_: Type to decode the cached payload into

        Returns:
            The cached value, or None if the key is not present

        Raises:
            DeserializationError: If the payload is not valid JSON for ``type_``
        """
        return self._load(key, self.cache.get(key), type_)

    async def get_async(self, key: str, type_: type[T]) -> Optional[T]:
        """Asynchronously get the value stored under a key.

        Args:
            key: Cache key
            type_: Type to decode the cached payload into

        Returns:
            The cached value, or None if the key is not present

        Raises:
            DeserializationError: If the payload is not valid JSON for ``type_``
        """
        return self._load(key, await self.cache.get_async(key), type_)

    def get_or_create(
        self,
        key: str,
        type_: type[T],
        producer: Callable[[CacheEntryOptions], Optional[T]],
    ) -> Optional[T]:
        """Get the value under a key, producing and storing it when missing.

        See :meth:`get_or_create_async`. The producer must be a plain callable.
        """
        data = self.cache.get(key)
        if data is not None:
            return self._load(key, data, type_)

        logger.debug(f"Cache miss for '{key}', invoking producer")
        options = self._new_options()
        value = producer(options)
        if value is None:
            logger.debug(f"Producer returned None for '{key}', skipping write")
            return None

        payload = self.serializer.serialize(value, type_, key=key)
        self.cache.set(key, payload, options)
        logger.debug(f"Stored {len(payload)} bytes under '{key}'")
        return value

    async def get_or_create_async(
        self,
        key: str,
        type_: type[T],
        producer: Producer[T],
    ) -> Optional[T]:
        """Get the value under a key, producing and storing it when missing.

        On a miss the producer is called with fresh entry options, which it
        may modify before the value is written. A None result is returned
        as-is and nothing is written. Concurrent calls for the same key are
        not coordinated: each may run the producer and the last write wins.

        Args:
            key: Cache key
            type_: Type of the cached value
            producer: Callable (sync or async) that builds the value

        Returns:
            The cached or newly produced value

        Raises:
            DeserializationError: If the cached payload is not valid for ``type_``
            SerializationError: If the produced value cannot be encoded
        """
        data = await self.cache.get_async(key)
        if data is not None:
            return self._load(key, data, type_)

        logger.debug(f"Cache miss for '{key}', invoking producer")
        options = self._new_options()
        value = producer(options)
        if inspect.isawaitable(value):
            value = await value
        if value is None:
            logger.debug(f"Producer returned None for '{key}', skipping write")
            return None

        payload = self.serializer.serialize(value, type_, key=key)
        await self.cache.set_async(key, payload, options)
        logger.debug(f"Stored {len(payload)} bytes under '{key}'")
        return value

    def set(self, key: str, value: Any, expiration: Expiration = None) -> None:
        """Associate a value with a key.

        Args:
            key: Cache key
            value: Value to store (must not be None)
            expiration: Absolute expiry time, duration relative to now,
                explicit options, or None for the configured default

        Raises:
            ArgumentError: If ``value`` is None
            SerializationError: If the value cannot be encoded
        """
        payload, options = self._prepare(key, value, expiration)
        self.cache.set(key, payload, options)
        logger.debug(f"Stored {len(payload)} bytes under '{key}'")

    async def set_async(self, key: str, value: Any, expiration: Expiration = None) -> None:
        """Asynchronously associate a value with a key.

        Args:
            key: Cache key
            value: Value to store (must not be None)
            expiration: Absolute expiry time, duration relative to now,
                explicit options, or None for the configured default

        Raises:
            ArgumentError: If ``value`` is None
            SerializationError: If the value cannot be encoded
        """
        payload, options = self._prepare(key, value, expiration)
        await self.cache.set_async(key, payload, options)
        logger.debug(f"Stored {len(payload)} bytes under '{key}'")

    def _prepare(
        self, key: str, value: Any, expiration: Expiration
    ) -> tuple[bytes, CacheEntryOptions]:
        if value is None:
            raise ArgumentError("value", key=key)
        payload = self.serializer.serialize(value, key=key)
        return payload, expiration_options(expiration, self.config.default_options)

    def _new_options(self) -> CacheEntryOptions:
        return expiration_options(None, self.config.default_options)

    def _load(self, key: str, data: Optional[bytes], type_: type[T]) -> Optional[T]:
        if data is None:
            logger.debug(f"Cache miss for '{key}'")
            return None

        logger.debug(f"Cache hit for '{key}' ({len(data)} bytes)")
        try:
            return self.serializer.deserialize(data, type_, key=key)
        except DeserializationError:
            logger.warning(f"Failed to decode cached payload for '{key}' as {type_!r}")
            raise
