"""Basic usage examples for typed-cache."""

import asyncio
import logging
from datetime import timedelta
from typing import Optional

from pydantic import BaseModel

from typed_cache import ByteCache, CacheEntryOptions, TypedCacheAdapter, TypedCacheConfig


class User(BaseModel):
    Id: int
    Name: str


class DictByteCache(ByteCache):
    """Toy byte cache for the examples. Expiration is ignored."""

    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    async def get_async(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def set(self, key: str, value: bytes, options: CacheEntryOptions) -> None:
        print(f"  write {key!r}: {value!r} ({options.model_dump(exclude_none=True)})")
        self._data[key] = value

    async def set_async(self, key: str, value: bytes, options: CacheEntryOptions) -> None:
        self.set(key, value, options)


def example_get_and_set(adapter: TypedCacheAdapter) -> None:
    """Example: Storing and reading a typed value."""
    print("\n=== Get / Set Example ===\n")

    adapter.set("user:7", User(Id=7, Name="Grace"), timedelta(minutes=5))
    print(f"Read back: {adapter.get('user:7', User)}")
    print(f"Missing key: {adapter.get('user:404', User)}")


async def example_get_or_create(adapter: TypedCacheAdapter) -> None:
    """Example: Producing a value on a cache miss."""
    print("\n=== Get Or Create Example ===\n")

    async def load_user(options: CacheEntryOptions) -> User:
        print("  producer invoked")
        options.sliding_expiration = timedelta(minutes=10)
        return User(Id=42, Name="Ada")

    first = await adapter.get_or_create_async("user:1", User, load_user)
    second = await adapter.get_or_create_async("user:1", User, load_user)
    print(f"First: {first}")
    print(f"Second (cached): {second}")


async def main() -> None:
    """Run all examples."""
    logging.basicConfig(level=logging.DEBUG)

    adapter = TypedCacheAdapter(DictByteCache(), TypedCacheConfig.from_env())

    example_get_and_set(adapter)
    await example_get_or_create(adapter)


if __name__ == "__main__":
    asyncio.run(main())
