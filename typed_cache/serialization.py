"""JSON serialization of typed values for byte caches."""

from functools import lru_cache
from typing import Any, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError
from pydantic_core import PydanticSerializationError

from typed_cache.core.exceptions import DeserializationError, SerializationError
from typed_cache.core.models import TypedCacheConfig

T = TypeVar("T")


@lru_cache(maxsize=256)
def _cached_adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def _type_adapter(type_: Any) -> TypeAdapter:
    try:
        return _cached_adapter(type_)
    except TypeError:
        # Unhashable type expressions can't be memoized
        return TypeAdapter(type_)


def _type_name(type_: Any) -> str:
    return getattr(type_, "__name__", None) or repr(type_)


class JsonSerializer:
    """Encodes values as UTF-8 JSON bytes and decodes them back.

    Any type pydantic can validate works: models, dataclasses, TypedDicts,
    builtin containers and scalars. No type information is embedded in the
    payload, so values must be read back with a compatible type.
    """

    def __init__(self, config: Optional[TypedCacheConfig] = None) -> None:
        """Initialize serializer.

        Args:
            config: Serialization settings (defaults apply when omitted)
        """
        self.config = config or TypedCacheConfig()

    def serialize(self, value: Any, type_: Any = None, key: Optional[str] = None) -> bytes:
        """Encode a value as compact UTF-8 JSON.

        Args:
            value: Value to encode
            type_: Declared type of the value (defaults to ``type(value)``)
            key: Cache key, for error context

        Returns:
            JSON bytes

        Raises:
            SerializationError: If the value cannot be encoded
        """
        target = type_ if type_ is not None else type(value)
        try:
            return _type_adapter(target).dump_json(
                value,
                by_alias=self.config.by_alias,
                exclude_none=self.config.exclude_none,
            )
        except (PydanticSchemaGenerationError, PydanticSerializationError) as e:
            raise SerializationError(
                f"Cannot serialize value of type {_type_name(target)}: {e}", key=key
            ) from e

    def deserialize(self, data: bytes, type_: type[T], key: Optional[str] = None) -> T:
        """Decode UTF-8 JSON bytes into an instance of ``type_``.

        Args:
            data: JSON bytes
            type_: Type to decode into
            key: Cache key, for error context

        Returns:
            Decoded value

        Raises:
            DeserializationError: If the bytes are not valid JSON for ``type_``
                or pydantic cannot decode into ``type_`` at all
        """
        try:
            adapter = _type_adapter(type_)
        except PydanticSchemaGenerationError as e:
            raise DeserializationError(
                f"Cannot deserialize into unsupported type {_type_name(type_)}: {e}",
                type_=type_,
                key=key,
            ) from e

        try:
            return adapter.validate_json(data, strict=self.config.strict)
        except ValidationError as e:
            raise DeserializationError(
                f"Cached payload is not valid JSON for {_type_name(type_)}: {e}",
                type_=type_,
                key=key,
            ) from e
