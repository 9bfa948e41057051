"""Custom exceptions for typed cache operations."""

from typing import Any


class TypedCacheError(Exception):
    """Base exception for typed cache errors."""

    def __init__(self, message: str, key: str | None = None) -> None:
        """Initialize error.

        Args:
            message: Error message
            key: Cache key the operation was acting on
        """
        self.key = key
        super().__init__(f"[{key}] {message}" if key is not None else message)


class ArgumentError(TypedCacheError, ValueError):
    """Raised when a required argument is missing.

    Absent values are never written to the cache, so passing ``None`` as the
    value of a set operation raises this before the cache is touched.
    """

    def __init__(self, param_name: str, key: str | None = None) -> None:
        """Initialize error.

        Args:
            param_name: Name of the offending argument
            key: Cache key
        """
        self.param_name = param_name
        super().__init__(f"Argument '{param_name}' must not be None", key=key)


class SerializationError(TypedCacheError):
    """Raised when a value cannot be encoded as JSON."""

    pass


class DeserializationError(TypedCacheError):
    """Raised when cached bytes are not valid JSON for the requested type."""

    def __init__(self, message: str, type_: Any, key: str | None = None) -> None:
        """Initialize error.

        Args:
            message: Error message
            type_: Type the payload was decoded into
            key: Cache key
        """
        self.type_ = type_
        super().__init__(message, key=key)
