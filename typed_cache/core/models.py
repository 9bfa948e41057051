"""Core data models for typed cache."""

import os
from datetime import datetime, timedelta
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class CacheEntryOptions(BaseModel):
    """Expiration options for a cache entry.

    Leaving every field unset means the cache provider's default expiration
    applies. How set fields combine is up to the provider.
    """

    model_config = ConfigDict(validate_assignment=True)

    absolute_expiration: datetime | None = None
    absolute_expiration_relative_to_now: timedelta | None = None
    sliding_expiration: timedelta | None = None

    @field_validator("absolute_expiration_relative_to_now", "sliding_expiration")
    @classmethod
    def _positive_duration(cls, value: timedelta | None) -> timedelta | None:
        if value is not None and value <= timedelta(0):
            raise ValueError("duration must be positive")
        return value


class TypedCacheConfig(BaseModel):
    """Configuration for the typed cache adapter."""

    # Dump under field aliases, which is what validation expects
    by_alias: bool = True
    exclude_none: bool = False
    strict: bool = False

    # Used when a caller gives no expiration
    default_options: CacheEntryOptions | None = None

    @classmethod
    def from_env(cls, prefix: str = "TYPED_CACHE_") -> "TypedCacheConfig":
        """Build configuration from environment variables.

        Recognized variables (shown with the default prefix):
            TYPED_CACHE_BY_ALIAS, TYPED_CACHE_EXCLUDE_NONE, TYPED_CACHE_STRICT:
                boolean flags
            TYPED_CACHE_DEFAULT_TTL_SECONDS: default expiration relative to now
            TYPED_CACHE_DEFAULT_SLIDING_SECONDS: default sliding expiration

        Args:
            prefix: Environment variable prefix

        Returns:
            Configuration with unset variables left at their defaults

        Raises:
            ValueError: If a variable holds an unrecognized value
        """
        values: dict[str, object] = {}
        for field in ("by_alias", "exclude_none", "strict"):
            raw = os.environ.get(f"{prefix}{field.upper()}")
            if raw is not None:
                values[field] = _parse_bool(f"{prefix}{field.upper()}", raw)

        ttl = os.environ.get(f"{prefix}DEFAULT_TTL_SECONDS")
        sliding = os.environ.get(f"{prefix}DEFAULT_SLIDING_SECONDS")
        if ttl is not None or sliding is not None:
            values["default_options"] = CacheEntryOptions(
                absolute_expiration_relative_to_now=(
                    timedelta(seconds=float(ttl)) if ttl is not None else None
                ),
                sliding_expiration=(
                    timedelta(seconds=float(sliding)) if sliding is not None else None
                ),
            )

        return cls(**values)


Expiration = Union[datetime, timedelta, CacheEntryOptions, None]


def expiration_options(
    expiration: Expiration,
    default: Optional[CacheEntryOptions] = None,
) -> CacheEntryOptions:
    """Normalize an expiration argument into entry options.

    Args:
        expiration: Absolute expiry time, duration relative to now, explicit
            options, or None for the default
        default: Options to copy when no expiration is given

    Returns:
        Entry options for the write

    Raises:
        TypeError: If the expiration has an unsupported type
    """
    if expiration is None:
        return default.model_copy(deep=True) if default is not None else CacheEntryOptions()
    if isinstance(expiration, CacheEntryOptions):
        return expiration
    if isinstance(expiration, datetime):
        return CacheEntryOptions(absolute_expiration=expiration)
    if isinstance(expiration, timedelta):
        return CacheEntryOptions(absolute_expiration_relative_to_now=expiration)
    raise TypeError(
        f"Unsupported expiration type: {type(expiration).__name__}. "
        "Expected datetime, timedelta or CacheEntryOptions."
    )


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {raw!r}")
