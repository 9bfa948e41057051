"""Tests for JSON serialization."""

from dataclasses import dataclass
from datetime import UTC, datetime

import pytest
from pydantic import BaseModel, Field

from typed_cache import DeserializationError, JsonSerializer, SerializationError, TypedCacheConfig


class Account(BaseModel):
    """Model with an alias and an optional field."""

    user_id: int = Field(alias="userId")
    nickname: str | None = None


@dataclass
class Event:
    name: str
    at: datetime


def test_serialize_is_compact_utf8_json():
    """Test payloads are compact UTF-8 JSON."""
    serializer = JsonSerializer()

    assert serializer.serialize({"name": "Zoë"}) == '{"name":"Zoë"}'.encode("utf-8")


def test_dataclass_round_trip():
    """Test dataclasses with datetimes survive a round trip."""
    serializer = JsonSerializer()
    event = Event(name="deploy", at=datetime(2026, 10, 18, 9, 30, tzinfo=UTC))

    payload = serializer.serialize(event)

    assert serializer.deserialize(payload, Event) == event


def test_serialize_by_alias_and_exclude_none():
    """Test dump settings come from the config."""
    account = Account(userId=5)

    assert JsonSerializer().serialize(account) == b'{"userId":5,"nickname":null}'
    configured = JsonSerializer(TypedCacheConfig(by_alias=False, exclude_none=True))
    assert configured.serialize(account) == b'{"user_id":5}'


def test_aliased_model_round_trip():
    """Test aliased models decode from their default encoding."""
    serializer = JsonSerializer()
    account = Account(userId=5, nickname="ada")

    assert serializer.deserialize(serializer.serialize(account), Account) == account


def test_deserialize_unsupported_type_raises():
    """Test types pydantic cannot build a schema for raise DeserializationError."""

    class Handle:
        pass

    with pytest.raises(DeserializationError) as exc_info:
        JsonSerializer().deserialize(b"{}", Handle, key="h")

    assert exc_info.value.type_ is Handle
    assert exc_info.value.__cause__ is not None


def test_serialize_with_declared_type():
    """Test an explicit type drives serialization."""
    serializer = JsonSerializer()

    assert serializer.serialize([1, 2], list[int]) == b"[1,2]"


def test_serialize_unsupported_type_raises():
    """Test unencodable values raise SerializationError."""

    class Handle:
        pass

    with pytest.raises(SerializationError) as exc_info:
        JsonSerializer().serialize(Handle(), key="h")

    assert exc_info.value.key == "h"
    assert str(exc_info.value).startswith("[h] ")


def test_deserialize_rejects_invalid_utf8():
    """Test bytes that are not UTF-8 JSON raise DeserializationError."""
    with pytest.raises(DeserializationError):
        JsonSerializer().deserialize(b"\xff\xfe", dict)
