"""Pytest configuration and fixtures."""

import pytest

ENV_VARS = (
    "TYPED_CACHE_BY_ALIAS",
    "TYPED_CACHE_EXCLUDE_NONE",
    "TYPED_CACHE_STRICT",
    "TYPED_CACHE_DEFAULT_TTL_SECONDS",
    "TYPED_CACHE_DEFAULT_SLIDING_SECONDS",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove typed cache environment variables for testing."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
