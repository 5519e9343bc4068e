"""Shared pytest fixtures for envget tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from envget import resolver as resolver_module
from envget.resolver import Resolver


@pytest.fixture
def sample_env() -> dict[str, str]:
    """A small environment mapping covering each coercion target.

    This is the single source of truth for the scenario environment.
    """
    return {
        "STRING": "test",
        "INTEGER": "12",
        "BOOL": "false",
        "JSON": '{"key":"value"}',
        "EMPTY": "",
    }


@pytest.fixture
def resolver(sample_env: dict[str, str]) -> Resolver:
    """Resolver bound to :func:`sample_env`."""
    return Resolver(sample_env)


@pytest.fixture(autouse=True)
def _fresh_default_resolver() -> Generator[None]:
    """Drop the cached process-wide resolver so ENVGET_* changes apply per test."""
    resolver_module._default.cache_clear()
    yield
    resolver_module._default.cache_clear()
