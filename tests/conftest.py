"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from shopcart_api.api import create_api
from shopcart_api.settings import BackendSettings, get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    """Ensure every test resolves settings from a clean cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> BackendSettings:
    return BackendSettings(_env_file=None)


@pytest.fixture
def client(settings: BackendSettings) -> Iterator[TestClient]:
    app = create_api(settings)
    with TestClient(app) as test_client:
        yield test_client
