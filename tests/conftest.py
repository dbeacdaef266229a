"""Shared test fixtures for the Open Food Facts Explorer clients."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import httpx
import pytest

from explorer.core.config import PricesBackendConfig, get_settings
from tests.fixtures.prices import PRICES_REMOTE_URL


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Load settings for the test environment without leaking env overrides."""
    monkeypatch.setenv("APP_ENV", "test")
    for name in (
        "PRICES_API__URL",
        "PRICES_API__LOCAL_URL",
        "PRICES_API__TIMEOUT",
        "OPEN_FOOD_FACTS__URL",
        "EXPLORER_CONFIG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def remote_config() -> PricesBackendConfig:
    """Backend configuration with only the remote URL set."""
    return PricesBackendConfig(url=PRICES_REMOTE_URL)


@pytest.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """A real httpx client; pair with respx to intercept requests."""
    async with httpx.AsyncClient() as client:
        yield client
