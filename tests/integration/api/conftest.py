"""
Fixtures for API integration tests.

The app is built around a DI container holding an in-memory token API,
so no request leaves the process.
"""

from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio

from vigie.config.settings import Settings
from vigie.di.container import DIContainer, override_container
from vigie.domain.exceptions import UpstreamHttpError
from vigie.domain.value_objects.network import Network
from vigie.main import create_app
from tests.helpers import FakeTokenApi, usdc_balance, usdc_transfer


def _settings(**overrides) -> Settings:
    values = {
        "ENV": "test",
        "TOKEN_API_KEY": "integration-key",
        "REFRESH_ON_STARTUP": False,
        "HISTORICAL_MODE": "empty",
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def token_api() -> FakeTokenApi:
    """Token API with USDC on ethereum and base, polygon not found."""
    return FakeTokenApi(
        balances={
            "mainnet": [usdc_balance(Network.ETHEREUM, "75000000", price_usd=0.9995)],
            "base": [usdc_balance(Network.BASE, "25000000")],
        },
        balance_errors={"matic": UpstreamHttpError(404)},
        transfers={
            "mainnet": [
                usdc_transfer(Network.ETHEREUM, "1000000", "0xsmall"),
                usdc_transfer(Network.ETHEREUM, "9000000", "0xbig"),
            ]
        },
    )


@pytest.fixture
def settings() -> Settings:
    return _settings()


@pytest_asyncio.fixture
async def client(
    settings: Settings, token_api: FakeTokenApi
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client bound to the app in-process."""
    container = DIContainer(settings=settings, token_api=token_api)
    app = create_app(container=container)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    override_container(None)


@pytest.fixture
def make_settings():
    """Settings factory for tests that need other values."""
    return _settings
