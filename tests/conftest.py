"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config, GeneratorConfig
from core.sources import FixedClock
from ui.app import create_app

# 2017-10-10T04:00:47Z, the timestamp of the published reference KSUID
REFERENCE_UNIX = 1_507_608_047


@pytest.fixture
def clock():
    """Create a clock frozen at the reference time."""
    return FixedClock(REFERENCE_UNIX)


@pytest.fixture
def app_config():
    """Create test config with a small generation limit."""
    return Config(generator=GeneratorConfig(default_count=1, max_count=10))


@pytest.fixture
async def app(app_config, clock):
    """Create test FastAPI app."""
    return create_app(app_config, clock=clock)


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
