"""
Test Configuration and Fixtures

Provides the async API test client and common Exhibit G inputs.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from backend.config import get_settings
from backend.main import app
from engines.schemas.exhibit_g import ExhibitGInput
from tests.factories import make_exhibit_g_input


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Provide an async test client against the ASGI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def override_settings():
    """Override settings for one test: override_settings(snap_time_inputs=True)."""

    def _override(**values):
        settings = get_settings().model_copy(update=values)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings

    yield _override
    app.dependency_overrides.pop(get_settings, None)


@pytest.fixture
def standard_day() -> ExhibitGInput:
    """Call 07:00, lunch 13:00-13:30, dismiss 15:30: exactly 8h worked."""
    return make_exhibit_g_input()
