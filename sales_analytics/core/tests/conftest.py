"""Test fixtures for core infrastructure."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from sales_analytics.main import app


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for testing FastAPI endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
