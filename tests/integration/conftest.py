import pytest_asyncio
from httpx import ASGITransport, AsyncClient


@pytest_asyncio.fixture
async def client():
    """Create test client against a fresh application"""
    from points_ledger.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    # Use ASGITransport for httpx AsyncClient
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
