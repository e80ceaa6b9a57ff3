"""
Shared test fixtures.

The API has no infrastructure behind it, so the only thing to replace is
the HTTP server: httpx.AsyncClient with ASGI transport talks to the app
in-process, no network involved.
"""

import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import create_app


@pytest_asyncio.fixture
async def client():
    """
    Create a test HTTP client that talks directly to a fresh FastAPI app.

    ASGITransport means requests go directly to the app in-process,
    no HTTP server or network involved.
    """
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
