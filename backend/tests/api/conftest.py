"""API test fixtures — FastAPI test client over an isolated registry.

Invariants:
    - Every test gets its own ResourceRegistry loaded from the packaged fixtures
    - get_registry dependency overridden; overrides cleared after each test

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises the real app, routers,
      middleware and error handlers without a network socket
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.infrastructure.resource_registry import get_registry
from app.main import app


@pytest.fixture
async def client(registry):
    """FastAPI test client with the registry dependency overridden."""
    app.dependency_overrides[get_registry] = lambda: registry
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
