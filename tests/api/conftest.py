"""API test fixtures: fresh FastAPI app per test + httpx test client.

Invariants:
    - Every test starts with empty rate-limit counters
    - Apps are built with create_app(), so settings overrides stay per-test
    - App exceptions are not re-raised: the 500 handler is what's under test

Design Decisions:
    - The limiter is process-wide; resetting its storage isolates tests
      instead of rebuilding it
"""

import pytest
from httpx import ASGITransport, AsyncClient

from blacklist_api.config import Settings
from blacklist_api.infrastructure.rate_limit import limiter
from blacklist_api.main import create_app


@pytest.fixture(autouse=True)
def reset_limiter():
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def make_app():
    """Build an app with Settings overrides, e.g. make_app(docs_enabled=False)."""
    def _make(**overrides):
        return create_app(Settings(**overrides))
    return _make


@pytest.fixture
def make_client():
    """Open an AsyncClient against `app`, optionally from a given client address."""
    def _make(app, client_host: str = "127.0.0.1"):
        transport = ASGITransport(
            app=app, raise_app_exceptions=False, client=(client_host, 4321),
        )
        return AsyncClient(transport=transport, base_url="http://test")
    return _make


@pytest.fixture
async def client(make_app, make_client):
    async with make_client(make_app()) as c:
        yield c
