"""Root conftest: shared test configuration.

Invariants:
    - Every test gets a fresh app built from its own Settings (no shared tunables)
    - Requests go through httpx's ASGITransport, no sockets

Design Decisions:
    - Short pacing tunables by default so timed endpoints finish quickly;
      tests that measure the defaults build their own app via make_client
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("HTTPBIN_LOG_FORMAT", "text")

from httpbin_app.config import Settings  # noqa: E402
from httpbin_app.main import create_app  # noqa: E402


@pytest.fixture
def settings():
    return Settings(
        delay_max_seconds=10.0,
        stream_interval_seconds=0.05,
        binary_chunk_size=1024,
    )


@pytest.fixture
def make_client():
    """Factory: AsyncClient bound to a new app built from the given Settings."""
    def _make(settings: Settings) -> AsyncClient:
        return AsyncClient(
            transport=ASGITransport(app=create_app(settings)),
            base_url="http://test",
        )
    return _make


@pytest.fixture
async def client(settings, make_client):
    async with make_client(settings) as c:
        yield c
