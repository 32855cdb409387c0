"""Shared fixtures: a recording stand-in for the YouTube client and an ASGI test client."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from tests.fakes import FakeYouTubeClient
from ytproxy.main import app
from ytproxy.services.youtube_service import get_youtube_client


@pytest.fixture
def fake_client() -> FakeYouTubeClient:
    return FakeYouTubeClient()


@pytest.fixture
async def api_client(fake_client: FakeYouTubeClient) -> AsyncIterator[AsyncClient]:
    """HTTP client against the app with the YouTube client swapped for `fake_client`."""
    app.dependency_overrides[get_youtube_client] = lambda: fake_client
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
