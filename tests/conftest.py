import httpx
import pytest
from httpx import ASGITransport


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("PLACES_API_BASE_URL", "http://places.test/api")
    monkeypatch.setenv("DEFAULT_LOCATION", "Barcelona")
    monkeypatch.setenv("DEFAULT_CATEGORY", "attraction")
    monkeypatch.setenv("PLATFORM", "android")
    monkeypatch.setenv("INTENT_DISPATCHER", "client")
    monkeypatch.setenv("CLIENT_SCHEMES", "http,https,tel,mailto,geo")


@pytest.fixture
async def client(mock_env):
    from lugares.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
