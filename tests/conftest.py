# ABOUTME: Shared test fixtures for the weather lookup test suite.
# ABOUTME: Provides settings with a short debounce, sample payloads and a routing mock HTTP client.

from unittest.mock import AsyncMock

import httpx
import pytest
from pydantic import SecretStr

from weather_lookup.config import Settings
from weather_lookup.deps import LookupDeps

RIO_WEATHER = {
    "name": "Rio de Janeiro",
    "sys": {"country": "BR"},
    "main": {
        "temp": 27.5,
        "feels_like": 29.4,
        "temp_min": 26.1,
        "temp_max": 29.0,
        "humidity": 70,
        "pressure": 1012,
    },
    "weather": [{"description": "céu limpo", "icon": "01d"}],
    "wind": {"speed": 5.0},
}

RIO_SUGGESTIONS = [
    {"name": "Rio de Janeiro", "country": "BR", "state": "Rio de Janeiro", "lat": -22.9068, "lon": -43.1729},
    {"name": "Rio Grande", "country": "BR", "state": "Rio Grande do Sul", "lat": -32.035, "lon": -52.0986},
    {"name": "Rio", "country": "GR", "lat": 38.3, "lon": 21.78},
]


def make_response(json_data=None, status_code: int = 200, url: str = "https://test") -> httpx.Response:
    """Build a real httpx.Response bound to a request, as httpx.AsyncClient.get would return."""
    return httpx.Response(status_code=status_code, json=json_data, request=httpx.Request("GET", url))


def routing_client(geo=None, weather=None) -> AsyncMock:
    """Mock httpx.AsyncClient that answers geocoding and weather URLs separately.

    `geo` and `weather` are either a Response, an exception instance to raise, or
    an async callable taking the request params.
    """
    mock = AsyncMock(spec=httpx.AsyncClient)

    async def fake_get(url, params=None, **kwargs):
        handler = geo if "/direct" in url else weather
        if handler is None:
            raise AssertionError(f"unexpected request to {url}")
        if isinstance(handler, Exception):
            raise handler
        if callable(handler):
            return await handler(params)
        return handler

    mock.get.side_effect = fake_get
    return mock


def calls_to(client: AsyncMock, path: str) -> list:
    """The recorded get() calls whose URL contains `path`."""
    return [c for c in client.get.call_args_list if path in c.args[0]]


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key=SecretStr("test-key"), debounce_seconds=0.01)


@pytest.fixture
def make_deps(settings):
    def _make(client) -> LookupDeps:
        return LookupDeps(http_client=client, settings=settings)

    return _make
