# ABOUTME: Dependency container for the weather controller using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient and settings used to call the OpenWeather API.

import httpx
from pydantic import BaseModel, ConfigDict

from weather_lookup.config import Settings


class LookupDeps(BaseModel):
    """Dependencies injected into the controller."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create an httpx client with the configured timeout.

    No retry transport: every failure is terminal for the user action that caused it.
    """
    return httpx.AsyncClient(timeout=settings.http_timeout)
