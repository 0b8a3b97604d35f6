# ABOUTME: Service layer for OpenWeather API calls and response parsing.
# ABOUTME: Handles city-name suggestions (geocoding) and current weather retrieval.

import logging

import httpx
from pydantic import ValidationError

from weather_lookup.config import Settings
from weather_lookup.errors import CityNotFoundError, WeatherFetchError
from weather_lookup.models import Suggestion, WeatherCondition, WeatherResult

logger = logging.getLogger(__name__)


async def search_cities(client: httpx.AsyncClient, settings: Settings, query: str) -> list[Suggestion]:
    """Look up up to `suggestion_limit` places matching free text via the geocoding API.

    Error statuses and unusable bodies yield an empty list. Transport errors and
    a malformed endpoint URL propagate as httpx.HTTPError or httpx.InvalidURL.
    """
    resp = await client.get(
        f"{settings.geo_base_url}/direct",
        params={
            "q": query,
            "limit": settings.suggestion_limit,
            "appid": settings.api_key.get_secret_value(),
        },
    )
    if not resp.is_success:
        logger.debug("Geocoding returned status %s for %r", resp.status_code, query)
        return []
    try:
        data = resp.json()
    except ValueError:
        return []
    return parse_suggestions(data)[: settings.suggestion_limit]


async def get_current_weather(
    client: httpx.AsyncClient,
    settings: Settings,
    city: str | None = None,
    lat: float | None = None,
    lon: float | None = None,
) -> WeatherResult:
    """Fetch current conditions for a coordinate pair, or for a city name when no pair is given.

    Raises CityNotFoundError for any non-2xx status and WeatherFetchError for
    transport or payload failures.
    """
    params: dict[str, str | float] = {
        "units": settings.units,
        "lang": settings.lang,
        "appid": settings.api_key.get_secret_value(),
    }
    if lat is not None and lon is not None:
        params["lat"] = lat
        params["lon"] = lon
        target = f"lat={lat} lon={lon}"
    else:
        params["q"] = (city or "").strip()
        target = repr(params["q"])

    logger.info("Fetching current weather for %s", target)
    try:
        resp = await client.get(f"{settings.data_base_url}/weather", params=params)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("Weather request for %s failed: %s", target, e)
        raise WeatherFetchError.from_exception(e) from e

    if not resp.is_success:
        logger.warning("Weather endpoint returned status %s for %s", resp.status_code, target)
        raise CityNotFoundError(resp.status_code)

    try:
        return parse_current_weather(resp.json())
    except (ValueError, KeyError, TypeError, IndexError) as e:
        logger.warning("Unusable weather payload for %s: %s", target, e)
        raise WeatherFetchError.from_exception(e) from e


def parse_suggestions(data) -> list[Suggestion]:
    """Parse a geocoding response body, keeping API order.

    Anything other than a list of well-formed place records counts as no suggestions.
    """
    if not isinstance(data, list):
        return []
    try:
        return [Suggestion.model_validate(item) for item in data]
    except ValidationError:
        return []


def parse_current_weather(data: dict) -> WeatherResult:
    """Flatten the nested current-weather payload into a WeatherResult."""
    main = data["main"]
    return WeatherResult(
        name=data["name"],
        country=data["sys"]["country"],
        temp=main["temp"],
        feels_like=main["feels_like"],
        temp_min=main["temp_min"],
        temp_max=main["temp_max"],
        humidity=main["humidity"],
        pressure=main["pressure"],
        wind_speed=data["wind"]["speed"],
        conditions=tuple(WeatherCondition(description=w["description"], icon=w["icon"]) for w in data["weather"]),
    )
