# ABOUTME: Formatting of weather data and suggestions for display.
# ABOUTME: Builds a page view model from UIState so the page script only draws widgets.

import math

from pydantic import BaseModel

from weather_lookup.config import ICON_URL
from weather_lookup.models import Suggestion, WeatherResult
from weather_lookup.state import UIMode, UIState

TITLE = "Weather App"
PLACEHOLDER = "Cidade ou Cidade, País (ex: Rio, BR)"
EMPTY_STATE_TEXT = "Descubra o clima em qualquer lugar do mundo."

FEELS_LIKE_LABEL = "Sensação"
HUMIDITY_LABEL = "Umidade"
WIND_LABEL = "Vento"
PRESSURE_LABEL = "Pressão"

MS_TO_KMH = 3.6


def round_half_up(value: float) -> int:
    """Round .5 upwards, so 20.5 shows as 21 and -0.5 as 0."""
    return math.floor(value + 0.5)


def wind_kmh(speed_ms: float) -> int:
    return round_half_up(speed_ms * MS_TO_KMH)


def icon_url(icon: str, base_url: str = ICON_URL) -> str:
    return f"{base_url}/{icon}@4x.png"


def compose_location_name(suggestion: Suggestion) -> str:
    """Join name, state and country with ", ", skipping the parts that are missing."""
    parts = [suggestion.name]
    if suggestion.state:
        parts.append(suggestion.state)
    if suggestion.country:
        parts.append(suggestion.country)
    return ", ".join(parts)


def suggestion_location_line(suggestion: Suggestion) -> str:
    """Second line of a suggestion row: "state, country", or just the country."""
    return ", ".join(part for part in (suggestion.state, suggestion.country) if part)


class WeatherView(BaseModel):
    """Display-ready values for one weather result."""

    location: str
    temperature: int
    description: str
    icon_url: str
    feels_like: int
    humidity: int
    wind_kmh: int
    pressure: int

    @property
    def details(self) -> list[tuple[str, str]]:
        return [
            (FEELS_LIKE_LABEL, f"{self.feels_like}°C"),
            (HUMIDITY_LABEL, f"{self.humidity}%"),
            (WIND_LABEL, f"{self.wind_kmh} km/h"),
            (PRESSURE_LABEL, f"{self.pressure} hPa"),
        ]


class SuggestionRow(BaseModel):
    name: str
    location: str
    suggestion: Suggestion


class PageView(BaseModel):
    """Everything the page draws for one state."""

    mode: UIMode
    busy: bool
    search_disabled: bool
    error: str = ""
    weather: WeatherView | None = None
    suggestions: list[SuggestionRow] = []
    empty_text: str = ""


def format_weather(result: WeatherResult, display_name: str, icon_base_url: str = ICON_URL) -> WeatherView:
    condition = result.conditions[0]
    return WeatherView(
        location=display_name,
        temperature=round_half_up(result.temp),
        description=condition.description,
        icon_url=icon_url(condition.icon, icon_base_url),
        feels_like=round_half_up(result.feels_like),
        humidity=result.humidity,
        wind_kmh=wind_kmh(result.wind_speed),
        pressure=result.pressure,
    )


def render_page(state: UIState, icon_base_url: str = ICON_URL) -> PageView:
    """Derive the page from state.

    A previous result stays on screen while a new one loads; an error replaces it.
    """
    rows = []
    if state.suggestions_visible:
        rows = [
            SuggestionRow(name=s.name, location=suggestion_location_line(s), suggestion=s) for s in state.suggestions
        ]

    weather = None
    if state.weather is not None and not state.error:
        weather = format_weather(state.weather, state.display_name, icon_base_url)

    return PageView(
        mode=state.mode,
        busy=state.loading or state.searching_suggestions,
        search_disabled=state.loading,
        error=state.error,
        weather=weather,
        suggestions=rows,
        empty_text=EMPTY_STATE_TEXT if state.mode is UIMode.EMPTY else "",
    )
