# ABOUTME: Pydantic BaseModels for OpenWeather geocoding and current-weather data.
# ABOUTME: Defines the suggestion and weather snapshot types shared by the controller and UI.

from pydantic import BaseModel, ConfigDict, Field


class Suggestion(BaseModel):
    """A candidate place returned by the geocoding endpoint."""

    model_config = ConfigDict(frozen=True)

    name: str
    country: str | None = None
    state: str | None = None
    lat: float
    lon: float


class WeatherCondition(BaseModel):
    """One condition descriptor, e.g. "céu limpo" with icon "01d"."""

    model_config = ConfigDict(frozen=True)

    description: str
    icon: str


class WeatherResult(BaseModel):
    """Snapshot of current conditions for one location."""

    model_config = ConfigDict(frozen=True)

    name: str
    country: str
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    humidity: int
    pressure: int
    wind_speed: float
    conditions: tuple[WeatherCondition, ...] = Field(min_length=1)

    @property
    def canonical_name(self) -> str:
        """The API's own "<name>, <country>" label for this location."""
        return f"{self.name}, {self.country}"
