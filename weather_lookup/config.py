# ABOUTME: Runtime settings for the weather lookup app, read from the environment.
# ABOUTME: Loads .env via python-dotenv and validates values with a Pydantic model.

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, SecretStr

load_dotenv()

GEO_URL = "https://api.openweathermap.org/geo/1.0"
DATA_URL = "https://api.openweathermap.org/data/2.5"
ICON_URL = "http://openweathermap.org/img/wn"


class Settings(BaseModel):
    """Configuration for the OpenWeather endpoints and the suggestion behavior."""

    api_key: SecretStr = SecretStr("")
    geo_base_url: str = GEO_URL
    data_base_url: str = DATA_URL
    icon_base_url: str = ICON_URL
    lang: str = "pt_br"
    units: str = "metric"
    suggestion_limit: int = 5
    debounce_seconds: float = 0.3
    min_query_length: int = 2
    http_timeout: float = 10.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, keeping defaults for unset ones."""
        env = {
            "api_key": os.environ.get("OPENWEATHER_API_KEY"),
            "geo_base_url": os.environ.get("OPENWEATHER_GEO_URL"),
            "data_base_url": os.environ.get("OPENWEATHER_DATA_URL"),
            "icon_base_url": os.environ.get("OPENWEATHER_ICON_URL"),
            "lang": os.environ.get("WEATHER_LANG"),
            "units": os.environ.get("WEATHER_UNITS"),
            "suggestion_limit": os.environ.get("SUGGESTION_LIMIT"),
            "debounce_seconds": os.environ.get("SUGGESTION_DEBOUNCE_SECONDS"),
            "min_query_length": os.environ.get("SUGGESTION_MIN_CHARS"),
            "http_timeout": os.environ.get("HTTP_TIMEOUT_SECONDS"),
            "log_level": os.environ.get("LOG_LEVEL"),
        }
        return cls(**{k: v for k, v in env.items() if v is not None})


def configure_logging(level: str) -> None:
    """Set up root logging for the page.

    httpx logs every request URL at INFO, and the URL carries the `appid` key,
    so its loggers are capped at WARNING.
    """
    logging.basicConfig(level=level)
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)
