# ABOUTME: Exception types raised by the weather service and shown to the user.
# ABOUTME: Each error carries the user-facing message the page renders as-is.

NOT_FOUND_MESSAGE = "Cidade não encontrada. Verifique o nome e tente novamente."
GENERIC_FAILURE_MESSAGE = "Falha ao obter dados meteorológicos"


class WeatherLookupError(Exception):
    """Base class for failures of a weather lookup."""

    def __init__(self, message: str = GENERIC_FAILURE_MESSAGE):
        super().__init__(message)
        self.message = message


class CityNotFoundError(WeatherLookupError):
    """The weather endpoint answered with a non-2xx status."""

    def __init__(self, status_code: int | None = None):
        super().__init__(NOT_FOUND_MESSAGE)
        self.status_code = status_code


class WeatherFetchError(WeatherLookupError):
    """Transport or payload failure while retrieving weather data."""

    @classmethod
    def from_exception(cls, exc: Exception) -> "WeatherFetchError":
        """Keep the underlying message when it has one, else fall back to the generic text."""
        return cls(str(exc) or GENERIC_FAILURE_MESSAGE)
