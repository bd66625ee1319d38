"""Weather provider abstraction and the errors a lookup can end in."""
from abc import ABC, abstractmethod
from typing import Optional

from weather_data import WeatherReport


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def get_current(self, city: str) -> WeatherReport:
        """
        Fetch current weather for a city.

        Args:
            city: City name as typed by the user

        Returns:
            WeatherReport: Current weather information

        Raises:
            WeatherProviderError: If the provider fails to fetch data
        """
        pass


class ConfigError(Exception):
    """Raised at startup when required configuration is missing."""
    pass


class WeatherProviderError(Exception):
    """Base class for recoverable failures of a single weather lookup."""
    pass


class NetworkError(WeatherProviderError):
    """The request timed out or the connection failed."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Network error: {cause}")


class NotFoundError(WeatherProviderError):
    """The API does not know the requested city."""

    def __init__(self, city: str):
        self.city = city
        super().__init__(f"City '{city}' not found")


class ApiError(WeatherProviderError):
    """The API answered with a non-success status other than 404."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        text = f"API error: HTTP {status_code}"
        if message:
            text += f": {message}"
        super().__init__(text)


class DecodeError(WeatherProviderError):
    """The response body was not valid JSON or did not match the schema."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to parse response: {cause}")
