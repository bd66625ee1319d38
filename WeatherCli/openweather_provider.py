"""OpenWeather Current Weather API provider implementation."""
import logging
from typing import Optional

import requests

from weather_provider import (
    ApiError,
    DecodeError,
    NetworkError,
    NotFoundError,
    WeatherProviderBase,
)
from weather_data import WeatherReport


class OpenWeatherProvider(WeatherProviderBase):
    """
    Weather provider using OpenWeather Current Weather API, queried by city name.

    Uses the free Current Weather API: https://openweathermap.org/current
    Results are always requested in metric units; conversion to Fahrenheit
    happens at display time.
    """

    BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
    UNITS = "metric"

    def __init__(self, api_key: str, timeout: int = 10, base_url: str = BASE_URL):
        """
        Initialize OpenWeather provider.

        Args:
            api_key: OpenWeather API key
            timeout: HTTP request timeout in seconds
            base_url: Endpoint to query (overridable for tests)
        """
        self.api_key = api_key
        self.timeout = timeout
        self.base_url = base_url

    def get_current(self, city: str) -> WeatherReport:
        """
        Fetch current weather for a city from OpenWeather.

        Args:
            city: City name, passed verbatim as the 'q' parameter

        Returns:
            WeatherReport: Current weather information

        Raises:
            NetworkError: On timeout or connection failure
            NotFoundError: If the API answers 404
            ApiError: On any other non-success status
            DecodeError: If the body is not a valid weather response
        """
        params = {
            "q": city,
            "appid": self.api_key,
            "units": self.UNITS,
        }

        try:
            logging.info(f"Making OpenWeather API request: {self.base_url}")
            logging.debug(f"Request parameters: q={city}, units={self.UNITS}")
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise NetworkError(e) from e

        logging.info(f"API response status: {response.status_code}")

        if not 200 <= response.status_code < 300:
            logging.error(f"API request failed with status {response.status_code}")
            self._handle_error_response(response, city)

        try:
            data = response.json()
            logging.debug(f"API response (truncated): {str(data)[:500]}...")
            report = WeatherReport.from_dict(data)
        except (KeyError, ValueError, TypeError, OverflowError) as e:
            logging.error(f"Failed to parse API response: {e!r}", exc_info=True)
            raise DecodeError(e) from e

        logging.info(
            f"Successfully parsed weather data: {report.name}, "
            f"{report.main.temp}°C, {report.condition.main}"
        )
        return report

    def _handle_error_response(self, response: requests.Response, city: str) -> None:
        """Raise the error matching a non-success OpenWeather response."""
        if response.status_code == 404:
            raise NotFoundError(city)

        message: Optional[str] = None
        try:
            error_data = response.json()
            logging.error(f"OpenWeather API error response: {error_data}")
            if isinstance(error_data, dict) and error_data.get("message"):
                message = str(error_data["message"])
        except ValueError:
            # Not JSON, the status code alone describes the failure
            logging.error(f"Non-JSON error response: HTTP {response.status_code}, body: {response.text[:500]}")

        raise ApiError(response.status_code, message)
