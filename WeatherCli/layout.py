"""Layout and rendering logic for the weather report - pure functions for testability."""
import sys
from typing import List, Optional, TextIO

from weather_data import WeatherReport

DIVIDER = "═" * 41
DEFAULT_EMOJI = "🌤️"
SECONDS_PER_DAY = 86400

WEATHER_EMOJI = {
    "clear": "☀️",
    "thunderstorm": "⛈️",
    "drizzle": "🌦️",
    "rain": "🌧️",
    "snow": "❄️",
    "mist": "🌫️",
    "smoke": "🌫️",
    "haze": "🌫️",
    "dust": "🌫️",
    "fog": "🌫️",
    "sand": "🌫️",
    "ash": "🌫️",
    "squall": "🌫️",
    "clouds": "☁️",
    "tornado": "🌪️",
}


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def format_temperature(celsius: float, use_fahrenheit: bool) -> str:
    """Render a Celsius value with one decimal digit, converted if requested."""
    if use_fahrenheit:
        return f"{celsius_to_fahrenheit(celsius):.1f}°F"
    return f"{celsius:.1f}°C"


def get_weather_emoji(condition: str) -> str:
    """
    Get the emoji for an OpenWeather condition group ("Rain", "Clouds", ...).

    Matching is case-insensitive; unknown conditions get a partly-cloudy emoji.
    """
    return WEATHER_EMOJI.get(condition.lower(), DEFAULT_EMOJI)


def format_visibility(meters: int) -> int:
    """Whole kilometers, truncated toward zero."""
    km = abs(meters) // 1000
    return km if meters >= 0 else -km


def format_timestamp(timestamp: int, timezone_offset: int) -> str:
    """
    Render a UNIX timestamp as HH:MM:SS local clock time.

    Args:
        timestamp: Seconds since the epoch (UTC)
        timezone_offset: Fixed offset from UTC in seconds, may be negative

    Returns:
        24-hour clock time string
    """
    seconds = (timestamp + timezone_offset) % SECONDS_PER_DAY
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_report_lines(weather: WeatherReport, use_fahrenheit: bool = False) -> List[str]:
    """
    Build the report as an ordered list of output lines, framed by dividers.

    Args:
        weather: Decoded weather report
        use_fahrenheit: Show temperatures in Fahrenheit instead of Celsius

    Returns:
        Lines to print, in display order
    """
    condition = weather.condition
    main = weather.main

    def temp(value: float) -> str:
        return format_temperature(value, use_fahrenheit)

    lines = [
        DIVIDER,
        f"🌍 Weather in {weather.name}, {weather.sys.country}",
        f"{get_weather_emoji(condition.main)} {condition.main} ({condition.description})",
        f"🌡️ Temperature: {temp(main.temp)} (feels like {temp(main.feels_like)})",
        f"📊 Min/Max: {temp(main.temp_min)}/{temp(main.temp_max)}",
        f"💧 Humidity: {main.humidity}%",
        f"🔄 Pressure: {main.pressure} hPa",
        f"💨 Wind: {weather.wind.speed:.1f} m/s, Direction: {weather.wind.deg}°",
    ]
    if weather.wind.gust is not None:
        lines.append(f"🌬️ Gusts: {weather.wind.gust:.1f} m/s")
    lines.extend([
        f"👁️ Visibility: {format_visibility(weather.visibility)} km",
        f"☁️ Cloudiness: {weather.clouds.all}%",
        f"🌅 Sunrise: {format_timestamp(weather.sys.sunrise, weather.timezone)}",
        f"🌇 Sunset: {format_timestamp(weather.sys.sunset, weather.timezone)}",
        DIVIDER,
    ])
    return lines


def display_weather(weather: WeatherReport, use_fahrenheit: bool = False, out: Optional[TextIO] = None) -> None:
    """Write the report to out (stdout by default), preceded by a blank line."""
    if out is None:
        out = sys.stdout
    out.write("\n")
    for line in format_report_lines(weather, use_fahrenheit):
        out.write(line + "\n")
