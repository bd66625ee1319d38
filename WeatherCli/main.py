"""Command-line weather report for a city, one-shot or interactive."""
import argparse
import logging
import os
import sys
from typing import List, Optional, TextIO

from dotenv import load_dotenv

from layout import display_weather
from openweather_provider import OpenWeatherProvider
from weather_provider import ConfigError, WeatherProviderBase, WeatherProviderError

API_KEY_ENV = "OPEN_WEATHER_MAP_API"
EXIT_WORDS = ("q", "exit")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="weather", description="A weather CLI application")
    parser.add_argument("-c", "--city", help="City to look up; skips interactive mode")
    parser.add_argument("-f", "--fahrenheit", action="store_true", help="Show temperatures in Fahrenheit")
    return parser.parse_args(argv)


def setup_logging() -> None:
    """
    Configure logging from the environment.

    Silent unless WEATHER_LOG_FILE names a log file or WEATHER_DEBUG=true
    turns on debug output to stderr, so logs never mix with the report.
    """
    verbose = os.getenv("WEATHER_DEBUG", "false").lower() == "true"
    log_file = os.getenv("WEATHER_LOG_FILE")

    handlers: List[logging.Handler] = []
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))
    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def load_config() -> str:
    """Return the OpenWeather API key from the environment or a .env file."""
    load_dotenv()
    api_key = os.getenv(API_KEY_ENV)

    if not api_key:
        raise ConfigError(f"{API_KEY_ENV} environment variable not set. Please add it to your .env file.")

    logging.info("Configuration loaded from %s", API_KEY_ENV)
    return api_key


def get_and_display_weather(
    provider: WeatherProviderBase,
    city: str,
    use_fahrenheit: bool,
    out: Optional[TextIO] = None,
) -> None:
    weather = provider.get_current(city)
    logging.info(
        "Weather: city=%s temp=%s condition=%s",
        weather.name,
        weather.main.temp,
        weather.condition.main,
    )
    display_weather(weather, use_fahrenheit, out)


def run_query(
    provider: WeatherProviderBase,
    city: str,
    use_fahrenheit: bool,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> bool:
    """
    Fetch and display one city, reporting a lookup failure on err.

    Returns:
        True if the report was displayed, False if the lookup failed
    """
    err = err if err is not None else sys.stderr
    try:
        get_and_display_weather(provider, city, use_fahrenheit, out)
    except WeatherProviderError as e:
        logging.error("Weather lookup for %r failed: %s", city, e)
        print(f"Error: Failed to get weather data for '{city}': {e}", file=err)
        return False
    return True


def is_exit_command(text: str) -> bool:
    return text.lower() in EXIT_WORDS


def interactive_loop(
    provider: WeatherProviderBase,
    use_fahrenheit: bool,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> None:
    """Prompt for city names until the user types 'q' or 'exit' (or stdin ends)."""
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout

    print("🌤️  Weather CLI v1.0", file=out)
    print("Enter 'q' or 'exit' to quit", file=out)

    while True:
        print("Enter city name: ", file=out, flush=True)
        line = stdin.readline()
        if not line:
            logging.info("End of input, leaving interactive mode")
            print("👋 Goodbye!", file=out)
            break

        city = line.strip()
        if is_exit_command(city):
            print("👋 Goodbye!", file=out)
            break

        run_query(provider, city, use_fahrenheit, out, err)
        print(file=out)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging()

    try:
        api_key = load_config()
    except ConfigError as e:
        logging.error("Startup failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    provider = OpenWeatherProvider(api_key=api_key)

    if args.city is not None:
        # One-shot lookup failures are reported but do not change the exit code
        run_query(provider, args.city, args.fahrenheit)
    else:
        interactive_loop(provider, args.fahrenheit)

    return 0


if __name__ == "__main__":
    sys.exit(main())
