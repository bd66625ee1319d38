"""Weather domain model - immutable records decoded from an OpenWeather response."""
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

INT32 = 32
INT64 = 64


def _as_int(value: Any, bits: int = INT32) -> int:
    """Accept a JSON integer (or integral float) that fits a signed field of the given width."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected integer, got {type(value).__name__}")
    if isinstance(value, float) and not (math.isfinite(value) and value.is_integer()):
        raise ValueError(f"expected integer, got {value!r}")
    result = int(value)
    limit = 1 << (bits - 1)
    if not -limit <= result < limit:
        raise ValueError(f"integer {result} out of range for {bits}-bit field")
    return result


def _as_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected number, got {type(value).__name__}")
    result = float(value)
    if not math.isfinite(result):
        raise ValueError(f"expected finite number, got {value!r}")
    return result


def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else _as_int(value)


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else _as_float(value)


def _as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Coord:
    lon: float
    lat: float


@dataclass(frozen=True)
class Condition:
    """One entry of the 'weather' array."""
    id: int
    main: str  # e.g., "Clouds", "Rain", "Clear"
    description: str  # e.g., "broken clouds", "light rain"
    icon: str


@dataclass(frozen=True)
class MainMetrics:
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int  # hPa
    humidity: int  # percentage
    sea_level: Optional[int] = None
    grnd_level: Optional[int] = None


@dataclass(frozen=True)
class Wind:
    speed: float  # m/s
    deg: int
    gust: Optional[float] = None


@dataclass(frozen=True)
class Clouds:
    all: int  # percentage


@dataclass(frozen=True)
class Sys:
    country: str
    sunrise: int  # UNIX timestamp (UTC)
    sunset: int  # UNIX timestamp (UTC)


@dataclass(frozen=True)
class WeatherReport:
    """Current weather for one city, as returned by the Current Weather API."""
    coord: Coord
    weather: Tuple[Condition, ...]
    base: str
    main: MainMetrics
    visibility: int  # meters
    wind: Wind
    clouds: Clouds
    dt: int  # UNIX timestamp (UTC)
    sys: Sys
    timezone: int  # Offset from UTC in seconds
    id: int
    name: str
    cod: int

    @property
    def condition(self) -> Condition:
        """The primary weather condition (first entry of the array)."""
        return self.weather[0]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeatherReport":
        """
        Decode an API response body into a WeatherReport.

        Only sea_level, grnd_level and gust may be absent.

        Raises:
            KeyError: If a required field is missing
            TypeError: If a field has the wrong shape
            ValueError: If a numeric field cannot be converted or the
                'weather' array is empty
        """
        conditions = tuple(
            Condition(
                id=_as_int(item["id"]),
                main=_as_str(item["main"]),
                description=_as_str(item["description"]),
                icon=_as_str(item["icon"]),
            )
            for item in data["weather"]
        )
        if not conditions:
            raise ValueError("Response has an empty 'weather' array")

        main_data = data["main"]
        wind_data = data["wind"]
        sys_data = data["sys"]

        return cls(
            coord=Coord(
                lon=_as_float(data["coord"]["lon"]),
                lat=_as_float(data["coord"]["lat"]),
            ),
            weather=conditions,
            base=_as_str(data["base"]),
            main=MainMetrics(
                temp=_as_float(main_data["temp"]),
                feels_like=_as_float(main_data["feels_like"]),
                temp_min=_as_float(main_data["temp_min"]),
                temp_max=_as_float(main_data["temp_max"]),
                pressure=_as_int(main_data["pressure"]),
                humidity=_as_int(main_data["humidity"]),
                sea_level=_optional_int(main_data.get("sea_level")),
                grnd_level=_optional_int(main_data.get("grnd_level")),
            ),
            visibility=_as_int(data["visibility"]),
            wind=Wind(
                speed=_as_float(wind_data["speed"]),
                deg=_as_int(wind_data["deg"]),
                gust=_optional_float(wind_data.get("gust")),
            ),
            clouds=Clouds(all=_as_int(data["clouds"]["all"])),
            dt=_as_int(data["dt"], INT64),
            sys=Sys(
                country=_as_str(sys_data["country"]),
                sunrise=_as_int(sys_data["sunrise"], INT64),
                sunset=_as_int(sys_data["sunset"], INT64),
            ),
            timezone=_as_int(data["timezone"]),
            id=_as_int(data["id"], INT64),
            name=_as_str(data["name"]),
            cod=_as_int(data["cod"]),
        )
