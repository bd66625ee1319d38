"""Tests for weather_data module."""
import dataclasses

import pytest
from weather_data import Condition, WeatherReport


@pytest.fixture
def sample_response():
    """Sample OpenWeather current weather response for London."""
    return {
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "weather": [
            {"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"},
            {"id": 701, "main": "Mist", "description": "mist", "icon": "50d"},
        ],
        "base": "stations",
        "main": {
            "temp": 12.3,
            "feels_like": 11.1,
            "temp_min": 10.9,
            "temp_max": 13.8,
            "pressure": 1012,
            "humidity": 81,
            "sea_level": 1012,
            "grnd_level": 1008,
        },
        "visibility": 10000,
        "wind": {"speed": 4.63, "deg": 240, "gust": 9.26},
        "clouds": {"all": 75},
        "dt": 1697713200,
        "sys": {"type": 2, "id": 2075535, "country": "GB", "sunrise": 1697697002, "sunset": 1697734527},
        "timezone": 3600,
        "id": 2643743,
        "name": "London",
        "cod": 200,
    }


def test_weather_report_from_dict(sample_response):
    """Test decoding a complete response."""
    report = WeatherReport.from_dict(sample_response)

    assert report.name == "London"
    assert report.sys.country == "GB"
    assert report.coord.lon == -0.1257
    assert report.coord.lat == 51.5085
    assert report.main.temp == 12.3
    assert report.main.pressure == 1012
    assert report.main.humidity == 81
    assert report.main.sea_level == 1012
    assert report.main.grnd_level == 1008
    assert report.wind.speed == 4.63
    assert report.wind.deg == 240
    assert report.wind.gust == 9.26
    assert report.clouds.all == 75
    assert report.visibility == 10000
    assert report.sys.sunrise == 1697697002
    assert report.timezone == 3600
    assert len(report.weather) == 2


def test_condition_is_first_entry(sample_response):
    """Only the first condition is the primary one."""
    report = WeatherReport.from_dict(sample_response)
    assert report.condition == Condition(id=500, main="Rain", description="light rain", icon="10d")


def test_optional_fields_may_be_absent(sample_response):
    """sea_level, grnd_level and gust are tolerated when missing."""
    del sample_response["main"]["sea_level"]
    del sample_response["main"]["grnd_level"]
    del sample_response["wind"]["gust"]

    report = WeatherReport.from_dict(sample_response)

    assert report.main.sea_level is None
    assert report.main.grnd_level is None
    assert report.wind.gust is None


def test_integer_temperatures_become_floats(sample_response):
    sample_response["main"]["temp"] = 12
    report = WeatherReport.from_dict(sample_response)
    assert isinstance(report.main.temp, float)


def test_structural_equality(sample_response):
    assert WeatherReport.from_dict(sample_response) == WeatherReport.from_dict(sample_response)


def test_report_is_immutable(sample_response):
    report = WeatherReport.from_dict(sample_response)
    with pytest.raises(dataclasses.FrozenInstanceError):
        report.name = "Paris"


@pytest.mark.parametrize("path", [
    ("main", "temp"),
    ("wind", "deg"),
    ("sys", "sunset"),
    ("visibility",),
    ("timezone",),
    ("name",),
])
def test_missing_required_field(sample_response, path):
    """A missing required field raises KeyError."""
    target = sample_response
    for key in path[:-1]:
        target = target[key]
    del target[path[-1]]

    with pytest.raises(KeyError):
        WeatherReport.from_dict(sample_response)


def test_empty_weather_array(sample_response):
    sample_response["weather"] = []
    with pytest.raises(ValueError):
        WeatherReport.from_dict(sample_response)


def test_wrong_types(sample_response):
    sample_response["main"]["temp"] = "warm"
    with pytest.raises(TypeError):
        WeatherReport.from_dict(sample_response)

    sample_response["main"]["temp"] = 12.3
    sample_response["name"] = 42
    with pytest.raises(TypeError):
        WeatherReport.from_dict(sample_response)


@pytest.mark.parametrize("path,value", [
    (("visibility",), float("inf")),
    (("visibility",), 10000.5),
    (("main", "humidity"), True),
    (("timezone",), 2 ** 31),
    (("dt",), 2 ** 63),
    (("main", "temp"), float("nan")),
    (("wind", "gust"), float("inf")),
])
def test_numbers_must_fit_their_field(sample_response, path, value):
    """Non-finite, fractional, boolean or oversized values are rejected."""
    target = sample_response
    for key in path[:-1]:
        target = target[key]
    target[path[-1]] = value

    with pytest.raises((TypeError, ValueError)):
        WeatherReport.from_dict(sample_response)


def test_integral_floats_are_accepted(sample_response):
    sample_response["visibility"] = 10000.0
    sample_response["sys"]["sunrise"] = 1697697002.0
    report = WeatherReport.from_dict(sample_response)
    assert report.visibility == 10000
    assert isinstance(report.sys.sunrise, int)
