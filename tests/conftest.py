"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from forecastweather._logging import LOGGER_NAME

DAY_ICON = "//cdn.weatherapi.com/weather/64x64/day/113.png"
NIGHT_ICON = "//cdn.weatherapi.com/weather/64x64/night/113.png"


def make_hour(hour: int, date: str = "2024-03-01", temp_c: float = 10.0, wind_kph: float = 5.0) -> dict[str, Any]:
    icon = DAY_ICON if 6 <= hour < 18 else NIGHT_ICON
    return {
        "time_epoch": 1709251200 + hour * 3600,
        "time": f"{date} {hour:02d}:00",
        "temp_c": temp_c,
        "temp_f": round(temp_c * 9 / 5 + 32, 1),
        "is_day": int(6 <= hour < 18),
        "condition": {"text": "Sunny" if 6 <= hour < 18 else "Clear", "icon": icon, "code": 1000},
        "wind_kph": wind_kph,
        "wind_dir": "SW",
        "humidity": 70,
    }


SAMPLE_LOCATION = {
    "name": "Paris",
    "region": "Ile-de-France",
    "country": "France",
    "lat": 48.87,
    "lon": 2.33,
    "tz_id": "Europe/Paris",
    "localtime_epoch": 1709290800,
    "localtime": "2024-03-01 12:00",
}

SAMPLE_FORECAST_DAY = {
    "date": "2024-03-01",
    "date_epoch": 1709251200,
    "day": {
        "maxtemp_c": 12.4,
        "mintemp_c": 4.1,
        "avgtemp_c": 8.0,
        "maxwind_kph": 18.7,
        "totalprecip_mm": 0.0,
        "condition": {"text": "Sunny", "icon": DAY_ICON, "code": 1000},
        "uv": 3.0,
    },
    "astro": {"sunrise": "07:35 AM", "sunset": "06:40 PM"},
    "hour": [make_hour(h, temp_c=4.0 + h / 2) for h in range(24)],
}

SAMPLE_RESPONSE = {
    "location": SAMPLE_LOCATION,
    "current": {"temp_c": 11.0, "condition": {"text": "Sunny", "icon": DAY_ICON, "code": 1000}},
    "forecast": {"forecastday": [SAMPLE_FORECAST_DAY]},
}


@pytest.fixture
def template_file(tmp_path):
    path = tmp_path / "template.html"
    path.write_text(
        "<h1>{{ City }}, {{ Country }}</h1>\n"
        "<p>{{ TodayWeatherDate }} <img src=\"{{ TodayWeatherIcon }}\"> {{ TodayWeatherCondition }}</p>\n"
        "{{ WeathersTable }}\n"
        "<footer>{{ UpdatedDateTime }}</footer>\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo configure_logging so handlers never outlive the captured stderr."""
    yield
    named_logger = logging.getLogger(LOGGER_NAME)
    for handler in named_logger.handlers[:]:
        handler.close()
        named_logger.removeHandler(handler)
    named_logger.setLevel(logging.NOTSET)
    named_logger.propagate = True
