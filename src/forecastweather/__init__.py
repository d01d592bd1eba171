"""forecastweather: weatherapi.com forecast client and HTML report renderer."""

from forecastweather.client import AsyncWeatherAPIClient
from forecastweather.exceptions import (
    WeatherAPIError,
    WeatherClientError,
    WeatherConnectionError,
    WeatherDataError,
    WeatherTimeoutError,
)
from forecastweather.report import build_hourly_table, render_report

__all__ = [
    "AsyncWeatherAPIClient",
    "WeatherAPIError",
    "WeatherClientError",
    "WeatherConnectionError",
    "WeatherDataError",
    "WeatherTimeoutError",
    "build_hourly_table",
    "render_report",
]

__version__ = "0.1.0"
