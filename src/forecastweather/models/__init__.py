"""Weather API data models."""

from forecastweather.models.condition import Condition
from forecastweather.models.forecast import Day, Forecast, ForecastDay, HourlyReading
from forecastweather.models.location import Location
from forecastweather.models.response import WeatherResponse

__all__ = [
    "Condition",
    "Day",
    "Forecast",
    "ForecastDay",
    "HourlyReading",
    "Location",
    "WeatherResponse",
]
