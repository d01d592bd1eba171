"""Top-level forecast response model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from forecastweather.models.forecast import Forecast, ForecastDay
from forecastweather.models.location import Location


class WeatherResponse(BaseModel):
    """Body of ``GET /forecast.json``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    location: Location
    forecast: Forecast

    @model_validator(mode="after")
    def validate_today_has_hours(self) -> WeatherResponse:
        # Only today's readings are rendered; later days may come back empty.
        if not self.today.hour:
            raise ValueError("forecast.forecastday[0].hour must not be empty")
        return self

    @property
    def today(self) -> ForecastDay:
        """The first forecast day."""
        return self.forecast.forecastday[0]
