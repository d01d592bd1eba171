"""Forecast day and hourly reading models."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from forecastweather.models.condition import Condition


class HourlyReading(BaseModel):
    """One hour-granularity weather sample."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    time: str
    condition: Condition
    temp_c: float
    wind_kph: float

    @field_validator("time")
    @classmethod
    def validate_time(cls, value: str) -> str:
        if " " not in value:
            raise ValueError("hour.time must look like 'YYYY-MM-DD HH:MM'")
        return value

    @property
    def hour_of_day(self) -> str:
        """Time-of-day part of ``time`` ("2024-03-01 13:00" -> "13:00")."""
        return self.time.split(" ", 1)[1]


class Day(BaseModel):
    """Daily summary of a forecast day."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    condition: Condition
    maxtemp_c: float | None = None
    mintemp_c: float | None = None
    avgtemp_c: float | None = None
    maxwind_kph: float | None = None


class ForecastDay(BaseModel):
    """One calendar day with its summary and hourly readings."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    date: date
    day: Day
    hour: list[HourlyReading]


class Forecast(BaseModel):
    """Ordered forecast days, index 0 being today."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    forecastday: list[ForecastDay] = Field(min_length=1)
