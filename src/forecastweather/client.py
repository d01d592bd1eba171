"""Client for the weatherapi.com forecast endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from forecastweather._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport
from forecastweather._logging import log_api_call
from forecastweather._query import DEFAULT_DAYS, build_forecast_path
from forecastweather.exceptions import WeatherDataError
from forecastweather.models.response import WeatherResponse


def _validate_response(data: dict[str, Any]) -> WeatherResponse:
    """Validate a forecast payload against the response model."""
    try:
        return WeatherResponse.model_validate(data)
    except ValidationError as exc:
        raise WeatherDataError(f"Failed to validate forecast response: {exc}") from exc


class AsyncWeatherAPIClient:
    """Asynchronous client for the weatherapi.com API.

    Usage:
        async with AsyncWeatherAPIClient(api_key="...") as client:
            weather = await client.forecast("Paris")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncWeatherAPIClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    @log_api_call
    async def forecast(self, city: str, days: int = DEFAULT_DAYS) -> WeatherResponse:
        """Get the location and a ``days``-long forecast for ``city``."""
        data = await self._transport.get(build_forecast_path(self._api_key, city, days))
        return _validate_response(data)
