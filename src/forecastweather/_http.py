"""HTTP transport for the weatherapi.com endpoints, wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from forecastweather.exceptions import (
    WeatherAPIError,
    WeatherConnectionError,
    WeatherDataError,
    WeatherTimeoutError,
)

DEFAULT_BASE_URL = "https://api.weatherapi.com/v1"
# Same as httpx's own default.
DEFAULT_TIMEOUT = 5.0


def _api_error(response: httpx.Response) -> WeatherAPIError:
    """Build the error for a failed response, using the provider's error body if present."""
    try:
        error = response.json().get("error") or {}
        return WeatherAPIError(
            status_code=response.status_code,
            message=str(error["message"]),
            error_code=error.get("code"),
        )
    except (ValueError, AttributeError, KeyError, TypeError):
        return WeatherAPIError(status_code=response.status_code, message=response.text)


def _decode_forecast(response: httpx.Response) -> dict[str, Any]:
    """Check the status and return the JSON object in the body."""
    if not response.is_success:
        raise _api_error(response)
    try:
        payload = response.json()
    except ValueError as exc:
        raise WeatherDataError(f"Response body is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise WeatherDataError("Response body holds no forecast object")
    return payload


class AsyncTransport:
    """One httpx.AsyncClient bound to the provider base URL.

    The client is opened on construction and released by ``close``; callers
    own exactly one request's worth of lifetime.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, path: str) -> dict[str, Any]:
        """GET ``path`` and return the decoded forecast object."""
        try:
            response = await self._client.get(path)
        except httpx.TimeoutException as exc:
            raise WeatherTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise WeatherConnectionError(f"{type(exc).__name__}: {exc}") from exc
        return _decode_forecast(response)

    async def close(self) -> None:
        await self._client.aclose()
