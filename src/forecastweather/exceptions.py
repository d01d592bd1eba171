"""Exceptions raised by the forecast client."""

from __future__ import annotations


class WeatherClientError(Exception):
    """Base exception for all weather client errors."""


class WeatherConnectionError(WeatherClientError):
    """Raised when the request fails at the transport level."""


class WeatherTimeoutError(WeatherClientError):
    """Raised when a request to the API times out."""


class WeatherAPIError(WeatherClientError):
    """Raised when the provider answers with a non-success status.

    weatherapi.com reports most failures as
    ``{"error": {"code": 1006, "message": "No matching location found."}}``;
    ``error_code`` holds that provider code when the body carries one.
    """

    def __init__(self, status_code: int, message: str, error_code: int | None = None) -> None:
        self.status_code = status_code
        self.message = message
        self.error_code = error_code
        detail = f" (provider code {error_code})" if error_code is not None else ""
        super().__init__(f"HTTP {status_code}{detail}: {message}")


class WeatherDataError(WeatherClientError):
    """Raised when the response body holds no usable forecast data."""
