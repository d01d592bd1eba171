"""Request path builder for the forecast endpoint."""

from __future__ import annotations

FORECAST_ENDPOINT = "/forecast.json"
DEFAULT_DAYS = 3


def build_forecast_path(api_key: str, city: str, days: int = DEFAULT_DAYS) -> str:
    """Build the forecast endpoint path with its query string.

    Values are inserted as given. The city is not percent-encoded, so a
    query such as ``London`` or ``48.85,2.35`` reaches the provider verbatim.

    Args:
        api_key: Provider API key, sent as the ``key`` parameter.
        city: City name or any query term the provider accepts.
        days: Forecast horizon in days.

    Returns:
        Path relative to the API base URL, e.g.
        ``/forecast.json?key=X&q=Paris&days=3``.
    """
    return f"{FORECAST_ENDPOINT}?key={api_key}&q={city}&days={days}"
