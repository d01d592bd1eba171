"""Command-line entry point: fetch a forecast and render the HTML report."""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from forecastweather._logging import configure_logging, logger
from forecastweather._query import DEFAULT_DAYS
from forecastweather.client import AsyncWeatherAPIClient
from forecastweather.exceptions import (
    WeatherAPIError,
    WeatherConnectionError,
    WeatherDataError,
    WeatherTimeoutError,
)
from forecastweather.report import render_report

# Flag -> argparse dest
REQUIRED_FLAGS = {
    "--city": "city",
    "--weather-api-key": "weather_api_key",
    "--template-file": "template_file",
    "--out-file": "out_file",
}


class Outcome(Enum):
    """Terminal state of a run."""

    SUCCESS = "success"
    ABORTED = "aborted"


@dataclass(frozen=True)
class ReportOptions:
    """Validated command-line options for one report run."""

    city: str
    api_key: str
    template_file: Path
    out_file: Path
    days: int = DEFAULT_DAYS


class _FirstValue(argparse.Action):
    """Keep the value of the first occurrence of a repeated flag."""

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest, None) is None:
            setattr(namespace, self.dest, values)


def _unquote(value: str) -> str:
    """Strip single quotes wrapped around a flag value."""
    return value.strip("'")


def _days(value: str) -> int:
    """Parse ``--days``, falling back to the default when unparsable."""
    try:
        return int(_unquote(value))
    except ValueError:
        return DEFAULT_DAYS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forecast-weather",
        description="Render an HTML weather report for a city from a placeholder template.",
        allow_abbrev=False,
        exit_on_error=False,
    )
    # nargs="?" lets a bare flag parse as None (required) or the default (--days).
    for flag, help_text in (
        ("--city", "City name or query term (required)."),
        ("--weather-api-key", "weatherapi.com API key (required)."),
        ("--template-file", "Path to the HTML template (required)."),
        ("--out-file", "Path to write the rendered report (required)."),
    ):
        parser.add_argument(flag, nargs="?", type=_unquote, action=_FirstValue, help=help_text)
    parser.add_argument(
        "--days",
        nargs="?",
        type=_days,
        const=DEFAULT_DAYS,
        action=_FirstValue,
        help=f"Forecast days to request (default: {DEFAULT_DAYS}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    return parser


def missing_flags(namespace: argparse.Namespace) -> list[str]:
    """Return the required flags that were absent or empty."""
    return [flag for flag, dest in REQUIRED_FLAGS.items() if not getattr(namespace, dest, None)]


def to_options(namespace: argparse.Namespace) -> ReportOptions:
    return ReportOptions(
        city=namespace.city,
        api_key=namespace.weather_api_key,
        template_file=Path(namespace.template_file),
        out_file=Path(namespace.out_file),
        days=DEFAULT_DAYS if namespace.days is None else namespace.days,
    )


async def run(options: ReportOptions) -> Outcome:
    """Fetch the forecast once, render the template and write the report.

    Client failures are reported on the console and end the run with
    ``Outcome.ABORTED``; nothing is written in that case. Errors reading
    the template or writing the output propagate.
    """
    try:
        async with AsyncWeatherAPIClient(api_key=options.api_key) as client:
            weather = await client.forecast(options.city, days=options.days)
    except WeatherAPIError as exc:
        print(f"Failed to fetch the weather data. Status Code: {exc.status_code}")
        return Outcome.ABORTED
    except (WeatherConnectionError, WeatherTimeoutError) as exc:
        print(f"Failed to fetch the weather data: {exc}")
        return Outcome.ABORTED
    except WeatherDataError:
        print("No weather data found.")
        return Outcome.ABORTED

    logger.info(
        "Rendering %s for %s, %s (%d hourly readings)",
        options.template_file, weather.location.name, weather.location.country, len(weather.today.hour),
    )
    content = render_report(weather.today, weather.location, options.template_file)
    options.out_file.write_text(content, encoding="utf-8", newline="")
    print(f"Weather report created at {options.out_file}")
    return Outcome.SUCCESS


def main(argv: Sequence[str] | None = None) -> None:
    """Parse ``argv`` and produce one report."""
    parser = build_parser()
    try:
        namespace, unknown = parser.parse_known_args(argv)
    except argparse.ArgumentError as exc:
        print(f"Invalid arguments: {exc}")
        print(parser.format_usage(), end="")
        return
    configure_logging(namespace.verbose)
    if unknown:
        logger.warning("Ignoring unrecognized arguments: %s", " ".join(unknown))

    missing = missing_flags(namespace)
    if missing:
        logger.debug("Missing flags: %s", ", ".join(missing))
        print(f"Missing required arguments: {', '.join(REQUIRED_FLAGS)}")
        print(parser.format_usage(), end="")
        return

    asyncio.run(run(to_options(namespace)))
