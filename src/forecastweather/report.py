"""HTML report rendering from a placeholder template."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from pathlib import Path

from forecastweather.models.forecast import ForecastDay, HourlyReading
from forecastweather.models.location import Location

UPDATED_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
ICON_SCHEME = "https"

# (header, cell renderer) per table row, in display order.
_TABLE_ROWS: list[tuple[str, Callable[[HourlyReading], str]]] = [
    ("Hour", lambda h: h.hour_of_day),
    ("Weather", lambda h: f'<img src="{h.condition.icon}" alt="Weather Icon">'),
    ("Condition", lambda h: h.condition.text),
    ("Temperature", lambda h: f"{format_number(h.temp_c)} °C"),
    ("Wind", lambda h: f"{format_number(h.wind_kph)} kph"),
]


def format_number(value: float) -> str:
    """Shortest form of a reading: 12.0 -> '12', 12.5 -> '12.5'."""
    if value.is_integer():
        return str(int(value))
    return str(value)


def build_hourly_table(hours: Sequence[HourlyReading]) -> str:
    """Render the hourly readings as a five-row HTML table.

    Every row starts with a ``<th>`` label and holds one ``<td>`` per reading,
    in the order given.
    """
    lines = ["<table>"]
    for header, cell in _TABLE_ROWS:
        lines.append(f"<tr><th>{header}</th>")
        lines.extend(f"<td>{cell(hour)}</td>" for hour in hours)
        lines.append("</tr>")
    lines.append("</table>")
    return "\n".join(lines) + "\n"


def build_replacements(
    day: ForecastDay,
    location: Location,
    now: datetime,
) -> list[tuple[str, str]]:
    """Return the ordered (placeholder, value) pairs for a report."""
    # The provider's icon path already starts with '//', so this yields
    # 'https//...'. Existing templates depend on that exact value.
    icon = f"{ICON_SCHEME}{day.day.condition.icon}"
    return [
        ("{{ City }}", location.name),
        ("{{ Country }}", location.country),
        ("{{ TodayWeatherDate }}", day.date.strftime("%Y-%m-%d")),
        ("{{ TodayWeatherIcon }}", icon),
        ("{{ TodayWeatherCondition }}", day.day.condition.text),
        ("{{ TodayWeatherConditionIcon }}", icon),
        ("{{ WeathersTable }}", build_hourly_table(day.hour)),
        ("{{ UpdatedDateTime }}", now.astimezone(timezone.utc).strftime(UPDATED_FORMAT)),
    ]


def substitute(text: str, replacements: Sequence[tuple[str, str]]) -> str:
    """Replace every placeholder in one pass over ``text``.

    Values are inserted literally and never rescanned, so a value that
    itself contains a placeholder token stays as it is.
    """
    if not replacements:
        return text
    values = dict(replacements)
    # Longest first so no token shadows another it is a prefix of.
    tokens = sorted(values, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(token) for token in tokens))
    return pattern.sub(lambda match: values[match.group(0)], text)


def render_report(
    day: ForecastDay,
    location: Location,
    template_path: str | Path,
    now: datetime | None = None,
) -> str:
    """Read the template at ``template_path`` and fill in the forecast.

    Raises:
        OSError: If the template cannot be read.
    """
    # Bytes in, so line endings reach the output exactly as the template has them.
    template = Path(template_path).read_bytes().decode("utf-8")
    if now is None:
        now = datetime.now(timezone.utc)
    return substitute(template, build_replacements(day, location, now))
