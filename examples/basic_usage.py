"""Basic usage examples for the weather client and report renderer."""

import asyncio
import sys
from pathlib import Path

from forecastweather import AsyncWeatherAPIClient, render_report


async def main() -> None:
    api_key = sys.argv[1] if len(sys.argv) > 1 else "YOUR_API_KEY"

    async with AsyncWeatherAPIClient(api_key=api_key) as client:
        weather = await client.forecast("London", days=3)

    print(f"=== {weather.location.name}, {weather.location.country} ===")
    for day in weather.forecast.forecastday:
        print(f"  {day.date}: {day.day.condition.text}")

    today = weather.today
    print(f"\n=== Hourly for {today.date} ===")
    for hour in today.hour[::3]:
        print(f"  {hour.hour_of_day}  {hour.temp_c:5.1f}°C  {hour.wind_kph:5.1f} kph  {hour.condition.text}")

    template = Path(__file__).with_name("template.html")
    out = Path("weather.html")
    out.write_text(render_report(today, weather.location, template), encoding="utf-8", newline="")
    print(f"\nReport written to {out}")


if __name__ == "__main__":
    asyncio.run(main())
