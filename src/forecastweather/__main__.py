"""Allow ``python -m forecastweather``."""

from forecastweather.cli import main

if __name__ == "__main__":
    main()
