class CityWeatherError(Exception):
    """Root exception for every error raised by this package."""

    pass
