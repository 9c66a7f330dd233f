from cityweather.exceptions.base import CityWeatherError


class ConfigurationError(CityWeatherError):
    """Base exception for missing or invalid settings."""

    pass
