from cityweather.exceptions.base import CityWeatherError


class WeatherServiceError(CityWeatherError):
    """Base exception for weather service errors."""

    pass
