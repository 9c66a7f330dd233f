from cityweather.exceptions.base import CityWeatherError
from cityweather.exceptions.config import ConfigurationError, WeatherAPIKeyError
from cityweather.exceptions.weather import (
    BadURLError,
    JSONParsingError,
    NoDataError,
    WeatherServiceError,
)

__all__ = [
    "BadURLError",
    "ConfigurationError",
    "JSONParsingError",
    "NoDataError",
    "WeatherAPIKeyError",
    "CityWeatherError",
    "WeatherServiceError",
]
