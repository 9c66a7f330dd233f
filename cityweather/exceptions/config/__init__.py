from cityweather.exceptions.config.api_key_error import WeatherAPIKeyError
from cityweather.exceptions.config.configuration_error import ConfigurationError

__all__ = ["ConfigurationError", "WeatherAPIKeyError"]
