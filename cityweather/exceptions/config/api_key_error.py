from cityweather.exceptions.config.configuration_error import ConfigurationError


class WeatherAPIKeyError(ConfigurationError):
    """Exception for a missing OpenWeatherMap API key."""

    pass
