from cityweather.exceptions.weather.weather_service_error import WeatherServiceError


class BadURLError(WeatherServiceError):
    """Exception for a request URL that could not be built."""

    pass
