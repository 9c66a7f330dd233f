from cityweather.exceptions.weather.weather_service_error import WeatherServiceError


class NoDataError(WeatherServiceError):
    """Exception for a successful response that carried no body."""

    pass
