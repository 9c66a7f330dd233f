from cityweather.exceptions.weather.weather_service_error import WeatherServiceError


class JSONParsingError(WeatherServiceError):
    """
    Exception for a decoded response without any weather condition.

    Raised after the body was decoded successfully, so it never wraps a
    decoding failure.
    """

    pass
