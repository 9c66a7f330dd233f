from cityweather.exceptions.weather.bad_url_error import BadURLError
from cityweather.exceptions.weather.json_parsing_error import JSONParsingError
from cityweather.exceptions.weather.no_data_error import NoDataError
from cityweather.exceptions.weather.weather_service_error import WeatherServiceError

__all__ = ["BadURLError", "JSONParsingError", "NoDataError", "WeatherServiceError"]
