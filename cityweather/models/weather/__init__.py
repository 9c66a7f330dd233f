from cityweather.models.weather.weather import (
    CommonWeatherModel,
    MainWeatherData,
    OpenWeatherMapResponse,
    WeatherCondition,
)
from cityweather.models.weather.weather_display import WeatherDisplay
from cityweather.models.weather.weather_group import WeatherGroup, classify

__all__ = [
    "CommonWeatherModel",
    "MainWeatherData",
    "OpenWeatherMapResponse",
    "WeatherCondition",
    "WeatherDisplay",
    "WeatherGroup",
    "classify",
]
