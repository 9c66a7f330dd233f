from enum import Enum
from typing import List, Tuple


class WeatherGroup(str, Enum):
    """Coarse weather groups used to pick a display icon."""

    THUNDER = "thunder"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    ATMOSPHERE = "atmosphere"
    CLEAR = "clear"
    CLOUDS = "clouds"

    @property
    def icon(self) -> str:
        """Name of the icon asset rendered for this group."""
        return _GROUP_ICONS[self]


_GROUP_ICONS = {
    WeatherGroup.THUNDER: "ic_thunder",
    WeatherGroup.DRIZZLE: "ic_rain",
    WeatherGroup.RAIN: "ic_rain",
    WeatherGroup.SNOW: "ic_snow",
    WeatherGroup.ATMOSPHERE: "ic_fog",
    WeatherGroup.CLEAR: "ic_sun",
    WeatherGroup.CLOUDS: "ic_sun_cloudy",
}

# Inclusive, disjoint condition code ranges, checked in order.
# See https://openweathermap.org/weather-conditions
CONDITION_RANGES: List[Tuple[int, int, WeatherGroup]] = [
    (200, 232, WeatherGroup.THUNDER),
    (300, 321, WeatherGroup.DRIZZLE),
    (500, 531, WeatherGroup.RAIN),
    (600, 622, WeatherGroup.SNOW),
    (701, 781, WeatherGroup.ATMOSPHERE),
    (800, 800, WeatherGroup.CLEAR),
]

DEFAULT_GROUP = WeatherGroup.CLOUDS


def classify(condition_code: int) -> WeatherGroup:
    """
    Get the weather group of an OpenWeatherMap condition code.

    Args:
        condition_code: Weather condition ID from the API response

    Returns:
        The matching WeatherGroup, or CLOUDS for any code outside the known ranges
    """
    for low, high, group in CONDITION_RANGES:
        if low <= condition_code <= high:
            return group
    return DEFAULT_GROUP
