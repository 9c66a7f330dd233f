from typing import Optional

from pydantic import BaseModel, Field

from cityweather.models.weather.weather import CommonWeatherModel
from cityweather.models.weather.weather_group import WeatherGroup

PLACEHOLDER = "-"
COLD_TEMPERATURE_LIMIT = 15


class WeatherDisplay(BaseModel):
    """Labels rendered by the weather widget."""

    city_name: Optional[str] = Field(None, description="City name")
    temperature_label: str = Field(..., description="Whole-degree temperature, e.g. 21°")
    description: str = Field(..., description="Main weather condition")
    group: WeatherGroup = Field(..., description="Weather group")
    icon: str = Field(..., description="Icon asset for the weather group")
    thermometer: str = Field(..., description="Thermometer icon variant (cold/hot)")

    @classmethod
    def from_common_model(cls, model: CommonWeatherModel) -> "WeatherDisplay":
        # A missing temperature renders as 0°
        temperature = int(model.temperature or 0.0)

        return cls(
            city_name=model.city_name,
            temperature_label=f"{temperature}°",
            description=model.description or PLACEHOLDER,
            group=model.icon,
            icon=model.icon.icon,
            thermometer="cold" if temperature <= COLD_TEMPERATURE_LIMIT else "hot",
        )
