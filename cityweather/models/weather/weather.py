from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from cityweather.models.weather.weather_group import WeatherGroup, classify


class WeatherCondition(BaseModel):
    """Weather condition details."""

    id: int = Field(..., strict=True, description="Weather condition ID")
    main: str = Field(..., description="Main weather condition (e.g., Rain, Snow, Clear)")


class MainWeatherData(BaseModel):
    """Main weather measurements."""

    temp: float = Field(..., strict=True, description="Current temperature")


class OpenWeatherMapResponse(BaseModel):
    """
    Subset of the OpenWeatherMap current weather response read by the client.

    Numeric fields are strict: a quoted number in the body is a schema error.
    """

    name: str = Field(..., description="City name")
    main: MainWeatherData = Field(..., description="Main weather data")
    weather: Optional[List[WeatherCondition]] = Field(None, description="Weather conditions")


class CommonWeatherModel(BaseModel):
    """Normalized weather shown to the user for one city."""

    model_config = ConfigDict(frozen=True)

    temperature: Optional[float] = Field(None, description="Temperature in Celsius")
    icon: WeatherGroup = Field(..., description="Weather group used to pick the icon")
    description: Optional[str] = Field(None, description="Main weather condition")
    city_name: Optional[str] = Field(None, description="City name")

    @classmethod
    def from_openweather_response(cls, response: OpenWeatherMapResponse) -> "CommonWeatherModel":
        """
        Create a CommonWeatherModel from an OpenWeatherMap API response.

        Only the first weather condition is used. The response must carry at
        least one condition.

        Args:
            response: OpenWeatherMap API response

        Returns:
            CommonWeatherModel: Normalized weather model
        """
        primary_weather = response.weather[0]

        return cls(
            temperature=response.main.temp,
            icon=classify(primary_weather.id),
            description=primary_weather.main,
            city_name=response.name,
        )
