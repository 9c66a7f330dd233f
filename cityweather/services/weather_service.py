from typing import Optional

import httpx
import structlog
from pydantic import ValidationError

from cityweather.config.config import Config, config
from cityweather.exceptions.weather import BadURLError, JSONParsingError, NoDataError
from cityweather.models.weather.weather import CommonWeatherModel, OpenWeatherMapResponse

logger = structlog.get_logger(__name__)

WEATHER_ENDPOINT = "weather"
TEMPERATURE_UNITS = "metric"

CITY_PARAM = "q"
UNITS_PARAM = "units"
KEY_PARAM = "APPID"


class WeatherService:
    """
    Service for fetching current weather from the OpenWeatherMap API.

    Each fetch issues exactly one GET request and either returns a
    CommonWeatherModel or raises. Transport errors (httpx.HTTPError) and
    decoding errors (pydantic.ValidationError) are raised unchanged; the
    service's own failures are WeatherServiceError subclasses.

    The service keeps no state between calls. The API key is read from the
    settings on every request.
    """

    def __init__(self, settings: Optional[Config] = None):
        """
        Initialize the weather service.

        Args:
            settings: Configuration provider (defaults to the application config)
        """
        self.settings = settings or config

    def build_url(self, city_name: str) -> httpx.URL:
        """
        Build the current weather request URL for a city.

        Args:
            city_name: Name of the city

        Returns:
            Absolute request URL including the query parameters

        Raises:
            BadURLError: If the base URL is malformed or not http(s)
            WeatherAPIKeyError: If no API key is configured
        """
        params = {
            CITY_PARAM: city_name,
            UNITS_PARAM: TEMPERATURE_UNITS,
            KEY_PARAM: self.settings.get_api_key(),
        }

        base_url = self.settings.openweather_base_url
        try:
            url = httpx.URL(base_url).join(WEATHER_ENDPOINT).copy_merge_params(params)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise BadURLError(f"Could not build request URL from {base_url!r}: {e}") from e

        if url.scheme not in ("http", "https") or not url.host:
            raise BadURLError(f"Request URL must be absolute http(s), got {base_url!r}")

        return url

    async def fetch_daily_weather(self, city_name: str) -> CommonWeatherModel:
        """
        Get current weather for a city.

        Args:
            city_name: Name of the city, already trimmed by the caller

        Returns:
            CommonWeatherModel with the current weather

        Raises:
            BadURLError: If the request URL cannot be built (no request is sent)
            NoDataError: If the response has an empty body
            JSONParsingError: If the response lists no weather condition
            httpx.HTTPError: If the request itself fails
            pydantic.ValidationError: If the body does not match the expected schema
        """
        url = self.build_url(city_name)

        logger.info(
            "Fetching current weather",
            city=city_name,
            url=str(url.copy_remove_param(KEY_PARAM)),
        )

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Weather request failed", city=city_name, error=str(e))
            raise

        weather = self.parse_response(response.content, city_name)

        logger.info(
            "Successfully fetched current weather",
            city=city_name,
            group=weather.icon.value,
            temperature=weather.temperature,
        )
        return weather

    def parse_response(self, body: Optional[bytes], city_name: str) -> CommonWeatherModel:
        """
        Map a raw response body to a CommonWeatherModel.

        Args:
            body: Raw response body
            city_name: City the request was made for (used for logging)

        Returns:
            CommonWeatherModel built from the first weather condition

        Raises:
            NoDataError: If the body is empty
            JSONParsingError: If the decoded response has no weather condition
            pydantic.ValidationError: If the body is not a valid weather response
        """
        if not body:
            logger.warning("Empty weather response", city=city_name)
            raise NoDataError(f"No weather data received for {city_name}")

        try:
            response = OpenWeatherMapResponse.model_validate_json(body)
        except ValidationError as e:
            logger.error("Failed to parse weather data", city=city_name, error=str(e))
            raise

        if not response.weather:
            logger.warning("Weather response has no conditions", city=city_name)
            raise JSONParsingError(f"No weather condition received for {city_name}")

        return CommonWeatherModel.from_openweather_response(response)


weather_service = WeatherService()
