from typing import Dict, Type

import httpx
import structlog
from fastapi import APIRouter, HTTPException, status
from pydantic import ValidationError

from cityweather.exceptions.config import WeatherAPIKeyError
from cityweather.exceptions.weather import BadURLError, JSONParsingError, NoDataError
from cityweather.models.weather.weather_display import WeatherDisplay
from cityweather.services.weather_service import weather_service

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(prefix="/weather", tags=["Weather"])

COMMON_ERROR_TITLE = "Error"
UPDATE_FAILED_MESSAGE = "Can't update weather info"

ERROR_TITLES: Dict[Type[Exception], str] = {
    NoDataError: "No info founded",
    BadURLError: COMMON_ERROR_TITLE,
    JSONParsingError: "Unknown city",
}

ERROR_STATUS_CODES: Dict[Type[Exception], int] = {
    JSONParsingError: status.HTTP_404_NOT_FOUND,
    NoDataError: status.HTTP_502_BAD_GATEWAY,
    BadURLError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    WeatherAPIKeyError: status.HTTP_503_SERVICE_UNAVAILABLE,
    httpx.HTTPError: status.HTTP_502_BAD_GATEWAY,
    ValidationError: status.HTTP_502_BAD_GATEWAY,
}


def error_title(error: Exception) -> str:
    """Get the user-facing title for a failed fetch."""
    for error_type, title in ERROR_TITLES.items():
        if isinstance(error, error_type):
            return title
    return COMMON_ERROR_TITLE


def error_status_code(error: Exception) -> int:
    """Get the HTTP status code for a failed fetch."""
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@router.get("/current/{city}", summary="Get Current Weather")
async def get_current_weather(city: str):
    """
    Get current weather for a specific city from the live API.

    Args:
        city: City name to query.

    Returns:
        JSON object with the display labels and the normalized weather model.

    Raises:
        HTTPException: With a titled error body when the fetch fails.
    """
    city_name = city.strip()
    if not city_name:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"title": COMMON_ERROR_TITLE, "message": "City name is required"},
        )

    logger.info("API request: Get current weather", city=city_name)
    try:
        weather = await weather_service.fetch_daily_weather(city_name)
    except (WeatherAPIKeyError, BadURLError, NoDataError, JSONParsingError,
            httpx.HTTPError, ValidationError) as e:
        logger.error(
            "Failed to get current weather",
            city=city_name,
            error_type=type(e).__name__,
            error=str(e),
        )
        raise HTTPException(
            status_code=error_status_code(e),
            detail={"title": error_title(e), "message": UPDATE_FAILED_MESSAGE},
        )

    return {
        "weather": weather.model_dump(mode="json"),
        "display": WeatherDisplay.from_common_model(weather).model_dump(mode="json"),
    }
