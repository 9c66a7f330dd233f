import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from cityweather.config.config import Config
from cityweather.models.weather.weather import CommonWeatherModel
from cityweather.models.weather.weather_group import WeatherGroup
from cityweather.services.weather_service import WeatherService


@pytest.fixture
def test_settings():
    """Settings with a test API key, isolated from any local .env file."""
    return Config(
        _env_file=None,
        openweather_api_key="test-weather-key",
        openweather_base_url="https://api.openweathermap.org/data/2.5/",
    )


@pytest.fixture
def service(test_settings):
    """Weather service bound to the test settings."""
    return WeatherService(settings=test_settings)


@pytest.fixture
def paris_payload():
    """Minimal current weather response for Paris."""
    return {
        "coord": {"lon": 2.3488, "lat": 48.8534},
        "weather": [{"id": 800, "main": "Clear sky", "description": "clear sky", "icon": "01d"}],
        "main": {"temp": 21.5, "feels_like": 21.1, "humidity": 50},
        "id": 2988507,
        "name": "Paris",
        "cod": 200,
    }


@pytest.fixture
def make_response():
    """Factory for fake httpx responses; dicts are JSON-encoded."""
    def _make_response(body, status_code: int = 200) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.content = json.dumps(body).encode("utf-8") if isinstance(body, dict) else body
        return response

    return _make_response


@pytest.fixture
def mock_http_client():
    """Patch httpx.AsyncClient and yield the client used inside `async with`."""
    with patch('httpx.AsyncClient') as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        yield mock_client


@pytest.fixture
def sample_weather():
    """Normalized weather model for Paris."""
    return CommonWeatherModel(
        temperature=21.5,
        icon=WeatherGroup.CLEAR,
        description="Clear sky",
        city_name="Paris",
    )


@pytest.fixture
def mock_weather_service():
    """Patch the weather service used by the API routes."""
    with patch('cityweather.api.v1.weather.weather_routes.weather_service') as mock_service:
        mock_service.fetch_daily_weather = AsyncMock()
        yield mock_service


@pytest.fixture
def api_client():
    """Test client for the FastAPI application."""
    from main import create_app

    return TestClient(create_app())
