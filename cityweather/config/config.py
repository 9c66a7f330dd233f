from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cityweather.exceptions.config import WeatherAPIKeyError


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    Every field has a default so the settings can be loaded without any
    environment; the API key is only checked when a request needs it.
    """

    # OpenWeatherMap Configuration
    openweather_api_key: Optional[str] = Field(
        default=None, description="OpenWeatherMap API key for weather data"
    )
    openweather_base_url: str = Field(
        default="https://api.openweathermap.org/data/2.5/",
        description="OpenWeatherMap API base URL",
    )

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="FastAPI host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="FastAPI port")

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")
    log_to_file: bool = Field(default=False, description="Also write logs to the logs directory")

    @field_validator("openweather_base_url")
    def validate_base_url(cls, v):
        # Endpoints are joined relative to the base, which needs a trailing slash
        return v if v.endswith("/") else f"{v}/"

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        """Validate log format."""
        if v.lower() not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'text'")
        return v.lower()

    def get_api_key(self) -> str:
        """
        Get the OpenWeatherMap API key.

        Returns:
            The configured API key

        Raises:
            WeatherAPIKeyError: If no API key is configured
        """
        if not self.openweather_api_key:
            raise WeatherAPIKeyError("OpenWeatherMap API key is not configured")
        return self.openweather_api_key

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


config = Config()
