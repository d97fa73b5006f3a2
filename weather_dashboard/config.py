# ABOUTME: Provider configuration loaded from the environment and an optional .env file.
# ABOUTME: Holds the OpenWeatherMap credential, base URL, and request timeout.

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_BASE_URL = "https://api.openweathermap.org"
DEFAULT_TIMEOUT = 10.0


class WeatherSettings(BaseModel):
    """Settings for the OpenWeatherMap client."""

    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("api_key")
    @classmethod
    def _blank_key_is_missing(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(cls) -> "WeatherSettings":
        """Build settings from OPENWEATHER_* environment variables (after loading .env)."""
        load_dotenv()
        return cls(
            api_key=os.environ.get("OPENWEATHER_API_KEY"),
            base_url=os.environ.get("OPENWEATHER_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(os.environ.get("OPENWEATHER_TIMEOUT", DEFAULT_TIMEOUT)),
        )
