# ABOUTME: Dependency container for the weather service using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient and provider credential passed to every fetch.

import logging

import httpx
from pydantic import BaseModel, ConfigDict

from weather_dashboard.config import DEFAULT_BASE_URL, WeatherSettings
from weather_dashboard.errors import ConfigurationError

logger = logging.getLogger(__name__)


class WeatherDeps(BaseModel):
    """Dependencies injected into the weather service functions."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    http_client: httpx.AsyncClient
    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    def require_api_key(self) -> str:
        """Return the credential, or raise ConfigurationError when none is configured."""
        if not self.api_key:
            raise ConfigurationError(
                "OpenWeatherMap API key not configured. Set OPENWEATHER_API_KEY in the environment."
            )
        return self.api_key


def create_http_client(settings: WeatherSettings) -> httpx.AsyncClient:
    """Create an httpx client for the provider.

    Requests are single attempts: there is no retrying transport.
    """
    return httpx.AsyncClient(timeout=settings.timeout)


def create_deps(settings: WeatherSettings | None = None) -> WeatherDeps:
    """Build WeatherDeps from settings, reading the environment when none are given."""
    settings = settings or WeatherSettings.from_env()
    if settings.api_key is None:
        logger.warning("OpenWeatherMap API key not found; weather requests will fail until it is set")
    return WeatherDeps(
        http_client=create_http_client(settings),
        api_key=settings.api_key,
        base_url=settings.base_url,
    )
