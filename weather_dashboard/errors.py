# ABOUTME: Typed error taxonomy for weather provider calls.
# ABOUTME: Separates missing configuration, "no match" responses, and transport failures.


class WeatherError(Exception):
    """Base class for all weather provider errors."""


class ConfigurationError(WeatherError):
    """The provider credential is missing. Raised before any request is made."""


class NotFoundError(WeatherError):
    """The provider reported no match for the requested location."""


class TransportError(WeatherError):
    """A non-success HTTP response or a network-level failure."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
