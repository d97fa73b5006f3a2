# ABOUTME: Service layer for OpenWeatherMap API calls and response normalization.
# ABOUTME: Handles current weather, forecast, hourly, air quality, and geocoding lookups.

import logging
import time
from datetime import datetime, timezone, tzinfo
from typing import Any

import httpx

from weather_dashboard.deps import WeatherDeps
from weather_dashboard.errors import ConfigurationError, NotFoundError, TransportError, WeatherError
from weather_dashboard.forecast import aggregate_daily
from weather_dashboard.helpers import round_half_up
from weather_dashboard.models import (
    AirQuality,
    Alert,
    CitySuggestion,
    CurrentConditions,
    DailyForecastEntry,
    HourlyEntry,
    LocationCoords,
    LocationQuery,
    Units,
)
from weather_dashboard.schemas import (
    AirPollutionPayload,
    CurrentWeatherPayload,
    ForecastPayload,
    geocoding_adapter,
)

logger = logging.getLogger(__name__)

CURRENT_PATH = "/data/2.5/weather"
FORECAST_PATH = "/data/2.5/forecast"
AIR_POLLUTION_PATH = "/data/2.5/air_pollution"
GEOCODING_PATH = "/geo/1.0/direct"

DEFAULT_VISIBILITY_M = 10_000
MAX_HOURLY_ENTRIES = 24
SUGGESTION_LIMIT = 5
MIN_SUGGESTION_QUERY = 2

QueryLike = LocationQuery | LocationCoords | str


def as_query(query: QueryLike) -> LocationQuery:
    """Coerce a city name or coordinate pair into a LocationQuery."""
    if isinstance(query, LocationQuery):
        return query
    if isinstance(query, LocationCoords):
        return LocationQuery(coords=query)
    return LocationQuery(city=query)


def location_params(query: LocationQuery) -> dict[str, Any]:
    """Provider query parameters for a location; coordinates take precedence over the name."""
    if query.coords is not None:
        return {"lat": query.coords.lat, "lon": query.coords.lon}
    return {"q": query.city}


async def _request(deps: WeatherDeps, path: str, params: dict[str, Any], what: str, not_found: str | None = None):
    """GET a provider endpoint and return the decoded JSON body.

    The credential is checked before any request is issued. A 404 becomes
    NotFoundError when `not_found` is given and a malformed base URL is a
    ConfigurationError; every other failure is a TransportError.
    """
    api_key = deps.require_api_key()
    url = f"{deps.base_url}{path}"
    logger.debug("GET %s %s", url, params)
    try:
        resp = await deps.http_client.get(url, params={**params, "appid": api_key})
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        if status == 404 and not_found is not None:
            raise NotFoundError(not_found) from e
        raise TransportError(f"Failed to fetch {what} (HTTP {status})", status_code=status) from e
    except httpx.RequestError as e:
        raise TransportError(f"Failed to fetch {what}: {e}") from e
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"Invalid provider URL {url!r}: {e}") from e
    return resp.json()


async def fetch_current(
    deps: WeatherDeps,
    query: QueryLike,
    units: Units = "metric",
    now: float | None = None,
) -> CurrentConditions:
    """Fetch current conditions for a city or coordinate pair."""
    query = as_query(query)
    data = await _request(
        deps,
        CURRENT_PATH,
        {**location_params(query), "units": units},
        what="weather data",
        not_found="Location not found",
    )
    return parse_current(data, now=now)


async def fetch_forecast(
    deps: WeatherDeps,
    query: QueryLike,
    units: Units = "metric",
    tz: tzinfo | None = None,
) -> list[DailyForecastEntry]:
    """Fetch the 3-hourly forecast and collapse it into at most five days."""
    query = as_query(query)
    data = await _request(
        deps,
        FORECAST_PATH,
        {**location_params(query), "units": units},
        what="forecast data",
        not_found="Location not found",
    )
    return parse_forecast(data, tz=tz)


async def fetch_hourly(deps: WeatherDeps, query: QueryLike, units: Units = "metric") -> list[HourlyEntry]:
    """Fetch the first 24 forecast samples at the provider's native cadence."""
    query = as_query(query)
    data = await _request(
        deps,
        FORECAST_PATH,
        {**location_params(query), "units": units},
        what="hourly data",
        not_found="Location not found",
    )
    return parse_hourly(data)


async def geocode(deps: WeatherDeps, name: str, limit: int = 1) -> list[CitySuggestion]:
    """Look up locations matching a name using the geocoding API."""
    data = await _request(deps, GEOCODING_PATH, {"q": name, "limit": limit}, what="location coordinates")
    return parse_suggestions(data)[:limit]


async def fetch_air_quality(deps: WeatherDeps, query: QueryLike) -> AirQuality:
    """Fetch air quality, geocoding the city first when no coordinates are given."""
    query = as_query(query)
    deps.require_api_key()

    coords = query.coords
    if coords is None:
        matches = await geocode(deps, query.city, limit=1)
        if not matches:
            raise NotFoundError("Location not found")
        coords = matches[0].coords

    data = await _request(
        deps,
        AIR_POLLUTION_PATH,
        {"lat": coords.lat, "lon": coords.lon},
        what="air quality data",
    )
    return parse_air_quality(data)


async def search_cities(deps: WeatherDeps, partial_name: str) -> list[CitySuggestion]:
    """Suggest up to five cities for a partial name.

    Best effort: short queries, a missing credential and any lookup failure all
    yield an empty list so suggestions never interrupt the main search.
    """
    partial_name = partial_name.strip()
    if not deps.has_credential or len(partial_name) < MIN_SUGGESTION_QUERY:
        return []

    try:
        return await geocode(deps, partial_name, limit=SUGGESTION_LIMIT)
    except (WeatherError, ValueError) as e:
        logger.warning("Failed to search cities for %r: %s", partial_name, e)
        return []


def parse_current(raw: dict, now: float | None = None) -> CurrentConditions:
    """Normalize a current-weather body. `now` defaults to the current epoch time."""
    payload = CurrentWeatherPayload.model_validate(raw)
    now = time.time() if now is None else now
    condition = payload.weather[0]
    visibility_m = DEFAULT_VISIBILITY_M if payload.visibility is None else payload.visibility
    dew_point = payload.main.dew_point

    return CurrentConditions(
        name=payload.name,
        country=payload.sys.country,
        temp=round_half_up(payload.main.temp),
        feels_like=round_half_up(payload.main.feels_like),
        description=condition.description,
        main=condition.main,
        humidity=payload.main.humidity,
        pressure=payload.main.pressure,
        wind_speed=payload.wind.speed,
        wind_direction=payload.wind.deg,
        visibility=round_half_up(visibility_m / 1000),
        icon=condition.icon,
        sunrise=payload.sys.sunrise,
        sunset=payload.sys.sunset,
        is_night=now < payload.sys.sunrise or now > payload.sys.sunset,
        coords=LocationCoords(lat=payload.coord.lat, lon=payload.coord.lon),
        uv_index=payload.uvi,
        dew_point=None if dew_point is None else round_half_up(dew_point),
        cloud_cover=payload.clouds.all,
        alerts=[Alert.model_validate(alert.model_dump()) for alert in payload.alerts],
    )


def parse_forecast(raw: dict, tz: tzinfo | None = None) -> list[DailyForecastEntry]:
    """Decode a forecast body and collapse it into daily entries."""
    return aggregate_daily(ForecastPayload.model_validate(raw).samples, tz=tz)


def parse_hourly(raw: dict) -> list[HourlyEntry]:
    """Map forecast samples to hourly entries without interpolating between them."""
    samples = ForecastPayload.model_validate(raw).samples[:MAX_HOURLY_ENTRIES]
    return [
        HourlyEntry(
            time=datetime.fromtimestamp(s.dt, tz=timezone.utc),
            temp=round_half_up(s.main.temp),
            feels_like=round_half_up(s.main.feels_like),
            description=s.weather[0].description,
            icon=s.weather[0].icon,
            humidity=s.main.humidity,
            wind_speed=s.wind.speed,
            wind_direction=s.wind.deg,
            pop=round_half_up(s.pop * 100),
            pressure=s.main.pressure,
        )
        for s in samples
    ]


def parse_air_quality(raw: dict) -> AirQuality:
    """Normalize the first reading of an air-pollution body."""
    sample = AirPollutionPayload.model_validate(raw).samples[0]
    return AirQuality(aqi=sample.main.aqi, **sample.components.model_dump())


def parse_suggestions(raw: list) -> list[CitySuggestion]:
    """Convert a geocoding array into city suggestions."""
    return [
        CitySuggestion(
            name=r.name,
            country=r.country,
            state=r.state,
            coords=LocationCoords(lat=r.lat, lon=r.lon),
        )
        for r in geocoding_adapter.validate_python(raw)
    ]
