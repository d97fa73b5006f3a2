# ABOUTME: Immutable Pydantic records produced by normalizing provider responses.
# ABOUTME: Defines current conditions, daily/hourly forecasts, air quality, and location types.

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Units = Literal["metric", "imperial"]
Severity = Literal["minor", "moderate", "severe", "extreme"]


class Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class LocationCoords(Record):
    """Geographic coordinates."""

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)


class LocationQuery(Record):
    """A city name or a coordinate pair. Coordinates win when both are set."""

    city: str | None = None
    coords: LocationCoords | None = None

    @field_validator("city")
    @classmethod
    def _blank_city_is_missing(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    @model_validator(mode="after")
    def _require_city_or_coords(self) -> "LocationQuery":
        if self.city is None and self.coords is None:
            raise ValueError("Either a city name or coordinates are required")
        return self


class Alert(Record):
    """A weather alert issued for the location."""

    event: str
    description: str
    severity: Severity
    start: int
    end: int


class CurrentConditions(Record):
    """Current weather at a location, rounded to whole units."""

    name: str
    country: str
    temp: int
    feels_like: int
    description: str
    main: str
    humidity: int
    pressure: int
    wind_speed: float = 0
    wind_direction: float = 0
    visibility: int
    icon: str
    sunrise: int
    sunset: int
    is_night: bool
    coords: LocationCoords | None = None
    uv_index: float | None = None
    dew_point: int | None = None
    cloud_cover: int = 0
    alerts: list[Alert] = []


class DailyForecastEntry(Record):
    """One calendar day collapsed from the provider's 3-hourly samples."""

    date: date
    temp_min: int
    temp_max: int
    main: str
    description: str
    icon: str
    humidity: int
    wind_speed: float
    wind_direction: float
    pressure: int
    pop: int = Field(ge=0, le=100)
    uv_index: float | None = None

    @model_validator(mode="after")
    def _min_not_above_max(self) -> "DailyForecastEntry":
        if self.temp_min > self.temp_max:
            raise ValueError("temp_min must not exceed temp_max")
        return self


class HourlyEntry(Record):
    """One forecast sample at the provider's native cadence."""

    time: datetime
    temp: int
    feels_like: int
    description: str
    icon: str
    humidity: int
    wind_speed: float
    wind_direction: float
    pop: int = Field(ge=0, le=100)
    pressure: int


class AirQuality(Record):
    """Air Quality Index (1 best, 5 worst) and pollutant concentrations in µg/m³."""

    aqi: int = Field(ge=1, le=5)
    co: float = Field(ge=0)
    no: float = Field(ge=0)
    no2: float = Field(ge=0)
    o3: float = Field(ge=0)
    so2: float = Field(ge=0)
    pm2_5: float = Field(ge=0)
    pm10: float = Field(ge=0)
    nh3: float = Field(ge=0)


class CitySuggestion(Record):
    """A geocoding match offered as a search suggestion."""

    name: str
    country: str
    state: str | None = None
    coords: LocationCoords


class Dashboard(Record):
    """Everything fetched for a single search."""

    current: CurrentConditions
    forecast: list[DailyForecastEntry] = []
    hourly: list[HourlyEntry] = []
    air_quality: AirQuality
    insights: list[str] = []
