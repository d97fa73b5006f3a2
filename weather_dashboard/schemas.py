# ABOUTME: Pydantic schemas for raw OpenWeatherMap response payloads.
# ABOUTME: Each endpoint body is decoded once through these models at the client boundary.

from pydantic import BaseModel, Field, TypeAdapter


class Condition(BaseModel):
    """One entry of the provider's `weather` array."""

    main: str
    description: str
    icon: str


class MainBlock(BaseModel):
    temp: float
    feels_like: float
    humidity: int
    pressure: int
    dew_point: float | None = None


class WindBlock(BaseModel):
    speed: float = 0
    deg: float = 0


class CloudsBlock(BaseModel):
    all: int = 0


class SysBlock(BaseModel):
    country: str
    sunrise: int
    sunset: int


class CoordBlock(BaseModel):
    lat: float
    lon: float


class AlertPayload(BaseModel):
    event: str
    description: str
    start: int
    end: int
    severity: str


class CurrentWeatherPayload(BaseModel):
    """Body of the `/data/2.5/weather` endpoint."""

    name: str
    sys: SysBlock
    main: MainBlock
    weather: list[Condition] = Field(min_length=1)
    wind: WindBlock = WindBlock()
    visibility: int | None = None
    clouds: CloudsBlock = CloudsBlock()
    coord: CoordBlock
    uvi: float | None = None
    alerts: list[AlertPayload] = []


class ForecastSample(BaseModel):
    """One 3-hourly sample of the `/data/2.5/forecast` endpoint."""

    dt: int
    main: MainBlock
    weather: list[Condition] = Field(min_length=1)
    wind: WindBlock = WindBlock()
    pop: float = 0


class ForecastPayload(BaseModel):
    samples: list[ForecastSample] = Field(alias="list")


class PollutionIndex(BaseModel):
    aqi: int


class PollutionComponents(BaseModel):
    co: float
    no: float
    no2: float
    o3: float
    so2: float
    pm2_5: float
    pm10: float
    nh3: float


class PollutionSample(BaseModel):
    main: PollutionIndex
    components: PollutionComponents


class AirPollutionPayload(BaseModel):
    """Body of the `/data/2.5/air_pollution` endpoint."""

    samples: list[PollutionSample] = Field(alias="list", min_length=1)


class GeocodingResult(BaseModel):
    """One match from the `/geo/1.0/direct` endpoint."""

    name: str
    country: str
    state: str | None = None
    lat: float
    lon: float


geocoding_adapter = TypeAdapter(list[GeocodingResult])
