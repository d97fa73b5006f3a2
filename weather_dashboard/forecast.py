# ABOUTME: Collapses the provider's 3-hourly forecast samples into daily buckets.
# ABOUTME: Computes per-day min/max temperature and keeps the first sample's conditions.

from datetime import date, datetime, tzinfo

from pydantic import BaseModel

from weather_dashboard.helpers import round_half_up
from weather_dashboard.models import DailyForecastEntry
from weather_dashboard.schemas import ForecastSample

MAX_FORECAST_DAYS = 5


class DayAccumulator(BaseModel):
    """Running state for one calendar date while samples are grouped."""

    first: ForecastSample
    temps: list[float] = []

    def to_entry(self, day: date) -> DailyForecastEntry:
        """Build the daily entry for `day` from the collected samples."""
        sample = self.first
        condition = sample.weather[0]
        return DailyForecastEntry(
            date=day,
            temp_min=round_half_up(min(self.temps)),
            temp_max=round_half_up(max(self.temps)),
            main=condition.main,
            description=condition.description,
            icon=condition.icon,
            humidity=sample.main.humidity,
            wind_speed=sample.wind.speed,
            wind_direction=sample.wind.deg,
            pressure=sample.main.pressure,
            pop=round_half_up(sample.pop * 100),
        )


def local_date(timestamp: int, tz: tzinfo | None = None) -> date:
    """Calendar date of an epoch timestamp in `tz`, or the process's local zone when None."""
    return datetime.fromtimestamp(timestamp, tz).date()


def aggregate_daily(
    samples: list[ForecastSample],
    tz: tzinfo | None = None,
    max_days: int = MAX_FORECAST_DAYS,
) -> list[DailyForecastEntry]:
    """Group samples by calendar date into at most `max_days` chronological entries.

    Conditions, humidity, wind, pressure and precipitation come from the first sample
    seen for each date; min/max temperature span every sample of that date. Short
    series produce fewer entries, never padded ones.
    """
    buckets: dict[date, DayAccumulator] = {}
    for sample in samples:
        day = local_date(sample.dt, tz)
        if day not in buckets:
            buckets[day] = DayAccumulator(first=sample)
        buckets[day].temps.append(sample.main.temp)

    return [buckets[day].to_entry(day) for day in sorted(buckets)[:max_days]]
