# ABOUTME: Stateless unit and formatting helpers for displaying weather data.
# ABOUTME: Compass directions, time formatting, AQI/UV classification, and background themes.

import math
import re
from datetime import datetime, tzinfo
from typing import Literal, NamedTuple

from weather_dashboard.models import Units

Theme = Literal["light", "dark", "auto"]

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


class Level(NamedTuple):
    """A classification label with the colour token used to display it."""

    label: str
    color: str


class Gradient(NamedTuple):
    """Background gradient as (from, via, to) colour tokens."""

    start: str
    middle: str
    end: str


AIR_QUALITY_LEVELS = {
    1: Level("Good", "emerald"),
    2: Level("Fair", "lime"),
    3: Level("Moderate", "amber"),
    4: Level("Poor", "orange"),
    5: Level("Very Poor", "red"),
}
UNKNOWN_LEVEL = Level("Unknown", "gray")

# Upper bounds are inclusive; anything above the last bound is Extreme.
UV_INDEX_LEVELS = (
    (2, Level("Low", "emerald")),
    (5, Level("Moderate", "lime")),
    (7, Level("High", "amber")),
    (10, Level("Very High", "orange")),
)
EXTREME_UV_LEVEL = Level("Extreme", "red")

# condition -> (light, dark); a single gradient when the theme does not matter
_BACKGROUNDS: dict[str, tuple[Gradient, Gradient]] = {
    "clear": (Gradient("orange-400", "pink-500", "purple-600"), Gradient("purple-900", "indigo-900", "pink-900")),
    "clouds": (Gradient("teal-400", "cyan-500", "blue-600"), Gradient("slate-800", "purple-900", "indigo-900")),
    "snow": (Gradient("cyan-100", "blue-200", "purple-300"), Gradient("cyan-900", "blue-800", "purple-900")),
    "mist": (Gradient("emerald-300", "teal-400", "cyan-500"), Gradient("emerald-700", "teal-800", "cyan-900")),
}
_BACKGROUNDS["fog"] = _BACKGROUNDS["haze"] = _BACKGROUNDS["mist"]
_RAIN_BACKGROUND = Gradient("indigo-700", "purple-800", "pink-900")
_STORM_BACKGROUND = Gradient("purple-900", "indigo-900", "black")
_DEFAULT_BACKGROUNDS = (Gradient("rose-400", "pink-500", "purple-600"), Gradient("violet-800", "purple-900", "indigo-900"))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding towards positive infinity."""
    return math.floor(value + 0.5)


def get_wind_direction(degrees: float) -> str:
    """Convert a bearing in degrees to a 16-point compass label."""
    return COMPASS_POINTS[round_half_up(degrees / 22.5) % 16]


def capitalize_words(text: str) -> str:
    """Uppercase the first letter of every word."""
    return re.sub(r"\b\w", lambda m: m.group().upper(), text)


def format_time(timestamp: int | float, tz: tzinfo | None = None) -> str:
    """Format an epoch timestamp as 24-hour HH:MM in `tz` (local time when None)."""
    return datetime.fromtimestamp(timestamp, tz).strftime("%H:%M")


def format_hour_time(value: str | datetime, tz: tzinfo | None = None) -> str:
    """Format an ISO-8601 string or datetime as a 12-hour label such as '3 PM'."""
    moment = datetime.fromisoformat(value.replace("Z", "+00:00")) if isinstance(value, str) else value
    if moment.tzinfo is not None:
        moment = moment.astimezone(tz)
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour} {suffix}"


def get_air_quality_level(aqi: int) -> Level:
    """Classify an AQI value (1-5); anything else is Unknown."""
    return AIR_QUALITY_LEVELS.get(aqi, UNKNOWN_LEVEL)


def get_uv_index_level(uv_index: float) -> Level:
    """Classify a UV index from Low to Extreme."""
    for upper, level in UV_INDEX_LEVELS:
        if uv_index <= upper:
            return level
    return EXTREME_UV_LEVEL


def get_weather_background(main: str, is_night: bool = False, theme: Theme = "auto") -> Gradient:
    """Pick a background gradient for a condition category.

    The dark variant applies when the theme is "dark", or when it is "auto" and it is
    night. Clear skies always switch to the dark variant at night. Rain, drizzle and
    thunderstorms have a single gradient.
    """
    is_dark = theme == "dark" or (theme == "auto" and is_night)
    condition = main.lower()

    if condition in ("rain", "drizzle"):
        return _RAIN_BACKGROUND
    if condition == "thunderstorm":
        return _STORM_BACKGROUND
    if condition == "clear":
        is_dark = is_dark or is_night

    light, dark = _BACKGROUNDS.get(condition, _DEFAULT_BACKGROUNDS)
    return dark if is_dark else light


def temperature_unit(units: Units) -> str:
    """Temperature label for the unit system."""
    return "°C" if units == "metric" else "°F"


def speed_unit(units: Units) -> str:
    """Wind speed label for the unit system."""
    return "m/s" if units == "metric" else "mph"
