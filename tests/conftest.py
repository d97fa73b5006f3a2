# ABOUTME: Shared test fixtures for the weather dashboard test suite.
# ABOUTME: Provides synthetic OpenWeatherMap payloads for current, forecast, and air quality endpoints.

import pytest

# 2025-01-15T00:00:00Z
DAY_ONE = 1736899200
HOUR = 3600
DAY = 24 * HOUR


@pytest.fixture
def current_payload() -> dict:
    return {
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
        "main": {"temp": 14.6, "feels_like": 14.2, "humidity": 82, "pressure": 1012},
        "visibility": 12000,
        "wind": {"speed": 4.6, "deg": 250},
        "clouds": {"all": 75},
        "sys": {"country": "GB", "sunrise": DAY_ONE + 8 * HOUR, "sunset": DAY_ONE + 16 * HOUR},
        "name": "London",
    }


@pytest.fixture
def make_sample():
    """Factory for one 3-hourly forecast sample."""

    def _make(dt: int, temp: float, pop: float | None = 0.0, main: str = "Clouds", humidity: int = 70) -> dict:
        sample = {
            "dt": dt,
            "main": {"temp": temp, "feels_like": temp - 1, "humidity": humidity, "pressure": 1015},
            "weather": [{"id": 803, "main": main, "description": f"{main.lower()} sample", "icon": "04d"}],
            "wind": {"speed": 3.2, "deg": 180},
        }
        if pop is not None:
            sample["pop"] = pop
        return sample

    return _make


@pytest.fixture
def forecast_payload(make_sample) -> dict:
    """Three calendar days (UTC) of 3-hourly samples, eight per day."""
    samples = []
    for day in range(3):
        for slot in range(8):
            dt = DAY_ONE + day * DAY + slot * 3 * HOUR
            samples.append(make_sample(dt, temp=10 + day * 5 + slot, pop=0.85 if day == 0 else 0.1))
    return {"cod": "200", "cnt": len(samples), "list": samples}


@pytest.fixture
def air_pollution_payload() -> dict:
    return {
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "list": [
            {
                "dt": DAY_ONE,
                "main": {"aqi": 2},
                "components": {
                    "co": 230.31,
                    "no": 0.4,
                    "no2": 18.85,
                    "o3": 52.93,
                    "so2": 1.63,
                    "pm2_5": 4.2,
                    "pm10": 6.11,
                    "nh3": 0.71,
                },
            }
        ],
    }


@pytest.fixture
def geocoding_payload() -> list:
    return [
        {"name": "Paris", "country": "FR", "state": "Ile-de-France", "lat": 48.8589, "lon": 2.32},
        {"name": "Paris", "country": "US", "state": "Texas", "lat": 33.6617, "lon": -95.5555},
    ]
