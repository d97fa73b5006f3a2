# ABOUTME: Tests for the grouped dashboard fetch.
# ABOUTME: Verifies all four provider calls are combined, insights attached, and failures fail the group.

import asyncio
import gc
from datetime import timezone
from unittest.mock import AsyncMock

import httpx
import pytest

from weather_dashboard.dashboard import fetch_dashboard
from weather_dashboard.deps import WeatherDeps
from weather_dashboard.errors import ConfigurationError, NotFoundError, TransportError
from weather_dashboard.models import LocationCoords


def _response(json_data, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test"))


def _routed_client(routes: dict[str, httpx.Response]) -> httpx.AsyncClient:
    """Create a mock httpx.AsyncClient that answers by URL path, whatever the call order."""
    mock = AsyncMock(spec=httpx.AsyncClient)

    async def get(url, params=None):
        for path, response in routes.items():
            if url.endswith(path):
                return response
        raise AssertionError(f"unexpected request to {url}")

    mock.get.side_effect = get
    return mock


@pytest.fixture
def routes(current_payload, forecast_payload, air_pollution_payload, geocoding_payload):
    return {
        "/data/2.5/weather": _response(current_payload),
        "/data/2.5/forecast": _response(forecast_payload),
        "/data/2.5/air_pollution": _response(air_pollution_payload),
        "/geo/1.0/direct": _response(geocoding_payload[:1]),
    }


def _deps(client, api_key="test-key") -> WeatherDeps:
    return WeatherDeps(http_client=client, api_key=api_key)


class TestFetchDashboard:
    @pytest.mark.asyncio
    async def test_combines_all_sections(self, routes):
        """fetch_dashboard returns current, forecast, hourly, air quality and insights together.

        Implementation: Routes each endpoint to a canned payload and queries by coordinates.
        Passing implies: The four fetches run as one group and insights use their results.
        """
        client = _routed_client(routes)
        result = await fetch_dashboard(_deps(client), LocationCoords(lat=51.5, lon=-0.12), tz=timezone.utc)

        assert result.current.name == "London"
        assert len(result.forecast) == 3
        assert len(result.hourly) == 24
        assert result.air_quality.aqi == 2
        # today 15 vs tomorrow 22, day one pop 85, humidity 82
        assert result.insights == [
            "Tomorrow will be significantly warmer than today",
            "High chance of precipitation today - consider bringing an umbrella",
            "High humidity levels - it may feel more uncomfortable than the temperature suggests",
        ]
        assert client.get.call_count == 4

    @pytest.mark.asyncio
    async def test_city_query_geocodes_for_air_quality(self, routes):
        client = _routed_client(routes)
        await fetch_dashboard(_deps(client), "London", tz=timezone.utc)

        urls = [call.args[0] for call in client.get.call_args_list]
        assert client.get.call_count == 5
        assert any(url.endswith("/geo/1.0/direct") for url in urls)

    @pytest.mark.asyncio
    async def test_single_failure_fails_group(self, routes):
        """One failing endpoint fails the whole dashboard.

        Implementation: Makes the air pollution endpoint return HTTP 500.
        Passing implies: No partial dashboard is ever returned.
        """
        routes["/data/2.5/air_pollution"] = _response({}, status_code=500)
        client = _routed_client(routes)

        with pytest.raises(TransportError):
            await fetch_dashboard(_deps(client), LocationCoords(lat=51.5, lon=-0.12))

    @pytest.mark.asyncio
    async def test_sibling_failures_are_consumed(self, routes):
        """When several fetches fail, only the first error is raised and the rest stay quiet.

        Implementation: Fails the weather and forecast endpoints, then collects garbage
        with a loop exception handler installed.
        Passing implies: Sibling failures are not cancelled and never logged as unretrieved.
        """
        routes["/data/2.5/weather"] = _response({}, status_code=500)
        routes["/data/2.5/forecast"] = _response({}, status_code=502)
        client = _routed_client(routes)
        reported = []
        asyncio.get_running_loop().set_exception_handler(lambda loop, context: reported.append(context))

        with pytest.raises(TransportError):
            await fetch_dashboard(_deps(client), LocationCoords(lat=51.5, lon=-0.12))
        await asyncio.sleep(0)
        gc.collect()

        assert client.get.call_count == 4
        assert reported == []

    @pytest.mark.asyncio
    async def test_unknown_city_fails_group(self, routes):
        routes["/data/2.5/weather"] = _response({"cod": "404"}, status_code=404)
        client = _routed_client(routes)

        with pytest.raises(NotFoundError):
            await fetch_dashboard(_deps(client), "Xyzzyville")

    @pytest.mark.asyncio
    async def test_missing_credential_makes_no_request(self, routes):
        client = _routed_client(routes)
        with pytest.raises(ConfigurationError):
            await fetch_dashboard(_deps(client, api_key=None), "London")
        client.get.assert_not_called()
