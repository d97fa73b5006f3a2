# ABOUTME: Grouped fetch for a single search: current, forecast, hourly, and air quality.
# ABOUTME: Runs the four provider calls concurrently and fails fast on the first error.

import asyncio
import logging
from datetime import tzinfo

from weather_dashboard.deps import WeatherDeps
from weather_dashboard.insights import derive_insights
from weather_dashboard.models import Dashboard, Units
from weather_dashboard.weather_service import (
    QueryLike,
    as_query,
    fetch_air_quality,
    fetch_current,
    fetch_forecast,
    fetch_hourly,
)

logger = logging.getLogger(__name__)


def _consume_outcome(task: asyncio.Future) -> None:
    if not task.cancelled():
        task.exception()


async def fetch_dashboard(
    deps: WeatherDeps,
    query: QueryLike,
    units: Units = "metric",
    tz: tzinfo | None = None,
) -> Dashboard:
    """Fetch everything a search displays and derive insights from it.

    Any failing call fails the whole group; there are no partial results. Callers
    issuing overlapping searches must discard responses for superseded queries.
    """
    query = as_query(query)
    deps.require_api_key()

    tasks = [
        asyncio.ensure_future(fetch_current(deps, query, units)),
        asyncio.ensure_future(fetch_forecast(deps, query, units, tz=tz)),
        asyncio.ensure_future(fetch_hourly(deps, query, units)),
        asyncio.ensure_future(fetch_air_quality(deps, query)),
    ]
    try:
        current, forecast, hourly, air_quality = await asyncio.gather(*tasks)
    except Exception:
        # siblings are not cancelled; consume their outcome so later failures are not reported as unretrieved
        for task in tasks:
            task.add_done_callback(_consume_outcome)
        raise
    logger.info("Fetched weather for %s, %s", current.name, current.country)

    return Dashboard(
        current=current,
        forecast=forecast,
        hourly=hourly,
        air_quality=air_quality,
        insights=derive_insights(current, forecast),
    )
