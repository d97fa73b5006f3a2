# ABOUTME: Derives short natural-language observations from current conditions and forecast.
# ABOUTME: Rules run in a fixed priority order and each contributes at most one insight.

from weather_dashboard.models import CurrentConditions, DailyForecastEntry

TREND_THRESHOLD = 5
PRECIPITATION_THRESHOLD = 70
WIND_THRESHOLD = 10
HUMIDITY_THRESHOLD = 80
VISIBILITY_THRESHOLD_KM = 5


def derive_insights(current: CurrentConditions, forecast: list[DailyForecastEntry]) -> list[str]:
    """Return insight strings for the given conditions, possibly none.

    Thresholds are compared in whatever unit system the inputs already use.
    Visibility is always in kilometres.
    """
    insights = []

    # forecast[0] is today, so the next day is the second bucket
    tomorrow_max = forecast[1].temp_max if len(forecast) > 1 else None
    if tomorrow_max is not None and abs(current.temp - tomorrow_max) > TREND_THRESHOLD:
        trend = "warmer" if tomorrow_max > current.temp else "cooler"
        insights.append(f"Tomorrow will be significantly {trend} than today")

    if forecast and forecast[0].pop > PRECIPITATION_THRESHOLD:
        insights.append("High chance of precipitation today - consider bringing an umbrella")

    if current.wind_speed > WIND_THRESHOLD:
        insights.append("Windy conditions expected - secure loose outdoor items")

    if current.humidity > HUMIDITY_THRESHOLD:
        insights.append("High humidity levels - it may feel more uncomfortable than the temperature suggests")

    if current.visibility < VISIBILITY_THRESHOLD_KM:
        insights.append("Reduced visibility conditions - drive carefully")

    return insights
