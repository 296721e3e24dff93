"""
app/connectors/weather.py

Open-Meteo current conditions (no API key).
"""

from __future__ import annotations

from typing import Any

from app.connectors.base import FetchClient
from app.connectors.fields import optional_number, text_field
from app.domain.api_result import ApiResult, map_success

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
CURRENT_FIELDS = (
    "temperature_2m,weather_code,wind_speed_10m,relative_humidity_2m,apparent_temperature"
)


def fetch_current_weather(
    client: FetchClient,
    *,
    latitude: float = 40.7128,
    longitude: float = -74.0060,
    location_name: str = "New York",
) -> ApiResult:
    result = client.fetch(
        FORECAST_URL,
        f"Weather - {location_name}",
        params={
            "latitude": f"{latitude:.4f}",
            "longitude": f"{longitude:.4f}",
            "current": CURRENT_FIELDS,
            "timezone": "auto",
        },
    )

    def reshape(payload: Any) -> dict[str, Any]:
        return {
            "location": location_name,
            "latitude": latitude,
            "longitude": longitude,
            "temperature": optional_number(payload, "current", "temperature_2m"),
            "apparent_temperature": optional_number(payload, "current", "apparent_temperature"),
            "weather_code": optional_number(payload, "current", "weather_code"),
            "wind_speed": optional_number(payload, "current", "wind_speed_10m"),
            "humidity": optional_number(payload, "current", "relative_humidity_2m"),
            "time": text_field(payload, "current", "time", default=""),
        }

    return map_success(result, reshape)
