"""
app/connectors/astronomy.py

NASA Astronomy Picture of the Day.
"""

from __future__ import annotations

from typing import Any

from app.connectors.base import FetchClient
from app.connectors.fields import text_field
from app.domain.api_result import ApiResult, map_success

APOD_URL = "https://api.nasa.gov/planetary/apod"


def fetch_astronomy_daily(client: FetchClient, *, api_key: str = "DEMO_KEY") -> ApiResult:
    """
    Latest APOD entry. DEMO_KEY is heavily rate limited (HTTP 429).
    """

    result = client.fetch(APOD_URL, "NASA APOD", params={"api_key": api_key or "DEMO_KEY"})
    return map_success(result, _reshape_apod)


def _reshape_apod(payload: Any) -> dict[str, Any]:
    return {
        "title": text_field(payload, "title"),
        "date": text_field(payload, "date", default=""),
        "url": text_field(payload, "url", default=""),
        "explanation": text_field(payload, "explanation", default=""),
        "media_type": text_field(payload, "media_type", default="image"),
        "copyright": text_field(payload, "copyright", default=""),
    }
