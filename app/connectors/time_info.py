"""
app/connectors/time_info.py

WorldTimeAPI timezone lookups.
"""

from __future__ import annotations

from typing import Any

from app.connectors.base import FetchClient
from app.connectors.fields import dig, optional_number, text_field
from app.domain.api_result import ApiResult, map_success

WORLD_TIME_URL = "https://worldtimeapi.org/api/timezone/{timezone}"


def fetch_current_time(client: FetchClient, *, timezone: str = "America/New_York") -> ApiResult:
    result = client.fetch(WORLD_TIME_URL.format(timezone=timezone), f"World Time - {timezone}")

    def reshape(payload: Any) -> dict[str, Any]:
        return {
            "timezone": text_field(payload, "timezone", default=timezone),
            "datetime": text_field(payload, "datetime", default=""),
            "utc_offset": text_field(payload, "utc_offset", default=""),
            "utc_datetime": text_field(payload, "utc_datetime", default=""),
            "week_number": optional_number(payload, "week_number"),
            "day_of_year": optional_number(payload, "day_of_year"),
            "is_dst": bool(dig(payload, "dst", default=False)),
        }

    return map_success(result, reshape)
