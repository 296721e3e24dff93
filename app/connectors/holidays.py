"""
app/connectors/holidays.py

Nager.Date public holidays, filtered to today.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from app.connectors.base import FetchClient
from app.connectors.fields import text_field
from app.domain.api_result import ApiResult, map_success

PUBLIC_HOLIDAYS_URL = "https://date.nager.at/api/v3/PublicHolidays/{year}/{country}"


def fetch_todays_holidays(
    client: FetchClient,
    *,
    country_code: str = "US",
    today: date | None = None,
) -> ApiResult:
    today = today or date.today()
    result = client.fetch(
        PUBLIC_HOLIDAYS_URL.format(year=today.year, country=country_code),
        f"Holidays - {country_code} ({today.year})",
    )

    def reshape(payload: Any) -> dict[str, Any]:
        holidays = [
            {
                "date": text_field(item, "date", default=""),
                "name": text_field(item, "name"),
                "local_name": text_field(item, "localName", default=""),
            }
            for item in (payload if isinstance(payload, list) else [])
            if isinstance(item, dict)
        ]
        todays = [holiday for holiday in holidays if holiday["date"] == today.isoformat()]
        return {
            "country_code": country_code,
            "year": today.year,
            "all_holidays": holidays,
            "todays_holidays": todays,
            "is_holiday_today": bool(todays),
        }

    return map_success(result, reshape)
