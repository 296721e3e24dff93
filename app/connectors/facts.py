"""
app/connectors/facts.py

Useless Facts random fact and fact of the day, plus notable birthdays from
Wikipedia's on-this-day feed.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from app.connectors.base import FetchClient
from app.connectors.fields import list_field, optional_number, text_field
from app.domain.api_result import ApiResult, map_success

RANDOM_FACT_URL = "https://uselessfacts.jsph.pl/random.json"
FACT_OF_DAY_URL = "https://uselessfacts.jsph.pl/api/v2/facts/today"
BIRTHS_URL = "https://en.wikipedia.org/api/rest_v1/feed/onthisday/births/{month:02d}/{day:02d}"


def fetch_random_facts(client: FetchClient, *, language: str = "en") -> ApiResult:
    result = client.fetch(RANDOM_FACT_URL, "Random Facts", params={"language": language})
    return map_success(result, _reshape_fact)


def _reshape_fact(payload: Any) -> dict[str, str]:
    return {
        "text": text_field(payload, "text", default="Unknown fact"),
        "source_url": text_field(payload, "source_url", default=""),
        "permalink": text_field(payload, "permalink", default=""),
    }


def fetch_fun_fact(client: FetchClient, *, language: str = "en") -> ApiResult:
    result = client.fetch(FACT_OF_DAY_URL, "Fun Facts", params={"language": language})
    return map_success(result, lambda payload: {"fact": text_field(payload, "text", default="No fact found")})


def fetch_celebrity_birthday(
    client: FetchClient,
    *,
    today: date | None = None,
    limit: int = 5,
) -> ApiResult:
    """
    Notable people born on `today`'s month and day, most recent first.
    """

    today = today or date.today()
    result = client.fetch(
        BIRTHS_URL.format(month=today.month, day=today.day),
        f"Celebrity Birthday - {today:%m/%d}",
    )

    def reshape(payload: Any) -> dict[str, Any]:
        births = [entry for entry in list_field(payload, "births") if isinstance(entry, dict)]
        births.sort(key=lambda entry: optional_number(entry, "year") or 0, reverse=True)
        return {
            "date": f"{today:%m/%d}",
            "people": [
                {
                    "name": text_field(entry, "text"),
                    "year": optional_number(entry, "year"),
                }
                for entry in births[: max(0, limit)]
            ],
        }

    return map_success(result, reshape)
