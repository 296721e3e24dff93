"""
app/connectors/entertainment.py

TVMaze schedules, iTunes top song charts and iTunes movie lookups.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from app.connectors.base import FetchClient
from app.connectors.fields import dig, first_item, list_field, optional_number, strip_html, text_field
from app.domain.api_result import ApiResult, map_success

TV_SCHEDULE_URL = "https://api.tvmaze.com/schedule"
WEB_SCHEDULE_URL = "https://api.tvmaze.com/schedule/web"
ITUNES_TOP_SONGS_URL = "https://itunes.apple.com/{country}/rss/topsongs/limit={limit}/json"
ITUNES_SEARCH_URL = "https://itunes.apple.com/search"


def fetch_trending_tv(
    client: FetchClient,
    *,
    country: str = "US",
    today: date | None = None,
    limit: int = 5,
) -> ApiResult:
    today = today or date.today()
    result = client.fetch(
        TV_SCHEDULE_URL,
        "Trending TV",
        params={"country": country, "date": today.isoformat()},
    )

    def reshape(payload: Any) -> dict[str, Any]:
        episodes = [item for item in list_field(payload) if isinstance(item, dict)]
        if not episodes:
            return {"message": "No trending shows found", "shows": []}
        return {"shows": [_reshape_episode(episode) for episode in episodes[:limit]]}

    return map_success(result, reshape)


def _reshape_episode(episode: dict[str, Any]) -> dict[str, str]:
    rating = optional_number(episode, "show", "rating", "average")
    return {
        "show": text_field(episode, "show", "name"),
        "network": text_field(episode, "show", "network", "name", default="Streaming"),
        "time": _format_airstamp(text_field(episode, "airstamp", default="")),
        "rating": f"{rating:.1f}" if rating is not None else "N/A",
    }


def _format_airstamp(airstamp: str) -> str:
    if not airstamp:
        return "TBA"
    try:
        return datetime.fromisoformat(airstamp.replace("Z", "+00:00")).strftime("%I:%M %p")
    except ValueError:
        return "TBA"


def fetch_trending_movie(client: FetchClient, *, today: date | None = None) -> ApiResult:
    """
    First title of today's web/streaming schedule.
    """

    today = today or date.today()
    result = client.fetch(WEB_SCHEDULE_URL, "Trending Shows", params={"date": today.isoformat()})

    def reshape(payload: Any) -> dict[str, str]:
        entry = first_item(payload)
        if not entry:
            return {"message": "No trending content available today"}
        show = dig(entry, "_embedded", "show", default={})
        return {
            "title": text_field(entry, "name", default=text_field(show, "name", default="")),
            "type": text_field(show, "type", default=text_field(entry, "type", default="")),
            "network": text_field(show, "webChannel", "name", default="Streaming"),
            "summary": strip_html(
                text_field(entry, "summary", default=text_field(show, "summary", default="No summary available"))
            ),
            "url": text_field(entry, "url", default=""),
            "airtime": text_field(entry, "airtime", default=""),
        }

    return map_success(result, reshape)


def fetch_music_charts(client: FetchClient, *, limit: int = 10, country: str = "us") -> ApiResult:
    result = client.fetch(
        ITUNES_TOP_SONGS_URL.format(country=country, limit=limit),
        "iTunes Charts",
    )

    def reshape(payload: Any) -> dict[str, Any]:
        entries = [item for item in list_field(payload, "feed", "entry") if isinstance(item, dict)]
        if not entries:
            return {"message": "No chart data available", "charts": []}
        return {
            "country": country.upper(),
            "updated": text_field(payload, "feed", "updated", "label", default=""),
            "charts": [
                {
                    "rank": rank,
                    "track": text_field(entry, "im:name", "label"),
                    "artist": text_field(entry, "im:artist", "label"),
                    "price": text_field(entry, "im:price", "label", default="N/A"),
                }
                for rank, entry in enumerate(entries, start=1)
            ],
        }

    return map_success(result, reshape)


def fetch_movie_info(client: FetchClient, *, title: str = "Inception", year: int | None = None) -> ApiResult:
    """
    First iTunes movie match for `title`; missing fields fall back to the query.
    """

    result = client.fetch(
        ITUNES_SEARCH_URL,
        "Movie Info",
        params={"term": title, "media": "movie", "limit": 1},
    )

    def reshape(payload: Any) -> dict[str, str]:
        movie = first_item(payload, "results")
        released = text_field(movie, "releaseDate", default="")
        return {
            "title": text_field(movie, "trackName", default=title),
            "year": released[:4] if released else (str(year) if year else "Unknown"),
            "genre": text_field(movie, "primaryGenreName"),
            "rating": text_field(movie, "contentAdvisoryRating", default="N/A"),
        }

    return map_success(result, reshape)
