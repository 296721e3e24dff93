"""
app/connectors/news.py

Hacker News, Reddit and Wikipedia headline sources, plus a random Wikipedia article.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

from app.connectors.base import FetchClient
from app.connectors.fields import dig, list_field, number_field, optional_number, text_field, truncate
from app.domain.api_result import ApiResult, Failure, Success, is_success, map_success

HN_TOP_STORIES_URL = "https://hacker-news.firebaseio.com/v0/topstories.json"
HN_ITEM_URL = "https://hacker-news.firebaseio.com/v0/item/{item_id}.json"
HN_DISCUSSION_URL = "https://news.ycombinator.com/item?id={item_id}"
REDDIT_TOP_URL = "https://www.reddit.com/r/{subreddit}/top.json"
WIKIPEDIA_FEATURED_URL = "https://en.wikipedia.org/api/rest_v1/feed/featured/{day:%Y/%m/%d}"
WIKIPEDIA_RANDOM_URL = "https://en.wikipedia.org/api/rest_v1/page/random/summary"


def _epoch_to_iso(value: float | int | None) -> str | None:
    if value is None:
        return None
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc).isoformat()
    except (OverflowError, OSError, ValueError):
        return None


def fetch_hacker_news(client: FetchClient, *, top_n: int = 5) -> ApiResult:
    """
    Top N stories; stories whose item lookup fails are skipped.
    """

    ids_result = client.fetch(HN_TOP_STORIES_URL, "Hacker News IDs")
    if not isinstance(ids_result, Success):
        return ids_result

    story_ids = [item for item in list_field(ids_result.data) if isinstance(item, int)]
    stories: list[dict[str, Any]] = []
    for story_id in story_ids[: max(0, top_n)]:
        item_result = client.fetch(HN_ITEM_URL.format(item_id=story_id), f"HN Story {story_id}")
        if not is_success(item_result):
            continue
        story = item_result.data
        stories.append(
            {
                "rank": len(stories) + 1,
                "title": text_field(story, "title", default="No title"),
                "url": text_field(story, "url", default=HN_DISCUSSION_URL.format(item_id=story_id)),
                "score": number_field(story, "score"),
                "author": text_field(story, "by", default="unknown"),
                "time": _epoch_to_iso(optional_number(story, "time")),
                "comments": number_field(story, "descendants"),
            }
        )

    return Success(source="Hacker News", data=stories, attempts=ids_result.attempts)


def fetch_reddit_top(client: FetchClient, *, subreddit: str = "all", limit: int = 5) -> ApiResult:
    result = client.fetch(
        REDDIT_TOP_URL.format(subreddit=subreddit),
        f"Reddit r/{subreddit}",
        params={"limit": limit, "t": "day"},
    )
    if not isinstance(result, Success):
        return result

    children = list_field(result.data, "data", "children")
    posts = [dig(child, "data") for child in children if isinstance(dig(child, "data"), dict)]
    if not posts:
        return Failure(source="Reddit", error="No posts found", attempts=result.attempts)

    return map_success(
        result,
        lambda _payload: [
            {
                "rank": rank,
                "title": text_field(post, "title", default="No title"),
                "subreddit": text_field(post, "subreddit", default=subreddit),
                "author": text_field(post, "author", default="unknown"),
                "score": number_field(post, "score"),
                "comments": number_field(post, "num_comments"),
                "url": f"https://reddit.com{text_field(post, 'permalink', default='')}",
                "created": _epoch_to_iso(optional_number(post, "created_utc")),
            }
            for rank, post in enumerate(posts, start=1)
        ],
    )


def fetch_wikipedia_featured(client: FetchClient, *, today: date | None = None) -> ApiResult:
    today = today or date.today()
    result = client.fetch(WIKIPEDIA_FEATURED_URL.format(day=today), "Wikipedia Featured")
    if not isinstance(result, Success):
        return result

    article = dig(result.data, "tfa")
    if not isinstance(article, dict):
        return Failure(
            source="Wikipedia",
            error="No featured article found",
            attempts=result.attempts,
        )

    return map_success(
        result,
        lambda _payload: {
            "title": text_field(article, "title", default="No title"),
            "description": text_field(article, "description", default=""),
            "extract": text_field(article, "extract", default=""),
            "url": text_field(
                article, "content_urls", "desktop", "page", default="https://en.wikipedia.org"
            ),
            "thumbnail": dig(article, "thumbnail", "source"),
            "date": today.isoformat(),
        },
    )


def fetch_random_wiki_article(client: FetchClient) -> ApiResult:
    result = client.fetch(WIKIPEDIA_RANDOM_URL, "Wikipedia Random Article")
    return map_success(
        result,
        lambda payload: {
            "title": text_field(payload, "title"),
            "description": text_field(payload, "description", default="No description"),
            "url": text_field(payload, "content_urls", "desktop", "page"),
            "extract": truncate(text_field(payload, "extract", default=""), 200),
        },
    )
