"""
app/connectors/quotes.py

Quote of the day, random quotes, advice and word of the day.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from app.connectors.base import FetchClient
from app.connectors.fields import first_item, list_field, text_field
from app.domain.api_result import ApiResult, Failure, Success, map_success

ZENQUOTES_TODAY_URL = "https://zenquotes.io/api/today"
RANDOM_WORD_URL = "https://random-word-api.herokuapp.com/word"
DICTIONARY_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/{word}"
INSPIRATIONAL_QUOTE_URL = "https://api.api-ninjas.com/v1/quotes"
PROGRAMMING_QUOTE_URL = "https://api.quotable.io/random"
ADVICE_URL = "https://api.adviceslip.com/advice"

RANDOM_QUOTE_URLS = {
    "quotable": "https://api.quotable.io/random",
    "zenquotes": "https://zenquotes.io/api/random",
    "advice": "https://api.adviceslip.com/advice",
    "kanye": "https://api.kanye.rest",
}


def fetch_quote_of_day(client: FetchClient, *, today: date | None = None) -> ApiResult:
    today = today or date.today()
    result = client.fetch(ZENQUOTES_TODAY_URL, "ZenQuotes")
    if not isinstance(result, Success):
        return result

    item = first_item(result.data)
    if not item:
        return Failure(source="ZenQuotes", error="No quote found", attempts=result.attempts)

    return map_success(
        result,
        lambda _payload: {
            "text": text_field(item, "q", default="No quote available"),
            "author": text_field(item, "a"),
            "date": today.isoformat(),
        },
    )


def fetch_quote(client: FetchClient, *, source: str = "quotable") -> ApiResult:
    """
    Random quote from one of several providers, normalized to text/author.
    """

    if source not in RANDOM_QUOTE_URLS:
        source = "quotable"
    result = client.fetch(RANDOM_QUOTE_URLS[source], f"Random Quote - {source}")
    return map_success(result, lambda payload: _reshape_quote(source, payload))


def _reshape_quote(source: str, payload: Any) -> dict[str, str]:
    if source == "zenquotes":
        item = first_item(payload)
        return {"text": text_field(item, "q"), "author": text_field(item, "a")}
    if source == "advice":
        return {"text": text_field(payload, "slip", "advice"), "author": "Advice Slip"}
    if source == "kanye":
        return {"text": text_field(payload, "quote"), "author": "Kanye West"}
    return {"text": text_field(payload, "content"), "author": text_field(payload, "author")}


def fetch_word_of_day(client: FetchClient, *, today: date | None = None) -> ApiResult:
    """
    Random word plus its first dictionary definition; a failed definition
    lookup keeps the word with placeholder definition fields.
    """

    today = today or date.today()
    word_result = client.fetch(RANDOM_WORD_URL, "Random Word API", params={"number": 1})
    if not isinstance(word_result, Success):
        return word_result

    words = [word for word in list_field(word_result.data) if isinstance(word, str) and word]
    if not words:
        return Failure(
            source="Random Word API",
            error="No word found",
            attempts=word_result.attempts,
        )
    word = words[0]

    entry: dict[str, Any] = {}
    dictionary_result = client.fetch(DICTIONARY_URL.format(word=word), "Dictionary API")
    if isinstance(dictionary_result, Success):
        entry = first_item(dictionary_result.data)

    return map_success(
        word_result,
        lambda _payload: {
            "word": word,
            "phonetic": text_field(entry, "phonetic", default=""),
            "part_of_speech": text_field(entry, "meanings", 0, "partOfSpeech", default="unknown"),
            "definition": text_field(
                entry,
                "meanings",
                0,
                "definitions",
                0,
                "definition",
                default="Definition not available",
            ),
            "date": today.isoformat(),
        },
    )



def fetch_inspirational_quote(client: FetchClient, *, api_key: str = "") -> ApiResult:
    """
    API Ninjas inspirational quote; the key is sent only when configured.
    """

    headers = {"X-Api-Key": api_key} if api_key else None
    result = client.fetch(
        INSPIRATIONAL_QUOTE_URL,
        "Inspirational Quote",
        params={"category": "inspirational"},
        headers=headers,
    )
    return map_success(
        result,
        lambda payload: {
            "text": text_field(first_item(payload), "quote"),
            "author": text_field(first_item(payload), "author"),
        },
    )


def fetch_programming_quote(client: FetchClient) -> ApiResult:
    result = client.fetch(PROGRAMMING_QUOTE_URL, "Programming Quotes", params={"tags": "programming"})
    return map_success(
        result,
        lambda payload: {
            "quote": text_field(payload, "content", default="No quote found"),
            "author": text_field(payload, "author"),
            "tags": ", ".join(str(tag) for tag in list_field(payload, "tags")),
        },
    )


def fetch_random_advice(client: FetchClient) -> ApiResult:
    result = client.fetch(ADVICE_URL, "Random Advice")
    return map_success(
        result,
        lambda payload: {"advice": text_field(payload, "slip", "advice", default="No advice found")},
    )
