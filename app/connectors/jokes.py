"""
app/connectors/jokes.py

Jokes, quotes, buzzwords and boredom busters from the public-apis collection.
"""

from __future__ import annotations

from typing import Any

from app.connectors.base import FetchClient
from app.connectors.fields import first_item, list_field, number_field, text_field
from app.domain.api_result import ApiResult, map_success

JOKE_URLS = {
    "programming": "https://official-joke-api.appspot.com/random_joke",
    "knock_knock": "https://official-joke-api.appspot.com/jokes/knock-knock/random",
    "general": "https://official-joke-api.appspot.com/jokes/general/random",
}

ACTIVITY_RANDOM_URL = "https://bored-api.appbrewery.com/random"
ACTIVITY_FILTER_URL = "https://bored-api.appbrewery.com/filter"


def fetch_zen_quote(client: FetchClient) -> ApiResult:
    result = client.fetch("https://zenquotes.io/api/random", "Zen Quote")
    return map_success(
        result,
        lambda payload: {
            "text": text_field(first_item(payload), "q"),
            "author": text_field(first_item(payload), "a"),
        },
    )


def fetch_random_joke(client: FetchClient, *, category: str = "programming") -> ApiResult:
    url = JOKE_URLS.get(category, JOKE_URLS["programming"])
    result = client.fetch(url, f"Random Joke - {category}")

    def reshape(payload: Any) -> dict[str, str]:
        # Category endpoints answer with a one-element list.
        joke = first_item(payload) if isinstance(payload, list) else payload
        setup = text_field(joke, "setup", default="")
        delivery = text_field(joke, "punchline", default=text_field(joke, "joke", default=""))
        return {
            "joke": f"{setup} {delivery}".strip() if setup else delivery,
            "type": text_field(joke, "type", default=category),
        }

    return map_success(result, reshape)


def fetch_random_fact(client: FetchClient) -> ApiResult:
    result = client.fetch("https://uselessfacts.jsph.pl/api/v2/facts/random", "Random Useless Fact")
    return map_success(result, lambda payload: {"fact": text_field(payload, "text", default="Unknown fact")})


def fetch_dad_joke(client: FetchClient) -> ApiResult:
    result = client.fetch("https://icanhazdadjoke.com/slack", "Dad Joke")

    def reshape(payload: Any) -> dict[str, str]:
        attachments = list_field(payload, "attachments")
        if attachments:
            return {"joke": text_field(attachments, 0, "text")}
        return {"joke": text_field(payload, "text")}

    return map_success(result, reshape)


def fetch_random_excuse(client: FetchClient) -> ApiResult:
    result = client.fetch("https://excuser-three.vercel.app/v1/excuse", "Random Excuse")
    return map_success(
        result,
        lambda payload: {"excuse": text_field(first_item(payload), "excuse", default="Unknown excuse")},
    )


def fetch_buzz_word(client: FetchClient) -> ApiResult:
    result = client.fetch("https://corporatebs-generator.sameerkumar.website/", "Corporate Buzz Word")
    return map_success(
        result,
        lambda payload: {"buzzword": text_field(payload, "phrase", default="Unknown buzzword")},
    )


def fetch_techy_phrase(client: FetchClient) -> ApiResult:
    result = client.fetch("https://techy-api.vercel.app/api/json", "Techy Phrase")
    return map_success(
        result,
        lambda payload: {"phrase": text_field(payload, "message", default="Unknown phrase")},
    )


def fetch_motivational_quote(client: FetchClient) -> ApiResult:
    result = client.fetch("https://api.motivational.live/", "Motivational Quote")
    return map_success(
        result,
        lambda payload: {
            "text": text_field(payload, "thought"),
            "author": text_field(payload, "author"),
        },
    )


def fetch_chuck_norris_joke(client: FetchClient) -> ApiResult:
    result = client.fetch("https://api.chucknorris.io/jokes/random", "Chuck Norris Joke")
    return map_success(
        result,
        lambda payload: {"joke": text_field(payload, "value", default="Unknown joke")},
    )


def fetch_random_activity(client: FetchClient, *, activity_type: str = "all") -> ApiResult:
    """
    Something to do when bored; a concrete type queries the filter endpoint.
    """

    kind = activity_type.strip().lower() or "all"
    if kind == "all":
        result = client.fetch(ACTIVITY_RANDOM_URL, "Random Activity (all)")
    else:
        result = client.fetch(ACTIVITY_FILTER_URL, f"Random Activity ({kind})", params={"type": kind})

    def reshape(payload: Any) -> dict[str, Any]:
        # The filter endpoint answers with a list of matches.
        activity = first_item(payload) if isinstance(payload, list) else payload
        return {
            "activity": text_field(activity, "activity", default="No activity found"),
            "type": text_field(activity, "type", default=kind),
            "participants": number_field(activity, "participants", default=1),
            "price": number_field(activity, "price"),
            "accessibility": text_field(activity, "accessibility", default="N/A"),
        }

    return map_success(result, reshape)
