"""
app/connectors/animals.py

Animal facts and images from the public-apis collection.
"""

from __future__ import annotations

from typing import Any

from app.connectors.base import FetchClient, FetchOptions
from app.connectors.fields import dig, first_item, list_field, number_field, text_field
from app.domain.api_result import ApiResult, map_success


def fetch_cat_fact(client: FetchClient) -> ApiResult:
    result = client.fetch("https://catfact.ninja/fact", "Cat Fact")
    return map_success(
        result,
        lambda payload: {
            "fact": text_field(payload, "fact", default="Unknown fact"),
            "length": number_field(payload, "length"),
        },
    )


def fetch_dog_fact(client: FetchClient) -> ApiResult:
    result = client.fetch("https://dogapi.dog/api/v2/facts", "Dog Fact", params={"limit": 1})
    return map_success(
        result,
        lambda payload: {
            "fact": text_field(first_item(payload, "data"), "attributes", "body", default="Unknown fact"),
        },
    )


def fetch_random_duck(client: FetchClient) -> ApiResult:
    result = client.fetch("https://random-d.uk/api/v2/random", "Random Duck")
    return map_success(
        result,
        lambda payload: {
            "url": text_field(payload, "url"),
            "message": text_field(payload, "message", default="Duck image"),
        },
    )


def fetch_random_fox(client: FetchClient) -> ApiResult:
    result = client.fetch("https://randomfox.ca/floof/", "Random Fox")
    return map_success(result, lambda payload: {"url": text_field(payload, "image")})


def fetch_random_dog_image(client: FetchClient) -> ApiResult:
    result = client.fetch("https://random.dog/woof.json", "Random Dog Image")
    return map_success(result, lambda payload: {"url": text_field(payload, "url")})


def fetch_meow_facts(client: FetchClient, *, count: int = 3) -> ApiResult:
    result = client.fetch("https://meowfacts.herokuapp.com/", "Meow Facts", params={"count": count})

    def reshape(payload: Any) -> dict[str, Any]:
        facts = [str(fact) for fact in list_field(payload, "data") if fact]
        return {
            "facts": " | ".join(facts) if facts else "Unknown facts",
            "count": len(facts),
        }

    return map_success(result, reshape)


def _image_options(client: FetchClient) -> FetchOptions:
    return FetchOptions(
        timeout_seconds=client.options.timeout_seconds,
        retry=client.options.retry,
        user_agent=client.options.user_agent,
        parse_json=False,
    )


def fetch_http_cat(client: FetchClient, *, status_code: int = 200) -> ApiResult:
    url = f"https://http.cat/{status_code}"
    result = client.fetch(url, "HTTP Status Cat", _image_options(client))
    return map_success(
        result,
        lambda _payload: {
            "status": status_code,
            "url": url,
            "message": f"Cat for HTTP {status_code}",
        },
    )


def fetch_http_dog(client: FetchClient, *, status_code: int = 200) -> ApiResult:
    url = f"https://http.dog/{status_code}.jpg"
    result = client.fetch(url, "HTTP Status Dog", _image_options(client))
    return map_success(
        result,
        lambda _payload: {
            "status": status_code,
            "url": url,
            "message": f"Dog for HTTP {status_code}",
        },
    )


def fetch_placeholder_image(
    client: FetchClient,
    *,
    animal: str = "bear",
    width: int = 200,
    height: int = 200,
) -> ApiResult:
    hosts = {"bear": "placebear.com", "dog": "place.dog", "cat": "placekitten.com"}
    url = f"https://{hosts.get(animal, hosts['bear'])}/{width}/{height}"
    result = client.fetch(url, f"Placeholder {animal.title()} Image", _image_options(client))
    return map_success(result, lambda _payload: {"url": url, "width": width, "height": height})


def fetch_random_shibe(client: FetchClient, *, kind: str = "shibes", count: int = 1) -> ApiResult:
    result = client.fetch(
        f"https://shibe.online/api/{kind}",
        f"Random Shibe - {kind}",
        params={"count": count},
    )

    def reshape(payload: Any) -> dict[str, Any]:
        images = [str(image) for image in list_field(payload) if image]
        return {
            "images": images or ["Unknown"],
            "type": kind,
            "count": len(images),
        }

    return map_success(result, reshape)


def fetch_zoo_animal(client: FetchClient) -> ApiResult:
    result = client.fetch("https://zoo-animal-api.herokuapp.com/animals/rand", "Zoo Animal Fact")
    return map_success(
        result,
        lambda payload: {
            "animal": text_field(payload, "name"),
            "fact": text_field(payload, "diet", default="Unknown diet"),
            "scientific": text_field(payload, "latin_name"),
            "image": dig(payload, "image_link"),
        },
    )
