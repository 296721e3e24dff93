"""
app/connectors/games.py

Games, comics and trivia sources.
"""

from __future__ import annotations

from typing import Any

from app.connectors.base import FetchClient
from app.connectors.fields import dig, first_item, list_field, number_field, text_field, truncate
from app.domain.api_result import ApiResult, map_success


def _slug(name: str) -> str:
    return name.strip().lower().replace(" ", "-")


def fetch_trivia_question(
    client: FetchClient,
    *,
    difficulty: str | None = "medium",
    category: int | None = None,
) -> ApiResult:
    params: dict[str, Any] = {"amount": 1}
    if difficulty:
        params["difficulty"] = difficulty
    if category is not None:
        params["category"] = category
    result = client.fetch("https://opentdb.com/api.php", "Trivia Question", params=params)

    def reshape(payload: Any) -> dict[str, Any]:
        question = first_item(payload, "results")
        return {
            "question": text_field(question, "question"),
            "correct_answer": text_field(question, "correct_answer"),
            "incorrect_answers": [str(answer) for answer in list_field(question, "incorrect_answers")],
            "difficulty": text_field(question, "difficulty", default=difficulty or "Unknown"),
        }

    return map_success(result, reshape)


def fetch_pokemon(client: FetchClient, *, name_or_id: str = "pikachu") -> ApiResult:
    result = client.fetch(f"https://pokeapi.co/api/v2/pokemon/{_slug(name_or_id)}", "Pokemon Info")

    def reshape(payload: Any) -> dict[str, Any]:
        types = [text_field(entry, "type", "name") for entry in list_field(payload, "types")]
        return {
            "name": text_field(payload, "name"),
            "id": number_field(payload, "id"),
            "height": number_field(payload, "height"),
            "weight": number_field(payload, "weight"),
            "types": ", ".join(types),
            "image": text_field(payload, "sprites", "front_default"),
        }

    return map_success(result, reshape)


def fetch_dnd_spell(client: FetchClient, *, spell_name: str = "fireball") -> ApiResult:
    result = client.fetch(f"https://www.dnd5eapi.co/api/spells/{_slug(spell_name)}", "D&D Spell")
    return map_success(
        result,
        lambda payload: {
            "name": text_field(payload, "name"),
            "level": number_field(payload, "level"),
            "school": text_field(payload, "school", "name"),
            "description": truncate(" ".join(str(line) for line in list_field(payload, "desc")), 300),
            "casting_time": text_field(payload, "casting_time"),
        },
    )


def fetch_dnd_monster(client: FetchClient, *, monster_name: str = "dragon") -> ApiResult:
    """
    Monster stat summary. Generic names such as "dragon" may not resolve
    to a single monster and then surface as an HTTP 404 failure.
    """

    result = client.fetch(
        f"https://www.dnd5eapi.co/api/monsters/{_slug(monster_name)}",
        "D&D Monster",
    )
    return map_success(
        result,
        lambda payload: {
            "name": text_field(payload, "name"),
            "cr": number_field(payload, "challenge_rating"),
            "alignment": text_field(payload, "alignment"),
            "size": text_field(payload, "size"),
            "type": text_field(payload, "type"),
            "hp": number_field(payload, "hit_points"),
        },
    )


def fetch_star_wars(client: FetchClient, *, resource: str = "people", item_id: int = 1) -> ApiResult:
    result = client.fetch(f"https://swapi.dev/api/{resource}/{item_id}/", "Star Wars")
    return map_success(
        result,
        lambda payload: {
            "name": text_field(payload, "name", default=text_field(payload, "title")),
            "resource_type": resource,
            "url": text_field(payload, "url"),
            "created": text_field(payload, "created"),
        },
    )


def fetch_xkcd_comic(client: FetchClient) -> ApiResult:
    result = client.fetch("https://xkcd.com/info.0.json", "XKCD Comic")
    return map_success(
        result,
        lambda payload: {
            "title": text_field(payload, "title"),
            "comic_url": text_field(payload, "img"),
            "alt_text": truncate(text_field(payload, "alt", default="No alt text"), 200),
            "num": number_field(payload, "num"),
        },
    )


def fetch_chess_game(client: FetchClient) -> ApiResult:
    result = client.fetch("https://api.chess.com/pub/streamers", "Chess Game")

    def reshape(payload: Any) -> dict[str, str]:
        streamer = first_item(payload, "streamers")
        return {
            "username": text_field(streamer, "username"),
            "twitch_url": text_field(streamer, "twitch_url", default="N/A"),
            "url": text_field(streamer, "url"),
            "is_live": "yes" if dig(streamer, "is_live", default=False) else "no",
        }

    return map_success(result, reshape)


def fetch_ghibli_film(client: FetchClient, *, film_id: str | None = None) -> ApiResult:
    base_url = "https://ghibliapi.vercel.app/films"
    url = f"{base_url}/{film_id}" if film_id else base_url
    result = client.fetch(url, "Studio Ghibli Film")

    def reshape(payload: Any) -> dict[str, str]:
        film = first_item(payload) if isinstance(payload, list) else payload
        return {
            "title": text_field(film, "title"),
            "director": text_field(film, "director"),
            "release_date": text_field(film, "release_date"),
            "description": truncate(text_field(film, "description", default="No description"), 200),
        }

    return map_success(result, reshape)


def fetch_jeopardy_question(client: FetchClient) -> ApiResult:
    result = client.fetch("https://jservice.xyz/api/random-clue", "Jeopardy Question")
    return map_success(
        result,
        lambda payload: {
            "question": text_field(payload, "question"),
            "answer": text_field(payload, "answer"),
            "category": text_field(payload, "category", "title"),
            "value": number_field(payload, "value"),
        },
    )


def fetch_mtg_card(client: FetchClient, *, query: str = "Black Lotus") -> ApiResult:
    result = client.fetch(
        "https://api.scryfall.com/cards/search",
        "MTG Card",
        params={"q": query, "unique": "cards"},
    )

    def reshape(payload: Any) -> dict[str, str]:
        card = first_item(payload, "data")
        return {
            "name": text_field(card, "name"),
            "type": text_field(card, "type_line"),
            "text": truncate(text_field(card, "oracle_text", default="No text"), 200),
            "image_url": text_field(card, "image_uris", "normal"),
            "mana_cost": text_field(card, "mana_cost", default="0"),
        }

    return map_success(result, reshape)


def fetch_yugioh_card(client: FetchClient, *, card_name: str = "Blue-Eyes White Dragon") -> ApiResult:
    result = client.fetch(
        "https://db.ygoprodeck.com/api/v7/cardinfo.php",
        "Yu-Gi-Oh Card",
        params={"name": card_name},
    )

    def reshape(payload: Any) -> dict[str, Any]:
        card = first_item(payload, "data")
        return {
            "name": text_field(card, "name"),
            "type": text_field(card, "type"),
            "desc": truncate(text_field(card, "desc", default="No description"), 200),
            "image_url": text_field(card, "card_images", 0, "image_url"),
            "atk": dig(card, "atk", default="N/A"),
            "def": dig(card, "def", default="N/A"),
        }

    return map_success(result, reshape)


def fetch_digimon(client: FetchClient, *, digimon_name: str = "agumon") -> ApiResult:
    result = client.fetch(
        f"https://digimon-api.vercel.app/api/digimon/name/{_slug(digimon_name)}",
        "Digimon Info",
    )

    def joined(item: Any, key: str) -> str:
        value = dig(item, key)
        if isinstance(value, list):
            return ", ".join(str(part) for part in value if part) or "Unknown"
        return text_field(item, key)

    def reshape(payload: Any) -> dict[str, str]:
        # Name lookups answer with a one-element list.
        digimon = first_item(payload) if isinstance(payload, list) else payload
        return {
            "name": text_field(digimon, "name"),
            "level": joined(digimon, "level"),
            "type": joined(digimon, "type"),
            "image": text_field(digimon, "img", default=text_field(digimon, "image")),
        }

    return map_success(result, reshape)
