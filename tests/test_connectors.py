"""
tests/test_connectors.py

Pytest unit tests for the per-source adapters.

Each adapter is exercised against canned provider payloads through a
scripted session. Assertions focus on the reshaped data and on explicit
placeholder values when optional fields are absent.
"""

from __future__ import annotations

from datetime import date

import pytest

from app.connectors import animals, astronomy, crypto, entertainment, facts, games, holidays
from app.connectors import jokes, news, quotes, sports, time_info, weather
from app.connectors.fields import dig, first_item, int_field, number_field, strip_html, text_field
from app.domain.api_result import Failure, Success
from tests.fakes import INVALID_JSON, FakeResponse

TODAY = date(2026, 7, 4)


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


class TestFieldHelpers:
    def test_dig_walks_keys_and_indexes(self) -> None:
        payload = {"a": [{"b": "x"}]}
        assert dig(payload, "a", 0, "b") == "x"
        assert dig(payload, "a", 3, "b", default="d") == "d"
        assert dig(payload, "missing", default=0) == 0

    def test_dig_treats_null_as_missing(self) -> None:
        assert dig({"a": None}, "a", default="fallback") == "fallback"

    def test_text_field_defaults(self) -> None:
        assert text_field({}, "title") == "Unknown"
        assert text_field({"title": "  "}, "title", default="none") == "none"
        assert text_field({"title": {"nested": 1}}, "title") == "Unknown"

    def test_number_field_parses_numeric_strings(self) -> None:
        assert number_field({"p": "25"}, "p") == 25
        assert number_field({"p": "2.5"}, "p") == 2.5
        assert number_field({"p": "n/a"}, "p") == 0
        assert number_field({"p": True}, "p", default=-1) == -1

    def test_non_finite_numbers_use_default(self) -> None:
        assert number_field({"p": "1e400"}, "p") == 0
        assert number_field({"p": float("inf")}, "p", default=-1) == -1
        assert number_field({"p": "nan"}, "p") == 0
        assert int_field({"p": "1e400"}, "p") == 0
        assert int_field({"p": "7"}, "p") == 7

    def test_first_item_on_bare_list(self) -> None:
        assert first_item([{"q": 1}, {"q": 2}]) == {"q": 1}
        assert first_item([]) == {}
        assert first_item({"items": "nope"}, "items") == {}

    def test_strip_html(self) -> None:
        assert strip_html("<p>The <b>Sun</b></p> ") == "The Sun"


# ---------------------------------------------------------------------------
# Astronomy, weather, crypto, time, holidays
# ---------------------------------------------------------------------------


class TestCoreSources:
    def test_astronomy_reshape_and_defaults(self, make_client) -> None:
        client, session = make_client({astronomy.APOD_URL: {"title": "Pillars", "url": "https://img"}})
        result = astronomy.fetch_astronomy_daily(client, api_key="KEY")

        assert isinstance(result, Success)
        assert result.source == "NASA APOD"
        assert result.data["title"] == "Pillars"
        assert result.data["media_type"] == "image"
        assert result.data["copyright"] == ""
        assert session.calls[0]["params"] == {"api_key": "KEY"}

    def test_astronomy_rate_limit_is_failure(self, make_client) -> None:
        client, session = make_client({astronomy.APOD_URL: FakeResponse(429)})
        result = astronomy.fetch_astronomy_daily(client)

        assert isinstance(result, Failure)
        assert result.status_code == 429
        assert len(session.calls) == 2

    def test_weather_labels_source_by_location(self, make_client) -> None:
        client, _ = make_client(
            {weather.FORECAST_URL: {"current": {"temperature_2m": 21.5, "time": "2026-07-04T12:00"}}}
        )
        result = weather.fetch_current_weather(client, latitude=51.5, longitude=-0.12, location_name="London")

        assert result.source == "Weather - London"
        assert result.data["temperature"] == 21.5
        assert result.data["humidity"] is None
        assert result.data["location"] == "London"

    def test_crypto_keeps_requested_coins_only(self, make_client) -> None:
        client, session = make_client(
            {
                crypto.SIMPLE_PRICE_URL: {
                    "bitcoin": {"usd": 65000, "usd_24h_change": -1.2},
                    "dogecoin": {"usd": 0.1},
                }
            }
        )
        result = crypto.fetch_crypto_prices(client, coins=["Bitcoin", "ethereum"])

        assert result.data == {
            "bitcoin": {"price": 65000, "market_cap": None, "volume_24h": None, "change_24h": -1.2}
        }
        assert session.calls[0]["params"]["ids"] == "bitcoin,ethereum"

    def test_crypto_requires_coins(self, make_client) -> None:
        client, _ = make_client()
        with pytest.raises(ValueError):
            crypto.fetch_crypto_prices(client, coins=[" "])

    def test_time_defaults(self, make_client) -> None:
        url = time_info.WORLD_TIME_URL.format(timezone="Asia/Tokyo")
        client, _ = make_client({url: {"datetime": "2026-07-04T21:00:00+09:00", "dst": False}})
        result = time_info.fetch_current_time(client, timezone="Asia/Tokyo")

        assert result.data["timezone"] == "Asia/Tokyo"
        assert result.data["utc_offset"] == ""
        assert result.data["is_dst"] is False

    def test_holidays_flags_today(self, make_client) -> None:
        url = holidays.PUBLIC_HOLIDAYS_URL.format(year=2026, country="US")
        client, _ = make_client(
            {
                url: [
                    {"date": "2026-01-01", "name": "New Year's Day", "localName": "New Year's Day"},
                    {"date": "2026-07-04", "name": "Independence Day", "localName": "Independence Day"},
                ]
            }
        )
        result = holidays.fetch_todays_holidays(client, country_code="US", today=TODAY)

        assert result.data["is_holiday_today"] is True
        assert [h["name"] for h in result.data["todays_holidays"]] == ["Independence Day"]
        assert len(result.data["all_holidays"]) == 2


# ---------------------------------------------------------------------------
# News and quotes
# ---------------------------------------------------------------------------


class TestNewsSources:
    def test_hacker_news_skips_failed_items(self, make_client) -> None:
        client, _ = make_client(
            {
                news.HN_TOP_STORIES_URL: [101, 102, 103],
                news.HN_ITEM_URL.format(item_id=101): {"title": "First", "score": 10, "by": "pg", "time": 0},
                news.HN_ITEM_URL.format(item_id=102): FakeResponse(500),
                news.HN_ITEM_URL.format(item_id=103): {"title": "Third"},
            }
        )
        result = news.fetch_hacker_news(client, top_n=3)

        assert isinstance(result, Success)
        assert [story["title"] for story in result.data] == ["First", "Third"]
        assert [story["rank"] for story in result.data] == [1, 2]
        assert result.data[1]["url"] == "https://news.ycombinator.com/item?id=103"
        assert result.data[1]["author"] == "unknown"
        assert result.data[0]["time"] == "1970-01-01T00:00:00+00:00"

    def test_hacker_news_out_of_range_time_keeps_story(self, make_client) -> None:
        client, _ = make_client(
            {
                news.HN_TOP_STORIES_URL: [201, 202],
                news.HN_ITEM_URL.format(item_id=201): {"title": "Far future", "time": 1e20},
                news.HN_ITEM_URL.format(item_id=202): {"title": "Normal", "time": 0},
            }
        )
        result = news.fetch_hacker_news(client, top_n=2)

        assert isinstance(result, Success)
        assert [story["title"] for story in result.data] == ["Far future", "Normal"]
        assert result.data[0]["time"] is None
        assert result.data[1]["time"] == "1970-01-01T00:00:00+00:00"

    def test_hacker_news_id_failure_propagates(self, make_client) -> None:
        client, _ = make_client({news.HN_TOP_STORIES_URL: FakeResponse(404)})
        assert isinstance(news.fetch_hacker_news(client), Failure)

    def test_reddit_without_posts_is_failure(self, make_client) -> None:
        client, _ = make_client({news.REDDIT_TOP_URL.format(subreddit="all"): {"data": {"children": []}}})
        result = news.fetch_reddit_top(client)

        assert isinstance(result, Failure)
        assert result.error == "No posts found"

    def test_reddit_reshape(self, make_client) -> None:
        client, _ = make_client(
            {
                news.REDDIT_TOP_URL.format(subreddit="python"): {
                    "data": {"children": [{"data": {"title": "PEP", "permalink": "/r/python/1", "score": 5}}]}
                }
            }
        )
        result = news.fetch_reddit_top(client, subreddit="python", limit=1)

        assert result.data == [
            {
                "rank": 1,
                "title": "PEP",
                "subreddit": "python",
                "author": "unknown",
                "score": 5,
                "comments": 0,
                "url": "https://reddit.com/r/python/1",
                "created": None,
            }
        ]

    def test_wikipedia_missing_featured_article(self, make_client) -> None:
        client, _ = make_client({news.WIKIPEDIA_FEATURED_URL.format(day=TODAY): {"mostread": {}}})
        result = news.fetch_wikipedia_featured(client, today=TODAY)

        assert isinstance(result, Failure)
        assert result.error == "No featured article found"

    def test_wikipedia_featured_article(self, make_client) -> None:
        client, session = make_client(
            {news.WIKIPEDIA_FEATURED_URL.format(day=TODAY): {"tfa": {"title": "Apollo 11", "extract": "..."}}}
        )
        result = news.fetch_wikipedia_featured(client, today=TODAY)

        assert result.data["title"] == "Apollo 11"
        assert result.data["url"] == "https://en.wikipedia.org"
        assert result.data["thumbnail"] is None
        assert session.urls() == ["https://en.wikipedia.org/api/rest_v1/feed/featured/2026/07/04"]

    def test_quote_of_day(self, make_client) -> None:
        client, _ = make_client({quotes.ZENQUOTES_TODAY_URL: [{"q": "Be here now.", "a": "Ram Dass"}]})
        result = quotes.fetch_quote_of_day(client, today=TODAY)

        assert result.data == {"text": "Be here now.", "author": "Ram Dass", "date": "2026-07-04"}

    def test_quote_of_day_empty_list(self, make_client) -> None:
        client, _ = make_client({quotes.ZENQUOTES_TODAY_URL: []})
        assert quotes.fetch_quote_of_day(client).error == "No quote found"

    @pytest.mark.parametrize(
        ("source", "payload", "expected"),
        [
            ("quotable", {"content": "Stay hungry.", "author": "Jobs"}, {"text": "Stay hungry.", "author": "Jobs"}),
            ("advice", {"slip": {"advice": "Drink water."}}, {"text": "Drink water.", "author": "Advice Slip"}),
            ("kanye", {"quote": "I am a god."}, {"text": "I am a god.", "author": "Kanye West"}),
        ],
    )
    def test_random_quote_providers(self, make_client, source, payload, expected) -> None:
        client, _ = make_client({quotes.RANDOM_QUOTE_URLS[source]: payload})
        assert quotes.fetch_quote(client, source=source).data == expected

    def test_word_of_day_without_definition_keeps_word(self, make_client) -> None:
        client, _ = make_client({quotes.RANDOM_WORD_URL: ["serendipity"]})
        result = quotes.fetch_word_of_day(client, today=TODAY)

        assert isinstance(result, Success)
        assert result.data["word"] == "serendipity"
        assert result.data["definition"] == "Definition not available"
        assert result.data["part_of_speech"] == "unknown"

    def test_word_of_day_with_definition(self, make_client) -> None:
        client, _ = make_client(
            {
                quotes.RANDOM_WORD_URL: ["lucid"],
                quotes.DICTIONARY_URL.format(word="lucid"): [
                    {
                        "phonetic": "/ˈluːsɪd/",
                        "meanings": [{"partOfSpeech": "adjective", "definitions": [{"definition": "Clear."}]}],
                    }
                ],
            }
        )
        result = quotes.fetch_word_of_day(client, today=TODAY)

        assert result.data["definition"] == "Clear."
        assert result.data["part_of_speech"] == "adjective"


# ---------------------------------------------------------------------------
# Sports and entertainment
# ---------------------------------------------------------------------------


class TestSportsAndEntertainment:
    def test_nba_without_games(self, make_client) -> None:
        client, _ = make_client({sports.NBA_SCOREBOARD_URL: {"events": []}})
        result = sports.fetch_nba_scores(client)

        assert result.data == {"has_games": False, "message": "No NBA games scheduled today", "season": "Unknown"}

    def test_nba_game_reshape(self, make_client) -> None:
        event = {
            "competitions": [
                {
                    "status": {"type": {"description": "Final"}},
                    "competitors": [
                        {"homeAway": "home", "team": {"displayName": "Celtics"}, "score": "110"},
                        {"homeAway": "away", "team": {"displayName": "Lakers"}, "score": "104"},
                    ],
                }
            ]
        }
        client, _ = make_client({sports.NBA_SCOREBOARD_URL: {"events": [event], "season": {"type": 2}}})
        result = sports.fetch_nba_scores(client)

        assert result.data["games"] == [{"matchup": "Lakers @ Celtics", "score": "104 - 110", "status": "Final"}]

    def test_f1_without_standings(self, make_client) -> None:
        url = sports.F1_STANDINGS_URL.format(season="current")
        client, _ = make_client({url: {"MRData": {"StandingsTable": {"StandingsLists": []}}}})
        assert sports.fetch_f1_standings(client).error == "No standings data available"

    def test_f1_standings_top_ten(self, make_client) -> None:
        rows = [
            {
                "position": str(n),
                "points": "10",
                "wins": "1",
                "Driver": {"givenName": "Driver", "familyName": str(n)},
                "Constructors": [{"name": "Team"}],
            }
            for n in range(1, 13)
        ]
        url = sports.F1_STANDINGS_URL.format(season="current")
        client, _ = make_client(
            {url: {"MRData": {"StandingsTable": {"StandingsLists": [{"season": "2026", "round": "9", "DriverStandings": rows}]}}}}
        )
        result = sports.fetch_f1_standings(client)

        assert len(result.data["standings"]) == 10
        assert result.data["standings"][0] == {
            "position": 1,
            "driver": "Driver 1",
            "team": "Team",
            "points": 10.0,
            "wins": 1,
        }

    def test_f1_overflowing_numbers_fall_back(self, make_client) -> None:
        row = {"position": "1e400", "points": "nan", "wins": "1e400", "Driver": {"familyName": "Solo"}}
        url = sports.F1_STANDINGS_URL.format(season="current")
        client, _ = make_client(
            {url: {"MRData": {"StandingsTable": {"StandingsLists": [{"DriverStandings": [row]}]}}}}
        )
        result = sports.fetch_f1_standings(client)

        assert isinstance(result, Success)
        assert result.data["standings"] == [
            {"position": 0, "driver": "Solo", "team": "Unknown", "points": 0.0, "wins": 0}
        ]

    def test_music_charts_reshape(self, make_client) -> None:
        url = entertainment.ITUNES_TOP_SONGS_URL.format(country="gb", limit=2)
        client, _ = make_client(
            {
                url: {
                    "feed": {
                        "entry": [
                            {"im:name": {"label": "Song A"}, "im:artist": {"label": "Artist A"}},
                            {"im:name": {"label": "Song B"}, "im:artist": {"label": "Artist B"}},
                        ]
                    }
                }
            }
        )
        result = entertainment.fetch_music_charts(client, limit=2, country="gb")

        assert result.data["country"] == "GB"
        assert [row["track"] for row in result.data["charts"]] == ["Song A", "Song B"]
        assert result.data["charts"][0]["price"] == "N/A"

    def test_music_charts_invalid_body(self, make_client) -> None:
        url = entertainment.ITUNES_TOP_SONGS_URL.format(country="us", limit=10)
        client, _ = make_client({url: FakeResponse(200, INVALID_JSON)})
        result = entertainment.fetch_music_charts(client)

        assert isinstance(result, Failure)
        assert result.error.startswith("Parse error")

    def test_trending_tv_reshape(self, make_client) -> None:
        client, session = make_client(
            {
                entertainment.TV_SCHEDULE_URL: [
                    {"airstamp": "2026-07-04T20:00:00+00:00", "show": {"name": "Show", "rating": {"average": 8}}},
                    {"show": {"name": "Other", "network": {"name": "NBC"}}},
                ]
            }
        )
        result = entertainment.fetch_trending_tv(client, today=TODAY, limit=5)

        assert result.data["shows"] == [
            {"show": "Show", "network": "Streaming", "time": "08:00 PM", "rating": "8.0"},
            {"show": "Other", "network": "NBC", "time": "TBA", "rating": "N/A"},
        ]
        assert session.calls[0]["params"] == {"country": "US", "date": "2026-07-04"}

    def test_trending_movie_empty_schedule(self, make_client) -> None:
        client, _ = make_client({entertainment.WEB_SCHEDULE_URL: []})
        result = entertainment.fetch_trending_movie(client, today=TODAY)

        assert result.data == {"message": "No trending content available today"}


# ---------------------------------------------------------------------------
# Animals, jokes and games
# ---------------------------------------------------------------------------


class TestLightSources:
    def test_http_cat_does_not_parse_image_body(self, make_client) -> None:
        client, _ = make_client(
            {"https://http.cat/404": FakeResponse(200, INVALID_JSON, headers={"Content-Type": "image/jpeg"})}
        )
        result = animals.fetch_http_cat(client, status_code=404)

        assert result.data == {"status": 404, "url": "https://http.cat/404", "message": "Cat for HTTP 404"}

    def test_meow_facts_joined(self, make_client) -> None:
        client, _ = make_client({"https://meowfacts.herokuapp.com/": {"data": ["Cats purr.", "Cats nap."]}})
        result = animals.fetch_meow_facts(client, count=2)

        assert result.data == {"facts": "Cats purr. | Cats nap.", "count": 2}

    def test_shibe_placeholder_when_empty(self, make_client) -> None:
        client, _ = make_client({"https://shibe.online/api/shibes": []})
        result = animals.fetch_random_shibe(client)

        assert result.data == {"images": ["Unknown"], "type": "shibes", "count": 0}

    def test_cat_fact_default(self, make_client) -> None:
        client, _ = make_client({"https://catfact.ninja/fact": {}})
        assert animals.fetch_cat_fact(client).data == {"fact": "Unknown fact", "length": 0}

    def test_programming_joke_joins_setup_and_punchline(self, make_client) -> None:
        client, _ = make_client(
            {jokes.JOKE_URLS["programming"]: {"setup": "Why?", "punchline": "Because.", "type": "programming"}}
        )
        assert jokes.fetch_random_joke(client).data == {"joke": "Why? Because.", "type": "programming"}

    def test_category_joke_list_payload(self, make_client) -> None:
        client, _ = make_client({jokes.JOKE_URLS["general"]: [{"setup": "Knock", "punchline": "Who"}]})
        result = jokes.fetch_random_joke(client, category="general")

        assert result.data == {"joke": "Knock Who", "type": "general"}

    def test_pokemon_reshape(self, make_client) -> None:
        client, session = make_client(
            {
                "https://pokeapi.co/api/v2/pokemon/mr-mime": {
                    "name": "mr-mime",
                    "id": 122,
                    "types": [{"type": {"name": "psychic"}}, {"type": {"name": "fairy"}}],
                }
            }
        )
        result = games.fetch_pokemon(client, name_or_id="Mr Mime")

        assert result.data["types"] == "psychic, fairy"
        assert result.data["image"] == "Unknown"
        assert result.data["height"] == 0

    def test_trivia_defaults_to_requested_difficulty(self, make_client) -> None:
        client, session = make_client({"https://opentdb.com/api.php": {"results": []}})
        result = games.fetch_trivia_question(client, difficulty="hard")

        assert result.data["difficulty"] == "hard"
        assert result.data["incorrect_answers"] == []
        assert session.calls[0]["params"] == {"amount": 1, "difficulty": "hard"}


# ---------------------------------------------------------------------------
# Extended sources
# ---------------------------------------------------------------------------


class TestExtendedSources:
    def test_inspirational_quote_sends_key_when_configured(self, make_client) -> None:
        client, session = make_client({quotes.INSPIRATIONAL_QUOTE_URL: [{"quote": "Keep going.", "author": "Ada"}]})
        result = quotes.fetch_inspirational_quote(client, api_key="k-123")

        assert result.data == {"text": "Keep going.", "author": "Ada"}
        assert session.calls[0]["headers"]["X-Api-Key"] == "k-123"
        assert session.calls[0]["params"] == {"category": "inspirational"}

    def test_inspirational_quote_without_key(self, make_client) -> None:
        client, session = make_client({quotes.INSPIRATIONAL_QUOTE_URL: []})
        result = quotes.fetch_inspirational_quote(client)

        assert result.data == {"text": "Unknown", "author": "Unknown"}
        assert "X-Api-Key" not in session.calls[0]["headers"]

    def test_programming_quote_joins_tags(self, make_client) -> None:
        client, session = make_client(
            {
                quotes.PROGRAMMING_QUOTE_URL: {
                    "content": "Simplicity is prerequisite for reliability.",
                    "author": "Edsger Dijkstra",
                    "tags": ["technology", "programming"],
                }
            }
        )
        result = quotes.fetch_programming_quote(client)

        assert result.data["tags"] == "technology, programming"
        assert result.data["author"] == "Edsger Dijkstra"
        assert session.calls[0]["params"] == {"tags": "programming"}

    def test_advice_default(self, make_client) -> None:
        client, _ = make_client({quotes.ADVICE_URL: {"slip": {}}})
        assert quotes.fetch_random_advice(client).data == {"advice": "No advice found"}

    def test_random_activity_any_type(self, make_client) -> None:
        client, _ = make_client({jokes.ACTIVITY_RANDOM_URL: {"activity": "Learn to juggle", "type": "recreational"}})
        result = jokes.fetch_random_activity(client)

        assert result.data == {
            "activity": "Learn to juggle",
            "type": "recreational",
            "participants": 1,
            "price": 0,
            "accessibility": "N/A",
        }

    def test_random_activity_filtered_list(self, make_client) -> None:
        client, session = make_client(
            {jokes.ACTIVITY_FILTER_URL: [{"activity": "Bake bread", "participants": 2, "price": 0.1}]}
        )
        result = jokes.fetch_random_activity(client, activity_type="Cooking")

        assert result.source == "Random Activity (cooking)"
        assert result.data["activity"] == "Bake bread"
        assert result.data["type"] == "cooking"
        assert result.data["participants"] == 2
        assert session.calls[0]["params"] == {"type": "cooking"}

    def test_fun_fact(self, make_client) -> None:
        client, session = make_client({facts.FACT_OF_DAY_URL: {"text": "Honey never spoils."}})
        result = facts.fetch_fun_fact(client)

        assert result.data == {"fact": "Honey never spoils."}
        assert session.calls[0]["params"] == {"language": "en"}

    def test_celebrity_birthdays_most_recent_first(self, make_client) -> None:
        url = facts.BIRTHS_URL.format(month=7, day=4)
        client, _ = make_client(
            {
                url: {
                    "births": [
                        {"text": "Louis Armstrong", "year": 1901},
                        {"text": "Nathaniel Hawthorne", "year": 1804},
                        {"text": "Post Malone", "year": 1995},
                        {"text": "Unknown year"},
                    ]
                }
            }
        )
        result = facts.fetch_celebrity_birthday(client, today=TODAY, limit=2)

        assert result.source == "Celebrity Birthday - 07/04"
        assert result.data == {
            "date": "07/04",
            "people": [
                {"name": "Post Malone", "year": 1995},
                {"name": "Louis Armstrong", "year": 1901},
            ],
        }

    def test_random_wiki_article_truncates_extract(self, make_client) -> None:
        client, _ = make_client(
            {
                news.WIKIPEDIA_RANDOM_URL: {
                    "title": "Aardvark",
                    "extract": "a" * 300,
                    "content_urls": {"desktop": {"page": "https://en.wikipedia.org/wiki/Aardvark"}},
                }
            }
        )
        result = news.fetch_random_wiki_article(client)

        assert result.data["title"] == "Aardvark"
        assert result.data["description"] == "No description"
        assert result.data["url"] == "https://en.wikipedia.org/wiki/Aardvark"
        assert len(result.data["extract"]) == 200

    def test_movie_info_reshape(self, make_client) -> None:
        client, session = make_client(
            {
                entertainment.ITUNES_SEARCH_URL: {
                    "results": [
                        {
                            "trackName": "The Matrix",
                            "releaseDate": "1999-03-31T08:00:00Z",
                            "primaryGenreName": "Sci-Fi & Fantasy",
                            "contentAdvisoryRating": "R",
                        }
                    ]
                }
            }
        )
        result = entertainment.fetch_movie_info(client, title="The Matrix")

        assert result.data == {"title": "The Matrix", "year": "1999", "genre": "Sci-Fi & Fantasy", "rating": "R"}
        assert session.calls[0]["params"] == {"term": "The Matrix", "media": "movie", "limit": 1}

    def test_movie_info_falls_back_to_query(self, make_client) -> None:
        client, _ = make_client({entertainment.ITUNES_SEARCH_URL: {"results": []}})
        result = entertainment.fetch_movie_info(client, title="Inception", year=2010)

        assert result.data == {"title": "Inception", "year": "2010", "genre": "Unknown", "rating": "N/A"}

    def test_digimon_list_payload(self, make_client) -> None:
        client, _ = make_client(
            {
                "https://digimon-api.vercel.app/api/digimon/name/agumon": [
                    {"name": "Agumon", "img": "https://digimon.shadowsmith.com/img/agumon.jpg", "level": "Rookie"}
                ]
            }
        )
        result = games.fetch_digimon(client, digimon_name="Agumon")

        assert result.data == {
            "name": "Agumon",
            "level": "Rookie",
            "type": "Unknown",
            "image": "https://digimon.shadowsmith.com/img/agumon.jpg",
        }

    def test_digimon_joins_list_fields(self, make_client) -> None:
        client, _ = make_client(
            {
                "https://digimon-api.vercel.app/api/digimon/name/gabumon": {
                    "name": "Gabumon",
                    "level": ["Rookie", "Child"],
                    "type": ["Reptile"],
                }
            }
        )
        result = games.fetch_digimon(client, digimon_name="gabumon")

        assert result.data["level"] == "Rookie, Child"
        assert result.data["type"] == "Reptile"
        assert result.data["image"] == "Unknown"
