"""
app/services/dashboard_catalog.py

Task list for one dashboard refresh.

Every task key appears exactly once and carries its own display section, so
the grouped snapshot view is derived from this list rather than maintained
separately.
"""

from __future__ import annotations

from datetime import date
from functools import partial

from app.config import DashboardSettings
from app.connectors import animals, astronomy, crypto, entertainment, facts, games
from app.connectors import holidays, jokes, news, quotes, sports, time_info, weather
from app.connectors.base import FetchClient
from app.domain.api_result import FetchTask

SECTION_ORDER: tuple[str, ...] = (
    "astronomy",
    "weather",
    "crypto",
    "time",
    "facts",
    "holidays",
    "news",
    "sports",
    "entertainment",
    "entertainment_quotes",
    "animals",
    "games_trivia",
)

CACHEABLE_TASKS = frozenset({"astronomy", "crypto", "wikipedia"})


def build_dashboard_tasks(
    settings: DashboardSettings,
    client: FetchClient,
    *,
    today: date | None = None,
    include_extended: bool = False,
) -> list[FetchTask]:
    """
    Build the dashboard task list bound to `client` and the source settings.

    `include_extended` adds the sources that are available as adapters but
    not part of the default dashboard.
    """

    src = settings.sources
    tz = src.timezones

    def task(name: str, label: str, section: str, invoke) -> FetchTask:
        return FetchTask(
            name=name,
            invoke=invoke,
            label=label,
            section=section,
            cacheable=name in CACHEABLE_TASKS,
        )

    tasks = [
        task("astronomy", "NASA APOD", "astronomy",
             partial(astronomy.fetch_astronomy_daily, client, api_key=src.nasa_api_key)),
        task("weather", "Weather", "weather",
             partial(
                 weather.fetch_current_weather,
                 client,
                 latitude=src.weather_latitude,
                 longitude=src.weather_longitude,
                 location_name=src.weather_location,
             )),
        task("crypto", "Cryptocurrency", "crypto",
             partial(crypto.fetch_crypto_prices, client, coins=src.crypto_coins)),
        task("time_ny", "Time (New York)", "time",
             partial(time_info.fetch_current_time, client, timezone=tz["new_york"])),
        task("time_london", "Time (London)", "time",
             partial(time_info.fetch_current_time, client, timezone=tz["london"])),
        task("time_tokyo", "Time (Tokyo)", "time",
             partial(time_info.fetch_current_time, client, timezone=tz["tokyo"])),
        task("facts", "Random Facts", "facts", partial(facts.fetch_random_facts, client)),
        task("holidays", "Holidays", "holidays",
             partial(holidays.fetch_todays_holidays, client, country_code=src.holiday_country, today=today)),
        # news
        task("hacker_news", "Hacker News", "news",
             partial(news.fetch_hacker_news, client, top_n=src.hacker_news_count)),
        task("reddit", "Reddit", "news",
             partial(news.fetch_reddit_top, client, subreddit=src.reddit_subreddit, limit=src.reddit_limit)),
        task("wikipedia", "Wikipedia", "news",
             partial(news.fetch_wikipedia_featured, client, today=today)),
        task("quote", "Quote", "news", partial(quotes.fetch_quote_of_day, client, today=today)),
        task("word", "Word of Day", "news", partial(quotes.fetch_word_of_day, client, today=today)),
        # sports
        task("nba", "NBA Scores", "sports", partial(sports.fetch_nba_scores, client)),
        task("f1", "F1 Standings", "sports", partial(sports.fetch_f1_standings, client)),
        # entertainment
        task("tv_shows", "TV Shows", "entertainment",
             partial(entertainment.fetch_trending_tv, client, today=today)),
        task("movies", "Movies", "entertainment",
             partial(entertainment.fetch_trending_movie, client, today=today)),
        task("music", "Music Charts", "entertainment",
             partial(
                 entertainment.fetch_music_charts,
                 client,
                 limit=src.music_chart_limit,
                 country=src.music_country,
             )),
        # entertainment_quotes
        task("quote_quotable", "Quotable Quote", "entertainment_quotes",
             partial(quotes.fetch_quote, client, source="quotable")),
        task("zen_quote", "Zen Quote", "entertainment_quotes", partial(jokes.fetch_zen_quote, client)),
        task("dad_joke", "Dad Joke", "entertainment_quotes", partial(jokes.fetch_dad_joke, client)),
        task("chuck_joke", "Chuck Norris Joke", "entertainment_quotes",
             partial(jokes.fetch_chuck_norris_joke, client)),
        task("random_joke", "Programming Joke", "entertainment_quotes",
             partial(jokes.fetch_random_joke, client, category="programming")),
        task("random_fact", "Useless Fact", "entertainment_quotes", partial(jokes.fetch_random_fact, client)),
        task("buzz_word", "Buzz Word", "entertainment_quotes", partial(jokes.fetch_buzz_word, client)),
        task("techy_phrase", "Techy Phrase", "entertainment_quotes", partial(jokes.fetch_techy_phrase, client)),
        task("motivational_quote", "Motivational Quote", "entertainment_quotes",
             partial(jokes.fetch_motivational_quote, client)),
        # animals
        task("cat_fact", "Cat Fact", "animals", partial(animals.fetch_cat_fact, client)),
        task("dog_fact", "Dog Fact", "animals", partial(animals.fetch_dog_fact, client)),
        task("random_duck", "Random Duck", "animals", partial(animals.fetch_random_duck, client)),
        task("random_fox", "Random Fox", "animals", partial(animals.fetch_random_fox, client)),
        task("random_dog_img", "Random Dog Image", "animals", partial(animals.fetch_random_dog_image, client)),
        task("meow_facts", "Meow Facts", "animals", partial(animals.fetch_meow_facts, client)),
        task("http_cat", "HTTP Status Cat", "animals", partial(animals.fetch_http_cat, client, status_code=200)),
        task("shibe", "Random Shibe", "animals",
             partial(animals.fetch_random_shibe, client, kind="shibes", count=1)),
        task("zoo_animal", "Zoo Animal", "animals", partial(animals.fetch_zoo_animal, client)),
        # games_trivia
        task("trivia_question", "Trivia Question", "games_trivia",
             partial(games.fetch_trivia_question, client, difficulty=src.trivia_difficulty)),
        task("pokemon", "Pokemon Info", "games_trivia",
             partial(games.fetch_pokemon, client, name_or_id=src.pokemon)),
        task("dnd_spell", "D&D Spell", "games_trivia",
             partial(games.fetch_dnd_spell, client, spell_name=src.dnd_spell)),
        task("dnd_monster", "D&D Monster", "games_trivia",
             partial(games.fetch_dnd_monster, client, monster_name=src.dnd_monster)),
        task("star_wars", "Star Wars Character", "games_trivia",
             partial(games.fetch_star_wars, client, resource="people", item_id=1)),
        task("xkcd_comic", "XKCD Comic", "games_trivia", partial(games.fetch_xkcd_comic, client)),
        task("chess_game", "Chess Player", "games_trivia", partial(games.fetch_chess_game, client)),
        task("ghibli_film", "Studio Ghibli Film", "games_trivia", partial(games.fetch_ghibli_film, client)),
        task("jeopardy_q", "Jeopardy Question", "games_trivia", partial(games.fetch_jeopardy_question, client)),
    ]

    if include_extended:
        tasks.extend(
            [
                task("random_excuse", "Random Excuse", "entertainment_quotes",
                     partial(jokes.fetch_random_excuse, client)),
                task("http_dog", "HTTP Status Dog", "animals",
                     partial(animals.fetch_http_dog, client, status_code=200)),
                task("placeholder_image", "Placeholder Image", "animals",
                     partial(animals.fetch_placeholder_image, client)),
                task("mtg_card", "Magic: The Gathering Card", "games_trivia",
                     partial(games.fetch_mtg_card, client)),
                task("yugioh_card", "Yu-Gi-Oh! Card", "games_trivia",
                     partial(games.fetch_yugioh_card, client)),
                task("inspirational_quote", "Inspirational Quote", "entertainment_quotes",
                     partial(quotes.fetch_inspirational_quote, client, api_key=src.api_ninjas_key)),
                task("programming_quote", "Programming Quote", "entertainment_quotes",
                     partial(quotes.fetch_programming_quote, client)),
                task("random_advice", "Random Advice", "entertainment_quotes",
                     partial(quotes.fetch_random_advice, client)),
                task("random_activity", "Random Activity", "entertainment_quotes",
                     partial(jokes.fetch_random_activity, client, activity_type=src.activity_type)),
                task("fun_fact", "Fun Fact", "facts", partial(facts.fetch_fun_fact, client)),
                task("celebrity_birthday", "Celebrity Birthdays", "facts",
                     partial(facts.fetch_celebrity_birthday, client, today=today)),
                task("random_wiki", "Random Wikipedia Article", "news",
                     partial(news.fetch_random_wiki_article, client)),
                task("movie_info", "Movie Info", "entertainment",
                     partial(entertainment.fetch_movie_info, client, title=src.movie_title)),
                task("digimon", "Digimon Info", "games_trivia",
                     partial(games.fetch_digimon, client, digimon_name=src.digimon)),
            ]
        )

    return tasks
