"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

_ALLOWED_CACHE_BACKENDS = {"memory", "sql", "none"}

DEFAULT_USER_AGENT = "CurrentInfoDashboard/1.0 (Python)"
DEFAULT_TIMEZONES: dict[str, str] = {
    "new_york": "America/New_York",
    "london": "Europe/London",
    "tokyo": "Asia/Tokyo",
}


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    project_root = Path(__file__).resolve().parents[1]
    for filename in (".env", ".env.local"):
        env_path = project_root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    """
    Read a float from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """
    Read a comma-separated list from environment variables with fallback.
    """

    raw_value = _get_str_env(name, "")
    if not raw_value:
        return default
    items = tuple(item.strip() for item in raw_value.split(",") if item.strip())
    return items or default


@dataclass(frozen=True)
class FetchSettings:
    """
    Shared HTTP behavior for every upstream source call.
    """

    timeout_seconds: float = 8.0
    max_attempts: int = 2
    backoff_initial_seconds: float = 0.3
    backoff_multiplier: float = 1.5
    user_agent: str = DEFAULT_USER_AGENT


@dataclass(frozen=True)
class AggregationSettings:
    """
    Runtime settings for the concurrent fetch orchestrator.
    """

    parallel_workers: int = 6
    run_timeout_seconds: float | None = 60.0
    cache_ttl_seconds: float = 900.0
    cache_backend: str = "memory"
    cache_url: str = "sqlite:///cache/api_cache.sqlite"
    sequential: bool = False
    include_extended: bool = False

    @property
    def effective_workers(self) -> int:
        if self.sequential:
            return 1
        return max(1, self.parallel_workers)


@dataclass(frozen=True)
class SourceSettings:
    """
    Default coordinates, coin lists and other per-source parameters.
    """

    weather_latitude: float = 40.7128
    weather_longitude: float = -74.0060
    weather_location: str = "New York"
    crypto_coins: tuple[str, ...] = ("bitcoin", "ethereum", "cardano")
    timezones: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_TIMEZONES))
    holiday_country: str = "US"
    hacker_news_count: int = 5
    reddit_subreddit: str = "all"
    reddit_limit: int = 5
    music_chart_limit: int = 10
    music_country: str = "us"
    nasa_api_key: str = "DEMO_KEY"
    trivia_difficulty: str = "medium"
    pokemon: str = "pikachu"
    dnd_spell: str = "fireball"
    dnd_monster: str = "dragon"
    digimon: str = "agumon"
    movie_title: str = "Inception"
    activity_type: str = "all"
    api_ninjas_key: str = ""


@dataclass(frozen=True)
class DashboardSettings:
    """
    Complete configuration value threaded through the aggregation stack.
    """

    fetch: FetchSettings = field(default_factory=FetchSettings)
    aggregation: AggregationSettings = field(default_factory=AggregationSettings)
    sources: SourceSettings = field(default_factory=SourceSettings)


@lru_cache(maxsize=1)
def get_fetch_settings() -> FetchSettings:
    """
    Return shared fetch settings from environment variables.
    """

    return FetchSettings(
        timeout_seconds=max(1.0, _get_float_env("DASHBOARD_TIMEOUT_SECONDS", 8.0)),
        max_attempts=max(1, _get_int_env("DASHBOARD_MAX_ATTEMPTS", 2)),
        backoff_initial_seconds=max(0.0, _get_float_env("DASHBOARD_BACKOFF_INITIAL_SECONDS", 0.3)),
        backoff_multiplier=max(1.0, _get_float_env("DASHBOARD_BACKOFF_MULTIPLIER", 1.5)),
        user_agent=_get_str_env("DASHBOARD_USER_AGENT", DEFAULT_USER_AGENT),
    )


@lru_cache(maxsize=1)
def get_aggregation_settings() -> AggregationSettings:
    """
    Return aggregation settings from environment variables.
    """

    backend = _get_str_env("DASHBOARD_CACHE_BACKEND", "memory").lower()
    if backend not in _ALLOWED_CACHE_BACKENDS:
        raise RuntimeError(
            f"DASHBOARD_CACHE_BACKEND '{backend}' is not valid. "
            f"Allowed values: {sorted(_ALLOWED_CACHE_BACKENDS)}."
        )

    run_timeout = _get_float_env("DASHBOARD_RUN_TIMEOUT_SECONDS", 60.0)
    return AggregationSettings(
        parallel_workers=max(1, _get_int_env("DASHBOARD_PARALLEL_WORKERS", 6)),
        run_timeout_seconds=run_timeout if run_timeout > 0 else None,
        cache_ttl_seconds=max(0.0, _get_float_env("DASHBOARD_CACHE_TTL_SECONDS", 900.0)),
        cache_backend=backend,
        cache_url=_get_str_env("DASHBOARD_CACHE_URL", "sqlite:///cache/api_cache.sqlite"),
        sequential=_get_bool_env("DASHBOARD_SEQUENTIAL", False),
        include_extended=_get_bool_env("DASHBOARD_INCLUDE_EXTENDED", False),
    )


@lru_cache(maxsize=1)
def get_source_settings() -> SourceSettings:
    """
    Return per-source defaults from environment variables.
    """

    return SourceSettings(
        weather_latitude=_get_float_env("WEATHER_LATITUDE", 40.7128),
        weather_longitude=_get_float_env("WEATHER_LONGITUDE", -74.0060),
        weather_location=_get_str_env("WEATHER_LOCATION", "New York"),
        crypto_coins=_get_list_env("CRYPTO_COINS", ("bitcoin", "ethereum", "cardano")),
        timezones={
            "new_york": _get_str_env("TIMEZONE_NEW_YORK", DEFAULT_TIMEZONES["new_york"]),
            "london": _get_str_env("TIMEZONE_LONDON", DEFAULT_TIMEZONES["london"]),
            "tokyo": _get_str_env("TIMEZONE_TOKYO", DEFAULT_TIMEZONES["tokyo"]),
        },
        holiday_country=_get_str_env("HOLIDAY_COUNTRY", "US"),
        hacker_news_count=max(1, _get_int_env("HACKER_NEWS_COUNT", 5)),
        reddit_subreddit=_get_str_env("REDDIT_SUBREDDIT", "all"),
        reddit_limit=max(1, _get_int_env("REDDIT_LIMIT", 5)),
        music_chart_limit=max(1, _get_int_env("MUSIC_CHART_LIMIT", 10)),
        music_country=_get_str_env("MUSIC_COUNTRY", "us"),
        nasa_api_key=_get_str_env("NASA_API_KEY", "DEMO_KEY"),
        trivia_difficulty=_get_str_env("TRIVIA_DIFFICULTY", "medium"),
        pokemon=_get_str_env("POKEMON_NAME", "pikachu"),
        dnd_spell=_get_str_env("DND_SPELL", "fireball"),
        dnd_monster=_get_str_env("DND_MONSTER", "dragon"),
        digimon=_get_str_env("DIGIMON_NAME", "agumon"),
        movie_title=_get_str_env("MOVIE_TITLE", "Inception"),
        activity_type=_get_str_env("ACTIVITY_TYPE", "all"),
        api_ninjas_key=_get_str_env("API_NINJAS_KEY", ""),
    )


@lru_cache(maxsize=1)
def get_dashboard_settings() -> DashboardSettings:
    """
    Return the full dashboard configuration.
    """

    return DashboardSettings(
        fetch=get_fetch_settings(),
        aggregation=get_aggregation_settings(),
        sources=get_source_settings(),
    )
