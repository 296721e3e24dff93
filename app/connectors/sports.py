"""
app/connectors/sports.py

NBA scoreboard (ESPN) and Formula 1 driver standings (Ergast).
"""

from __future__ import annotations

from typing import Any

from app.connectors.base import FetchClient
from app.connectors.fields import dig, first_item, int_field, list_field, number_field, text_field
from app.domain.api_result import ApiResult, Failure, Success, map_success

NBA_SCOREBOARD_URL = "https://site.api.espn.com/apis/site/v2/sports/basketball/nba/scoreboard"
F1_STANDINGS_URL = "https://ergast.com/api/f1/{season}/driverStandings.json"


def fetch_nba_scores(client: FetchClient) -> ApiResult:
    result = client.fetch(NBA_SCOREBOARD_URL, "NBA Scores")
    return map_success(result, _reshape_scoreboard)


def _reshape_scoreboard(payload: Any) -> dict[str, Any]:
    season = dig(payload, "season", "type", default="Unknown")
    events = list_field(payload, "events")
    if not events:
        return {"has_games": False, "message": "No NBA games scheduled today", "season": season}

    games = [game for game in (_reshape_game(event) for event in events) if game is not None]
    if not games:
        return {
            "has_games": True,
            "message": "Games found but failed to parse details",
            "season": season,
        }
    return {"has_games": True, "games": games, "season": season}


def _reshape_game(event: Any) -> dict[str, str] | None:
    competition = first_item(event, "competitions")
    competitors = [item for item in list_field(competition, "competitors") if isinstance(item, dict)]
    home = next((item for item in competitors if item.get("homeAway") == "home"), None)
    away = next((item for item in competitors if item.get("homeAway") == "away"), None)
    if home is None or away is None:
        return None
    return {
        "matchup": f"{text_field(away, 'team', 'displayName')} @ {text_field(home, 'team', 'displayName')}",
        "score": f"{text_field(away, 'score', default='0')} - {text_field(home, 'score', default='0')}",
        "status": text_field(competition, "status", "type", "description"),
    }


def fetch_f1_standings(client: FetchClient, *, season: str = "current") -> ApiResult:
    """
    Top 10 drivers of the season's latest standings list.
    """

    result = client.fetch(F1_STANDINGS_URL.format(season=season), "Formula 1")
    if not isinstance(result, Success):
        return result

    standings_list = first_item(result.data, "MRData", "StandingsTable", "StandingsLists")
    if not standings_list:
        return Failure(
            source="Formula 1",
            error="No standings data available",
            attempts=result.attempts,
        )

    drivers = [row for row in list_field(standings_list, "DriverStandings") if isinstance(row, dict)]
    return map_success(
        result,
        lambda _payload: {
            "season": text_field(standings_list, "season", default=season),
            "round": text_field(standings_list, "round", default="?"),
            "standings": [
                {
                    "position": int_field(row, "position"),
                    "driver": " ".join(
                        part
                        for part in (
                            text_field(row, "Driver", "givenName", default=""),
                            text_field(row, "Driver", "familyName", default=""),
                        )
                        if part
                    )
                    or "Unknown",
                    "team": text_field(row, "Constructors", 0, "name"),
                    "points": float(number_field(row, "points")),
                    "wins": int_field(row, "wins"),
                }
                for row in drivers[:10]
            ],
        },
    )
