"""Command-line interface for fetching league data as JSON."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Any

from fflclient.client import Client
from fflclient.config import ClientSettings, SeasonEras
from fflclient.errors import FantasyAPIError
from fflclient.mapping import Entity


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch fantasy football league data")
    parser.add_argument(
        "--league-id",
        type=int,
        default=os.getenv("FFL_LEAGUE_ID"),
        help="League id (defaults to $FFL_LEAGUE_ID)",
    )
    parser.add_argument("--espn-s2", default=os.getenv("ESPN_S2"), help="espn_s2 cookie for private leagues")
    parser.add_argument("--swid", default=os.getenv("ESPN_SWID"), help="SWID cookie for private leagues")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (e.g., INFO, DEBUG)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    league = subparsers.add_parser("league", help="League settings for a season")
    league.add_argument("season", type=int)

    teams = subparsers.add_parser("teams", help="Teams and rosters at a scoring period")
    teams.add_argument("season", type=int)
    teams.add_argument("scoring_period", type=int)

    players = subparsers.add_parser("players", help="Player pool for a season")
    players.add_argument("season", type=int)
    players.add_argument("--limit", type=int, default=2000)
    players.add_argument("--offset", type=int, default=0)

    boxscores = subparsers.add_parser("boxscores", help="Matchups and lineups for one week")
    boxscores.add_argument("season", type=int)
    boxscores.add_argument("matchup_period", type=int)
    boxscores.add_argument("scoring_period", type=int)

    scoreboard = subparsers.add_parser("historical-scoreboard", help="Matchup scores for a week of a past season")
    scoreboard.add_argument("season", type=int)
    scoreboard.add_argument("matchup_period", type=int)
    scoreboard.add_argument("scoring_period", type=int)

    free_agents = subparsers.add_parser("free-agents", help="Free agents at a scoring period")
    free_agents.add_argument("season", type=int)
    free_agents.add_argument("scoring_period", type=int)

    player_season = subparsers.add_parser("player-season", help="A player's season stats and transactions")
    player_season.add_argument("season", type=int)
    player_season.add_argument("player_id", type=int)

    games = subparsers.add_parser("games", help="NFL games between two YYYYMMDD dates")
    games.add_argument("start_date")
    games.add_argument("end_date")

    args = parser.parse_args(argv)
    if args.league_id is None and args.command != "games":
        parser.error("--league-id or $FFL_LEAGUE_ID is required")
    return args


def _to_json(result: Any) -> Any:
    if isinstance(result, Entity):
        return result.model_dump(mode="json", exclude_unset=True)
    if isinstance(result, list):
        return [_to_json(item) for item in result]
    return result


async def _run(args: argparse.Namespace) -> Any:
    client = Client(
        int(args.league_id or 0),
        espn_s2=args.espn_s2,
        swid=args.swid,
        settings=ClientSettings.from_env(),
        eras=SeasonEras.from_env(),
    )
    async with client:
        if args.command == "league":
            return await client.get_league_info(args.season)
        if args.command == "teams":
            return await client.get_teams_at_week(args.season, args.scoring_period)
        if args.command == "players":
            return await client.get_all_players(args.season, limit=args.limit, offset=args.offset)
        if args.command == "boxscores":
            return await client.get_boxscore_for_week(args.season, args.matchup_period, args.scoring_period)
        if args.command == "historical-scoreboard":
            return await client.get_historical_scoreboard_for_week(
                args.season, args.matchup_period, args.scoring_period
            )
        if args.command == "free-agents":
            return await client.get_free_agents(args.season, args.scoring_period)
        if args.command == "player-season":
            return await client.get_player_season(args.season, args.player_id)
        if args.command == "games":
            return await client.get_nfl_games_for_period(args.start_date, args.end_date)
    raise ValueError(f"Unknown command {args.command!r}")


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        result = asyncio.run(_run(args))
    except FantasyAPIError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(json.dumps(_to_json(result), indent=2))


if __name__ == "__main__":
    main()
