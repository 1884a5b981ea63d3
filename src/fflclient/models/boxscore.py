"""A head-to-head matchup from the league schedule, with both lineups."""

from __future__ import annotations

from typing import List, Optional

from fflclient.mapping import MISSING, CustomRule, Entity, MappingSchema, build_many, from_params, nested
from fflclient.models.constants import LINEUP_SLOTS
from fflclient.models.player import Player
from fflclient.stats import ParsedStats, StatSelector, StatSource, StatSplitType, select_stats


def _slot(raw, document, params):
    if raw is None:
        return MISSING
    return LINEUP_SLOTS.get(raw)


def _period_points(raw, document, params):
    if not isinstance(raw, dict) or params.season_id is None or not params.scoring_period_id:
        return MISSING
    selector = StatSelector(
        season_id=params.season_id,
        stat_source_id=StatSource.REAL,
        stat_split_type_id=StatSplitType.WEEKLY,
        scoring_period_id=params.scoring_period_id,
    )
    points = select_stats(raw.get("stats"), True, selector, params.scoring_rule)
    return MISSING if points is None else points


class BoxscorePlayer(Entity):
    player: Optional[Player] = None
    position: Optional[str] = None
    total_points: Optional[float] = None
    points: Optional[ParsedStats] = None

    response_map = MappingSchema(
        {
            "player": CustomRule("playerPoolEntry.player", nested(Player)),
            "position": CustomRule("lineupSlotId", _slot),
            "total_points": "playerPoolEntry.appliedStatTotal",
            "points": CustomRule("playerPoolEntry.player", _period_points),
        }
    )


def _roster(raw, document, params):
    if raw is None:
        return MISSING
    return build_many(BoxscorePlayer, raw, params)


class BoxscoreTeam(Entity):
    """One side of a matchup; the historical scoreboard carries no ``roster``."""

    team_id: Optional[int] = None
    score: Optional[float] = None
    roster: List[BoxscorePlayer] = []

    response_map = MappingSchema(
        {
            "team_id": "teamId",
            "score": "totalPoints",
            "roster": CustomRule("rosterForCurrentScoringPeriod.entries", _roster),
        }
    )


class Boxscore(Entity):
    id: Optional[int] = None
    season_id: Optional[int] = None
    matchup_period_id: Optional[int] = None
    winner: Optional[str] = None
    home_team: Optional[BoxscoreTeam] = None
    away_team: Optional[BoxscoreTeam] = None

    response_map = MappingSchema(
        {
            "id": "id",
            "season_id": from_params("season_id"),
            "matchup_period_id": "matchupPeriodId",
            "winner": "winner",
            "home_team": CustomRule("home", nested(BoxscoreTeam)),
            "away_team": CustomRule("away", nested(BoxscoreTeam)),
        }
    )
