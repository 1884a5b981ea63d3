"""A real-life NFL game from the fantasy games feed."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from fflclient.mapping import MISSING, CustomRule, Entity, MappingSchema, build


class NFLGameTeam(Entity):
    id: Union[int, str, None] = None
    team: Optional[str] = None
    abbreviation: Optional[str] = None
    record: Optional[str] = None
    score: Optional[int] = None

    response_map = MappingSchema(
        {
            "id": "id",
            "team": "name",
            "abbreviation": "abbreviation",
            "record": "record",
            "score": "score",
        }
    )


def _side(home_away: str):
    def extract(raw, document, params):
        for competitor in raw or ():
            if isinstance(competitor, dict) and competitor.get("homeAway") == home_away:
                return build(NFLGameTeam, competitor, params)
        return MISSING

    return extract


class NFLGame(Entity):
    id: Union[int, str, None] = None
    start_time: Optional[datetime] = None
    quarter: Optional[int] = None
    clock: Union[float, str, None] = None
    odds: Optional[str] = None
    broadcaster: Optional[str] = None
    game_status: Optional[str] = None
    home_team: Optional[NFLGameTeam] = None
    away_team: Optional[NFLGameTeam] = None

    response_map = MappingSchema(
        {
            "id": "id",
            "start_time": "date",
            "quarter": "period",
            "clock": "clock",
            "odds": "odds",
            "broadcaster": "network",
            "game_status": "fullStatus.type.description",
            "home_team": CustomRule("competitors", _side("home")),
            "away_team": CustomRule("competitors", _side("away")),
        }
    )
