"""NFL player as described by the fantasy player pool."""

from __future__ import annotations

from typing import List, Optional

from fflclient.mapping import MISSING, CustomRule, Entity, MappingSchema
from fflclient.models.constants import LINEUP_SLOTS, POSITIONS, PRO_TEAMS


def _label(table):
    def extract(raw, document, params):
        if raw is None:
            return MISSING
        return table.get(raw)

    return extract


def _eligible_positions(raw, document, params):
    if raw is None:
        return MISSING
    return [LINEUP_SLOTS[slot] for slot in raw if slot in LINEUP_SLOTS]


class Player(Entity):
    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    jersey_number: Optional[str] = None
    pro_team_id: Optional[int] = None
    pro_team: Optional[str] = None
    default_position_id: Optional[int] = None
    default_position: Optional[str] = None
    eligible_positions: List[str] = []
    injured: Optional[bool] = None
    injury_status: Optional[str] = None
    droppable: Optional[bool] = None
    average_draft_position: Optional[float] = None
    auction_value_average: Optional[float] = None
    percent_change: Optional[float] = None
    percent_owned: Optional[float] = None
    percent_started: Optional[float] = None

    response_map = MappingSchema(
        {
            "id": "id",
            "first_name": "firstName",
            "last_name": "lastName",
            "full_name": "fullName",
            "jersey_number": "jersey",
            "pro_team_id": "proTeamId",
            "pro_team": CustomRule("proTeamId", _label(PRO_TEAMS)),
            "default_position_id": "defaultPositionId",
            "default_position": CustomRule("defaultPositionId", _label(POSITIONS)),
            "eligible_positions": CustomRule("eligibleSlots", _eligible_positions),
            "injured": "injured",
            "injury_status": "injuryStatus",
            "droppable": "droppable",
            "average_draft_position": "ownership.averageDraftPosition",
            "auction_value_average": "ownership.auctionValueAverage",
            "percent_change": "ownership.percentChange",
            "percent_owned": "ownership.percentOwned",
            "percent_started": "ownership.percentStarted",
        }
    )
