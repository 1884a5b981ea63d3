"""A player changing teams: draft, add, drop or trade."""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from fflclient.mapping import MISSING, CustomRule, Entity, MappingSchema

# Only these actions carry a price; only drafts carry keeper status.
COSTED_ACTIONS = frozenset({"ADD", "DRAFT"})


def _item_field(name: str):
    """Read ``name`` from the transaction item that concerns ``params.player_id``.

    One transaction lists every player it moves (a waiver claim is an add plus a drop),
    so the item for the requested player decides the action and teams.
    """

    def extract(items, document, params):
        for item in items or ():
            if isinstance(item, dict) and item.get("playerId") == params.player_id:
                return item.get(name, MISSING)
        return MISSING

    return extract


class Transaction(Entity):
    """
    ``from_team_id``/``to_team_id`` of 0 mean the player was not on a roster.
    ``cost`` is only set for ADD and DRAFT, ``is_keeper`` only for DRAFT.
    """

    id: Union[str, int, None] = None
    cost: Optional[int] = None
    scoring_period_id: Optional[int] = None
    action: Optional[str] = None
    from_team_id: Optional[int] = None
    to_team_id: Optional[int] = None
    is_keeper: Optional[bool] = None

    response_map = MappingSchema(
        {
            "id": "id",
            "cost": "bidAmount",
            "scoring_period_id": "scoringPeriodId",
            "action": CustomRule("items", _item_field("type")),
            "from_team_id": CustomRule("items", _item_field("fromTeamId")),
            "to_team_id": CustomRule("items", _item_field("toTeamId")),
            "is_keeper": CustomRule("items", _item_field("isKeeper")),
        }
    )

    @classmethod
    def on_populate(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        action = values.get("action")
        if action not in COSTED_ACTIONS:
            values.pop("cost", None)
        if action != "DRAFT":
            values.pop("is_keeper", None)
        return values
