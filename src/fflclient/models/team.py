"""A fantasy team within a league, with its record and roster."""

from __future__ import annotations

from typing import List, Optional

from fflclient.mapping import MISSING, CustomRule, Entity, MappingSchema, build
from fflclient.models.player import Player


def _name(raw, document, params):
    if document.get("name"):
        return document["name"]
    parts = [document.get("location"), document.get("nickname")]
    parts = [part.strip() for part in parts if part]
    return " ".join(parts) if parts else MISSING


def _roster(raw, document, params):
    players: List[Player] = []
    for entry in raw or ():
        player = ((entry or {}).get("playerPoolEntry") or {}).get("player")
        if player:
            players.append(build(Player, player, params))
    return players


class Team(Entity):
    id: Optional[int] = None
    abbreviation: Optional[str] = None
    location: Optional[str] = None
    nickname: Optional[str] = None
    name: Optional[str] = None
    logo_url: Optional[str] = None
    wins: Optional[int] = None
    losses: Optional[int] = None
    ties: Optional[int] = None
    points_for: Optional[float] = None
    points_against: Optional[float] = None
    winning_percentage: Optional[float] = None
    playoff_seed: Optional[int] = None
    final_standings_position: Optional[int] = None
    roster: List[Player] = []

    response_map = MappingSchema(
        {
            "id": "id",
            "abbreviation": "abbrev",
            "location": "location",
            "nickname": "nickname",
            "name": CustomRule(None, _name),
            "logo_url": "logo",
            "wins": "record.overall.wins",
            "losses": "record.overall.losses",
            "ties": "record.overall.ties",
            "points_for": "record.overall.pointsFor",
            "points_against": "record.overall.pointsAgainst",
            "winning_percentage": "record.overall.percentage",
            "playoff_seed": "playoffSeed",
            "final_standings_position": "rankCalculatedFinal",
            "roster": CustomRule("roster.entries", _roster),
        }
    )
