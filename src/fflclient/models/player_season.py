"""A player's stats and roster moves over one season."""

from __future__ import annotations

from typing import Dict, List, Optional

from fflclient.mapping import ConstructionParams, CustomRule, Entity, MappingSchema, build_many, from_params, nested
from fflclient.models.player import Player
from fflclient.models.transaction import Transaction
from fflclient.stats import StatSelector, StatsBundle, StatSource, StatSplitType, select_bundle, weekly_bundles


def _stat_records(raw):
    if isinstance(raw, dict):
        return raw.get("stats") or []
    return []


def _season_bundle(stat_source_id: int):
    def extract(raw, document, params):
        selector = StatSelector(
            season_id=params.season_id,
            stat_source_id=stat_source_id,
            stat_split_type_id=StatSplitType.SEASON,
        )
        return select_bundle(_stat_records(raw), selector, params.scoring_rule)

    return extract


def _weekly_actual(raw, document, params):
    return weekly_bundles(_stat_records(raw), params.season_id, StatSource.REAL, params.scoring_rule)


def _transactions(raw, document, params):
    if raw is None:
        return None
    player = document.get("player") or {}
    transaction_params = ConstructionParams(
        league_id=params.league_id,
        season_id=params.season_id,
        player_id=player.get("id", params.player_id),
    )
    return build_many(Transaction, raw, transaction_params)


class PlayerSeason(Entity):
    """
    ``weekly_actual`` only holds scoring periods with data; bye weeks and unplayed weeks
    are absent keys rather than empty bundles.
    """

    player: Player
    season_id: int
    season_actual: StatsBundle = StatsBundle()
    season_projected: StatsBundle = StatsBundle()
    weekly_actual: Dict[int, StatsBundle] = {}
    transactions: Optional[List[Transaction]] = None

    response_map = MappingSchema(
        {
            "player": CustomRule("player", nested(Player)),
            "season_id": from_params("season_id"),
            "season_actual": CustomRule("player", _season_bundle(StatSource.REAL)),
            "season_projected": CustomRule("player", _season_bundle(StatSource.PROJECTED)),
            "weekly_actual": CustomRule("player", _weekly_actual),
            "transactions": CustomRule("transactions", _transactions),
        }
    )
