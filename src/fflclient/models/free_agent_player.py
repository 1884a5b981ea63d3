"""A player available on waivers or in free agency for a scoring period."""

from __future__ import annotations

from typing import Optional

from fflclient.mapping import CustomRule, Entity, MappingSchema, from_params, nested
from fflclient.models.player import Player
from fflclient.stats import StatSelector, StatsBundle, StatSource, StatSplitType, select_bundle


def _period_bundle(stat_source_id: int):
    """Stats for the requested scoring period, or the season when no period was given."""

    def extract(raw, document, params):
        if params.scoring_period_id:
            selector = StatSelector(
                season_id=params.season_id,
                stat_source_id=stat_source_id,
                stat_split_type_id=StatSplitType.WEEKLY,
                scoring_period_id=params.scoring_period_id,
            )
        else:
            selector = StatSelector(
                season_id=params.season_id,
                stat_source_id=stat_source_id,
                stat_split_type_id=StatSplitType.SEASON,
            )
        records = raw.get("stats") if isinstance(raw, dict) else None
        return select_bundle(records, selector, params.scoring_rule)

    return extract


class FreeAgentPlayer(Entity):
    player: Player
    status: Optional[str] = None
    season_id: Optional[int] = None
    scoring_period_id: Optional[int] = None
    projected: StatsBundle = StatsBundle()
    actual: StatsBundle = StatsBundle()

    response_map = MappingSchema(
        {
            "player": CustomRule("player", nested(Player)),
            "status": "status",
            "season_id": from_params("season_id"),
            "scoring_period_id": from_params("scoring_period_id"),
            "projected": CustomRule("player", _period_bundle(StatSource.PROJECTED)),
            "actual": CustomRule("player", _period_bundle(StatSource.REAL)),
        }
    )
