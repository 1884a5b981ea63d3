"""League configuration: draft, roster and schedule settings."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Optional

from fflclient.mapping import MISSING, CustomRule, Entity, MappingSchema, from_params, nested
from fflclient.models.constants import LINEUP_SLOTS, POSITIONS


def _epoch_ms(raw, document, params):
    if raw is None:
        return MISSING
    return datetime.fromtimestamp(raw / 1000, tz=timezone.utc)


def _slot_counts(table):
    def extract(raw, document, params):
        if not isinstance(raw, dict):
            return MISSING
        counts: Dict[str, int] = {}
        for key, count in raw.items():
            try:
                label = table.get(int(key))
            except (TypeError, ValueError):
                continue
            if label is not None:
                counts[label] = count
        return counts

    return extract


def _playoff_matchups(raw, document, params):
    # matchupPeriods lists every matchup, regular season first.
    regular = document.get("matchupPeriodCount")
    if not isinstance(raw, dict) or regular is None:
        return MISSING
    return max(len(raw) - regular, 0)


class DraftSettings(Entity):
    date: Optional[datetime] = None
    type: Optional[str] = None
    time_per_selection: Optional[int] = None
    can_trade_draft_picks: Optional[bool] = None

    response_map = MappingSchema(
        {
            "date": CustomRule("date", _epoch_ms),
            "type": "type",
            "time_per_selection": "timePerSelection",
            "can_trade_draft_picks": "isTradingEnabled",
        }
    )


class RosterSettings(Entity):
    lineup_slot_counts: Dict[str, int] = {}
    position_limits: Dict[str, int] = {}
    locktime: Optional[str] = None

    response_map = MappingSchema(
        {
            "lineup_slot_counts": CustomRule("lineupSlotCounts", _slot_counts(LINEUP_SLOTS)),
            "position_limits": CustomRule("positionLimits", _slot_counts(POSITIONS)),
            "locktime": "lineupLocktimeType",
        }
    )


class ScheduleSettings(Entity):
    number_of_regular_season_matchups: Optional[int] = None
    regular_season_matchup_length: Optional[int] = None
    number_of_playoff_matchups: Optional[int] = None
    playoff_matchup_length: Optional[int] = None
    number_of_playoff_teams: Optional[int] = None

    response_map = MappingSchema(
        {
            "number_of_regular_season_matchups": "matchupPeriodCount",
            "regular_season_matchup_length": "matchupPeriodLength",
            "number_of_playoff_matchups": CustomRule("matchupPeriods", _playoff_matchups),
            "playoff_matchup_length": "playoffMatchupPeriodLength",
            "number_of_playoff_teams": "playoffTeamCount",
        }
    )


class League(Entity):
    league_id: Optional[int] = None
    season_id: Optional[int] = None
    name: Optional[str] = None
    size: Optional[int] = None
    is_public: Optional[bool] = None
    draft_settings: Optional[DraftSettings] = None
    roster_settings: Optional[RosterSettings] = None
    schedule_settings: Optional[ScheduleSettings] = None

    response_map = MappingSchema(
        {
            "league_id": from_params("league_id"),
            "season_id": from_params("season_id"),
            "name": "name",
            "size": "size",
            "is_public": "isPublic",
            "draft_settings": CustomRule("draftSettings", nested(DraftSettings)),
            "roster_settings": CustomRule("rosterSettings", nested(RosterSettings)),
            "schedule_settings": CustomRule("scheduleSettings", nested(ScheduleSettings)),
        }
    )
