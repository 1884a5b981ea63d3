"""Async client for a fantasy football league's data."""

from __future__ import annotations

import json
import logging
from typing import Any, List, Mapping, Optional

from fflclient.config import ClientSettings, SeasonEras
from fflclient.mapping import ConstructionParams, build, build_many
from fflclient.models import Boxscore, FreeAgentPlayer, League, NFLGame, Player, PlayerSeason, Team
from fflclient.reconcile import SeasonReconciler
from fflclient.stats import MAX_SCORING_PERIOD_ID, ScoringRule
from fflclient.transport import HttpxFetcher, JSONFetcher


logger = logging.getLogger(__name__)

FILTER_HEADER = "x-fantasy-filter"


def _filter_header(players_filter: Mapping[str, Any]) -> dict[str, str]:
    return {FILTER_HEADER: json.dumps({"players": players_filter})}


def _first_document(data: Any) -> Optional[Mapping[str, Any]]:
    # The history endpoint answers with one document per matching season.
    return data[0] if isinstance(data, list) and data else None


def _matchups(document: Any, matchup_period_id: int) -> List[Mapping[str, Any]]:
    schedule = document.get("schedule") if isinstance(document, Mapping) else None
    return [
        matchup
        for matchup in schedule or ()
        if isinstance(matchup, Mapping) and matchup.get("matchupPeriodId") == matchup_period_id
    ]


def _first_player(document: Any) -> Optional[Mapping[str, Any]]:
    players = document.get("players") if isinstance(document, Mapping) else None
    if not players:
        return None
    return players[0]


class Client:
    """Retrieval operations for one league.

    Private leagues need the ``espn_s2`` and ``SWID`` cookies; both must be supplied for
    either to be sent. Every operation is a coroutine returning entities from
    ``fflclient.models``.
    """

    def __init__(
        self,
        league_id: int,
        *,
        espn_s2: str | None = None,
        swid: str | None = None,
        fetcher: JSONFetcher | None = None,
        settings: ClientSettings | None = None,
        eras: SeasonEras | None = None,
        scoring_rule: ScoringRule | None = None,
    ):
        self.league_id = league_id
        self.settings = settings or ClientSettings()
        self.eras = eras or SeasonEras()
        self.scoring_rule = scoring_rule
        self._owns_fetcher = fetcher is None
        self._fetcher = fetcher or HttpxFetcher(settings=self.settings)
        self.espn_s2: str | None = None
        self.swid: str | None = None
        self.set_cookies(espn_s2=espn_s2, swid=swid)
        self._reconciler = SeasonReconciler(
            self._fetch_modern_player_season,
            self._fetch_historical_player_season,
            self.eras,
        )

    def set_cookies(self, *, espn_s2: str | None, swid: str | None) -> None:
        if espn_s2 and swid:
            self.espn_s2 = espn_s2
            self.swid = swid

    def _headers(self, extra: Mapping[str, str] | None = None) -> dict[str, str]:
        headers = dict(extra or {})
        if self.espn_s2 and self.swid:
            headers["Cookie"] = f"espn_s2={self.espn_s2}; SWID={self.swid};"
        return headers

    def _params(self, **kwargs: Any) -> ConstructionParams:
        return ConstructionParams(league_id=self.league_id, scoring_rule=self.scoring_rule, **kwargs)

    async def _get(self, url: str, params: Mapping[str, Any] | None = None, headers: Mapping[str, str] | None = None) -> Any:
        return await self._fetcher.fetch_json(url, params=params, headers=self._headers(headers))

    async def get_league_info(self, season_id: int) -> League:
        data = await self._get(self.settings.league_url(season_id, self.league_id), {"view": "mSettings"})
        return build(League, data.get("settings") or {}, self._params(season_id=season_id))

    async def get_teams_at_week(self, season_id: int, scoring_period_id: int) -> List[Team]:
        data = await self._get(
            self.settings.league_url(season_id, self.league_id),
            {"scoringPeriodId": scoring_period_id, "view": ["mRoster", "mTeam"]},
        )
        params = self._params(season_id=season_id, scoring_period_id=scoring_period_id)
        return build_many(Team, data.get("teams"), params)

    async def get_all_players(self, season_id: int, limit: int = 2000, offset: int = 0) -> List[Player]:
        headers = _filter_header(
            {
                "limit": limit,
                "offset": offset,
                # Some sort is required or the endpoint answers 400.
                "sortDraftRanks": {"sortPriority": 100, "sortAsc": True, "value": "STANDARD"},
                "filterRanksForScoringPeriodIds": {"value": [-1]},
                "filterStatsForTopScoringPeriodIds": {"value": 1},
            }
        )
        data = await self._get(
            self.settings.league_url(season_id, self.league_id),
            {"view": "kona_player_info"},
            headers,
        )
        return build_many(Player, data.get("players"), self._params(season_id=season_id))

    async def get_boxscore_for_week(
        self, season_id: int, matchup_period_id: int, scoring_period_id: int
    ) -> List[Boxscore]:
        """Matchups of one week with lineups.

        ``matchup_period_id`` and ``scoring_period_id`` must refer to the same week; the
        upstream answers with the whole schedule, filtered here by matchup period.
        """

        data = await self._get(
            self.settings.league_url(season_id, self.league_id),
            {"scoringPeriodId": scoring_period_id, "view": ["mMatchup", "mMatchupScore"]},
        )
        params = self._params(season_id=season_id, scoring_period_id=scoring_period_id)
        return build_many(Boxscore, _matchups(data, matchup_period_id), params)

    async def get_historical_scoreboard_for_week(
        self, season_id: int, matchup_period_id: int, scoring_period_id: int
    ) -> List[Boxscore]:
        """Matchups of one week of a completed season, without lineups."""

        data = await self._get(
            self.settings.history_league_url(self.league_id),
            {
                "scoringPeriodId": scoring_period_id,
                "seasonId": season_id,
                "view": ["mMatchupScore", "mScoreboard", "mSettings", "mTopPerformers", "mTeam"],
            },
        )
        params = self._params(season_id=season_id, scoring_period_id=scoring_period_id)
        return build_many(Boxscore, _matchups(_first_document(data), matchup_period_id), params)

    async def get_free_agents(self, season_id: int, scoring_period_id: int) -> List[FreeAgentPlayer]:
        """Free agents and waiver-wire players; period 0 is the preseason."""

        headers = _filter_header(
            {
                "filterStatus": {"value": ["FREEAGENT", "WAIVERS"]},
                "limit": 2000,
                "sortPercOwned": {"sortAsc": False, "sortPriority": 1},
            }
        )
        data = await self._get(
            self.settings.league_url(season_id, self.league_id),
            {"scoringPeriodId": scoring_period_id, "view": "kona_player_info"},
            headers,
        )
        params = self._params(season_id=season_id, scoring_period_id=scoring_period_id)
        return build_many(FreeAgentPlayer, data.get("players"), params)

    async def get_nfl_games_for_period(self, start_date: str, end_date: str) -> List[NFLGame]:
        """Games between two ``YYYYMMDD`` dates, inclusive."""

        data = await self._get(
            self.settings.games_url,
            {"dates": f"{start_date}-{end_date}", "pbpOnly": "true"},
        )
        return build_many(NFLGame, data.get("events"), self._params())

    async def get_player_season(self, season_id: int, player_id: int) -> PlayerSeason:
        return await self._reconciler.reconcile(season_id, player_id)

    async def _fetch_modern_player_season(self, season_id: int, player_id: int) -> Optional[PlayerSeason]:
        headers = _filter_header(
            {
                "filterIds": {"value": [player_id]},
                "filterStatsForTopScoringPeriodIds": {
                    "value": MAX_SCORING_PERIOD_ID,
                    # "00" prefixes season actuals, "01" season projections.
                    "additionalValue": [f"00{season_id}", f"01{season_id}"],
                },
            }
        )
        data = await self._get(
            self.settings.league_url(season_id, self.league_id),
            {"view": "kona_playercard"},
            headers,
        )
        player = _first_player(data)
        if player is None:
            return None
        return build(PlayerSeason, player, self._params(season_id=season_id, player_id=player_id))

    async def _fetch_historical_player_season(self, season_id: int, player_id: int) -> Optional[PlayerSeason]:
        headers = _filter_header({"filterIds": {"value": [player_id]}})
        data = await self._get(
            self.settings.history_league_url(self.league_id),
            {"view": "kona_playercard", "seasonId": season_id},
            headers,
        )
        player = _first_player(_first_document(data))
        if player is None:
            return None
        return build(PlayerSeason, player, self._params(season_id=season_id, player_id=player_id))

    async def aclose(self) -> None:
        if self._owns_fetcher and isinstance(self._fetcher, HttpxFetcher):
            await self._fetcher.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
