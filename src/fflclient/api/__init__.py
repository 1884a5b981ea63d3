"""REST API exposing the league retrieval operations."""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Any, Awaitable, List, TypeVar

from fastapi import FastAPI, HTTPException, Query, Request

from fflclient.client import Client
from fflclient.config import ClientSettings, SeasonEras
from fflclient.errors import NotFoundError, ReconciliationImpossible, UpstreamError
from fflclient.models import Boxscore, FreeAgentPlayer, League, NFLGame, Player, PlayerSeason, Team


T = TypeVar("T")


def _client_from_env() -> Client:
    league_id = os.getenv("FFL_LEAGUE_ID")
    if not league_id:
        raise RuntimeError("FFL_LEAGUE_ID must be set to serve the API without an explicit client")
    return Client(
        int(league_id),
        espn_s2=os.getenv("ESPN_S2"),
        swid=os.getenv("ESPN_SWID"),
        settings=ClientSettings.from_env(),
        eras=SeasonEras.from_env(),
    )


async def _call(awaitable: Awaitable[T]) -> T:
    try:
        return await awaitable
    except (NotFoundError, ReconciliationImpossible) as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except UpstreamError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


def create_app(client: Client | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = client is None
        app.state.client = client or _client_from_env()
        try:
            yield
        finally:
            if owned:
                await app.state.client.aclose()

    app = FastAPI(title="fflclient", lifespan=lifespan)
    if client is not None:
        app.state.client = client

    def _client(request: Request) -> Client:
        return request.app.state.client

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/seasons/{season_id}/league", response_model=League, response_model_exclude_unset=True)
    async def league(request: Request, season_id: int) -> Any:
        return await _call(_client(request).get_league_info(season_id))

    @app.get("/seasons/{season_id}/teams", response_model=List[Team], response_model_exclude_unset=True)
    async def teams(request: Request, season_id: int, scoring_period_id: int = Query(..., ge=0)) -> Any:
        return await _call(_client(request).get_teams_at_week(season_id, scoring_period_id))

    @app.get("/seasons/{season_id}/players", response_model=List[Player], response_model_exclude_unset=True)
    async def players(
        request: Request,
        season_id: int,
        limit: int = Query(2000, ge=1),
        offset: int = Query(0, ge=0),
    ) -> Any:
        return await _call(_client(request).get_all_players(season_id, limit=limit, offset=offset))

    @app.get("/seasons/{season_id}/boxscores", response_model=List[Boxscore], response_model_exclude_unset=True)
    async def boxscores(
        request: Request,
        season_id: int,
        matchup_period_id: int = Query(..., ge=1),
        scoring_period_id: int = Query(..., ge=1),
    ) -> Any:
        return await _call(
            _client(request).get_boxscore_for_week(season_id, matchup_period_id, scoring_period_id)
        )

    @app.get(
        "/seasons/{season_id}/historical-scoreboard",
        response_model=List[Boxscore],
        response_model_exclude_unset=True,
    )
    async def historical_scoreboard(
        request: Request,
        season_id: int,
        matchup_period_id: int = Query(..., ge=1),
        scoring_period_id: int = Query(..., ge=1),
    ) -> Any:
        return await _call(
            _client(request).get_historical_scoreboard_for_week(season_id, matchup_period_id, scoring_period_id)
        )

    @app.get(
        "/seasons/{season_id}/free-agents",
        response_model=List[FreeAgentPlayer],
        response_model_exclude_unset=True,
    )
    async def free_agents(request: Request, season_id: int, scoring_period_id: int = Query(..., ge=0)) -> Any:
        return await _call(_client(request).get_free_agents(season_id, scoring_period_id))

    @app.get(
        "/seasons/{season_id}/players/{player_id}",
        response_model=PlayerSeason,
        response_model_exclude_unset=True,
    )
    async def player_season(request: Request, season_id: int, player_id: int) -> Any:
        return await _call(_client(request).get_player_season(season_id, player_id))

    @app.get("/games", response_model=List[NFLGame], response_model_exclude_unset=True)
    async def games(
        request: Request,
        start_date: str = Query(..., pattern=r"^\d{8}$"),
        end_date: str = Query(..., pattern=r"^\d{8}$"),
    ) -> Any:
        return await _call(_client(request).get_nfl_games_for_period(start_date, end_date))

    return app
