import pytest
from httpx import ASGITransport, AsyncClient

from fflclient import Client
from fflclient.api import create_app
from fflclient.config import ClientSettings
from fflclient.errors import UpstreamError
from tests.payloads import (
    PLAYER_ID,
    historical_response,
    matchup,
    modern_response,
    player_document,
    player_season_document,
)
from tests.test_client import FakeFetcher


SETTINGS = ClientSettings(seasons_url="https://fantasy.test/seasons/", history_url="https://fantasy.test/leagueHistory/")
LEAGUE_ID = 99


def _app(responses):
    fetcher = FakeFetcher(responses)
    return create_app(client=Client(LEAGUE_ID, fetcher=fetcher, settings=SETTINGS)), fetcher


async def _get(app, path, **params):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        return await client.get(path, params=params)


@pytest.mark.anyio
async def test_health():
    app, _ = _app({})

    response = await _get(app, "/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.anyio
async def test_player_season_serializes_sparse_weeks():
    history_url = SETTINGS.history_league_url(LEAGUE_ID)
    app, _ = _app({history_url: historical_response(player_season_document(season=2016))})

    response = await _get(app, f"/seasons/2016/players/{PLAYER_ID}")

    assert response.status_code == 200
    body = response.json()
    assert body["season_id"] == 2016
    assert body["player"]["full_name"] == "Davante Adams"
    assert sorted(body["weekly_actual"]) == ["15", "16"]
    assert body["weekly_actual"]["15"]["points"]["total_points"] == pytest.approx(3.1)
    assert [t["action"] for t in body["transactions"]] == ["DRAFT", "DROP"]
    assert "cost" not in body["transactions"][1]


@pytest.mark.anyio
async def test_player_season_without_data_is_404():
    app, _ = _app({})

    response = await _get(app, f"/seasons/2016/players/{PLAYER_ID}")

    assert response.status_code == 404


@pytest.mark.anyio
async def test_upstream_failure_is_502():
    modern_url = SETTINGS.league_url(2024, LEAGUE_ID)
    app, _ = _app({modern_url: UpstreamError(500, modern_url)})

    response = await _get(app, "/seasons/2024/league")

    assert response.status_code == 502
    assert "HTTP 500" in response.json()["detail"]


@pytest.mark.anyio
async def test_modern_season_reaches_both_backends():
    modern_url = SETTINGS.league_url(2024, LEAGUE_ID)
    app, fetcher = _app({modern_url: modern_response(player_season_document(season=2024))})

    response = await _get(app, f"/seasons/2024/players/{PLAYER_ID}")

    assert response.status_code == 200
    assert sorted(fetcher.urls()) == sorted([modern_url, SETTINGS.history_league_url(LEAGUE_ID)])


@pytest.mark.anyio
async def test_teams_require_scoring_period():
    app, _ = _app({})

    response = await _get(app, "/seasons/2020/teams")

    assert response.status_code == 422


@pytest.mark.anyio
async def test_players_listing_omits_unset_fields():
    app, _ = _app({SETTINGS.league_url(2020, LEAGUE_ID): {"players": [{"id": 1, "fullName": "Someone"}, player_document()]}})

    response = await _get(app, "/seasons/2020/players", limit=2)

    assert response.status_code == 200
    body = response.json()
    assert body[0] == {"id": 1, "full_name": "Someone"}
    assert body[1]["pro_team"] == "GB"


@pytest.mark.anyio
async def test_games_validate_date_format():
    app, _ = _app({})

    response = await _get(app, "/games", start_date="2018-12-16", end_date="20181217")

    assert response.status_code == 422


@pytest.mark.anyio
async def test_boxscores_for_week():
    schedule = [matchup(1, 4, 1, 2, season=2020), matchup(2, 5, 3, 4, season=2020)]
    app, fetcher = _app({SETTINGS.league_url(2020, LEAGUE_ID): {"schedule": schedule}})

    response = await _get(app, "/seasons/2020/boxscores", matchup_period_id=4, scoring_period_id=4)

    assert response.status_code == 200
    body = response.json()
    assert [boxscore["id"] for boxscore in body] == [1]
    assert body[0]["home_team"]["roster"][0]["position"] == "WR"
    assert fetcher.requests[0]["params"]["scoringPeriodId"] == 4


@pytest.mark.anyio
async def test_historical_scoreboard_for_current_season_is_404():
    app, _ = _app({})

    response = await _get(app, "/seasons/2024/historical-scoreboard", matchup_period_id=1, scoring_period_id=1)

    assert response.status_code == 404
