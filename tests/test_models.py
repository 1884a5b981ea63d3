from datetime import datetime, timezone

from fflclient.mapping import ConstructionParams
from fflclient.models import Boxscore, FreeAgentPlayer, League, NFLGame, Player, Team
from tests.payloads import SEASON, matchup, player_document, season_record, weekly_record


def test_player_maps_ownership_and_labels():
    player = Player.from_response(player_document())

    assert player.full_name == "Davante Adams"
    assert player.pro_team_id == 9
    assert player.pro_team == "GB"
    assert player.default_position == "WR"
    assert player.eligible_positions == ["RB/WR", "WR", "WR/TE", "OP", "Bench", "IR"]
    assert player.percent_owned == 99.9
    assert player.average_draft_position == 14.2


def test_player_with_sparse_payload():
    player = Player.from_response({"id": 1, "fullName": "Someone"})

    assert player.to_dict() == {"id": 1, "full_name": "Someone"}
    assert player.eligible_positions == []


def test_team_record_and_roster():
    document = {
        "id": 2,
        "abbrev": "GB",
        "location": "Green Bay",
        "nickname": "Cheeseheads",
        "logo": "https://example.com/logo.png",
        "record": {
            "overall": {
                "wins": 9,
                "losses": 4,
                "ties": 0,
                "pointsFor": 1402.5,
                "pointsAgainst": 1290.1,
                "percentage": 0.692,
            }
        },
        "playoffSeed": 2,
        "rankCalculatedFinal": 1,
        "roster": {
            "entries": [
                {"playerPoolEntry": {"player": player_document()}},
                {"playerPoolEntry": {"player": {"id": 3, "fullName": "Backup"}}},
                {"playerPoolEntry": {}},
            ]
        },
    }

    team = Team.from_response(document, ConstructionParams(season_id=SEASON))

    assert team.name == "Green Bay Cheeseheads"
    assert team.wins == 9
    assert team.points_for == 1402.5
    assert team.final_standings_position == 1
    assert [player.id for player in team.roster] == [12483, 3]


def test_team_prefers_explicit_name():
    team = Team.from_response({"id": 5, "name": "The Team", "location": "Ignored"})

    assert team.name == "The Team"
    assert team.roster == []


def test_league_settings_nested_entities():
    document = {
        "name": "Office League",
        "size": 10,
        "isPublic": False,
        "draftSettings": {"date": 1535846400000, "type": "SNAKE", "timePerSelection": 90},
        "rosterSettings": {
            "lineupSlotCounts": {"0": 1, "2": 2, "4": 2, "20": 6, "22": 0},
            "positionLimits": {"1": 4, "16": 2},
            "lineupLocktimeType": "INDIVIDUAL_GAME",
        },
        "scheduleSettings": {
            "matchupPeriodCount": 13,
            "matchupPeriodLength": 1,
            "matchupPeriods": {str(i): [i] for i in range(1, 17)},
            "playoffMatchupPeriodLength": 1,
            "playoffTeamCount": 4,
        },
    }

    league = League.from_response(document, ConstructionParams(league_id=336358, season_id=SEASON))

    assert league.league_id == 336358
    assert league.season_id == SEASON
    assert league.draft_settings.date == datetime(2018, 9, 2, tzinfo=timezone.utc)
    assert league.draft_settings.type == "SNAKE"
    assert league.roster_settings.lineup_slot_counts == {"QB": 1, "RB": 2, "WR": 2, "Bench": 6}
    assert league.roster_settings.position_limits == {"QB": 4, "D/ST": 2}
    assert league.schedule_settings.number_of_regular_season_matchups == 13
    assert league.schedule_settings.number_of_playoff_matchups == 3
    assert league.schedule_settings.number_of_playoff_teams == 4


def test_league_without_settings_sections():
    league = League.from_response({"name": "Tiny"})

    assert league.draft_settings is None
    assert league.to_dict() == {"name": "Tiny"}


def test_nfl_game_finds_home_and_away_sides():
    document = {
        "id": 401030893,
        "date": "2018-12-16T18:00:00Z",
        "period": 4,
        "clock": "0:00",
        "odds": "GB -6.5",
        "network": "FOX",
        "fullStatus": {"type": {"description": "Final"}},
        "competitors": [
            {"id": "20", "homeAway": "away", "name": "Jets", "abbreviation": "NYJ", "record": "4-10", "score": "38"},
            {"id": "9", "homeAway": "home", "name": "Packers", "abbreviation": "GB", "record": "5-8-1", "score": "44"},
        ],
    }

    game = NFLGame.from_response(document)

    assert game.start_time == datetime(2018, 12, 16, 18, 0, tzinfo=timezone.utc)
    assert game.game_status == "Final"
    assert game.home_team.abbreviation == "GB"
    assert game.home_team.score == 44
    assert game.away_team.team == "Jets"


def test_nfl_game_without_competitors():
    game = NFLGame.from_response({"id": 1})

    assert game.home_team is None
    assert "away_team" not in game.to_dict()


def test_free_agent_period_stats():
    player = player_document()
    player["stats"] = [
        {**weekly_record(4, {42: 7.5}, {42: 75}), "statSourceId": 1},
        weekly_record(4, {42: 9.1}, {42: 91}),
        season_record(0, {42: 100}, {42: 1000}),
    ]
    document = {"id": player["id"], "status": "WAIVERS", "player": player}

    free_agent = FreeAgentPlayer.from_response(document, ConstructionParams(season_id=SEASON, scoring_period_id=4))

    assert free_agent.status == "WAIVERS"
    assert free_agent.scoring_period_id == 4
    assert free_agent.projected.stats.value("receivingYards") == 75
    assert free_agent.actual.points.total_points == 9.1


def test_free_agent_preseason_uses_season_stats():
    player = player_document()
    player["stats"] = [season_record(1, {42: 150}, {42: 1500})]

    free_agent = FreeAgentPlayer.from_response(
        {"player": player, "status": "FREEAGENT"},
        ConstructionParams(season_id=SEASON, scoring_period_id=0),
    )

    assert free_agent.projected.points.total_points == 150
    assert free_agent.actual.points is None
    assert "scoring_period_id" in free_agent.to_dict()


def test_roster_player_without_id_still_builds():
    anonymous = player_document()
    del anonymous["id"]
    document = {"abbrev": "GB", "roster": {"entries": [{"playerPoolEntry": {"player": anonymous}}]}}

    team = Team.from_response(document)

    assert "id" not in team.to_dict()
    assert team.roster[0].id is None
    assert team.roster[0].full_name == "Davante Adams"


def test_boxscore_builds_both_sides_with_lineups():
    boxscore = Boxscore.from_response(matchup(7, 4, 2, 5), ConstructionParams(season_id=SEASON, scoring_period_id=4))

    assert boxscore.matchup_period_id == 4
    assert boxscore.winner == "HOME"
    assert boxscore.home_team.team_id == 2
    assert boxscore.home_team.score == 112.4
    assert boxscore.away_team.team_id == 5
    assert boxscore.away_team.roster == []

    starter, bench = boxscore.home_team.roster
    assert starter.player.full_name == "Davante Adams"
    assert starter.position == "WR"
    assert starter.total_points == 12.6
    assert starter.points.value("receivingYards") == 7.6
    assert bench.position == "Bench"
    assert "points" not in bench.to_dict()


def test_historical_boxscore_has_no_rosters():
    boxscore = Boxscore.from_response(matchup(7, 4, 2, 5, with_rosters=False), ConstructionParams(season_id=SEASON))

    assert boxscore.home_team.score == 112.4
    assert "roster" not in boxscore.home_team.to_dict()
    assert boxscore.away_team.roster == []
