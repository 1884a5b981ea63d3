"""Domain entities built from upstream payloads."""

from .boxscore import Boxscore, BoxscorePlayer, BoxscoreTeam
from .free_agent_player import FreeAgentPlayer
from .league import DraftSettings, League, RosterSettings, ScheduleSettings
from .nfl_game import NFLGame, NFLGameTeam
from .player import Player
from .player_season import PlayerSeason
from .team import Team
from .transaction import Transaction

__all__ = [
    "Boxscore",
    "BoxscorePlayer",
    "BoxscoreTeam",
    "DraftSettings",
    "FreeAgentPlayer",
    "League",
    "NFLGame",
    "NFLGameTeam",
    "Player",
    "PlayerSeason",
    "RosterSettings",
    "ScheduleSettings",
    "Team",
    "Transaction",
]
