"""HTTP endpoints and transport settings, overridable from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

_SEASONS_URL_ENV = "FFL_SEASONS_URL"
_HISTORY_URL_ENV = "FFL_HISTORY_URL"
_GAMES_URL_ENV = "FFL_GAMES_URL"
_TIMEOUT_ENV = "FFL_HTTP_TIMEOUT"

DEFAULT_SEASONS_URL = "https://lm-api-reads.fantasy.espn.com/apis/v3/games/ffl/seasons/"
DEFAULT_HISTORY_URL = "https://lm-api-reads.fantasy.espn.com/apis/v3/games/ffl/leagueHistory/"
DEFAULT_GAMES_URL = "https://site.api.espn.com/apis/fantasy/v2/games/ffl/games"
DEFAULT_TIMEOUT = 20.0


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _with_slash(url: str) -> str:
    return url if url.endswith("/") else f"{url}/"


@dataclass(frozen=True)
class ClientSettings:
    seasons_url: str = DEFAULT_SEASONS_URL
    history_url: str = DEFAULT_HISTORY_URL
    games_url: str = DEFAULT_GAMES_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "ClientSettings":
        return cls(
            seasons_url=_with_slash(os.getenv(_SEASONS_URL_ENV, DEFAULT_SEASONS_URL)),
            history_url=_with_slash(os.getenv(_HISTORY_URL_ENV, DEFAULT_HISTORY_URL)),
            games_url=os.getenv(_GAMES_URL_ENV, DEFAULT_GAMES_URL),
            timeout=_env_float(_TIMEOUT_ENV, DEFAULT_TIMEOUT, clamp_min=1.0),
        )

    def league_url(self, season_id: int, league_id: int) -> str:
        return f"{self.seasons_url}{season_id}/segments/0/leagues/{league_id}"

    def history_league_url(self, league_id: int) -> str:
        return f"{self.history_url}{league_id}"
