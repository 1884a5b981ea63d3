"""Exception types raised by the fflclient library."""

from __future__ import annotations


class FantasyAPIError(Exception):
    """Base class for every error raised by fflclient."""


class MappingError(FantasyAPIError):
    """A response map is malformed; this is a defect, not an upstream condition."""


class NotFoundError(FantasyAPIError):
    def __init__(self, url: str):
        super().__init__(f"Resource not found: {url}")
        self.url = url


class UpstreamError(FantasyAPIError):
    def __init__(self, status_code: int, url: str):
        super().__init__(f"Upstream request failed with HTTP {status_code}: {url}")
        self.status_code = status_code
        self.url = url


class ReconciliationImpossible(FantasyAPIError):
    """Neither backend returned data for the requested player season."""

    def __init__(self, season_id: int, player_id: int):
        super().__init__(f"No data for player {player_id} in season {season_id}")
        self.season_id = season_id
        self.player_id = player_id
