"""Merging player seasons fetched from the modern and historical backends.

Seasons up to ``SeasonEras.historical_only_through`` only exist in the historical
backend, so the modern one is never queried for them. Later seasons are fetched from
both backends concurrently. The historical backend only serves completed seasons, so a
not-found answer from it is read as "no historical data" rather than a failure.

When both backends answer, the historical season wins, except that from
``SeasonEras.priced_transactions_from`` on its transactions are replaced by the modern
ones, which carry reliable costs.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from fflclient.config import SeasonEras
from fflclient.errors import NotFoundError, ReconciliationImpossible
from fflclient.models import PlayerSeason


logger = logging.getLogger(__name__)

SeasonFetch = Callable[[int, int], Awaitable[Optional[PlayerSeason]]]


class SourceAvailability(enum.Enum):
    MODERN_ONLY = "modern_only"
    HISTORICAL_ONLY = "historical_only"
    BOTH = "both"
    NEITHER = "neither"


@dataclass(frozen=True)
class SeasonSources:
    season_id: int
    player_id: int
    modern: Optional[PlayerSeason] = None
    historical: Optional[PlayerSeason] = None

    @property
    def availability(self) -> SourceAvailability:
        if self.modern is not None and self.historical is not None:
            return SourceAvailability.BOTH
        if self.modern is not None:
            return SourceAvailability.MODERN_ONLY
        if self.historical is not None:
            return SourceAvailability.HISTORICAL_ONLY
        return SourceAvailability.NEITHER


def merge_player_seasons(sources: SeasonSources, eras: SeasonEras | None = None) -> PlayerSeason:
    """Combine the two backend results; inputs are never modified."""

    eras = eras or SeasonEras()
    availability = sources.availability
    if availability is SourceAvailability.MODERN_ONLY:
        return sources.modern
    if availability is SourceAvailability.HISTORICAL_ONLY:
        return sources.historical
    if availability is SourceAvailability.BOTH:
        if eras.prefers_modern_transactions(sources.season_id):
            return sources.historical.model_copy(update={"transactions": sources.modern.transactions})
        return sources.historical
    if availability is SourceAvailability.NEITHER:
        raise ReconciliationImpossible(sources.season_id, sources.player_id)
    raise AssertionError(f"Unhandled availability {availability!r}")


class SeasonReconciler:
    def __init__(
        self,
        fetch_modern: SeasonFetch,
        fetch_historical: SeasonFetch,
        eras: SeasonEras | None = None,
    ):
        self._fetch_modern = fetch_modern
        self._fetch_historical = fetch_historical
        self.eras = eras or SeasonEras()

    async def gather(self, season_id: int, player_id: int) -> SeasonSources:
        if self.eras.requires_historical_only(season_id):
            historical = await self._fetch_historical(season_id, player_id)
            return SeasonSources(season_id, player_id, historical=historical)

        modern, historical = await asyncio.gather(
            self._fetch_modern(season_id, player_id),
            self._fetch_historical(season_id, player_id),
            return_exceptions=True,
        )
        if isinstance(modern, BaseException):
            raise modern
        if isinstance(historical, NotFoundError):
            logger.debug(
                "No historical season %s for player %s; assuming an in-progress season",
                season_id,
                player_id,
            )
            historical = None
        elif isinstance(historical, BaseException):
            raise historical
        return SeasonSources(season_id, player_id, modern=modern, historical=historical)

    async def reconcile(self, season_id: int, player_id: int) -> PlayerSeason:
        sources = await self.gather(season_id, player_id)
        return merge_player_seasons(sources, self.eras)
