"""Season boundaries in the upstream service's history."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

_HISTORICAL_ONLY_ENV = "FFL_HISTORICAL_ONLY_THROUGH"
_PRICED_TRANSACTIONS_ENV = "FFL_PRICED_TRANSACTIONS_FROM"

_HISTORICAL_ONLY_DEFAULT = 2017
_PRICED_TRANSACTIONS_DEFAULT = 2019


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default


@dataclass(frozen=True)
class SeasonEras:
    # Seasons up to and including this one exist only in the historical backend.
    historical_only_through: int = _HISTORICAL_ONLY_DEFAULT
    # From this season on, the historical backend's transaction costs are unreliable.
    priced_transactions_from: int = _PRICED_TRANSACTIONS_DEFAULT

    def __post_init__(self) -> None:
        if self.priced_transactions_from <= self.historical_only_through:
            raise ValueError(
                "priced_transactions_from must be later than historical_only_through, "
                f"got {self.priced_transactions_from} <= {self.historical_only_through}"
            )

    @classmethod
    def from_env(cls) -> "SeasonEras":
        return cls(
            historical_only_through=_env_int(_HISTORICAL_ONLY_ENV, _HISTORICAL_ONLY_DEFAULT),
            priced_transactions_from=_env_int(_PRICED_TRANSACTIONS_ENV, _PRICED_TRANSACTIONS_DEFAULT),
        )

    def requires_historical_only(self, season_id: int) -> bool:
        return season_id <= self.historical_only_through

    def prefers_modern_transactions(self, season_id: int) -> bool:
        return season_id >= self.priced_transactions_from
