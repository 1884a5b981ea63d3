"""Typed access to ESPN fantasy football league data."""

from .client import Client
from .config import ClientSettings, SeasonEras
from .errors import (
    FantasyAPIError,
    MappingError,
    NotFoundError,
    ReconciliationImpossible,
    UpstreamError,
)

__all__ = [
    "Client",
    "ClientSettings",
    "FantasyAPIError",
    "MappingError",
    "NotFoundError",
    "ReconciliationImpossible",
    "SeasonEras",
    "UpstreamError",
]
