"""Configuration helpers for endpoints and season boundaries."""

from .eras import SeasonEras
from .settings import ClientSettings

__all__ = [
    "ClientSettings",
    "SeasonEras",
]
