"""Combining player seasons from the two upstream API generations."""

from .season import (
    SeasonFetch,
    SeasonReconciler,
    SeasonSources,
    SourceAvailability,
    merge_player_seasons,
)

__all__ = [
    "SeasonFetch",
    "SeasonReconciler",
    "SeasonSources",
    "SourceAvailability",
    "merge_player_seasons",
]
