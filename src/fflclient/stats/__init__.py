"""Stat record selection and the decoded stat types."""

from .constants import MAX_SCORING_PERIOD_ID, STAT_IDS, STAT_NAMES, StatSource, StatSplitType
from .parser import (
    ParsedStats,
    ScoringRule,
    StatSelector,
    StatsBundle,
    find_record,
    select_bundle,
    select_stats,
    sum_applied_stats,
    weekly_bundles,
)

__all__ = [
    "MAX_SCORING_PERIOD_ID",
    "ParsedStats",
    "STAT_IDS",
    "STAT_NAMES",
    "ScoringRule",
    "StatSelector",
    "StatSource",
    "StatSplitType",
    "StatsBundle",
    "find_record",
    "select_bundle",
    "select_stats",
    "sum_applied_stats",
    "weekly_bundles",
]
