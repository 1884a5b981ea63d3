"""Identifiers used by the upstream stat records."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict


class StatSource(IntEnum):
    REAL = 0
    PROJECTED = 1


class StatSplitType(IntEnum):
    SEASON = 0
    WEEKLY = 1


# Highest regular-season scoring period the weekly breakdown scans.
MAX_SCORING_PERIOD_ID = 18


STAT_NAMES: Dict[int, str] = {
    0: "passingAttempts",
    1: "passingCompletions",
    2: "passingIncompletions",
    3: "passingYards",
    4: "passingTouchdowns",
    15: "passing40PlusYardTD",
    16: "passing50PlusYardTD",
    17: "passing300To399YardGame",
    18: "passing400PlusYardGame",
    19: "passing2PtConversions",
    20: "passingInterceptions",
    23: "rushingAttempts",
    24: "rushingYards",
    25: "rushingTouchdowns",
    26: "rushing2PtConversions",
    35: "rushing40PlusYardTD",
    36: "rushing50PlusYardTD",
    37: "rushing100To199YardGame",
    38: "rushing200PlusYardGame",
    42: "receivingYards",
    43: "receivingTouchdowns",
    44: "receiving2PtConversions",
    45: "receiving40PlusYardTD",
    46: "receiving50PlusYardTD",
    53: "receivingReceptions",
    56: "receiving100To199YardGame",
    57: "receiving200PlusYardGame",
    58: "receivingTargets",
    68: "fumbles",
    72: "lostFumbles",
    74: "madeFieldGoalsFrom50Plus",
    77: "madeFieldGoalsFrom40To49",
    80: "madeFieldGoalsFromUnder40",
    83: "madeFieldGoals",
    84: "attemptedFieldGoals",
    85: "missedFieldGoals",
    86: "madeExtraPoints",
    87: "attemptedExtraPoints",
    88: "missedExtraPoints",
    89: "defensive0PointsAllowed",
    90: "defensive1To6PointsAllowed",
    91: "defensive7To13PointsAllowed",
    92: "defensive14To17PointsAllowed",
    93: "defensiveBlockedKickForTouchdowns",
    95: "defensiveInterceptions",
    96: "defensiveFumbles",
    97: "defensiveBlockedKicks",
    98: "defensiveSafeties",
    99: "defensiveSacks",
    101: "kickoffReturnTouchdown",
    102: "puntReturnTouchdown",
    103: "fumbleReturnTouchdown",
    104: "interceptionReturnTouchdown",
    120: "defensivePointsAllowed",
    127: "defensiveYardsAllowed",
    155: "teamWin",
    156: "teamLoss",
    210: "gamesPlayed",
}

STAT_IDS: Dict[str, int] = {name: stat_id for stat_id, name in STAT_NAMES.items()}
