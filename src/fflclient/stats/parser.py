"""Selection and decoding of per-period stat records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Union

from pydantic import BaseModel
from pydantic.config import ConfigDict

from fflclient.stats.constants import MAX_SCORING_PERIOD_ID, STAT_IDS, STAT_NAMES, StatSplitType

ScoringRule = Callable[[Mapping[int, float]], float]


def sum_applied_stats(applied: Mapping[int, float]) -> float:
    """Default scoring rule: applied stats are already point values."""

    return float(sum(applied.values()))


class ParsedStats(BaseModel):
    """Stat values keyed by upstream stat id, optionally with a point total."""

    stats: Dict[int, float]
    uses_points: bool = False
    total_points: Optional[float] = None

    model_config = ConfigDict(frozen=True)

    def value(self, stat: Union[int, str], default: Optional[float] = None) -> Optional[float]:
        stat_id = STAT_IDS.get(stat) if isinstance(stat, str) else stat
        if stat_id is None:
            raise KeyError(f"Unknown stat name {stat!r}")
        return self.stats.get(stat_id, default)

    def named(self) -> Dict[str, float]:
        """Values keyed by readable name; ids without a known name keep their number."""

        return {STAT_NAMES.get(stat_id, str(stat_id)): value for stat_id, value in self.stats.items()}


class StatsBundle(BaseModel):
    points: Optional[ParsedStats] = None
    stats: Optional[ParsedStats] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return self.points is None and self.stats is None


@dataclass(frozen=True)
class StatSelector:
    season_id: int
    stat_source_id: int
    stat_split_type_id: int
    scoring_period_id: Optional[int] = None

    def matches(self, record: Mapping[str, Any]) -> bool:
        if record.get("seasonId") != self.season_id:
            return False
        if record.get("statSourceId") != self.stat_source_id:
            return False
        if record.get("statSplitTypeId") != self.stat_split_type_id:
            return False
        period = record.get("scoringPeriodId")
        if self.scoring_period_id is None:
            # Season totals carry no period; some payloads send 0 in its place.
            return period is None or period == 0
        return period == self.scoring_period_id


def _decode_stat_map(raw: Mapping[Any, Any]) -> Dict[int, float]:
    decoded: Dict[int, float] = {}
    for key, value in raw.items():
        try:
            stat_id = int(key)
        except (TypeError, ValueError):
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue
        decoded[stat_id] = float(value)
    return decoded


def find_record(
    records: Iterable[Mapping[str, Any]] | None,
    selector: StatSelector,
) -> Optional[Mapping[str, Any]]:
    """Return the first record matching ``selector``; duplicates after it are ignored."""

    for record in records or ():
        if isinstance(record, Mapping) and selector.matches(record):
            return record
    return None


def select_stats(
    records: Iterable[Mapping[str, Any]] | None,
    uses_points: bool,
    selector: StatSelector,
    scoring_rule: Optional[ScoringRule] = None,
) -> Optional[ParsedStats]:
    """Decode the record matching ``selector`` or return ``None`` when there is none.

    With ``uses_points`` the ``appliedStats`` map is read and a ``total_points`` value is
    attached: ``scoring_rule`` applied to the decoded values when a rule is given,
    otherwise the record's own ``appliedTotal``, otherwise the sum of the values. Without
    it the raw ``stats`` map is read.
    """

    record = find_record(records, selector)
    if record is None:
        return None
    raw = record.get("appliedStats" if uses_points else "stats")
    if not isinstance(raw, Mapping):
        return None
    stats = _decode_stat_map(raw)
    if not uses_points:
        return ParsedStats(stats=stats)

    applied_total = record.get("appliedTotal")
    if scoring_rule is not None:
        total_points = scoring_rule(stats)
    elif isinstance(applied_total, (int, float)) and not isinstance(applied_total, bool):
        total_points = float(applied_total)
    else:
        total_points = sum_applied_stats(stats)
    return ParsedStats(stats=stats, uses_points=True, total_points=total_points)


def select_bundle(
    records: Iterable[Mapping[str, Any]] | None,
    selector: StatSelector,
    scoring_rule: Optional[ScoringRule] = None,
) -> StatsBundle:
    records = list(records or ())
    return StatsBundle(
        points=select_stats(records, True, selector, scoring_rule),
        stats=select_stats(records, False, selector, scoring_rule),
    )


def weekly_bundles(
    records: Iterable[Mapping[str, Any]] | None,
    season_id: int,
    stat_source_id: int,
    scoring_rule: Optional[ScoringRule] = None,
    max_scoring_period_id: int = MAX_SCORING_PERIOD_ID,
) -> Dict[int, StatsBundle]:
    """Per-period bundles for periods ``1..max_scoring_period_id`` that have any data."""

    records = list(records or ())
    weekly: Dict[int, StatsBundle] = {}
    for scoring_period_id in range(1, max_scoring_period_id + 1):
        selector = StatSelector(
            season_id=season_id,
            stat_source_id=stat_source_id,
            stat_split_type_id=StatSplitType.WEEKLY,
            scoring_period_id=scoring_period_id,
        )
        bundle = select_bundle(records, selector, scoring_rule)
        if not bundle.is_empty:
            weekly[scoring_period_id] = bundle
    return weekly
