from collections.abc import Sequence
from decimal import Decimal

from crm_metrics.schemas.analytics import PerformanceMetric, PerformerRecord, RankedPerformer, Tier
from crm_metrics.services.numeric import to_decimal

# Tier bands around the team average, distinct from the 5% trend threshold.
HIGH_TIER_FACTOR = Decimal("1.10")
LOW_TIER_FACTOR = Decimal("0.90")

# Metrics where the smallest value is the best one.
LOWER_IS_BETTER = frozenset({PerformanceMetric.avg_response_time_hours})


def metric_value(record: PerformerRecord, metric: PerformanceMetric) -> float:
    return getattr(record, metric.value)


def tier_for(value: float, team_average: float, invert: bool = False) -> Tier:
    subject = to_decimal(value)
    baseline = to_decimal(team_average)
    if invert:
        # Same mirroring as classify_trend: the team figure against the individual's.
        subject, baseline = baseline, subject
    if subject >= baseline * HIGH_TIER_FACTOR:
        return Tier.high
    if subject < baseline * LOW_TIER_FACTOR:
        return Tier.below_average
    return Tier.average


def rank_performers(
    records: Sequence[PerformerRecord],
    team_average: float,
    metric: PerformanceMetric = PerformanceMetric.conversion_rate,
) -> list[RankedPerformer]:
    """
    Sort performers best-first by ``metric`` and tag each with a tier
    relative to ``team_average``. Ties keep their input order.

    For metrics in ``LOWER_IS_BETTER`` the smallest value ranks first and
    the tier comparison is mirrored.
    """
    invert = metric in LOWER_IS_BETTER
    # sorted() is stable in both directions.
    ordered = sorted(records, key=lambda r: metric_value(r, metric), reverse=not invert)
    return [
        RankedPerformer(
            rank=position,
            record=record,
            metric=metric,
            metric_value=metric_value(record, metric),
            tier=tier_for(metric_value(record, metric), team_average, invert=invert),
        )
        for position, record in enumerate(ordered, start=1)
    ]
