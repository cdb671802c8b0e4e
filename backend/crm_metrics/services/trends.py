from decimal import Decimal
import logging
import math

from crm_metrics.schemas.analytics import Trend
from crm_metrics.services.numeric import to_decimal

logger = logging.getLogger(__name__)

# Movement of 5% or more relative to the baseline counts as a trend.
TREND_THRESHOLD_PCT = 5


def classify_trend(
    value: float,
    average: float,
    invert: bool = False,
    threshold_pct: float = TREND_THRESHOLD_PCT,
) -> Trend:
    """
    Direction of ``value`` relative to a baseline ``average``.

    With ``invert=True`` lower is better (response time): the baseline is
    measured against the value instead, so an individual well under the team
    average trends ``up``.
    """
    if not (math.isfinite(value) and math.isfinite(average)):
        logger.warning("Non-finite trend input value=%r average=%r", value, average)
        return Trend.stable

    if invert:
        value, average = average, value

    subject = to_decimal(value)
    baseline = to_decimal(average)

    if baseline == 0:
        if subject > 0:
            return Trend.up
        if subject < 0:
            return Trend.down
        return Trend.stable

    # Same as baseline * (1 ± band) for the usual positive baseline.
    margin = abs(baseline) * to_decimal(threshold_pct) / Decimal(100)
    if subject >= baseline + margin:
        return Trend.up
    if subject <= baseline - margin:
        return Trend.down
    return Trend.stable
