from collections.abc import Sequence
from decimal import Decimal
import logging

from crm_metrics.core.errors import EmptyInputError
from crm_metrics.schemas.analytics import PerformerRecord, TeamStats
from crm_metrics.services.numeric import mean_2dp, to_decimal

logger = logging.getLogger(__name__)


def aggregate_team_stats(records: Sequence[PerformerRecord]) -> TeamStats:
    """
    Team-wide means and totals over the current performance roster.

    Means are rounded half-up to two decimals here and nowhere else.
    Raises EmptyInputError for an empty roster, since a mean over nobody has
    no value; callers show an empty state instead.
    """
    if not records:
        raise EmptyInputError("performance records")

    return TeamStats(
        avg_conversion_rate=mean_2dp([r.conversion_rate for r in records]),
        avg_response_time=mean_2dp([r.avg_response_time_hours for r in records]),
        total_leads=sum(r.leads_handled for r in records),
        total_conversions=sum(r.conversions_achieved for r in records),
        total_followups=sum(r.follow_ups_completed for r in records),
        member_count=len(records),
    )


def derived_conversion_rate(record: PerformerRecord) -> Decimal:
    if record.leads_handled == 0:
        return Decimal(0)
    return Decimal(100 * record.conversions_achieved) / Decimal(record.leads_handled)


def check_conversion_rates(records: Sequence[PerformerRecord], tolerance: float = 1.0) -> list[str]:
    """
    Names of performers whose supplied conversion_rate disagrees with
    conversions / leads by more than ``tolerance`` percentage points.

    The supplied rate is still the one used everywhere; this only reports.
    """
    limit = to_decimal(tolerance)
    divergent = []
    for record in records:
        expected = derived_conversion_rate(record)
        if abs(to_decimal(record.conversion_rate) - expected) > limit:
            logger.warning(
                "Conversion rate for %s is %s%% but %d/%d leads converted (%.2f%%)",
                record.salesperson,
                record.conversion_rate,
                record.conversions_achieved,
                record.leads_handled,
                expected,
            )
            divergent.append(record.salesperson)
    return divergent
