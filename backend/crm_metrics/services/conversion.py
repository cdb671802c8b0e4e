from decimal import Decimal

from crm_metrics.schemas.analytics import BreakdownCategory, BreakdownSlice, ConversionCounts
from crm_metrics.services.numeric import WHOLE, round_half_up


def conversion_breakdown(counts: ConversionCounts) -> list[BreakdownSlice]:
    """
    Share of converted / active / invalid leads as whole percentages.

    Returns an empty list when there are no leads at all. Zero-value
    categories are left out. Each percentage is rounded on its own, so the
    slices can add up to 99 or 101.
    """
    total = counts.total
    if total == 0:
        return []

    slices = []
    for category, value in (
        (BreakdownCategory.converted, counts.converted),
        (BreakdownCategory.active, counts.active),
        (BreakdownCategory.invalid, counts.invalid),
    ):
        if value == 0:
            continue
        share = Decimal(100 * value) / Decimal(total)
        slices.append(
            BreakdownSlice(
                category=category,
                value=value,
                percentage=int(round_half_up(share, WHOLE)),
            )
        )
    return slices


def invalid_percentage(counts: ConversionCounts) -> float:
    total = counts.total
    if total == 0:
        return 0.0
    return float(round_half_up(Decimal(100 * counts.invalid) / Decimal(total)))
