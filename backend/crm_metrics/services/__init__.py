from crm_metrics.services.analytics import build_dashboard_summary, parse_dashboard_payload, parse_followups
from crm_metrics.services.conversion import conversion_breakdown, invalid_percentage
from crm_metrics.services.followups import classify_followups, is_overdue, upcoming_for_display
from crm_metrics.services.ranges import range_label, resolve_range
from crm_metrics.services.ranking import rank_performers, tier_for
from crm_metrics.services.reports import build_export_request
from crm_metrics.services.team_stats import aggregate_team_stats, check_conversion_rates
from crm_metrics.services.trends import classify_trend

__all__ = [
    "build_dashboard_summary",
    "parse_dashboard_payload",
    "parse_followups",
    "conversion_breakdown",
    "invalid_percentage",
    "classify_followups",
    "is_overdue",
    "upcoming_for_display",
    "range_label",
    "resolve_range",
    "rank_performers",
    "tier_for",
    "build_export_request",
    "aggregate_team_stats",
    "check_conversion_rates",
    "classify_trend",
]
