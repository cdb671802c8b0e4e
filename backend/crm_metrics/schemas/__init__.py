from crm_metrics.schemas.analytics import (
    BreakdownCategory,
    BreakdownSlice,
    ConversionCounts,
    DailyTrendPoint,
    DashboardCharts,
    DashboardKpis,
    DashboardPayload,
    DashboardSummary,
    PerformanceMetric,
    PerformerRecord,
    PerformerRow,
    RankedPerformer,
    ReminderSummary,
    StatusCount,
    TeamStats,
    Tier,
    Trend,
)
from crm_metrics.schemas.followup import FollowupBuckets, FollowupRecord
from crm_metrics.schemas.report import (
    DateRange,
    DateRangeToken,
    ExportRequest,
    ReportFormat,
    ReportType,
    ResolvedRange,
)

__all__ = [
    "BreakdownCategory",
    "BreakdownSlice",
    "ConversionCounts",
    "DailyTrendPoint",
    "DashboardCharts",
    "DashboardKpis",
    "DashboardPayload",
    "DashboardSummary",
    "PerformanceMetric",
    "PerformerRecord",
    "PerformerRow",
    "RankedPerformer",
    "ReminderSummary",
    "StatusCount",
    "TeamStats",
    "Tier",
    "Trend",
    "FollowupBuckets",
    "FollowupRecord",
    "DateRange",
    "DateRangeToken",
    "ExportRequest",
    "ReportFormat",
    "ReportType",
    "ResolvedRange",
]
