import enum

from pydantic import BaseModel, ConfigDict, Field

from crm_metrics.schemas.followup import FollowupRecord
from crm_metrics.schemas.report import ResolvedRange


class _Snapshot(BaseModel):
    # Immutable per-fetch snapshot; NaN/Infinity never reach the calculators.
    model_config = ConfigDict(frozen=True, allow_inf_nan=False, extra="ignore")


# Raw payload as delivered by the analytics API


class DashboardKpis(_Snapshot):
    # Missing counters default to 0 explicitly instead of being guessed downstream.
    total_leads: int = 0
    conversion_rate: float = 0.0
    invalid_percentage: float = 0.0
    active_followups: int = 0
    overdue_tasks: int = 0


class StatusCount(_Snapshot):
    status: str
    count: int


class DailyTrendPoint(_Snapshot):
    date: str
    leads: int


class ConversionCounts(_Snapshot):
    converted: int = 0
    active: int = 0
    invalid: int = 0

    @property
    def total(self) -> int:
        return self.converted + self.active + self.invalid


class DashboardCharts(_Snapshot):
    leads_by_status: list[StatusCount] = Field(default_factory=list)
    conversion_breakdown: ConversionCounts = Field(default_factory=ConversionCounts)
    daily_trends: list[DailyTrendPoint] = Field(default_factory=list)


class PerformerRecord(_Snapshot):
    salesperson: str
    leads_handled: int
    conversions_achieved: int
    # Supplied by the API, not derived from conversions / leads.
    conversion_rate: float
    avg_response_time_hours: float
    follow_ups_completed: int


class DashboardPayload(_Snapshot):
    summary: DashboardKpis = Field(default_factory=DashboardKpis)
    charts: DashboardCharts = Field(default_factory=DashboardCharts)
    performance: list[PerformerRecord] = Field(default_factory=list)


# Derived values


class Trend(str, enum.Enum):
    up = "up"
    down = "down"
    stable = "stable"


class Tier(str, enum.Enum):
    high = "High"
    average = "Average"
    below_average = "Below Avg"


class PerformanceMetric(str, enum.Enum):
    conversion_rate = "conversion_rate"
    conversions_achieved = "conversions_achieved"
    avg_response_time_hours = "avg_response_time_hours"
    follow_ups_completed = "follow_ups_completed"
    leads_handled = "leads_handled"


class BreakdownCategory(str, enum.Enum):
    converted = "Converted"
    active = "Active"
    invalid = "Invalid"


class BreakdownSlice(_Snapshot):
    category: BreakdownCategory
    value: int
    percentage: int


class TeamStats(_Snapshot):
    avg_conversion_rate: float
    avg_response_time: float
    total_leads: int
    total_conversions: int
    total_followups: int
    member_count: int


class RankedPerformer(_Snapshot):
    rank: int
    record: PerformerRecord
    metric: PerformanceMetric
    metric_value: float
    tier: Tier


class PerformerRow(_Snapshot):
    rank: int
    salesperson: str
    leads_handled: int
    conversions_achieved: int
    conversion_rate: float
    avg_response_time_hours: float
    follow_ups_completed: int
    conversion_trend: Trend
    response_trend: Trend
    tier: Tier
    # Progress bar fill, capped at 100.
    progress: float


class ReminderSummary(_Snapshot):
    overdue: list[FollowupRecord]
    upcoming: list[FollowupRecord]
    overdue_count: int
    upcoming_count: int
    completed_count: int


class DashboardSummary(_Snapshot):
    range: ResolvedRange | None
    kpis: DashboardKpis
    conversion_breakdown: list[BreakdownSlice]
    invalid_percentage: float
    daily_trends: list[DailyTrendPoint]
    leads_by_status: list[StatusCount]
    has_performance_data: bool
    team: TeamStats | None
    performers: list[PerformerRow]
    reminders: ReminderSummary
    data_warnings: list[str]
