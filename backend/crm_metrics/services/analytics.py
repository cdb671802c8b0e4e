from collections.abc import Iterable, Mapping
from datetime import datetime
import logging
from typing import Any

from pydantic import ValidationError

from crm_metrics.core.config import get_settings
from crm_metrics.core.errors import EmptyInputError, PayloadValidationError
from crm_metrics.schemas.analytics import (
    DashboardPayload,
    DashboardSummary,
    PerformerRow,
    ReminderSummary,
    TeamStats,
)
from crm_metrics.schemas.followup import FollowupRecord
from crm_metrics.schemas.report import DateRangeToken
from crm_metrics.services.conversion import conversion_breakdown, invalid_percentage
from crm_metrics.services.followups import classify_followups, upcoming_for_display
from crm_metrics.services.ranges import report_date_at, resolve_range
from crm_metrics.services.ranking import rank_performers
from crm_metrics.services.team_stats import aggregate_team_stats, check_conversion_rates
from crm_metrics.services.trends import classify_trend

logger = logging.getLogger(__name__)


def parse_dashboard_payload(data: Mapping[str, Any]) -> DashboardPayload:
    try:
        return DashboardPayload.model_validate(data)
    except ValidationError as exc:
        raise PayloadValidationError(
            f"Dashboard payload rejected ({exc.error_count()} errors)",
            errors=exc.errors(include_url=False, include_context=False),
        ) from exc


def _performer_rows(payload: DashboardPayload, team: TeamStats) -> list[PerformerRow]:
    rows: list[PerformerRow] = []
    for ranked in rank_performers(payload.performance, team.avg_conversion_rate):
        person = ranked.record
        rows.append(
            PerformerRow(
                rank=ranked.rank,
                salesperson=person.salesperson,
                leads_handled=person.leads_handled,
                conversions_achieved=person.conversions_achieved,
                conversion_rate=person.conversion_rate,
                avg_response_time_hours=person.avg_response_time_hours,
                follow_ups_completed=person.follow_ups_completed,
                conversion_trend=classify_trend(person.conversion_rate, team.avg_conversion_rate),
                # Lower response time is better.
                response_trend=classify_trend(
                    person.avg_response_time_hours, team.avg_response_time, invert=True
                ),
                tier=ranked.tier,
                progress=min(person.conversion_rate, 100.0),
            )
        )
    return rows


def parse_followups(items: Iterable[FollowupRecord | Mapping[str, Any]]) -> list[FollowupRecord]:
    parsed = []
    for item in items:
        if isinstance(item, FollowupRecord):
            parsed.append(item)
            continue
        try:
            parsed.append(FollowupRecord.model_validate(item))
        except ValidationError as exc:
            raise PayloadValidationError(
                f"Follow-up record rejected ({exc.error_count()} errors)",
                errors=exc.errors(include_url=False, include_context=False),
            ) from exc
    return parsed


def _reminders(followups: list[FollowupRecord], now: datetime, limit: int) -> ReminderSummary:
    buckets = classify_followups(followups, now)
    return ReminderSummary(
        overdue=buckets.overdue,
        upcoming=upcoming_for_display(buckets, limit),
        overdue_count=len(buckets.overdue),
        upcoming_count=len(buckets.upcoming),
        completed_count=len(buckets.completed),
    )


def build_dashboard_summary(
    payload: DashboardPayload | Mapping[str, Any],
    *,
    now: datetime,
    followups: Iterable[FollowupRecord | Mapping[str, Any]] = (),
    range_token: DateRangeToken | str | None = None,
) -> DashboardSummary:
    """
    Compose everything the analytics dashboard displays from one fetch.

    ``now`` drives both the follow-up classification and the range bounds,
    so the result depends on nothing but the arguments. An empty roster
    yields a summary without a performance section.
    """
    if not isinstance(payload, DashboardPayload):
        payload = parse_dashboard_payload(payload)

    settings = get_settings()
    records = payload.performance

    try:
        team = aggregate_team_stats(records)
    except EmptyInputError:
        logger.info("No performance records in payload, skipping team section")
        team = None

    performers = _performer_rows(payload, team) if team is not None else []
    warnings = [
        f"conversion_rate mismatch for {name}"
        for name in check_conversion_rates(records, settings.CONVERSION_RATE_TOLERANCE)
    ]

    resolved = None
    if range_token is not None:
        resolved = resolve_range(range_token, today=report_date_at(now))

    counts = payload.charts.conversion_breakdown
    summary = DashboardSummary(
        range=resolved,
        kpis=payload.summary,
        conversion_breakdown=conversion_breakdown(counts),
        invalid_percentage=invalid_percentage(counts),
        daily_trends=list(payload.charts.daily_trends),
        leads_by_status=list(payload.charts.leads_by_status),
        has_performance_data=team is not None,
        team=team,
        performers=performers,
        reminders=_reminders(parse_followups(followups), now, settings.UPCOMING_REMINDER_LIMIT),
        data_warnings=warnings,
    )
    logger.debug(
        "Built dashboard summary: %d performers, %d overdue follow-ups",
        len(performers),
        summary.reminders.overdue_count,
    )
    return summary
