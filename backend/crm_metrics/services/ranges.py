"""
Date-range token resolution for the dashboard filter and report export.

Labels are a static table; bounds are inclusive calendar dates computed from
an explicit ``today`` (or the current date in the report timezone). Tokens
whose window is computed server-side, and unknown tokens, resolve without
bounds.
"""
from datetime import date, datetime, timedelta, timezone
import logging

from crm_metrics.core.config import get_settings
from crm_metrics.schemas.report import DateRange, DateRangeToken, ResolvedRange

logger = logging.getLogger(__name__)

RANGE_LABELS: dict[DateRangeToken, str] = {
    DateRangeToken.today: "Today",
    DateRangeToken.yesterday: "Yesterday",
    DateRangeToken.last_7_days: "Last 7 days",
    DateRangeToken.this_week: "This week",
    DateRangeToken.last_week: "Last week",
    DateRangeToken.last_30_days: "Last 30 days",
    DateRangeToken.this_month: "This month",
    DateRangeToken.last_month: "Last month",
    DateRangeToken.year_to_date: "Year to date",
    DateRangeToken.lifetime: "Lifetime",
}

DEFAULT_RANGE = DateRangeToken.this_month


def current_report_date() -> date:
    return datetime.now(get_settings().report_tz).date()


def report_date_at(moment: datetime) -> date:
    # Naive instants are UTC, as elsewhere in the engine.
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(get_settings().report_tz).date()


def _week_start(day: date, week_starts_on: int) -> date:
    return day - timedelta(days=(day.weekday() - week_starts_on) % 7)


def _month_start(day: date) -> date:
    return day.replace(day=1)


def range_bounds(token: DateRangeToken, today: date, week_starts_on: int = 0) -> DateRange | None:
    if token == DateRangeToken.today:
        return DateRange(start=today, end=today)
    if token == DateRangeToken.yesterday:
        day = today - timedelta(days=1)
        return DateRange(start=day, end=day)
    if token == DateRangeToken.last_7_days:
        return DateRange(start=today - timedelta(days=6), end=today)
    if token == DateRangeToken.this_week:
        return DateRange(start=_week_start(today, week_starts_on), end=today)
    if token == DateRangeToken.last_week:
        start = _week_start(today, week_starts_on) - timedelta(days=7)
        return DateRange(start=start, end=start + timedelta(days=6))
    if token == DateRangeToken.last_30_days:
        return DateRange(start=today - timedelta(days=29), end=today)
    if token == DateRangeToken.this_month:
        return DateRange(start=_month_start(today), end=today)
    if token == DateRangeToken.last_month:
        end = _month_start(today) - timedelta(days=1)
        return DateRange(start=_month_start(end), end=end)
    if token == DateRangeToken.year_to_date:
        return DateRange(start=today.replace(month=1, day=1), end=today)
    # lifetime: the data source decides
    return None


def parse_range_token(token: DateRangeToken | str) -> DateRangeToken | None:
    if isinstance(token, DateRangeToken):
        return token
    try:
        return DateRangeToken(token)
    except ValueError:
        return None


def range_label(token: DateRangeToken | str) -> str:
    known = parse_range_token(token)
    if known is None:
        return str(token)
    return RANGE_LABELS[known]


def resolve_range(token: DateRangeToken | str, today: date | None = None) -> ResolvedRange:
    """
    Resolve a range token to its display label and concrete bounds.

    Unknown tokens are passed through as their own label with no bounds so
    the server can still interpret them; this is logged, never raised.
    """
    known = parse_range_token(token)
    if known is None:
        raw = str(token)
        logger.warning("Unknown date range token %r, passing through unresolved", raw)
        return ResolvedRange(token=raw, label=raw, bounds=None, is_known=False)

    if known == DateRangeToken.lifetime:
        bounds = None
    else:
        day = today if today is not None else current_report_date()
        bounds = range_bounds(known, day, week_starts_on=get_settings().WEEK_STARTS_ON)

    return ResolvedRange(token=known.value, label=RANGE_LABELS[known], bounds=bounds, is_known=True)
