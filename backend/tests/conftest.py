"""Shared fixtures for the metrics engine tests."""

from datetime import datetime, timedelta, timezone

import pytest

from crm_metrics.core.config import get_settings
from crm_metrics.schemas.analytics import PerformerRecord
from crm_metrics.schemas.followup import FollowupRecord

SETTINGS_ENV_VARS = (
    "LOG_LEVEL",
    "REPORT_TIMEZONE",
    "WEEK_STARTS_ON",
    "UPCOMING_REMINDER_LIMIT",
    "CONVERSION_RATE_TOLERANCE",
)

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def make_performer(name, leads, conversions, rate, response, followups) -> PerformerRecord:
    return PerformerRecord(
        salesperson=name,
        leads_handled=leads,
        conversions_achieved=conversions,
        conversion_rate=rate,
        avg_response_time_hours=response,
        follow_ups_completed=followups,
    )


def make_followup(id_, scheduled_at, is_completed=False, lead_id=None) -> FollowupRecord:
    return FollowupRecord(
        id=id_,
        lead_id=lead_id if lead_id is not None else 100 + id_,
        salesperson_id=7,
        scheduled_at=scheduled_at,
        is_completed=is_completed,
    )


@pytest.fixture
def clean_settings(monkeypatch):
    """Default settings, independent of the developer's environment."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def two_person_team():
    return [
        make_performer("Asha", 10, 5, 50.0, 2.0, 3),
        make_performer("Ben", 10, 7, 70.0, 1.0, 4),
    ]


@pytest.fixture
def dashboard_payload():
    return {
        "summary": {
            "total_leads": 20,
            "conversion_rate": 60.0,
            "invalid_percentage": 10.0,
            "active_followups": 3,
            "overdue_tasks": 1,
        },
        "charts": {
            "leads_by_status": [
                {"status": "converted", "count": 12},
                {"status": "assigned", "count": 8},
            ],
            "conversion_breakdown": {"converted": 12, "active": 6, "invalid": 2},
            "daily_trends": [
                {"date": "2026-10-18", "leads": 4},
                {"date": "2026-10-19", "leads": 6},
            ],
        },
        "performance": [
            {
                "salesperson": "Asha",
                "leads_handled": 10,
                "conversions_achieved": 5,
                "conversion_rate": 50.0,
                "avg_response_time_hours": 2.0,
                "follow_ups_completed": 3,
            },
            {
                "salesperson": "Ben",
                "leads_handled": 10,
                "conversions_achieved": 7,
                "conversion_rate": 70.0,
                "avg_response_time_hours": 1.0,
                "follow_ups_completed": 4,
            },
        ],
    }


@pytest.fixture
def followups(now):
    # One overdue, one completed (in the past), seven upcoming.
    items = [
        make_followup(1, now - timedelta(hours=3)),
        make_followup(2, now - timedelta(days=2), is_completed=True),
    ]
    items += [make_followup(10 + i, now + timedelta(hours=i + 1)) for i in range(7)]
    return items
