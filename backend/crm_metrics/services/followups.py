from collections.abc import Iterable
from datetime import datetime, timezone

from crm_metrics.schemas.followup import FollowupBuckets, FollowupRecord


def _as_utc(moment: datetime) -> datetime:
    # Naive timestamps from the API are UTC.
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def is_overdue(task: FollowupRecord, now: datetime) -> bool:
    return not task.is_completed and _as_utc(task.scheduled_at) < _as_utc(now)


def classify_followups(tasks: Iterable[FollowupRecord], now: datetime) -> FollowupBuckets:
    """
    Partition follow-ups into overdue, upcoming and completed as of ``now``.

    Completed follow-ups are never overdue, whatever their schedule. Each
    bucket keeps input order; truncation for display is up to the caller.
    """
    overdue: list[FollowupRecord] = []
    upcoming: list[FollowupRecord] = []
    completed: list[FollowupRecord] = []

    for task in tasks:
        if task.is_completed:
            completed.append(task)
        elif is_overdue(task, now):
            overdue.append(task)
        else:
            upcoming.append(task)

    return FollowupBuckets(overdue=overdue, upcoming=upcoming, completed=completed)


def upcoming_for_display(buckets: FollowupBuckets, limit: int = 5) -> list[FollowupRecord]:
    return list(buckets.upcoming[: max(0, limit)])
