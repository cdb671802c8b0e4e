"""Tests for overdue / upcoming / completed classification."""

from datetime import datetime, timedelta, timezone

from conftest import make_followup

from crm_metrics.services.followups import classify_followups, is_overdue, upcoming_for_display


class TestClassifyFollowups:
    def test_one_second_either_side_of_now(self, now):
        past = make_followup(1, now - timedelta(seconds=1))
        future = make_followup(2, now + timedelta(seconds=1))
        buckets = classify_followups([past, future], now)
        assert buckets.overdue == [past]
        assert buckets.upcoming == [future]
        assert buckets.completed == []

    def test_completed_is_never_overdue(self, now):
        done_late = make_followup(1, now - timedelta(days=30), is_completed=True)
        done_early = make_followup(2, now + timedelta(days=30), is_completed=True)
        buckets = classify_followups([done_late, done_early], now)
        assert buckets.completed == [done_late, done_early]
        assert buckets.overdue == []
        assert not is_overdue(done_late, now)

    def test_scheduled_exactly_now_is_upcoming(self, now):
        task = make_followup(1, now)
        assert classify_followups([task], now).upcoming == [task]

    def test_preserves_input_order(self, now):
        tasks = [make_followup(i, now + timedelta(hours=10 - i)) for i in range(5)]
        assert classify_followups(tasks, now).upcoming == tasks

    def test_result_depends_on_now(self, now):
        task = make_followup(1, now + timedelta(minutes=30))
        assert classify_followups([task], now).upcoming == [task]
        assert classify_followups([task], now + timedelta(hours=1)).overdue == [task]

    def test_naive_timestamps_are_utc(self, now):
        naive = make_followup(1, datetime(2026, 10, 19, 11, 59))
        assert is_overdue(naive, now)
        assert not is_overdue(naive, datetime(2026, 10, 19, 11, 0, tzinfo=timezone.utc))

    def test_empty_input(self, now):
        buckets = classify_followups([], now)
        assert buckets.overdue == buckets.upcoming == buckets.completed == []


class TestUpcomingForDisplay:
    def test_caps_to_limit_without_touching_buckets(self, now, followups):
        buckets = classify_followups(followups, now)
        shown = upcoming_for_display(buckets, limit=5)
        assert len(shown) == 5
        assert shown == buckets.upcoming[:5]
        assert len(buckets.upcoming) == 7

    def test_negative_limit_shows_nothing(self, now, followups):
        assert upcoming_for_display(classify_followups(followups, now), limit=-1) == []
