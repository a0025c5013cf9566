from datetime import datetime, timedelta, timezone

from timeflow_engine.lexicon import Category
from timeflow_engine.schema import ActivityRecord
from timeflow_engine.windowing import category_durations, duration_in, is_same_day, is_yesterday, todays_activities

NOW = datetime(2025, 3, 12, 21, 0)


def test_day_window_uses_calendar_date():
    activities = [
        ActivityRecord("a1", "Python coding", 60, NOW.replace(hour=0, minute=0)),
        ActivityRecord("a2", "Python coding", 60, NOW.replace(hour=0) - timedelta(seconds=1)),
        ActivityRecord("a3", "Python coding", 60, NOW + timedelta(hours=2, minutes=59)),
    ]
    assert [a.id for a in todays_activities(activities, NOW)] == ["a1", "a3"]


def test_aware_timestamps_are_compared_in_now_timezone():
    now = datetime(2025, 3, 13, 10, 0, tzinfo=timezone(timedelta(hours=2)))
    late_utc = datetime(2025, 3, 12, 23, 30, tzinfo=timezone.utc)
    assert is_same_day(late_utc, now)
    assert not is_yesterday(late_utc, now)


def test_missing_timestamps_are_never_today():
    assert not is_same_day(None, NOW)
    assert not is_yesterday(None, NOW)


def test_category_durations_split_and_full():
    activities = [ActivityRecord("a1", "coding tutorial and family dinner", 3000, NOW)]
    split = category_durations(activities)
    assert split == {Category.TECHNICAL_EDUCATION: 1000, Category.EATING: 1000, Category.FAMILY: 1000}
    full = category_durations(activities, split=False)
    assert set(full.values()) == {3000}


def test_duration_in_counts_each_activity_once():
    activities = [
        ActivityRecord("a1", "coding tutorial and family dinner", 3000, NOW),
        ActivityRecord("a2", "Watch movie", 600, NOW),
    ]
    assert duration_in(activities, {Category.TECHNICAL_EDUCATION, Category.FAMILY}) == 3000
    assert duration_in(activities, [Category.LEISURE]) == 600
