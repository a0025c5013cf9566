"""Day-window selection and per-category time aggregation."""

from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime, timedelta

from timeflow_engine.categorizer import activity_categories
from timeflow_engine.lexicon import Category
from timeflow_engine.schema import ActivityRecord


def local_date(timestamp: datetime, now: datetime) -> date:
    """Calendar date of ``timestamp`` in the timezone ``now`` is expressed in."""

    if timestamp.tzinfo is not None and now.tzinfo is not None:
        timestamp = timestamp.astimezone(now.tzinfo)
    return timestamp.date()


def is_same_day(timestamp: datetime | None, now: datetime) -> bool:
    if timestamp is None:
        return False
    return local_date(timestamp, now) == local_date(now, now)


def is_yesterday(timestamp: datetime | None, now: datetime) -> bool:
    if timestamp is None:
        return False
    return local_date(timestamp, now) == local_date(now, now) - timedelta(days=1)


def todays_activities(activities: list[ActivityRecord], now: datetime) -> list[ActivityRecord]:
    return [activity for activity in activities if is_same_day(activity.start_time, now)]


def total_duration(activities: list[ActivityRecord]) -> int:
    return sum(max(0, activity.duration) for activity in activities)


def category_durations(activities: list[ActivityRecord], split: bool = True) -> dict[Category, float]:
    """Seconds spent per category.

    With ``split`` an activity tagged with several categories shares its
    duration evenly between them, so the totals add up to the tracked time.
    Without it every matching category is credited the full duration.
    """

    totals: dict[Category, float] = defaultdict(float)
    for activity in activities:
        duration = max(0, activity.duration)
        categories = activity_categories(activity)
        share = duration / len(categories) if split else duration
        for category in categories:
            totals[category] += share
    return dict(totals)


def duration_in(activities: list[ActivityRecord], categories) -> int:
    """Full duration of activities tagged with at least one of ``categories``."""

    wanted = set(categories)
    return sum(
        max(0, activity.duration)
        for activity in activities
        if wanted.intersection(activity_categories(activity))
    )
