"""Today's activity statistics and category distribution."""

from __future__ import annotations

from datetime import datetime, timedelta

from timeflow_engine.lexicon import Category, category_color, category_emoji
from timeflow_engine.schema import ActivityRecord
from timeflow_engine.windowing import category_durations, local_date, todays_activities, total_duration


def todays_stats(activities: list[ActivityRecord], now: datetime) -> dict:
    """Total tracked time and activity count for the current day."""

    today = todays_activities(activities, now)
    total_time = total_duration(today)
    return {
        "total_time": total_time,
        "hours": total_time // 3600,
        "minutes": (total_time % 3600) // 60,
        "activity_count": len(today),
    }


def category_distribution(activities: list[ActivityRecord], now: datetime, limit: int = 8) -> list[dict]:
    """Top categories by time today, each activity credited to all its categories."""

    totals = category_durations(todays_activities(activities, now), split=False)
    attributed = sum(totals.values())
    ranked = sorted(totals.items(), key=lambda item: (-item[1], list(Category).index(item[0])))[:limit]
    return [
        {
            "category": category.value,
            "seconds": int(seconds),
            "percentage": seconds / attributed * 100.0 if attributed else 0.0,
            "color": category_color(category),
            "emoji": category_emoji(category),
        }
        for category, seconds in ranked
    ]


def top_category(activities: list[ActivityRecord], now: datetime) -> Category | None:
    distribution = category_distribution(activities, now, limit=1)
    if not distribution or distribution[0]["seconds"] == 0:
        return None
    return Category(distribution[0]["category"])


def _daily_seconds(activities: list[ActivityRecord], now: datetime, days: int) -> dict:
    today = local_date(now, now)
    totals = {today - timedelta(days=offset): 0 for offset in range(days)}
    for activity in activities:
        day = local_date(activity.start_time, now)
        if day in totals:
            totals[day] += max(0, activity.duration)
    return dict(sorted(totals.items()))


def daily_minutes(activities: list[ActivityRecord], now: datetime, days: int = 7) -> list[dict]:
    """Minutes tracked on each of the last ``days`` days, oldest first, today last."""

    return [
        {"date": day.isoformat(), "day": day.strftime("%a"), "minutes": round(seconds / 60)}
        for day, seconds in _daily_seconds(activities, now, days).items()
    ]


def activity_insights(activities: list[ActivityRecord], now: datetime) -> dict:
    """Last-seven-days trend with the all-time total and the daily average over the window."""

    window_seconds = sum(_daily_seconds(activities, now, 7).values())
    return {
        "total_hours": total_duration(activities) / 3600,
        "daily_average_hours": window_seconds / 3600 / 7,
        "daily": daily_minutes(activities, now, days=7),
    }
