"""Weekly category goals and the weekly total-time goal."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from timeflow_engine.lexicon import parse_category
from timeflow_engine.schema import ActivityRecord, CategoryGoal
from timeflow_engine.windowing import duration_in, local_date, total_duration


@dataclass
class GoalProgress:
    category: str
    current_minutes: int
    target_minutes: int
    percent: float
    completed: bool


def week_start(now: datetime) -> datetime:
    """Midnight of the most recent Sunday, in ``now``'s timezone."""

    days_since_sunday = (now.weekday() + 1) % 7
    start = now - timedelta(days=days_since_sunday)
    return start.replace(hour=0, minute=0, second=0, microsecond=0)


def this_weeks_activities(activities: list[ActivityRecord], now: datetime) -> list[ActivityRecord]:
    first_day = week_start(now).date()
    last_day = local_date(now, now)
    return [a for a in activities if first_day <= local_date(a.start_time, now) <= last_day]


def _progress(category: str, current_minutes: int, target_minutes: float) -> GoalProgress:
    percent = min(current_minutes / target_minutes * 100.0, 100.0) if target_minutes > 0 else 0.0
    return GoalProgress(
        category=category,
        current_minutes=current_minutes,
        target_minutes=int(target_minutes),
        percent=percent,
        completed=target_minutes > 0 and current_minutes >= target_minutes,
    )


def category_goal_progress(goal: CategoryGoal, activities: list[ActivityRecord], now: datetime) -> GoalProgress:
    """Minutes tracked this week towards a category goal."""

    category = parse_category(goal.category)
    seconds = duration_in(this_weeks_activities(activities, now), [category])
    return _progress(goal.category, seconds // 60, goal.weekly_minutes)


def refresh_goals(goals: list[CategoryGoal], activities: list[ActivityRecord], now: datetime) -> list[CategoryGoal]:
    """Recompute ``current_minutes`` for every goal; unchanged goals are returned as-is."""

    refreshed = []
    for goal in goals:
        current = category_goal_progress(goal, activities, now).current_minutes
        refreshed.append(goal if current == goal.current_minutes else replace(goal, current_minutes=current))
    return refreshed


def weekly_progress(activities: list[ActivityRecord], now: datetime, goal_hours: float = 40.0) -> dict:
    """Hours tracked this week against the weekly total-time goal."""

    total_time = total_duration(this_weeks_activities(activities, now))
    goal_seconds = goal_hours * 3600
    return {
        "total_time": total_time,
        "hours_completed": total_time // 3600,
        "goal_hours": int(goal_hours),
        "percent": min(total_time / goal_seconds * 100.0, 100.0) if goal_seconds > 0 else 0.0,
    }
