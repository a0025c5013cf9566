"""Habit completion toggling and streak bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from enum import Enum

from timeflow_engine.schema import Habit
from timeflow_engine.windowing import is_same_day, is_yesterday


class HabitState(Enum):
    NEVER_COMPLETED = "never_completed"
    COMPLETED_TODAY = "completed_today"
    COMPLETED_PREVIOUSLY = "completed_previously"


def habit_state(habit: Habit, now: datetime) -> HabitState:
    if habit.last_completed is None:
        return HabitState.NEVER_COMPLETED
    if is_same_day(habit.last_completed, now):
        return HabitState.COMPLETED_TODAY
    return HabitState.COMPLETED_PREVIOUSLY


def toggle_habit(habit: Habit, now: datetime) -> Habit:
    """Complete or un-complete a habit for today, returning the updated habit.

    Un-completing clears ``last_completed`` but leaves the streak as it was.
    Completing extends the streak only when the previous completion was
    yesterday; otherwise the streak restarts at 1.
    """

    if habit_state(habit, now) is HabitState.COMPLETED_TODAY:
        return replace(habit, completed=False, last_completed=None)

    streak = habit.streak + 1 if is_yesterday(habit.last_completed, now) else 1
    return replace(habit, completed=True, streak=streak, last_completed=now)


def refresh_habit(habit: Habit, now: datetime) -> Habit:
    """Roll a habit over to ``now``'s day: clear stale completion, drop broken streaks."""

    state = habit_state(habit, now)
    if state is HabitState.COMPLETED_TODAY:
        return replace(habit, completed=True)
    if is_yesterday(habit.last_completed, now):
        return replace(habit, completed=False)
    return replace(habit, completed=False, streak=0)


def update_daily_streak(streak: int, last_active: date | None, today: date) -> tuple[int, date]:
    """Advance the app-wide usage streak when the app is opened on ``today``."""

    if last_active is None or last_active == today:
        return streak, today
    if last_active == today - timedelta(days=1):
        return streak + 1, today
    return 0, today


@dataclass(frozen=True)
class StreakLevel:
    level: str
    color: str
    icon: str


_STREAK_LEVELS = (
    (30, StreakLevel("Master", "bg-purple-500", "👑")),
    (21, StreakLevel("Expert", "bg-orange-500", "🥇")),
    (14, StreakLevel("Pro", "bg-blue-500", "💎")),
    (7, StreakLevel("Committed", "bg-green-500", "🎯")),
    (3, StreakLevel("Getting Started", "bg-yellow-500", "⭐")),
)
_BEGINNER = StreakLevel("Beginner", "bg-gray-500", "🌱")

STREAK_MILESTONES = (
    (3, "First Steps"),
    (7, "Week Warrior"),
    (14, "Two Week Pro"),
    (21, "Habit Former"),
    (30, "Month Master"),
)


def streak_level(streak: int) -> StreakLevel:
    for threshold, level in _STREAK_LEVELS:
        if streak >= threshold:
            return level
    return _BEGINNER


def streak_milestones(streak: int) -> list[dict]:
    """Every milestone with whether ``streak`` has reached it."""

    return [{"days": days, "title": title, "reached": streak >= days} for days, title in STREAK_MILESTONES]


def streak_message(streak: int) -> str:
    if streak <= 0:
        return "Start your streak today!"
    if streak == 1:
        return "Great start! Keep it up!"
    return f"{streak} days strong! 🔥"
